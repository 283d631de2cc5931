import random

from django.test import SimpleTestCase

from anagrams.puzzles import PuzzleEditor, PuzzleRecord


class PuzzleEditorTests(SimpleTestCase):
    def setUp(self):
        self.saved = []
        self.record = PuzzleRecord(id="p1", name="Anagram 1")

    def _editor(self, record=None, **kwargs):
        return PuzzleEditor(
            record or self.record,
            on_update=lambda **fields: self.saved.append(fields),
            rng=random.Random(11),
            **kwargs,
        )

    def test_new_editor_has_no_arrangement(self):
        editor = self._editor()
        self.assertEqual(editor.arrangement, [])
        self.assertIsNone(editor.error)
        self.assertEqual([s.char for s in editor.slots], [""] * 5)

    def test_pool_edit_sanitizes_and_shuffles(self):
        editor = self._editor()
        result = editor.set_pool("c-a t")
        self.assertTrue(result.valid)
        self.assertEqual(editor.pool, "CAT")
        self.assertEqual(sorted(editor.arrangement), ["A", "C", "T"])
        self.assertEqual(self.saved, [{"pool": "CAT", "length": 5}])

    def test_pool_edit_grows_length(self):
        editor = self._editor()
        editor.set_pool("RRETOPUCM")
        self.assertEqual(editor.length, 9)
        self.assertEqual(self.saved[-1], {"pool": "RRETOPUCM", "length": 9})
        self.assertEqual(sorted(s.char for s in editor.slots), sorted("RRETOPUCM"))

    def test_pool_edit_never_shrinks_length(self):
        editor = self._editor(PuzzleRecord(id="p1", name="x", length=8))
        editor.set_pool("AB")
        self.assertEqual(editor.length, 8)

    def test_pool_is_truncated_and_growth_is_capped(self):
        editor = self._editor(max_length=10, max_pool_length=12)
        editor.set_pool("ABCDEFGHIJKLMNOP")
        self.assertEqual(editor.pool, "ABCDEFGHIJKL")
        self.assertEqual(editor.length, 10)

    def test_pool_edit_with_violation_sets_error(self):
        editor = self._editor(PuzzleRecord(id="p1", name="x", known_letters={0: "D"}))
        result = editor.set_pool("CAT")
        self.assertFalse(result.valid)
        self.assertEqual(editor.error, "D not available in pool")
        self.assertEqual(editor.arrangement, [])

    def test_shuffle_after_lock(self):
        editor = self._editor(PuzzleRecord(id="p1", name="x", length=3, pool="CAT"))
        editor.set_lock(0, "c")
        self.assertEqual(editor.known_letters, {0: "C"})
        self.assertEqual(editor.arrangement, [])
        editor.shuffle()
        slots = editor.slots
        self.assertEqual((slots[0].char, slots[0].locked), ("C", True))
        self.assertEqual(sorted(s.char for s in slots[1:]), ["A", "T"])

    def test_failed_shuffle_clears_arrangement(self):
        editor = self._editor(PuzzleRecord(id="p1", name="x", length=3, pool="CAT"))
        editor.shuffle()
        self.assertEqual(len(editor.arrangement), 3)
        editor.known_letters = {0: "D"}
        result = editor.shuffle()
        self.assertFalse(result.valid)
        self.assertEqual(editor.arrangement, [])
        self.assertEqual(editor.error, "D not available in pool")

    def test_successful_shuffle_clears_previous_error(self):
        editor = self._editor(PuzzleRecord(id="p1", name="x", length=3, pool="CAT", known_letters={0: "D"}))
        editor.shuffle()
        self.assertEqual(editor.error, "D not available in pool")
        editor.known_letters = {0: "C"}
        result = editor.shuffle()
        self.assertTrue(result.valid)
        self.assertIsNone(editor.error)
        self.assertEqual(sorted(editor.arrangement), ["A", "T"])

    def test_shuffle_overrides(self):
        editor = self._editor(PuzzleRecord(id="p1", name="x", length=3, pool="CAT"))
        result = editor.shuffle(pool="DOG", locks={})
        self.assertTrue(result.valid)
        self.assertEqual(sorted(editor.arrangement), ["D", "G", "O"])

    def test_lock_edit_clears_arrangement_and_error(self):
        editor = self._editor(PuzzleRecord(id="p1", name="x", length=3, pool="CAT", known_letters={0: "D"}))
        editor.shuffle()
        self.assertIsNotNone(editor.error)
        editor.set_lock(0, None)
        self.assertIsNone(editor.error)
        self.assertEqual(editor.known_letters, {})
        self.assertEqual(self.saved[-1], {"known_letters": {}})

    def test_lock_uses_last_typed_character(self):
        editor = self._editor()
        editor.set_lock(1, "ab")
        self.assertEqual(editor.known_letters, {1: "B"})

    def test_lock_rejects_non_letters(self):
        editor = self._editor()
        with self.assertRaises(ValueError):
            editor.set_lock(0, "7")
        self.assertEqual(self.saved, [])

    def test_lock_rejects_hidden_slot(self):
        editor = self._editor()
        with self.assertRaises(ValueError):
            editor.set_lock(5, "A")

    def test_clear_locks(self):
        editor = self._editor(PuzzleRecord(id="p1", name="x", pool="AB", known_letters={0: "A", 1: "B"}))
        editor.shuffle()
        editor.clear_locks()
        self.assertEqual(editor.known_letters, {})
        self.assertEqual(editor.arrangement, [])
        self.assertEqual(self.saved[-1], {"known_letters": {}})

    def test_length_change_keeps_hidden_locks(self):
        editor = self._editor(PuzzleRecord(id="p1", name="x", length=5, pool="XAB", known_letters={4: "X"}))
        editor.shuffle()
        editor.set_length(3)
        self.assertEqual(editor.arrangement, [])
        self.assertEqual(len(editor.slots), 3)
        self.assertFalse(any(s.locked for s in editor.slots))
        self.assertEqual(editor.known_letters, {4: "X"})
        self.assertEqual(editor.pool, "XAB")

        editor.set_length(5)
        self.assertEqual(editor.slots[4].char, "X")
        self.assertTrue(editor.slots[4].locked)

    def test_length_is_clamped(self):
        editor = self._editor(max_length=20)
        editor.set_length(0)
        self.assertEqual(editor.length, 1)
        editor.set_length(25)
        self.assertEqual(editor.length, 20)
        self.assertEqual(self.saved[-1], {"length": 20})

    def test_rename_keeps_arrangement(self):
        editor = self._editor(PuzzleRecord(id="p1", name="x", length=3, pool="CAT"))
        editor.shuffle()
        arrangement = list(editor.arrangement)
        editor.rename("Cats")
        self.assertEqual(editor.arrangement, arrangement)
        self.assertEqual(self.saved[-1], {"name": "Cats"})

    def test_summary(self):
        editor = self._editor(PuzzleRecord(id="p1", name="x", length=7, known_letters={0: "A", 3: "B"}))
        self.assertEqual(editor.summary, {"known": 2, "length": 7})

    def test_editor_does_not_mutate_record_locks(self):
        record = PuzzleRecord(id="p1", name="x", known_letters={0: "A"})
        editor = self._editor(record)
        editor.set_lock(1, "B")
        self.assertEqual(record.known_letters, {0: "A"})
