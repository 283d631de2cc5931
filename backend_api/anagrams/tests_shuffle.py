import random

from django.test import SimpleTestCase

from anagrams.puzzles import compose_slots, shuffle_letters, validate_pool


class ShuffleLettersTests(SimpleTestCase):
    def test_preserves_multiset(self):
        rng = random.Random(7)
        for word in ["", "A", "AB", "RRETOPUCM", "AAAABBBCCD"]:
            items = list(word)
            self.assertEqual(sorted(shuffle_letters(items, rng)), sorted(items))

    def test_input_not_modified(self):
        items = list("ABCDEFG")
        shuffle_letters(items, random.Random(3))
        self.assertEqual(items, list("ABCDEFG"))

    def test_returns_new_list(self):
        items = ["A"]
        result = shuffle_letters(items)
        self.assertEqual(result, ["A"])
        self.assertIsNot(result, items)

    def test_empty(self):
        self.assertEqual(shuffle_letters([]), [])

    def test_seeded_rng_is_reproducible(self):
        items = list("ABCDEFGHIJ")
        first = shuffle_letters(items, random.Random(42))
        second = shuffle_letters(items, random.Random(42))
        self.assertEqual(first, second)

    def test_accepts_any_sequence(self):
        self.assertEqual(sorted(shuffle_letters("CAT", random.Random(0))), ["A", "C", "T"])

    def test_every_permutation_reachable(self):
        rng = random.Random(2024)
        seen = {tuple(shuffle_letters("ABC", rng)) for _ in range(600)}
        self.assertEqual(len(seen), 6)

    def test_draws_from_shrinking_range(self):
        calls = []

        class Recorder:
            def randrange(self, stop):
                calls.append(stop)
                return 0

        shuffle_letters("ABCD", Recorder())
        self.assertEqual(calls, [4, 3, 2])


class ScenarioTests(SimpleTestCase):
    def test_nine_letter_pool_without_locks(self):
        result = validate_pool("RRETOPUCM", {})
        arrangement = shuffle_letters(result.remaining, random.Random(5))
        self.assertEqual(sorted(arrangement), sorted("RRETOPUCM"))
        slots = compose_slots(9, {}, arrangement)
        self.assertEqual([s.char for s in slots], arrangement)
        self.assertFalse(any(s.locked for s in slots))
