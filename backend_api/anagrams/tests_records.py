import json
import random

from django.conf import settings
from django.test import SimpleTestCase, TestCase

from anagrams.models import AnagramPuzzle
from anagrams.puzzles import (
    MemoryRecordStore,
    PuzzleRecord,
    PuzzleRecordManager,
    RecordStore,
    resolve_selection,
    selection_params,
)
from anagrams.stores import ModelRecordStore


def _sample_records():
    return [
        PuzzleRecord(id="a1", name="Anagram 1", length=9, pool="RRETOPUCM", created_at=1700000000000),
        PuzzleRecord(
            id="b2",
            name="Cats",
            length=3,
            known_letters={0: "C", 7: "X"},
            pool="CAT",
            created_at=1700000000500,
        ),
    ]


class PuzzleRecordTests(SimpleTestCase):
    def test_new_record_defaults(self):
        record = PuzzleRecord.new("Anagram 1", now=123)
        self.assertEqual(record.length, 5)
        self.assertEqual(record.known_letters, {})
        self.assertEqual(record.pool, "")
        self.assertEqual(record.created_at, 123)
        self.assertTrue(record.id)

    def test_ids_are_unique(self):
        self.assertNotEqual(PuzzleRecord.new("a").id, PuzzleRecord.new("a").id)

    def test_storage_form(self):
        data = _sample_records()[1].to_dict()
        self.assertEqual(
            data,
            {
                "id": "b2",
                "name": "Cats",
                "length": 3,
                "knownLetters": {"0": "C", "7": "X"},
                "pool": "CAT",
                "createdAt": 1700000000500,
            },
        )
        self.assertEqual(PuzzleRecord.from_dict(json.loads(json.dumps(data))), _sample_records()[1])


class MemoryRecordStoreTests(SimpleTestCase):
    def test_round_trip(self):
        store = MemoryRecordStore()
        records = _sample_records()
        store.save(records)
        self.assertEqual(store.load(), records)

    def test_empty_store(self):
        self.assertEqual(MemoryRecordStore().load(), [])

    def test_keys_are_separate(self):
        backend = {}
        MemoryRecordStore("one", backend).save(_sample_records())
        self.assertEqual(MemoryRecordStore("two", backend).load(), [])
        self.assertEqual(len(MemoryRecordStore("one", backend).load()), 2)

    def test_satisfies_protocol(self):
        self.assertIsInstance(MemoryRecordStore(), RecordStore)


class SelectionTests(SimpleTestCase):
    def test_params(self):
        record = _sample_records()[1]
        self.assertEqual(selection_params(record), {"name": "Cats"})
        self.assertEqual(selection_params(None), {})

    def test_resolve_first_match(self):
        records = _sample_records() + [PuzzleRecord(id="c3", name="Cats")]
        self.assertEqual(resolve_selection(records, "Cats"), "b2")
        self.assertIsNone(resolve_selection(records, "Dogs"))
        self.assertIsNone(resolve_selection(records, ""))


class PuzzleRecordManagerTests(SimpleTestCase):
    def setUp(self):
        self.store = MemoryRecordStore()
        self.manager = PuzzleRecordManager(self.store, rng=random.Random(1))

    def test_create_names_and_selects(self):
        first = self.manager.create(now=1)
        second = self.manager.create(now=2)
        self.assertEqual(first.name, "Anagram 1")
        self.assertEqual(second.name, "Anagram 2")
        self.assertEqual(self.manager.selected_id, second.id)
        self.assertEqual([r.id for r in self.store.load()], [first.id, second.id])

    def test_loads_existing_records(self):
        self.store.save(_sample_records())
        manager = PuzzleRecordManager(self.store)
        self.assertEqual(manager.records, _sample_records())
        self.assertIsNone(manager.selected)

    def test_update_record_replaces_by_id(self):
        record = self.manager.create()
        updated = self.manager.update_record(record.id, name="Renamed", pool="AB")
        self.assertEqual(updated.name, "Renamed")
        self.assertEqual(updated.pool, "AB")
        self.assertEqual(record.name, "Anagram 1")
        self.assertEqual(self.store.load()[0].name, "Renamed")

    def test_update_unknown_id_or_field(self):
        record = self.manager.create()
        with self.assertRaises(KeyError):
            self.manager.update_record("missing", name="x")
        with self.assertRaises(TypeError):
            self.manager.update_record(record.id, colour="red")

    def test_delete_selected_clears_selection(self):
        keep = self.manager.create()
        gone = self.manager.create()
        editor = self.manager.editor()
        editor.set_pool("AB")
        self.manager.delete(gone.id)
        self.assertIsNone(self.manager.selected_id)
        self.assertEqual([r.id for r in self.manager.records], [keep.id])
        with self.assertRaises(KeyError):
            self.manager.editor()

    def test_delete_other_keeps_selection(self):
        other = self.manager.create()
        current = self.manager.create()
        self.manager.delete(other.id)
        self.assertEqual(self.manager.selected_id, current.id)

    def test_delete_unknown(self):
        with self.assertRaises(KeyError):
            self.manager.delete("missing")

    def test_select_by_name(self):
        first = self.manager.create()
        self.manager.create()
        self.assertEqual(self.manager.select_by_name("Anagram 1"), first)
        self.assertEqual(self.manager.selected_id, first.id)
        self.assertIsNone(self.manager.select_by_name("Nope"))
        self.assertIsNone(self.manager.selected_id)

    def test_editor_writes_back(self):
        record = self.manager.create()
        editor = self.manager.editor()
        editor.set_pool("cat")
        editor.set_lock(0, "C")
        editor.rename("Cats")
        stored = self.manager.get(record.id)
        self.assertEqual(stored.pool, "CAT")
        self.assertEqual(stored.known_letters, {0: "C"})
        self.assertEqual(stored.name, "Cats")
        self.assertEqual(PuzzleRecordManager(self.store).get(record.id), stored)

    def test_editor_is_kept_for_selection(self):
        self.manager.create()
        editor = self.manager.editor()
        editor.set_pool("CAT")
        self.assertIs(self.manager.editor(), editor)
        self.assertEqual(len(self.manager.editor().arrangement), 3)

        other = self.manager.create()
        self.assertIsNot(self.manager.editor(), editor)
        self.assertEqual(self.manager.editor().puzzle_id, other.id)

    def test_editor_requires_selection(self):
        with self.assertRaises(KeyError):
            self.manager.editor()

    def test_manager_limits_reach_editor(self):
        manager = PuzzleRecordManager(self.store, max_length=20, max_pool_length=20)
        manager.create()
        editor = manager.editor()
        editor.set_pool("ABCDEFGHIJKLMNOPQR")
        self.assertEqual(editor.length, 18)
        self.assertEqual(manager.selected.length, 18)


class ModelRecordStoreTests(TestCase):
    def test_round_trip(self):
        store = ModelRecordStore("test-key")
        records = _sample_records()
        store.save(records)
        self.assertEqual(store.load(), records)
        self.assertEqual(AnagramPuzzle.objects.filter(storage_key="test-key").count(), 2)

    def test_save_replaces_collection(self):
        store = ModelRecordStore("test-key")
        store.save(_sample_records())
        store.save(_sample_records()[1:])
        self.assertEqual([r.id for r in store.load()], ["b2"])

    def test_keys_are_separate(self):
        ModelRecordStore("one").save(_sample_records())
        self.assertEqual(ModelRecordStore("two").load(), [])

    def test_default_key_from_settings(self):
        with self.settings(ANAGRAM_STORAGE_KEY="from-settings"):
            self.assertEqual(ModelRecordStore().key, "from-settings")

    def test_manager_over_models(self):
        manager = PuzzleRecordManager(ModelRecordStore("test-key"))
        record = manager.create(now=5)
        manager.editor().set_pool("RRETOPUCM")
        reloaded = PuzzleRecordManager(ModelRecordStore("test-key")).get(record.id)
        self.assertEqual(reloaded.pool, "RRETOPUCM")
        self.assertEqual(reloaded.length, 9)
        self.assertEqual(reloaded.created_at, 5)


class EmptyLockValueTests(SimpleTestCase):
    def test_empty_lock_value_round_trips(self):
        records = [PuzzleRecord(id="a", name="x", known_letters={0: "", 2: "B"})]
        store = MemoryRecordStore()
        store.save(records)
        self.assertEqual(store.load(), records)

    def test_summary_ignores_empty_lock_values(self):
        record = PuzzleRecord(id="a", name="x", length=4, known_letters={0: "", 2: "B"})
        self.assertEqual(record.summary, {"known": 1, "length": 4})


class SharedModelStoreTests(TestCase):
    def _manager(self):
        return PuzzleRecordManager(ModelRecordStore("shared"))

    def _stored_ids(self):
        return [r.id for r in ModelRecordStore("shared").load()]

    def test_interleaved_creates_keep_both(self):
        a, b = self._manager(), self._manager()
        first = a.create()
        second = b.create()
        self.assertEqual(self._stored_ids(), [first.id, second.id])

    def test_interleaved_edits_keep_both(self):
        setup = self._manager()
        one = setup.create()
        two = setup.create()

        a, b = self._manager(), self._manager()
        a.editor(one.id).set_pool("CAT")
        b.editor(two.id).rename("Dogs")

        stored = {r.id: r for r in ModelRecordStore("shared").load()}
        self.assertEqual(stored[one.id].pool, "CAT")
        self.assertEqual(stored[one.id].name, "Anagram 1")
        self.assertEqual(stored[two.id].name, "Dogs")
        self.assertEqual(stored[two.id].pool, "")

    def test_delete_only_removes_own_record(self):
        a, b = self._manager(), self._manager()
        first = a.create()
        second = b.create()
        a.delete(first.id)
        self.assertEqual(self._stored_ids(), [second.id])

    def test_unchanged_record_deleted_elsewhere_stays_deleted(self):
        setup = self._manager()
        one = setup.create()
        two = setup.create()

        a, b = self._manager(), self._manager()
        b.delete(one.id)
        a.update_record(two.id, name="Renamed")
        self.assertEqual(self._stored_ids(), [two.id])

    def test_row_timestamps_survive_edits(self):
        manager = self._manager()
        record = manager.create()
        row = AnagramPuzzle.objects.get(storage_key="shared", puzzle_id=record.id)
        manager.update_record(record.id, pool="AB")
        updated = AnagramPuzzle.objects.get(storage_key="shared", puzzle_id=record.id)
        self.assertEqual(updated.pk, row.pk)
        self.assertEqual(updated.created_at, row.created_at)
        self.assertGreaterEqual(updated.updated_at, row.updated_at)
        self.assertEqual(updated.pool, "AB")

    def test_empty_lock_value_round_trips(self):
        records = [PuzzleRecord(id="a", name="x", known_letters={0: "", 2: "B"})]
        store = ModelRecordStore("shared")
        store.save(records)
        self.assertEqual(store.load(), records)

    def test_pool_column_fits_configured_pool(self):
        width = AnagramPuzzle._meta.get_field("pool").max_length
        self.assertGreaterEqual(width, settings.ANAGRAM_MAX_POOL_LENGTH)
