from django.test import SimpleTestCase

from anagrams.puzzles import Slot, compose_slots


class ComposeSlotsTests(SimpleTestCase):
    def test_locked_slot_does_not_consume_arrangement(self):
        slots = compose_slots(3, {0: "C"}, ["T", "A"])
        self.assertEqual(slots, [Slot("C", True), Slot("T", False), Slot("A", False)])

    def test_lock_in_the_middle(self):
        slots = compose_slots(4, {1: "X"}, ["A", "B", "C"])
        self.assertEqual([s.char for s in slots], ["A", "X", "B", "C"])
        self.assertEqual([s.locked for s in slots], [False, True, False, False])

    def test_no_arrangement_leaves_open_slots_empty(self):
        slots = compose_slots(3, {2: "Z"}, None)
        self.assertEqual(slots, [Slot("", False), Slot("", False), Slot("Z", True)])

    def test_short_arrangement(self):
        slots = compose_slots(4, {}, ["A"])
        self.assertEqual([s.char for s in slots], ["A", "", "", ""])

    def test_long_arrangement_is_cut_to_length(self):
        slots = compose_slots(2, {}, ["A", "B", "C"])
        self.assertEqual([s.char for s in slots], ["A", "B"])

    def test_locks_beyond_length_are_hidden(self):
        locks = {4: "X"}
        slots = compose_slots(3, locks, [])
        self.assertEqual(len(slots), 3)
        self.assertFalse(any(s.locked for s in slots))
        self.assertEqual(locks, {4: "X"})

        slots = compose_slots(5, locks, [])
        self.assertEqual(slots[4], Slot("X", True))

    def test_empty_lock_value_is_open(self):
        slots = compose_slots(2, {0: ""}, ["Q"])
        self.assertEqual(slots, [Slot("Q", False), Slot("", False)])
