import random
from collections import Counter

from django.test import SimpleTestCase

from anagrams.puzzles import PoolViolation, validate_pool


class ValidatePoolTests(SimpleTestCase):
    def test_no_locks_keeps_whole_pool(self):
        result = validate_pool("RRETOPUCM", {})
        self.assertTrue(result.valid)
        self.assertIsNone(result.error)
        self.assertEqual(len(result.remaining), 9)
        self.assertEqual(Counter(result.remaining), Counter("RRETOPUCM"))
        self.assertEqual(result.remaining.count("R"), 2)

    def test_locked_letter_is_consumed(self):
        result = validate_pool("CAT", {0: "C"})
        self.assertTrue(result.valid)
        self.assertEqual(sorted(result.remaining), ["A", "T"])

    def test_missing_letter_is_named(self):
        result = validate_pool("CAT", {0: "D"})
        self.assertFalse(result.valid)
        self.assertEqual(result.letter, "D")
        self.assertEqual(result.error, "D not available in pool")
        self.assertEqual(result.remaining, [])

    def test_duplicate_locks_exceeding_supply(self):
        result = validate_pool("AAB", {0: "A", 1: "A", 2: "A"})
        self.assertFalse(result.valid)
        self.assertEqual(result.letter, "A")

    def test_duplicate_locks_within_supply(self):
        result = validate_pool("AAB", {0: "A", 2: "A"})
        self.assertTrue(result.valid)
        self.assertEqual(result.remaining, ["B"])

    def test_empty_pool_and_locks(self):
        result = validate_pool("", {})
        self.assertTrue(result.valid)
        self.assertEqual(result.remaining, [])

    def test_lock_against_empty_pool(self):
        result = validate_pool("", {3: "Q"})
        self.assertFalse(result.valid)
        self.assertEqual(result.letter, "Q")

    def test_first_violation_only(self):
        result = validate_pool("CAT", {0: "X", 1: "Y"})
        self.assertFalse(result.valid)
        self.assertEqual(result.letter, "X")

    def test_lowercase_pool_and_empty_lock_values(self):
        result = validate_pool("cat", {0: "C", 1: ""})
        self.assertTrue(result.valid)
        self.assertEqual(sorted(result.remaining), ["A", "T"])

    def test_remaining_is_grouped_by_letter(self):
        result = validate_pool("ABAB", {})
        self.assertEqual(result.remaining, ["A", "A", "B", "B"])

    def test_violation_carries_letter(self):
        err = PoolViolation("Z")
        self.assertIsInstance(err, ValueError)
        self.assertEqual(err.letter, "Z")
        self.assertEqual(str(err), "Z not available in pool")


class ValidatePoolPropertyTests(SimpleTestCase):
    letters = "ABCDE"

    def _random_case(self, rng):
        pool = "".join(rng.choice(self.letters) for _ in range(rng.randint(0, 15)))
        locks = {i: rng.choice(self.letters) for i in rng.sample(range(15), rng.randint(0, 6))}
        return pool, locks

    def test_satisfiable_locks_leave_the_difference(self):
        rng = random.Random(1234)
        checked = 0
        for _ in range(300):
            pool, locks = self._random_case(rng)
            supply, demand = Counter(pool), Counter(locks.values())
            if any(demand[ch] > supply[ch] for ch in demand):
                continue
            result = validate_pool(pool, locks)
            self.assertTrue(result.valid)
            self.assertEqual(len(result.remaining), len(pool) - len(locks))
            self.assertEqual(Counter(result.remaining), supply - demand)
            checked += 1
        self.assertGreater(checked, 0)

    def test_unsatisfiable_locks_name_a_short_letter(self):
        rng = random.Random(99)
        checked = 0
        for _ in range(300):
            pool, locks = self._random_case(rng)
            supply, demand = Counter(pool), Counter(locks.values())
            short = {ch for ch in demand if demand[ch] > supply[ch]}
            if not short:
                continue
            result = validate_pool(pool, locks)
            self.assertFalse(result.valid)
            self.assertIn(result.letter, short)
            checked += 1
        self.assertGreater(checked, 0)
