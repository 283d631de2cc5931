from django.test import override_settings
from django.urls import reverse
from rest_framework.test import APITestCase

from anagrams.models import AnagramPuzzle


@override_settings(ANAGRAM_STORAGE_KEY="api-tests", ANAGRAM_MAX_LENGTH=15, ANAGRAM_MAX_POOL_LENGTH=15)
class PuzzleApiTests(APITestCase):
    def _create(self):
        resp = self.client.post(reverse('puzzles'), {}, format="json")
        self.assertEqual(resp.status_code, 201)
        return resp.json()

    def _patch(self, puzzle_id, payload):
        return self.client.patch(reverse('puzzle-detail', kwargs={"puzzle_id": puzzle_id}), payload, format="json")

    def _lock(self, puzzle_id, index, letter):
        return self.client.post(
            reverse('puzzle-locks', kwargs={"puzzle_id": puzzle_id}),
            {"index": index, "letter": letter},
            format="json",
        )

    def test_health(self):
        resp = self.client.get(reverse('Health'))
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), {"message": "Server is up!"})

    def test_limits(self):
        resp = self.client.get(reverse('limits'))
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), {"default_length": 5, "max_length": 15, "max_pool_length": 15})

    def test_create_and_list(self):
        first = self._create()
        self.assertEqual(first["name"], "Anagram 1")
        self.assertEqual(first["length"], 5)
        self.assertEqual(first["known_letters"], {})
        self.assertEqual(first["pool"], "")
        self.assertEqual(first["summary"], {"known": 0, "length": 5})
        second = self._create()
        self.assertEqual(second["name"], "Anagram 2")

        resp = self.client.get(reverse('puzzles'))
        self.assertEqual(resp.status_code, 200)
        self.assertEqual([p["id"] for p in resp.json()], [first["id"], second["id"]])
        self.assertEqual(AnagramPuzzle.objects.filter(storage_key="api-tests").count(), 2)

    def test_get_puzzle(self):
        puzzle = self._create()
        resp = self.client.get(reverse('puzzle-detail', kwargs={"puzzle_id": puzzle["id"]}))
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual(data["puzzle"]["id"], puzzle["id"])
        self.assertEqual(data["slots"], [{"char": "", "locked": False}] * 5)
        self.assertEqual(data["arrangement"], [])
        self.assertIsNone(data["error"])
        self.assertEqual(data["query"], {"name": "Anagram 1"})

    def test_unknown_puzzle(self):
        resp = self.client.get(reverse('puzzle-detail', kwargs={"puzzle_id": "missing"}))
        self.assertEqual(resp.status_code, 404)
        resp = self.client.post(reverse('shuffle-puzzle', kwargs={"puzzle_id": "missing"}), {}, format="json")
        self.assertEqual(resp.status_code, 404)

    def test_pool_edit_shuffles_and_grows_length(self):
        puzzle = self._create()
        resp = self._patch(puzzle["id"], {"pool": "rretopucm"})
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual(data["puzzle"]["pool"], "RRETOPUCM")
        self.assertEqual(data["puzzle"]["length"], 9)
        self.assertEqual(sorted(data["arrangement"]), sorted("RRETOPUCM"))
        self.assertEqual([s["char"] for s in data["slots"]], data["arrangement"])

    def test_lock_and_shuffle(self):
        puzzle = self._create()
        self._patch(puzzle["id"], {"pool": "CAT", "length": 3})
        resp = self._lock(puzzle["id"], 0, "c")
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual(data["puzzle"]["known_letters"], {"0": "C"})
        self.assertEqual(data["arrangement"], [])
        self.assertEqual(data["slots"][0], {"char": "C", "locked": True})

        resp = self.client.post(reverse('shuffle-puzzle', kwargs={"puzzle_id": puzzle["id"]}), {}, format="json")
        self.assertEqual(resp.status_code, 200)
        slots = resp.json()["slots"]
        self.assertEqual(slots[0], {"char": "C", "locked": True})
        self.assertEqual(sorted(s["char"] for s in slots[1:]), ["A", "T"])

    def test_shuffle_reports_missing_letter(self):
        puzzle = self._create()
        self._patch(puzzle["id"], {"pool": "CAT", "length": 3})
        self._lock(puzzle["id"], 0, "D")
        resp = self.client.post(reverse('shuffle-puzzle', kwargs={"puzzle_id": puzzle["id"]}), {}, format="json")
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual(data["error"], "D not available in pool")
        self.assertEqual(data["arrangement"], [])

    def test_bad_lock(self):
        puzzle = self._create()
        resp = self._lock(puzzle["id"], 9, "A")
        self.assertEqual(resp.status_code, 400)
        self.assertIn("error", resp.json())
        resp = self._lock(puzzle["id"], 0, "1")
        self.assertEqual(resp.status_code, 400)

    def test_unlock_and_clear(self):
        puzzle = self._create()
        self._lock(puzzle["id"], 0, "A")
        self._lock(puzzle["id"], 1, "B")
        resp = self._lock(puzzle["id"], 0, None)
        self.assertEqual(resp.json()["puzzle"]["known_letters"], {"1": "B"})

        resp = self.client.delete(reverse('puzzle-locks', kwargs={"puzzle_id": puzzle["id"]}))
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["puzzle"]["known_letters"], {})

    def test_length_change_hides_lock(self):
        puzzle = self._create()
        self._lock(puzzle["id"], 4, "X")
        resp = self._patch(puzzle["id"], {"length": 3})
        data = resp.json()
        self.assertEqual(len(data["slots"]), 3)
        self.assertEqual(data["puzzle"]["known_letters"], {"4": "X"})

        data = self._patch(puzzle["id"], {"length": 5}).json()
        self.assertEqual(data["slots"][4], {"char": "X", "locked": True})

    def test_length_is_clamped(self):
        puzzle = self._create()
        data = self._patch(puzzle["id"], {"length": 99}).json()
        self.assertEqual(data["puzzle"]["length"], 15)

    def test_empty_patch_rejected(self):
        puzzle = self._create()
        resp = self._patch(puzzle["id"], {})
        self.assertEqual(resp.status_code, 400)

    def test_rename_and_resolve(self):
        puzzle = self._create()
        data = self._patch(puzzle["id"], {"name": "Cats"}).json()
        self.assertEqual(data["query"], {"name": "Cats"})

        resp = self.client.get(reverse('resolve-puzzle'), {"name": "Cats"})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), {"id": puzzle["id"], "name": "Cats"})

        resp = self.client.get(reverse('resolve-puzzle'), {"name": "Dogs"})
        self.assertEqual(resp.status_code, 404)

    def test_delete(self):
        puzzle = self._create()
        resp = self.client.delete(reverse('puzzle-detail', kwargs={"puzzle_id": puzzle["id"]}))
        self.assertEqual(resp.status_code, 204)
        self.assertEqual(self.client.get(reverse('puzzles')).json(), [])
        resp = self.client.delete(reverse('puzzle-detail', kwargs={"puzzle_id": puzzle["id"]}))
        self.assertEqual(resp.status_code, 404)
