from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence

from django.conf import settings
from django.db import transaction

from .models import AnagramPuzzle
from .puzzles import PuzzleRecord

logger = logging.getLogger(__name__)


# PUBLIC_INTERFACE
class ModelRecordStore:
    """Record store backed by AnagramPuzzle rows sharing one storage key.

    save() writes record by record: rows are upserted by (storage_key, puzzle_id),
    only records that changed since this store last loaded or saved them are
    written, and only ids this store has seen and that are now gone are
    deleted. Rows added by other stores on the same key are left alone.
    """

    def __init__(self, key: Optional[str] = None):
        self.key = key or settings.ANAGRAM_STORAGE_KEY
        self._seen: Dict[str, Dict[str, Any]] = {}

    def load(self) -> List[PuzzleRecord]:
        rows = AnagramPuzzle.objects.filter(storage_key=self.key).order_by("position")
        records = [row.to_record() for row in rows]
        self._seen = {r.id: r.to_dict() for r in records}
        return records

    def save(self, records: Sequence[PuzzleRecord]) -> None:
        current = {r.id: r for r in records}
        removed = [pid for pid in self._seen if pid not in current]
        written = 0
        with transaction.atomic():
            if removed:
                AnagramPuzzle.objects.filter(storage_key=self.key, puzzle_id__in=removed).delete()
            rows = list(AnagramPuzzle.objects.select_for_update().filter(storage_key=self.key))
            existing = {row.puzzle_id: row for row in rows}
            next_position = max((row.position for row in rows), default=-1) + 1

            for record in records:
                if self._seen.get(record.id) == record.to_dict():
                    continue
                row = existing.get(record.id)
                if row is None:
                    row = AnagramPuzzle.from_record(self.key, next_position, record)
                    next_position += 1
                else:
                    row.apply_record(record)
                row.save()
                written += 1

        self._seen = {r.id: r.to_dict() for r in records}
        logger.debug("Saved %d of %d puzzles under %r, removed %d", written, len(records), self.key, len(removed))
