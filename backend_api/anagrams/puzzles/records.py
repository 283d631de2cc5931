from __future__ import annotations

import dataclasses
import logging
import time
import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .editor import PuzzleEditor
from .letters import DEFAULT_LENGTH, MAX_LENGTH, MAX_POOL_LENGTH
from .selection import resolve_selection
from .slots import summarize

logger = logging.getLogger(__name__)


def _now_ms() -> int:
    return int(time.time() * 1000)


# PUBLIC_INTERFACE
@dataclass
class PuzzleRecord:
    """A saved anagram puzzle.

    Fields:
    - id: opaque unique identifier
    - name: display name, also used for selection by name
    - length: number of slots
    - known_letters: slot index -> locked letter (may hold indexes >= length)
    - pool: all available letters, uppercase A-Z
    - created_at: creation time in epoch milliseconds
    """

    id: str
    name: str
    length: int = DEFAULT_LENGTH
    known_letters: Dict[int, str] = field(default_factory=dict)
    pool: str = ""
    created_at: int = 0

    @classmethod
    def new(cls, name: str, now: Optional[int] = None) -> "PuzzleRecord":
        return cls(
            id=uuid.uuid4().hex,
            name=name,
            created_at=_now_ms() if now is None else now,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Storage form; index keys become strings so the dict is JSON safe."""
        return {
            "id": self.id,
            "name": self.name,
            "length": self.length,
            "knownLetters": {str(k): v for k, v in sorted(self.known_letters.items())},
            "pool": self.pool,
            "createdAt": self.created_at,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PuzzleRecord":
        return cls(
            id=str(data["id"]),
            name=data.get("name", ""),
            length=int(data.get("length", DEFAULT_LENGTH)),
            known_letters={int(k): v for k, v in (data.get("knownLetters") or {}).items()},
            pool=data.get("pool", ""),
            created_at=int(data.get("createdAt", 0)),
        )

    @property
    def summary(self) -> Dict[str, int]:
        return summarize(self.length, self.known_letters)


# PUBLIC_INTERFACE
class PuzzleRecordManager:
    """Owns the puzzle collection and the currently selected puzzle.

    The collection is loaded from `store` once and handed back to it after
    every change. Records are replaced by id, never mutated in place.
    """

    def __init__(
        self,
        store,
        max_length: int = MAX_LENGTH,
        max_pool_length: int = MAX_POOL_LENGTH,
        rng=None,
    ):
        self._store = store
        self._records: List[PuzzleRecord] = list(store.load())
        self._max_length = max_length
        self._max_pool_length = max_pool_length
        self._rng = rng
        self._editor: Optional[PuzzleEditor] = None
        self.selected_id: Optional[str] = None

    @property
    def records(self) -> List[PuzzleRecord]:
        return list(self._records)

    @property
    def selected(self) -> Optional[PuzzleRecord]:
        if self.selected_id is None:
            return None
        return self.get(self.selected_id)

    def _index(self, puzzle_id: str) -> int:
        for i, record in enumerate(self._records):
            if record.id == puzzle_id:
                return i
        raise KeyError(f"Unknown puzzle id: {puzzle_id!r}")

    def _persist(self) -> None:
        self._store.save(self._records)

    # PUBLIC_INTERFACE
    def get(self, puzzle_id: str) -> PuzzleRecord:
        """Return the record with this id, or raise KeyError."""
        return self._records[self._index(puzzle_id)]

    # PUBLIC_INTERFACE
    def create(self, now: Optional[int] = None) -> PuzzleRecord:
        """Append a blank puzzle named "Anagram N" and select it."""
        record = PuzzleRecord.new(name=f"Anagram {len(self._records) + 1}", now=now)
        self._records.append(record)
        self._persist()
        logger.info("Created puzzle %s (%s)", record.id, record.name)
        self.select(record.id)
        return record

    # PUBLIC_INTERFACE
    def delete(self, puzzle_id: str) -> None:
        """Remove a puzzle; clears the selection if it was the selected one."""
        del self._records[self._index(puzzle_id)]
        self._persist()
        logger.info("Deleted puzzle %s", puzzle_id)
        if self.selected_id == puzzle_id:
            self.selected_id = None
            self._editor = None

    # PUBLIC_INTERFACE
    def select(self, puzzle_id: Optional[str]) -> Optional[PuzzleRecord]:
        """Make `puzzle_id` the active puzzle; None clears the selection."""
        record = None if puzzle_id is None else self.get(puzzle_id)
        if puzzle_id != self.selected_id:
            self._editor = None
        self.selected_id = puzzle_id
        return record

    # PUBLIC_INTERFACE
    def select_by_name(self, name: Optional[str]) -> Optional[PuzzleRecord]:
        """Select the first puzzle with exactly this name, or clear the selection."""
        return self.select(resolve_selection(self._records, name))

    # PUBLIC_INTERFACE
    def update_record(self, puzzle_id: str, **fields) -> PuzzleRecord:
        """Replace the record with `fields` applied.

        Raises:
            KeyError: unknown puzzle id.
            TypeError: a field name that PuzzleRecord does not have.
        """
        idx = self._index(puzzle_id)
        updated = dataclasses.replace(self._records[idx], **fields)
        self._records[idx] = updated
        self._persist()
        return updated

    # PUBLIC_INTERFACE
    def editor(self, puzzle_id: Optional[str] = None) -> PuzzleEditor:
        """Return an editor whose changes are written back through update_record.

        Without `puzzle_id` the selected puzzle is used; its editor is kept
        until the selection changes so the arrangement survives between edits.
        """
        target = puzzle_id or self.selected_id
        if target is None:
            raise KeyError("No puzzle selected.")
        if self._editor is not None and self._editor.puzzle_id == target:
            return self._editor

        editor = PuzzleEditor(
            self.get(target),
            on_update=lambda **fields: self.update_record(target, **fields),
            max_length=self._max_length,
            max_pool_length=self._max_pool_length,
            rng=self._rng,
        )
        if target == self.selected_id:
            self._editor = editor
        return editor
