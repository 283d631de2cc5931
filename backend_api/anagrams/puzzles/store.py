from __future__ import annotations

import json
from typing import Dict, List, Optional, Protocol, Sequence, runtime_checkable

from .records import PuzzleRecord

STORAGE_KEY = "anagram-helper-data"


# PUBLIC_INTERFACE
@runtime_checkable
class RecordStore(Protocol):
    """Load and save the whole ordered puzzle collection under one key."""

    def load(self) -> List[PuzzleRecord]: ...

    def save(self, records: Sequence[PuzzleRecord]) -> None: ...


# PUBLIC_INTERFACE
class MemoryRecordStore:
    """Key-value store keeping each collection as a JSON document.

    `backend` can be shared between stores to simulate one storage area
    holding several keys.
    """

    def __init__(self, key: str = STORAGE_KEY, backend: Optional[Dict[str, str]] = None):
        self.key = key
        self.backend: Dict[str, str] = {} if backend is None else backend

    def load(self) -> List[PuzzleRecord]:
        raw = self.backend.get(self.key)
        if not raw:
            return []
        return [PuzzleRecord.from_dict(item) for item in json.loads(raw)]

    def save(self, records: Sequence[PuzzleRecord]) -> None:
        self.backend[self.key] = json.dumps([r.to_dict() for r in records])
