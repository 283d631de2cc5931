"""
Anagram helper app.

Re-exports the framework-agnostic puzzle core so callers can import from
anagrams directly, e.g.:

    from anagrams import validate_pool, shuffle_letters
"""

# PUBLIC_INTERFACE
from .puzzles import (
    PoolValidation,
    PoolViolation,
    validate_pool,
    shuffle_letters,
    Slot,
    compose_slots,
    PuzzleEditor,
    PuzzleRecord,
    PuzzleRecordManager,
    MemoryRecordStore,
)

__all__ = [
    "PoolValidation",
    "PoolViolation",
    "validate_pool",
    "shuffle_letters",
    "Slot",
    "compose_slots",
    "PuzzleEditor",
    "PuzzleRecord",
    "PuzzleRecordManager",
    "MemoryRecordStore",
]
