"""
Anagram puzzle core.

Exports:
- validate_pool, PoolValidation and PoolViolation for checking locks against a pool
- shuffle_letters for the Fisher-Yates arrangement of leftover letters
- compose_slots and Slot for merging locks with an arrangement
- PuzzleEditor, PuzzleRecord and PuzzleRecordManager for editing saved puzzles
- RecordStore and MemoryRecordStore for persistence
- selection_params and resolve_selection for selecting a puzzle by name

These modules are framework-agnostic and can be reused by views or services
without importing Django.
"""

from .letters import (
    DEFAULT_LENGTH,
    MAX_LENGTH,
    MAX_POOL_LENGTH,
    clamp_length,
    sanitize_lock_letter,
    sanitize_pool,
)
from .pool import PoolValidation, PoolViolation, validate_pool
from .shuffle import shuffle_letters
from .slots import Slot, compose_slots, summarize
from .editor import PuzzleEditor
from .records import PuzzleRecord, PuzzleRecordManager
from .selection import resolve_selection, selection_params
from .store import STORAGE_KEY, MemoryRecordStore, RecordStore

__all__ = [
    "DEFAULT_LENGTH",
    "MAX_LENGTH",
    "MAX_POOL_LENGTH",
    "clamp_length",
    "sanitize_lock_letter",
    "sanitize_pool",
    "PoolValidation",
    "PoolViolation",
    "validate_pool",
    "shuffle_letters",
    "Slot",
    "compose_slots",
    "summarize",
    "PuzzleEditor",
    "PuzzleRecord",
    "PuzzleRecordManager",
    "resolve_selection",
    "selection_params",
    "STORAGE_KEY",
    "MemoryRecordStore",
    "RecordStore",
]
