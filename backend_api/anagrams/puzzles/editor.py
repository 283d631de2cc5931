from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Mapping, Optional

from .letters import (
    MAX_LENGTH,
    MAX_POOL_LENGTH,
    clamp_length,
    sanitize_lock_letter,
    sanitize_pool,
)
from .pool import PoolValidation, validate_pool
from .shuffle import shuffle_letters
from .slots import Slot, compose_slots, summarize

logger = logging.getLogger(__name__)

UpdateCallback = Callable[..., Any]


# PUBLIC_INTERFACE
class PuzzleEditor:
    """Working copy of one puzzle record plus its transient arrangement.

    Edits are applied locally and then reported through `on_update(**fields)`
    so the owner can replace the stored record. The arrangement and the
    validation error are never reported; they only live as long as the editor.

    Example:
        editor = PuzzleEditor(record, on_update=lambda **f: manager.update_record(record.id, **f))
        editor.set_pool("cat")
        editor.set_lock(0, "c")
        editor.shuffle()
        [slot.char for slot in editor.slots]  # -> ["C", "A", "T"] or ["C", "T", "A"]
    """

    def __init__(
        self,
        record,
        on_update: Optional[UpdateCallback] = None,
        max_length: int = MAX_LENGTH,
        max_pool_length: int = MAX_POOL_LENGTH,
        rng=None,
    ):
        self.puzzle_id = record.id
        self.name: str = record.name
        self.length: int = record.length
        self.pool: str = record.pool
        self.known_letters: Dict[int, str] = dict(record.known_letters)
        self.arrangement: List[str] = []
        self.error: Optional[str] = None
        self._on_update = on_update
        self._max_length = max_length
        self._max_pool_length = max_pool_length
        self._rng = rng

    def _save(self, **fields) -> None:
        if self._on_update is not None:
            self._on_update(**fields)

    # PUBLIC_INTERFACE
    def shuffle(
        self,
        pool: Optional[str] = None,
        locks: Optional[Mapping[int, str]] = None,
    ) -> PoolValidation:
        """Validate the pool against the locks and re-arrange the leftovers.

        On a pool violation the error is kept and the arrangement cleared.
        """
        result = validate_pool(
            self.pool if pool is None else pool,
            self.known_letters if locks is None else locks,
        )
        if not result.valid:
            logger.info("Puzzle %s: %s", self.puzzle_id, result.error)
            self.error = result.error
            self.arrangement = []
            return result

        self.error = None
        self.arrangement = shuffle_letters(result.remaining, self._rng)
        logger.debug("Puzzle %s shuffled into %s", self.puzzle_id, "".join(self.arrangement))
        return result

    # PUBLIC_INTERFACE
    def set_pool(self, raw: Optional[str]) -> PoolValidation:
        """Replace the pool and immediately re-shuffle.

        The target length grows to fit a longer pool (up to the maximum)
        and is never shrunk here.
        """
        pool = sanitize_pool(raw, self._max_pool_length)
        self.pool = pool
        if len(pool) > self.length:
            self.length = max(self.length, min(len(pool), self._max_length))
        self._save(pool=pool, length=self.length)
        return self.shuffle(pool=pool)

    # PUBLIC_INTERFACE
    def set_lock(self, index: int, letter: Optional[str]) -> None:
        """Lock `letter` at slot `index`, or unlock the slot when letter is empty.

        Raises:
            ValueError: if the letter is not A-Z or the index is outside the
                        displayed slots.
        """
        letter = sanitize_lock_letter(letter)
        known = dict(self.known_letters)
        if letter is None:
            known.pop(index, None)
        else:
            if not 0 <= index < self.length:
                raise ValueError(f"Slot index must be between 0 and {self.length - 1}.")
            known[index] = letter
        self.known_letters = known
        self.arrangement = []
        self.error = None
        self._save(known_letters=known)

    # PUBLIC_INTERFACE
    def clear_locks(self) -> None:
        """Unlock every slot."""
        self.known_letters = {}
        self.arrangement = []
        self.error = None
        self._save(known_letters={})

    # PUBLIC_INTERFACE
    def set_length(self, length: int) -> None:
        """Change the number of slots. Pool and locks are left untouched."""
        self.length = clamp_length(length, self._max_length)
        self.arrangement = []
        self._save(length=self.length)

    # PUBLIC_INTERFACE
    def rename(self, name: str) -> None:
        self.name = name
        self._save(name=name)

    @property
    def slots(self) -> List[Slot]:
        """Current display slots for the target length."""
        return compose_slots(self.length, self.known_letters, self.arrangement)

    @property
    def summary(self) -> Dict[str, int]:
        """Short description for list views: number of locks and target length."""
        return summarize(self.length, self.known_letters)
