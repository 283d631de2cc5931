from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional


# PUBLIC_INTERFACE
class PoolViolation(ValueError):
    """A locked letter is demanded more often than the pool supplies it."""

    def __init__(self, letter: str):
        self.letter = letter
        super().__init__(f"{letter} not available in pool")


# PUBLIC_INTERFACE
@dataclass
class PoolValidation:
    """Outcome of checking a pool against a lock map.

    Fields:
    - valid: True when every locked letter is covered by the pool
    - remaining: leftover letters, grouped by letter (only when valid)
    - error: human readable message naming the offending letter (only when invalid)
    - letter: the offending letter (only when invalid)
    """

    valid: bool
    remaining: List[str] = field(default_factory=list)
    error: Optional[str] = None
    letter: Optional[str] = None


def _count_letters(letters) -> Dict[str, int]:
    counts: Dict[str, int] = {}
    for ch in letters:
        if not ch:
            continue
        ch = ch.upper()
        if "A" <= ch <= "Z":
            counts[ch] = counts.get(ch, 0) + 1
    return counts


def _consume_locks(pool_counts: Dict[str, int], lock_counts: Dict[str, int]) -> None:
    """Subtract lock demand from pool supply in place.

    Stops at the first letter whose demand exceeds supply.
    """
    for ch, needed in lock_counts.items():
        if pool_counts.get(ch, 0) < needed:
            raise PoolViolation(ch)
        pool_counts[ch] -= needed


# PUBLIC_INTERFACE
def validate_pool(pool: str, locks: Mapping[int, str]) -> PoolValidation:
    """Check that the locked letters can be taken from the pool.

    Parameters:
        pool: available letters, e.g. "RRETOPUCM"
        locks: slot index -> letter; only the letters (values) matter here

    Returns:
        PoolValidation(valid=True, remaining=[...]) with the leftover letters,
        or PoolValidation(valid=False, error="X not available in pool", letter="X")
        for the first letter found short.
    """
    pool_counts = _count_letters(pool)
    lock_counts = _count_letters(locks.values())
    try:
        _consume_locks(pool_counts, lock_counts)
    except PoolViolation as e:
        return PoolValidation(valid=False, error=str(e), letter=e.letter)

    remaining: List[str] = []
    for ch, count in pool_counts.items():
        remaining.extend([ch] * count)
    return PoolValidation(valid=True, remaining=remaining)
