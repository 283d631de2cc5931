from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional, Sequence


# PUBLIC_INTERFACE
@dataclass(frozen=True)
class Slot:
    """One display position: a locked letter, an arranged letter, or empty ("")."""

    char: str
    locked: bool


# PUBLIC_INTERFACE
def compose_slots(
    length: int,
    locks: Mapping[int, str],
    arrangement: Optional[Sequence[str]] = None,
) -> List[Slot]:
    """Merge locked letters with the arrangement into `length` slots.

    Locked positions keep their letter and do not consume the arrangement;
    open positions take arrangement letters left to right and stay empty
    once it runs out. Locks at index >= length are not shown.
    """
    arrangement = arrangement or []
    slots: List[Slot] = []
    next_idx = 0
    for i in range(length):
        locked = locks.get(i)
        if locked:
            slots.append(Slot(char=locked, locked=True))
        elif next_idx < len(arrangement):
            slots.append(Slot(char=arrangement[next_idx], locked=False))
            next_idx += 1
        else:
            slots.append(Slot(char="", locked=False))
    return slots


# PUBLIC_INTERFACE
def summarize(length: int, locks: Mapping[int, str]) -> Dict[str, int]:
    """List-view line for a puzzle: how many letters are locked and the slot count."""
    return {"known": sum(1 for letter in locks.values() if letter), "length": length}
