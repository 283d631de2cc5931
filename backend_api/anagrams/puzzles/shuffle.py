from __future__ import annotations

import random
from typing import List, Optional, Protocol, Sequence, TypeVar

T = TypeVar("T")


class _RandomLike(Protocol):
    """Anything that can draw an integer from [0, stop)."""

    def randrange(self, stop: int) -> int: ...


_default_rng = random.Random()


# PUBLIC_INTERFACE
def shuffle_letters(items: Sequence[T], rng: Optional[_RandomLike] = None) -> List[T]:
    """Return a uniformly shuffled copy of items (Fisher-Yates).

    The input sequence is not modified. Pass a seeded random.Random as rng
    for reproducible output.
    """
    rng = rng or _default_rng
    result = list(items)
    for i in range(len(result) - 1, 0, -1):
        j = rng.randrange(i + 1)
        result[i], result[j] = result[j], result[i]
    return result
