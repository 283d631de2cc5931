from __future__ import annotations

import re
from typing import Optional

DEFAULT_LENGTH = 5
MAX_LENGTH = 15
MAX_POOL_LENGTH = 15

_NON_LETTERS = re.compile(r"[^A-Z]")


# PUBLIC_INTERFACE
def sanitize_pool(raw: Optional[str], max_pool_length: int = MAX_POOL_LENGTH) -> str:
    """Upper-case raw pool input, drop anything outside A-Z and truncate.

    Example:
        sanitize_pool("rr-eto pucm!")  # -> "RRETOPUCM"
    """
    return _NON_LETTERS.sub("", (raw or "").upper())[:max_pool_length]


# PUBLIC_INTERFACE
def sanitize_lock_letter(raw: Optional[str]) -> Optional[str]:
    """Return the upper-cased last typed character, or None to unlock.

    Raises:
        ValueError: if the character is not a letter A-Z.
    """
    if not raw:
        return None
    letter = raw[-1].upper()
    if _NON_LETTERS.match(letter):
        raise ValueError(f"Locked letter must be A-Z, got {letter!r}.")
    return letter


# PUBLIC_INTERFACE
def clamp_length(value: int, max_length: int = MAX_LENGTH) -> int:
    """Clamp a target length into [1, max_length]."""
    return max(1, min(int(value), max_length))
