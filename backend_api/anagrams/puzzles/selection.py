from __future__ import annotations

from typing import Dict, Iterable, Optional

SELECTION_PARAM = "name"


# PUBLIC_INTERFACE
def selection_params(record) -> Dict[str, str]:
    """Query parameters that point at `record`, e.g. {"name": "Anagram 1"}.

    An empty dict means "nothing selected" and the parameter should be removed.
    """
    if record is None:
        return {}
    return {SELECTION_PARAM: record.name}


# PUBLIC_INTERFACE
def resolve_selection(records: Iterable, name: Optional[str]) -> Optional[str]:
    """Return the id of the first record named `name`, or None."""
    if not name:
        return None
    for record in records:
        if record.name == name:
            return record.id
    return None
