from __future__ import annotations

"""Collection naming rules shared by store adapters."""

from typing import Any

MIN_COLLECTION_NAME_LENGTH = 5


def is_valid_collection_name(name: Any) -> bool:
    """Return True for names a store accepts.

    A valid name is a non-blank string of at least five characters that does
    not start or end with a space.
    """

    if not isinstance(name, str) or not name.strip():
        return False
    if name.startswith(" ") or name.endswith(" "):
        return False
    return len(name) >= MIN_COLLECTION_NAME_LENGTH


__all__ = ["MIN_COLLECTION_NAME_LENGTH", "is_valid_collection_name"]
