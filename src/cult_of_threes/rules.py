"""
The membership rule: display names of at most three letters belong in the
channel, anything longer does not.

Length is measured in UTF-16 code units, which is how Slack's own clients
count characters, so an emoji outside the BMP counts as two.
"""

from __future__ import annotations

MAX_NAME_LENGTH = 3


def display_name_length(name: str | None) -> int:
    """Return the length of ``name`` in UTF-16 code units."""
    if not name:
        return 0
    return len(name.encode("utf-16-le")) // 2


def is_short_name(name: str | None, limit: int = MAX_NAME_LENGTH) -> bool:
    return display_name_length(name) <= limit


__all__ = ["MAX_NAME_LENGTH", "display_name_length", "is_short_name"]
