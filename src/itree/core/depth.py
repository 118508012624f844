"""Tree depth input validation."""

from __future__ import annotations

from itree.utils.constants import DEFAULT_DEPTH, MAX_DEPTH


def parse_depth(raw: str | None, *, default: int = DEFAULT_DEPTH, maximum: int = MAX_DEPTH) -> int:
    """Parse a user-typed depth.

    Only plain digits no greater than *maximum* are accepted; empty,
    non-numeric or out-of-range input yields *default*.
    """
    if raw is None:
        return default
    text = raw.strip()
    if not text or not text.isascii() or not text.isdigit():
        return default
    value = int(text)
    if value > maximum:
        return default
    return value
