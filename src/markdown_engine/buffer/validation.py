"""Selection checks shared by every engine entry point."""

from __future__ import annotations

from .state import Selection
from .sync import InvalidSelectionError


def ensure_selection(text: str, start: int, end: int) -> Selection:
    """Return ``Selection(start, end)`` or raise ``InvalidSelectionError``."""

    if start > end:
        raise InvalidSelectionError("Selection start is after end", selection=(start, end))
    if start < 0 or end > len(text):
        raise InvalidSelectionError("Selection out of range", selection=(start, end))
    return Selection(start, end)


def clamp_selection(text: str, start: int, end: int | None = None) -> Selection:
    """Clamp host-provided offsets into the buffer, ordering them if reversed."""

    limit = len(text)
    head = start if end is None else end
    low = max(0, min(start, limit))
    high = max(0, min(head, limit))
    if low > high:
        low, high = high, low
    return Selection(low, high)
