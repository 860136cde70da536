"""Buffer/selection contract shared by the detector, applicator and cleaner."""

from .lines import (
    LineSpan,
    block_bounds,
    iter_lines,
    line_at,
    line_end,
    line_start,
    location_to_offset,
    next_line,
    offset_to_location,
)
from .state import EditResult, Location, Selection
from .stats import DocumentStats, document_stats
from .sync import BufferMirror, BufferSync, InvalidSelectionError
from .validation import clamp_selection, ensure_selection

__all__ = [
    "BufferMirror",
    "BufferSync",
    "DocumentStats",
    "EditResult",
    "InvalidSelectionError",
    "LineSpan",
    "Location",
    "Selection",
    "block_bounds",
    "clamp_selection",
    "document_stats",
    "ensure_selection",
    "iter_lines",
    "line_at",
    "line_end",
    "line_start",
    "location_to_offset",
    "next_line",
    "offset_to_location",
]
