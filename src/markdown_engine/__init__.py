"""Offset-based markdown formatting engine."""

from .buffer import EditResult, InvalidSelectionError, Selection
from .catalog import FormatId, UnknownFormatError
from .clear import clear_formatting
from .detect import StyleSet, detect_styles
from .formatting import apply_format, apply_link

__all__ = [
    "EditResult",
    "FormatId",
    "InvalidSelectionError",
    "Selection",
    "StyleSet",
    "UnknownFormatError",
    "apply_format",
    "apply_link",
    "clear_formatting",
    "detect_styles",
]

__version__ = "0.1.0"
