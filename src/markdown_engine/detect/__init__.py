"""Style detector: reports formats active at a selection."""

from .detector import detect_styles
from .inline import LOOKAROUND, InlineContext, Wrap, find_wrap, inline_styles
from .line import line_style, setext_level
from .styles import StyleSet

__all__ = [
    "LOOKAROUND",
    "InlineContext",
    "StyleSet",
    "Wrap",
    "detect_styles",
    "find_wrap",
    "inline_styles",
    "line_style",
    "setext_level",
]
