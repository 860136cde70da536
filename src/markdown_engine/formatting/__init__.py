"""Format applicator: buffer + selection + format id -> new buffer + selection."""

from .applicator import apply_format, apply_link
from .blocks import apply_line_prefix
from .headings import apply_heading, apply_paragraph
from .inline import toggle_inline
from .inserts import insert_block, insert_link

__all__ = [
    "apply_format",
    "apply_heading",
    "apply_line_prefix",
    "apply_link",
    "apply_paragraph",
    "insert_block",
    "insert_link",
    "toggle_inline",
]
