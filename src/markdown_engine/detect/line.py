"""Line-level style of the line holding the selection start."""

from __future__ import annotations

from typing import Optional

from markdown_engine.buffer import LineSpan, line_at, next_line
from markdown_engine.catalog import FormatId

from .patterns import HEADING, QUOTE, SETEXT_H1, SETEXT_H2, match_line_prefix


def setext_level(text: str, line: LineSpan) -> int:
    """1 or 2 when the line after ``line`` underlines it, else 0."""

    if line.is_blank:
        return 0
    underline = next_line(text, line)
    if underline is None:
        return 0
    if SETEXT_H1.match(underline.text):
        return 1
    if SETEXT_H2.match(underline.text) and not QUOTE.match(line.text):
        return 2
    return 0


def line_style(text: str, start: int) -> Optional[FormatId]:
    """Exactly one line style for a non-blank line, ``None`` for a blank one."""

    line = line_at(text, start)
    if line.is_blank:
        return None
    heading = HEADING.match(line.text)
    if heading:
        return FormatId(f"h{len(heading.group(1))}")
    level = setext_level(text, line)
    if level:
        return FormatId(f"h{level}")
    found = match_line_prefix(line.text)
    if found is not None:
        return found[0]
    return FormatId.PARAGRAPH


__all__ = ["line_style", "setext_level"]
