"""Line-anchored markdown patterns shared by detection and application.

All patterns run against a single physical line (no trailing newline).
"""

from __future__ import annotations

import re
from typing import Optional, Tuple

from markdown_engine.catalog import FormatId

HEADING = re.compile(r"^(#{1,6})\s")
QUOTE = re.compile(r"^(?:>[ \t]?)+")
TASK = re.compile(r"^([ \t]*)[-*+]\s\[[ xX]\]\s")
# A bullet whose body merely starts with a link is still a bullet.
BULLET = re.compile(r"^([ \t]*)[-*+]\s(?!\[[ xX]\]\s)")
ORDERED = re.compile(r"^([ \t]*)\d+\.\s")
SETEXT_H1 = re.compile(r"^=+\s*$")
SETEXT_H2 = re.compile(r"^-+\s*$")

# Checked in this order; a task line must not be read as a bullet.
LINE_PREFIXES: Tuple[Tuple[FormatId, "re.Pattern[str]"], ...] = (
    (FormatId.QUOTE, QUOTE),
    (FormatId.TASK, TASK),
    (FormatId.LIST, BULLET),
    (FormatId.ORDERED_LIST, ORDERED),
)

LIST_STYLES = frozenset({FormatId.LIST, FormatId.ORDERED_LIST, FormatId.TASK})


def match_line_prefix(line: str) -> Optional[Tuple[FormatId, "re.Match[str]"]]:
    """Return the line style and its prefix match, headings included."""

    heading = HEADING.match(line)
    if heading:
        return FormatId(f"h{len(heading.group(1))}"), heading
    for style, pattern in LINE_PREFIXES:
        found = pattern.match(line)
        if found:
            return style, found
    return None


def pattern_for(style: FormatId) -> "re.Pattern[str]":
    for candidate, pattern in LINE_PREFIXES:
        if candidate is style:
            return pattern
    raise KeyError(style)


def list_indent(found: "re.Match[str]") -> str:
    """Leading indentation captured by a list pattern ('' for others)."""

    if found.re.groups and found.re is not HEADING:
        return found.group(1) or ""
    return ""


__all__ = [
    "BULLET",
    "HEADING",
    "LINE_PREFIXES",
    "LIST_STYLES",
    "ORDERED",
    "QUOTE",
    "SETEXT_H1",
    "SETEXT_H2",
    "TASK",
    "list_indent",
    "match_line_prefix",
    "pattern_for",
]
