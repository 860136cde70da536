"""Heading level changes and the paragraph (un-heading) command."""

from __future__ import annotations

from markdown_engine.buffer import EditResult, LineSpan, Selection, line_at, next_line
from markdown_engine.catalog import FormatId, FormatSpec
from markdown_engine.detect import setext_level
from markdown_engine.detect.patterns import HEADING

from .edits import splice


def apply_heading(text: str, selection: Selection, spec: FormatSpec) -> EditResult:
    """Set the selection's line to ``spec``'s level, or clear it if already there.

    ``#`` prefixes of another level are swapped in place; a setext underline
    is dropped in favour of the ``#`` prefix.
    """

    label = f"format::{spec.id.value}"
    level = spec.id.heading_level
    line = line_at(text, selection.start)

    if selection.is_caret and line.is_blank:
        at = line.start
        new_text = text[:at] + spec.prefix + spec.placeholder + text[at:]
        inner = at + len(spec.prefix)
        return EditResult(new_text, inner, inner + len(spec.placeholder), label=label)

    heading = HEADING.match(line.text)
    if heading:
        existing = heading.group(0)
        replacement = "" if len(heading.group(1)) == level else spec.prefix
        new_text, moved = splice(text, selection, line.start, len(existing), replacement)
        return _result(new_text, moved, label if replacement else f"{label}:off")

    underline_level = setext_level(text, line)
    if underline_level:
        new_text, moved = _drop_underline(text, selection, line)
        if underline_level == level:
            return _result(new_text, moved, f"{label}:off")
        text, selection = new_text, moved

    new_text, moved = splice(text, selection, line.start, 0, spec.prefix)
    return _result(new_text, moved, label)


def apply_paragraph(text: str, selection: Selection) -> EditResult:
    """Strip a ``#`` prefix or setext underline; plain lines are left alone."""

    label = f"format::{FormatId.PARAGRAPH.value}"
    line = line_at(text, selection.start)
    heading = HEADING.match(line.text)
    if heading:
        new_text, moved = splice(text, selection, line.start, heading.end(), "")
        return _result(new_text, moved, label)
    if setext_level(text, line):
        new_text, moved = _drop_underline(text, selection, line)
        return _result(new_text, moved, label)
    return EditResult.unchanged(text, selection.start, selection.end, label=label)


def _drop_underline(
    text: str, selection: Selection, line: LineSpan
) -> tuple[str, Selection]:
    underline = next_line(text, line)
    assert underline is not None
    return splice(text, selection, line.end, underline.end - line.end, "")


def _result(text: str, selection: Selection, label: str) -> EditResult:
    return EditResult(text, selection.start, selection.end, label=label)
