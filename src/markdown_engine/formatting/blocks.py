"""Quote and list prefixes over every line a selection touches."""

from __future__ import annotations

from typing import List

from markdown_engine.buffer import EditResult, LineSpan, Selection, iter_lines
from markdown_engine.catalog import FormatId, FormatSpec
from markdown_engine.detect.patterns import (
    LIST_STYLES,
    list_indent,
    match_line_prefix,
    pattern_for,
)


def apply_line_prefix(text: str, selection: Selection, spec: FormatSpec) -> EditResult:
    """Toggle ``spec`` on the block spanned by ``selection``.

    The block is toggled off only when every non-blank line already carries
    the target prefix; otherwise each non-blank line gets it, replacing any
    other line prefix it had. Blank lines are never touched.
    """

    label = f"format::{spec.id.value}"
    lines = list(iter_lines(text, selection.start, selection.end))
    block_start, block_end = lines[0].start, lines[-1].end
    content = [line for line in lines if not line.is_blank]

    if not content:
        new_text = text[:block_start] + spec.prefix + spec.placeholder + text[block_start:]
        inner = block_start + len(spec.prefix)
        return EditResult(new_text, inner, inner + len(spec.placeholder), label=label)

    pattern = pattern_for(spec.id)
    if all(pattern.match(line.text) for line in content):
        rebuilt = [_strip_prefix(line, spec.id) for line in lines]
        label = f"{label}:off"
    else:
        rebuilt = _prefix_lines(lines, spec)

    block = "\n".join(rebuilt)
    new_text = text[:block_start] + block + text[block_end:]
    delta = len(block) - (block_end - block_start)
    return EditResult(new_text, block_start, block_end + delta, label=label)


def _strip_prefix(line: LineSpan, style: FormatId) -> str:
    if line.is_blank:
        return line.text
    found = pattern_for(style).match(line.text)
    assert found is not None
    return list_indent(found) + line.text[found.end() :]


def _prefix_lines(lines: List[LineSpan], spec: FormatSpec) -> List[str]:
    rebuilt: List[str] = []
    number = 0
    for line in lines:
        if line.is_blank:
            rebuilt.append(line.text)
            continue
        number += 1
        prefix = f"{number}. " if spec.id is FormatId.ORDERED_LIST else spec.prefix
        found = match_line_prefix(line.text)
        if found is None:
            rebuilt.append(prefix + line.text)
            continue
        style, match = found
        indent = ""
        if style in LIST_STYLES and spec.id in LIST_STYLES:
            indent = list_indent(match)
        rebuilt.append(indent + prefix + line.text[match.end() :])
    return rebuilt
