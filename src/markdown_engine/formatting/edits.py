"""Splice helper that keeps a selection attached to the text it covered."""

from __future__ import annotations

from markdown_engine.buffer import Selection


def map_offset(offset: int, at: int, removed: int, inserted: int) -> int:
    """Where ``offset`` lands after replacing ``removed`` chars at ``at``.

    Offsets inside (or at the start of) the replaced run move to its end.
    """

    if offset < at:
        return offset
    if offset < at + removed:
        return at + inserted
    return offset - removed + inserted


def splice(
    text: str, selection: Selection, at: int, removed: int, insert: str
) -> tuple[str, Selection]:
    new_text = text[:at] + insert + text[at + removed :]
    start = map_offset(selection.start, at, removed, len(insert))
    end = map_offset(selection.end, at, removed, len(insert))
    return new_text, Selection(start, max(start, end))
