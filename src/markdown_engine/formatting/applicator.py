"""Dispatch a format command to the transform for its kind."""

from __future__ import annotations

from markdown_engine.buffer import EditResult, ensure_selection
from markdown_engine.catalog import HEADINGS, FormatId, FormatKind, resolve_format
from markdown_engine.runtime.telemetry import span

from .blocks import apply_line_prefix
from .headings import apply_heading, apply_paragraph
from .inline import toggle_inline
from .inserts import insert_block, insert_link


def apply_format(text: str, start: int, end: int, format_id: FormatId | str) -> EditResult:
    """Apply (or toggle off) ``format_id`` on ``text[start:end]``.

    Raises ``UnknownFormatError`` for ids outside the catalog and
    ``InvalidSelectionError`` for out-of-range offsets; the input is never
    modified in either case.
    """

    with span(
        "format::apply",
        component="formatting",
        metadata={"format": format_id, "start": start, "end": end},
    ) as handle:
        spec = resolve_format(format_id)
        selection = ensure_selection(text, start, end)

        if spec.kind is FormatKind.INLINE:
            result = toggle_inline(text, selection, spec)
        elif spec.id in HEADINGS:
            result = apply_heading(text, selection, spec)
        elif spec.id is FormatId.PARAGRAPH:
            result = apply_paragraph(text, selection)
        elif spec.kind is FormatKind.LINE:
            result = apply_line_prefix(text, selection, spec)
        else:
            result = insert_block(text, selection, spec)

        handle.add_metadata("label", result.label)
        handle.add_metadata("changed", result.changed)
        return result


def apply_link(
    text: str,
    start: int,
    end: int,
    url: str,
    *,
    label: str | None = None,
    image: bool = False,
) -> EditResult:
    with span(
        "format::link",
        component="formatting",
        metadata={"image": image, "start": start, "end": end},
    ):
        selection = ensure_selection(text, start, end)
        return insert_link(text, selection, url, label=label, image=image)
