"""Block templates and link/image markup; these never toggle."""

from __future__ import annotations

from markdown_engine.buffer import EditResult, Selection
from markdown_engine.catalog import FormatId, FormatSpec


def insert_block(text: str, selection: Selection, spec: FormatSpec) -> EditResult:
    label = f"insert::{spec.id.value}"
    start, end = selection.as_tuple()

    if spec.id is FormatId.HR:
        new_text = text[:start] + spec.prefix + text[start:]
        shift = len(spec.prefix)
        return EditResult(new_text, start + shift, end + shift, label=label)

    if spec.id is FormatId.FOOTNOTE:
        new_text = text[:end] + spec.prefix + spec.placeholder + spec.suffix + text[end:]
        inner = end + len(spec.prefix)
        return EditResult(new_text, inner, inner + len(spec.placeholder), label=label)

    # Fenced code and tables must sit on their own lines.
    inner_text = text[start:end] or spec.placeholder
    lead = "\n" if start > 0 and text[start - 1] != "\n" else ""
    trail = "\n" if end < len(text) and text[end] != "\n" else ""
    new_text = (
        text[:start] + lead + spec.prefix + inner_text + spec.suffix + trail + text[end:]
    )
    inner = start + len(lead) + len(spec.prefix)
    return EditResult(new_text, inner, inner + len(inner_text), label=label)


def insert_link(
    text: str,
    selection: Selection,
    url: str,
    *,
    label: str | None = None,
    image: bool = False,
) -> EditResult:
    """Replace the selection with ``[label](url)`` (``![label](url)`` for images).

    ``label`` defaults to the selected text; the caret ends after the markup.
    """

    start, end = selection.as_tuple()
    caption = text[start:end] if label is None else label
    markup = f"{'!' if image else ''}[{caption}]({url})"
    new_text = text[:start] + markup + text[end:]
    caret = start + len(markup)
    return EditResult(
        new_text, caret, caret, label="insert::image" if image else "insert::link"
    )
