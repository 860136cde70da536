"""Wrap/unwrap toggles for inline formats."""

from __future__ import annotations

from markdown_engine.buffer import EditResult, Selection
from markdown_engine.catalog import FormatSpec
from markdown_engine.detect import InlineContext, Wrap, find_wrap


def toggle_inline(text: str, selection: Selection, spec: FormatSpec) -> EditResult:
    label = f"format::{spec.id.value}"
    start, end = selection.as_tuple()
    if not selection.is_caret:
        wrap = find_wrap(InlineContext.capture(text, start, end), spec)
        if wrap is not None:
            return _unwrap(text, selection, wrap, label)

    inner = text[start:end] or spec.placeholder
    new_text = text[:start] + spec.prefix + inner + spec.suffix + text[end:]
    inner_start = start + len(spec.prefix)
    return EditResult(new_text, inner_start, inner_start + len(inner), label=label)


def _unwrap(text: str, selection: Selection, wrap: Wrap, label: str) -> EditResult:
    start, end = selection.as_tuple()
    prefix_len, suffix_len = len(wrap.prefix), len(wrap.suffix)
    if wrap.placement == "outside":
        new_text = text[: start - prefix_len] + text[start:end] + text[end + suffix_len :]
        return EditResult(
            new_text, start - prefix_len, end - prefix_len, label=f"{label}:off"
        )

    inner = text[start + prefix_len : end - suffix_len]
    new_text = text[:start] + inner + text[end:]
    return EditResult(new_text, start, start + len(inner), label=f"{label}:off")
