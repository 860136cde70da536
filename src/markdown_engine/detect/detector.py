"""Entry point for toolbar state: which styles apply to a selection."""

from __future__ import annotations

from markdown_engine.buffer import ensure_selection
from markdown_engine.runtime.telemetry import span

from .inline import LOOKAROUND, InlineContext, inline_styles
from .line import line_style
from .styles import StyleSet


def detect_styles(
    text: str, start: int, end: int, *, window: int = LOOKAROUND
) -> StyleSet:
    """Detect inline and line styles for ``text[start:end]``.

    Raises ``InvalidSelectionError`` for offsets outside the buffer.
    """

    with span(
        "detect::styles",
        component="detect",
        metadata={"start": start, "end": end},
    ) as handle:
        ensure_selection(text, start, end)
        context = InlineContext.capture(text, start, end, window=window)
        styles = StyleSet(inline=inline_styles(context), line=line_style(text, start))
        handle.add_metadata("styles", ",".join(styles.names()))
        return styles
