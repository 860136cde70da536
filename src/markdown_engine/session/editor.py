"""Caller-side façade owning the authoritative buffer and selection."""

from __future__ import annotations

from contextlib import AbstractContextManager
from typing import ContextManager, Optional

from markdown_engine.buffer import (
    BufferMirror,
    DocumentStats,
    EditResult,
    Selection,
    clamp_selection,
    document_stats,
)
from markdown_engine.catalog import FormatId
from markdown_engine.clear import clear_formatting
from markdown_engine.detect import StyleSet, detect_styles
from markdown_engine.formatting import apply_format, apply_link
from markdown_engine.runtime import telemetry

from .bus import EventBus


class EditorSession:
    """Serialises engine edits against one buffer.

    Each command runs the pure engine on the current text, then commits the
    returned buffer and selection before the next command can start. History
    belongs to the host widget; the session only reports ``edit.committed``
    events carrying the before/after text.
    """

    def __init__(
        self,
        text: str = "",
        *,
        name: str = "default",
        selection: Optional[Selection] = None,
        bus: Optional[EventBus] = None,
    ) -> None:
        self.name = name
        self.bus = bus or EventBus()
        self.version = 0
        self._text = text
        self._selection = clamp_selection(text, 0, 0)
        if selection is not None:
            self._selection = clamp_selection(text, selection.start, selection.end)

    @property
    def text(self) -> str:
        return self._text

    @property
    def selection(self) -> Selection:
        return self._selection

    @property
    def selected_text(self) -> str:
        return self._text[self._selection.start : self._selection.end]

    def mirror(self, *, attributes: Optional[dict[str, str]] = None) -> BufferMirror:
        return BufferMirror(
            text=self._text,
            selection=self._selection,
            version=self.version,
            attributes=dict(attributes or {}),
        )

    # BufferSync
    def pull_buffer(self) -> BufferMirror:
        return self.mirror()

    def push_host_edit(self, mirror: BufferMirror) -> None:
        selection = clamp_selection(
            mirror.text, mirror.selection.start, mirror.selection.end
        )
        if mirror.text != self._text:
            self._commit(
                EditResult(mirror.text, selection.start, selection.end, label="host_edit")
            )
        else:
            self.select(selection.start, selection.end)

    def select(self, start: int, end: Optional[int] = None) -> Selection:
        selection = clamp_selection(self._text, start, end)
        if selection != self._selection:
            self._selection = selection
            self.bus.emit("selection.changed", selection)
        return selection

    def styles(self) -> StyleSet:
        return detect_styles(self._text, self._selection.start, self._selection.end)

    def stats(self) -> DocumentStats:
        return document_stats(self._text)

    def apply(self, format_id: FormatId | str) -> EditResult:
        start, end = self._selection.as_tuple()
        result = apply_format(self._text, start, end, format_id)
        return self._commit(result)

    def clear_formatting(self) -> EditResult:
        start, end = self._selection.as_tuple()
        return self._commit(clear_formatting(self._text, start, end))

    def insert_link(
        self, url: str, *, label: Optional[str] = None, image: bool = False
    ) -> EditResult:
        start, end = self._selection.as_tuple()
        result = apply_link(self._text, start, end, url, label=label, image=image)
        return self._commit(result)

    def replace_text(self, text: str) -> EditResult:
        """Swap in externally produced text (e.g. an AI rewrite) wholesale."""

        caret = min(self._selection.start, len(text))
        return self._commit(EditResult(text, caret, caret, label="replace_text"))

    def _commit(self, result: EditResult) -> EditResult:
        if not result.changed:
            self.bus.emit("edit.noop", result.label)
            return result
        with Commit(self, result.label) as commit:
            before = self._text
            self._text = result.text
            self._selection = clamp_selection(result.text, result.start, result.end)
            self.version += 1
            commit.publish(before, result)
        return result


class Commit(AbstractContextManager["Commit"]):
    """Span + event emission around a single buffer commit."""

    def __init__(self, session: EditorSession, label: str) -> None:
        self.session = session
        self.label = label
        self._span_cm: Optional[ContextManager[object]] = None

    def __enter__(self) -> "Commit":
        self._span_cm = telemetry.span(
            name=f"session::{self.label}",
            component="session",
            metadata={"session": self.session.name},
        )
        self._span_cm.__enter__()
        return self

    def publish(self, before_text: str, result: EditResult) -> None:
        self.session.bus.emit(
            "edit.committed",
            {
                "label": self.label,
                "before": before_text,
                "after": result.text,
                "selection": result.selection,
                "version": self.session.version,
            },
        )

    def __exit__(self, exc_type, exc, tb) -> bool:
        if self._span_cm is not None:
            self._span_cm.__exit__(exc_type, exc, tb)
        return False
