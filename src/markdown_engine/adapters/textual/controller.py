"""Textual-agnostic controller wiring an EditorSession into UI callbacks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Optional

from markdown_engine.buffer import BufferMirror, DocumentStats, EditResult, Selection
from markdown_engine.detect import StyleSet
from markdown_engine.keymaps import KeymapRegistry, KeyStroke
from markdown_engine.session import EditorSession


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks the controller uses to update Textual widgets."""

    update_buffer: Callable[[BufferMirror], None]
    update_toolbar: Callable[[StyleSet], None] = _noop
    update_status: Callable[[str], None] = _noop
    update_stats: Callable[[DocumentStats], None] = _noop
    log: Callable[[str], None] = _noop


class TextualFormatAdapter:
    """Routes toolbar clicks, shortcuts and widget edits through a session."""

    def __init__(
        self,
        session: EditorSession,
        registry: KeymapRegistry,
        hooks: TextualUIHooks,
    ) -> None:
        self.session = session
        self.registry = registry
        self.hooks = hooks
        self._subscribe_events()
        self._refresh_buffer()
        self._refresh_toolbar()

    def handle_textual_key(
        self, key: str, *, modifiers: Iterable[str] = ()
    ) -> Optional[EditResult]:
        """Run the action bound to ``key``; returns None when nothing is bound."""

        stroke = _stroke_from_textual(key, modifiers)
        if stroke is None:
            return None
        action = self.registry.resolve(stroke)
        self._log_state(
            "key ->", stroke=stroke.token, action=action.id if action else None
        )
        if action is None:
            return None
        return self.run_action(action.id)

    def run_action(self, action_id: str) -> EditResult:
        action = self.registry.get_action(action_id)
        result = action(self.session)
        if not isinstance(result, EditResult):
            raise TypeError(
                f"Action '{action_id}' returned {type(result).__name__}, expected EditResult"
            )
        status = result.label if result.changed else f"{result.label}:noop"
        self.hooks.update_status(status)
        self._log_state("result <-", label=result.label, changed=result.changed)
        return result

    def insert_link(
        self, url: str, *, label: Optional[str] = None, image: bool = False
    ) -> EditResult:
        result = self.session.insert_link(url, label=label, image=image)
        self.hooks.update_status(result.label)
        return result

    def sync_from_widget(self, text: str, start: int, end: int) -> None:
        """Mirror a change the user made directly in the text widget."""

        low, high = sorted((start, end))
        self.session.push_host_edit(
            BufferMirror(text=text, selection=Selection(low, high))
        )
        self._refresh_toolbar()

    def _subscribe_events(self) -> None:
        bus = self.session.bus
        bus.subscribe("edit.committed", self._on_committed)
        bus.subscribe("selection.changed", lambda _payload: self._refresh_toolbar())

    def _on_committed(self, payload: object | None) -> None:
        label = payload.get("label") if isinstance(payload, dict) else None
        self._log_state("commit ->", label=label)
        if label != "host_edit":
            self._refresh_buffer()
        self._refresh_toolbar()
        self.hooks.update_stats(self.session.stats())

    def _refresh_buffer(self) -> None:
        self.hooks.update_buffer(self.session.mirror())

    def _refresh_toolbar(self) -> None:
        self.hooks.update_toolbar(self.session.styles())

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot: Dict[str, object] = {
            "session": self.session.name,
            "version": self.session.version,
            "selection": self.session.selection.as_tuple(),
        }
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix] + [f"{key}={value!r}" for key, value in snapshot.items()]
        self.hooks.log(" ".join(parts))


def _stroke_from_textual(key: str, modifiers: Iterable[str]) -> Optional[KeyStroke]:
    """Textual reports chords as ``"ctrl+b"``; extra modifiers may be passed."""

    if not key:
        return None
    try:
        stroke = KeyStroke.parse(key)
    except ValueError:
        return None
    extra = tuple(str(mod) for mod in modifiers)
    if extra:
        stroke = KeyStroke(stroke.key, stroke.modifiers + extra)
    return stroke


__all__ = ["TextualFormatAdapter", "TextualUIHooks"]
