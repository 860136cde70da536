from __future__ import annotations

from typing import List

import pytest

from markdown_engine import Selection
from markdown_engine.adapters.textual import TextualFormatAdapter, TextualUIHooks
from markdown_engine.buffer import BufferMirror, DocumentStats
from markdown_engine.detect import StyleSet
from markdown_engine.keymaps import (
    CLEAR_ACTION_ID,
    ActionRef,
    KeymapRegistry,
    load_default_keymaps,
)
from markdown_engine.session import EditorSession


class Recorder:
    def __init__(self) -> None:
        self.buffers: List[BufferMirror] = []
        self.toolbars: List[StyleSet] = []
        self.statuses: List[str] = []
        self.stats: List[DocumentStats] = []
        self.logs: List[str] = []

    def hooks(self) -> TextualUIHooks:
        return TextualUIHooks(
            update_buffer=self.buffers.append,
            update_toolbar=self.toolbars.append,
            update_status=self.statuses.append,
            update_stats=self.stats.append,
            log=self.logs.append,
        )


def make_adapter(text: str, start: int, end: int) -> tuple[TextualFormatAdapter, Recorder]:
    registry = KeymapRegistry()
    load_default_keymaps(registry)
    session = EditorSession(text, name="test", selection=Selection(start, end))
    recorder = Recorder()
    return TextualFormatAdapter(session, registry, recorder.hooks()), recorder


def test_adapter_pushes_initial_state() -> None:
    _, recorder = make_adapter("# Title", 2, 2)

    assert recorder.buffers[-1].text == "# Title"
    assert "h1" in recorder.toolbars[-1]


def test_shortcut_updates_buffer_toolbar_and_status() -> None:
    adapter, recorder = make_adapter("hello", 0, 5)

    result = adapter.handle_textual_key("ctrl+b")

    assert result is not None
    assert recorder.buffers[-1].text == "**hello**"
    assert recorder.buffers[-1].selection == Selection(2, 7)
    assert "bold" in recorder.toolbars[-1]
    assert recorder.statuses[-1] == "format::bold"
    assert recorder.stats[-1].words == 1


def test_separate_modifiers_are_merged() -> None:
    adapter, _ = make_adapter("hello", 0, 5)

    adapter.handle_textual_key("i", modifiers=("ctrl",))

    assert adapter.session.text == "*hello*"


def test_unbound_key_is_ignored() -> None:
    adapter, recorder = make_adapter("hello", 0, 5)

    assert adapter.handle_textual_key("ctrl+z") is None
    assert adapter.handle_textual_key("") is None
    assert adapter.session.text == "hello"
    assert recorder.statuses == []


def test_noop_reports_status() -> None:
    adapter, recorder = make_adapter("**x**", 2, 2)

    adapter.run_action(CLEAR_ACTION_ID)

    assert recorder.statuses[-1] == "clear:noop"
    assert len(recorder.buffers) == 1


def test_widget_edits_do_not_echo_buffer() -> None:
    adapter, recorder = make_adapter("", 0, 0)

    adapter.sync_from_widget("typed text", 10, 5)

    assert adapter.session.text == "typed text"
    assert adapter.session.selection == Selection(5, 10)
    assert len(recorder.buffers) == 1
    assert recorder.stats[-1].words == 2


def test_insert_link_reports_label() -> None:
    adapter, recorder = make_adapter("see docs", 4, 8)

    adapter.insert_link("http://x")

    assert recorder.buffers[-1].text == "see [docs](http://x)"
    assert recorder.statuses[-1] == "insert::link"


def test_adapter_emits_log_lines() -> None:
    adapter, recorder = make_adapter("hello", 0, 5)

    adapter.handle_textual_key("ctrl+b")

    assert any(line.startswith("key ->") for line in recorder.logs)
    assert any(line.startswith("result <-") for line in recorder.logs)


def test_action_returning_non_result_is_rejected() -> None:
    adapter, recorder = make_adapter("hello", 0, 5)
    adapter.registry.register_action(
        ActionRef(id="custom.nothing", handler=lambda session: None)
    )

    with pytest.raises(TypeError):
        adapter.run_action("custom.nothing")

    assert recorder.statuses == []
