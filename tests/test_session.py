from typing import List

import pytest

from markdown_engine import Selection, UnknownFormatError
from markdown_engine.buffer import BufferMirror
from markdown_engine.session import EditorSession, EventBus


def make_session(text: str, start: int, end: int) -> tuple[EditorSession, List[object]]:
    events: List[object] = []
    session = EditorSession(text, name="doc.md", selection=Selection(start, end))
    session.bus.subscribe("edit.committed", events.append)
    return session, events


def test_apply_commits_result_and_emits_event() -> None:
    session, events = make_session("hello world", 0, 5)

    result = session.apply("bold")

    assert session.text == "**hello** world"
    assert session.selection == Selection(2, 7)
    assert session.selected_text == "hello"
    assert session.version == 1
    assert result.label == "format::bold"
    assert len(events) == 1
    payload = events[0]
    assert isinstance(payload, dict)
    assert payload["before"] == "hello world"
    assert payload["after"] == "**hello** world"
    assert payload["version"] == 1


def test_sequential_commands_see_previous_result() -> None:
    session, events = make_session("a\nb\nc", 0, 5)

    session.apply("orderedList")
    session.apply("orderedList")

    assert session.text == "a\nb\nc"
    assert session.version == 2
    assert [event["label"] for event in events] == [  # type: ignore[index]
        "format::orderedList",
        "format::orderedList:off",
    ]


def test_noop_does_not_bump_version() -> None:
    session, events = make_session("**x**", 2, 2)
    noops: List[object] = []
    session.bus.subscribe("edit.noop", noops.append)

    result = session.clear_formatting()

    assert result.changed is False
    assert session.version == 0
    assert events == []
    assert noops == ["clear"]


def test_unknown_format_leaves_buffer_untouched() -> None:
    session, events = make_session("abc", 0, 3)

    with pytest.raises(UnknownFormatError):
        session.apply("blink")

    assert session.text == "abc"
    assert session.version == 0
    assert events == []


def test_select_clamps_and_orders_offsets() -> None:
    session, _ = make_session("hello", 0, 0)
    changes: List[object] = []
    session.bus.subscribe("selection.changed", changes.append)

    assert session.select(50) == Selection(5, 5)
    assert session.select(4, 1) == Selection(1, 4)
    session.select(4, 1)

    assert changes == [Selection(5, 5), Selection(1, 4)]


def test_push_host_edit_commits_new_text() -> None:
    session, events = make_session("", 0, 0)

    session.push_host_edit(BufferMirror(text="typed", selection=Selection(5, 5)))

    assert session.text == "typed"
    assert session.selection == Selection(5, 5)
    assert events[-1]["label"] == "host_edit"  # type: ignore[index]


def test_push_host_edit_with_same_text_only_moves_selection() -> None:
    session, events = make_session("typed", 0, 0)

    session.push_host_edit(BufferMirror(text="typed", selection=Selection(1, 3)))

    assert session.selection == Selection(1, 3)
    assert session.version == 0
    assert events == []


def test_pull_buffer_snapshot() -> None:
    session, _ = make_session("text", 1, 2)

    mirror = session.pull_buffer()

    assert mirror.text == "text"
    assert mirror.selection == Selection(1, 2)
    assert mirror.version == 0


def test_styles_and_stats_follow_buffer() -> None:
    session, _ = make_session("**bold** words here", 2, 6)

    assert "bold" in session.styles()
    assert session.stats().words == 3


def test_insert_link_and_replace_text() -> None:
    session, _ = make_session("see docs", 4, 8)

    session.insert_link("http://x")
    assert session.text == "see [docs](http://x)"
    assert session.selection == Selection(20, 20)

    session.replace_text("short")
    assert session.text == "short"
    assert session.selection == Selection(5, 5)


def test_event_bus_unsubscribe() -> None:
    bus = EventBus()
    seen: List[object] = []
    bus.subscribe("ping", seen.append)
    bus.emit("ping", 1)
    bus.unsubscribe("ping", seen.append)
    bus.emit("ping", 2)

    assert seen == [1]
