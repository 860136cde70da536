import pytest

from markdown_engine import FormatId, Selection
from markdown_engine.keymaps import (
    CLEAR_ACTION_ID,
    DEFAULT_BINDINGS,
    ActionRef,
    Binding,
    KeymapConflictError,
    KeymapRegistry,
    KeyStroke,
    action_id_for,
    load_default_keymaps,
)
from markdown_engine.session import EditorSession


def make_action(action_id: str = "format.test") -> ActionRef:
    return ActionRef(id=action_id, handler=lambda *args, **kwargs: None)


def make_binding(
    *, binding_id: str, stroke: str = "ctrl+b", action_id: str = "format.test"
) -> Binding:
    return Binding(id=binding_id, stroke=KeyStroke.parse(stroke), action_id=action_id)


def test_keystroke_parse_normalizes() -> None:
    stroke = KeyStroke.parse("Shift+Control+X")

    assert stroke.token == "ctrl+shift+x"
    assert KeyStroke.parse("ctrl++").key == "+"
    with pytest.raises(ValueError):
        KeyStroke.parse("hyper+x")


def test_binding_accepts_chord_string() -> None:
    binding = Binding(id="b", stroke="ctrl+B", action_id="format.test")  # type: ignore[arg-type]

    assert binding.key_signature == "ctrl+b"


def test_register_binding_success() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    binding = make_binding(binding_id="shortcut.test")

    registry.register_binding(binding)

    assert registry.stats().binding_count == 1
    assert list(registry.iter_bindings()) == [binding]
    assert registry.binding_for("ctrl+b") == binding


def test_register_binding_unknown_action() -> None:
    registry = KeymapRegistry()

    with pytest.raises(KeyError):
        registry.register_binding(make_binding(binding_id="orphan"))


def test_register_binding_conflict_detection() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    registry.register_binding(make_binding(binding_id="first"))

    with pytest.raises(KeymapConflictError) as info:
        registry.register_binding(make_binding(binding_id="second"))

    assert [b.id for b in info.value.conflicts] == ["first"]


def test_register_binding_with_replace() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    first = make_binding(binding_id="first")
    second = make_binding(binding_id="second")

    registry.register_binding(first)
    registry.register_binding(second, replace=True)

    assert list(registry.iter_bindings()) == [second]


def test_rebind_moves_stroke() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    registry.register_binding(make_binding(binding_id="binding"))
    before = registry.revision()

    registry.rebind("binding", "ctrl+alt+b")

    assert registry.binding_for("ctrl+b") is None
    assert registry.binding_for("alt+ctrl+b").id == "binding"  # type: ignore[union-attr]
    assert registry.revision() == before + 1


def test_unregister_binding() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    binding = make_binding(binding_id="binding")
    registry.register_binding(binding)

    removed = registry.unregister_binding("binding")

    assert removed == binding
    assert registry.stats().binding_count == 0
    assert registry.unregister_binding("binding") is None
    assert registry.resolve("ctrl+b") is None


def test_load_default_keymaps() -> None:
    registry = KeymapRegistry()

    load_default_keymaps(registry)

    stats = registry.stats()
    assert stats.action_count == len(FormatId) + 1
    assert stats.binding_count == len(DEFAULT_BINDINGS)
    assert registry.resolve("ctrl+b").id == action_id_for("bold")  # type: ignore[union-attr]
    assert registry.resolve("ctrl+backslash").id == CLEAR_ACTION_ID  # type: ignore[union-attr]


def test_default_bindings_have_unique_strokes() -> None:
    signatures = [binding.key_signature for binding in DEFAULT_BINDINGS]

    assert len(signatures) == len(set(signatures))


def test_load_default_keymaps_include_filters() -> None:
    registry = KeymapRegistry()

    load_default_keymaps(registry, include_bindings=("shortcut.bold",))

    assert registry.stats().binding_count == 1
    assert registry.get_binding("shortcut.bold").action_id == "format.bold"


def test_load_default_keymaps_extra_binding_overrides_stroke() -> None:
    registry = KeymapRegistry()
    custom = Binding(
        id="custom.bold_italic",
        stroke=KeyStroke.parse("ctrl+b"),
        action_id=action_id_for(FormatId.ITALIC),
    )

    load_default_keymaps(registry, extra_bindings=(custom,))

    assert registry.binding_for("ctrl+b") == custom
    with pytest.raises(KeyError):
        registry.get_binding("shortcut.bold")


def test_default_actions_drive_session() -> None:
    registry = KeymapRegistry()
    load_default_keymaps(registry)
    session = EditorSession("hello", selection=Selection(0, 5))

    registry.get_action(action_id_for("italic"))(session)
    assert session.text == "*hello*"

    session.select(0, len(session.text))
    registry.get_action(CLEAR_ACTION_ID)(session)
    assert session.text == "hello"
