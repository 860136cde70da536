"""Built-in formatting shortcuts."""

from __future__ import annotations

from typing import Iterable, Sequence

from markdown_engine.catalog import FormatId

from .models import ActionRef, Binding, KeyStroke
from .registry import KeymapRegistry

CLEAR_ACTION_ID = "format.clear"


def action_id_for(format_id: FormatId | str) -> str:
    return f"format.{FormatId(format_id).value}"


def _format_handler(format_id: FormatId):
    def handler(session):
        return session.apply(format_id)

    handler.__name__ = f"apply_{format_id.value}"
    return handler


def _clear_handler(session):
    return session.clear_formatting()


DEFAULT_ACTIONS: tuple[ActionRef, ...] = (
    *(
        ActionRef(
            id=action_id_for(format_id),
            handler=_format_handler(format_id),
            description=f"Apply {format_id.value}",
            metadata={"format": format_id.value},
        )
        for format_id in FormatId
    ),
    ActionRef(
        id=CLEAR_ACTION_ID,
        handler=_clear_handler,
        description="Strip formatting from the selection",
    ),
)

_DEFAULT_CHORDS: tuple[tuple[str, str, str], ...] = (
    ("ctrl+b", action_id_for(FormatId.BOLD), "Bold"),
    ("ctrl+i", action_id_for(FormatId.ITALIC), "Italic"),
    ("ctrl+1", action_id_for(FormatId.H1), "Heading 1"),
    ("ctrl+2", action_id_for(FormatId.H2), "Heading 2"),
    ("ctrl+3", action_id_for(FormatId.H3), "Heading 3"),
    ("ctrl+4", action_id_for(FormatId.H4), "Heading 4"),
    ("ctrl+5", action_id_for(FormatId.H5), "Heading 5"),
    ("ctrl+6", action_id_for(FormatId.H6), "Heading 6"),
    ("ctrl+0", action_id_for(FormatId.PARAGRAPH), "Paragraph"),
    ("ctrl+shift+x", action_id_for(FormatId.STRIKETHROUGH), "Strikethrough"),
    ("ctrl+shift+c", action_id_for(FormatId.CODE), "Inline code"),
    ("ctrl+shift+h", action_id_for(FormatId.HIGHLIGHT), "Highlight"),
    ("ctrl+shift+q", action_id_for(FormatId.QUOTE), "Quote"),
    ("ctrl+shift+8", action_id_for(FormatId.LIST), "Bullet list"),
    ("ctrl+shift+7", action_id_for(FormatId.ORDERED_LIST), "Ordered list"),
    ("ctrl+shift+9", action_id_for(FormatId.TASK), "Task list"),
    ("ctrl+shift+k", action_id_for(FormatId.CODE_BLOCK), "Code block"),
    ("ctrl+backslash", CLEAR_ACTION_ID, "Clear formatting"),
)

DEFAULT_BINDINGS: tuple[Binding, ...] = tuple(
    Binding(
        id=f"shortcut.{action.split('.', 1)[1]}",
        stroke=KeyStroke.parse(chord),
        action_id=action,
        description=description,
        source="defaults",
    )
    for chord, action, description in _DEFAULT_CHORDS
)


def load_default_keymaps(
    registry: KeymapRegistry,
    *,
    replace: bool = False,
    extra_bindings: Iterable[Binding] | None = None,
    include_bindings: Sequence[str] | None = None,
    exclude_bindings: Sequence[str] | None = None,
) -> None:
    """Register every format action plus the default shortcut table.

    Actions are always registered so that filtered-out shortcuts can be
    rebound later; ``extra_bindings`` override defaults on the same stroke.
    """

    include = set(include_bindings) if include_bindings else None
    exclude = set(exclude_bindings or ())

    for action in DEFAULT_ACTIONS:
        registry.register_action(action, replace=replace)

    for binding in DEFAULT_BINDINGS:
        if include is not None and binding.id not in include:
            continue
        if binding.id in exclude:
            continue
        registry.register_binding(binding, replace=replace)

    for binding in extra_bindings or ():
        registry.register_binding(binding, replace=True)


__all__ = [
    "CLEAR_ACTION_ID",
    "DEFAULT_ACTIONS",
    "DEFAULT_BINDINGS",
    "action_id_for",
    "load_default_keymaps",
]
