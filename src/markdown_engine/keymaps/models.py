"""Dataclasses describing keyboard shortcuts and the commands they run."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Callable, Iterable, Mapping

MODIFIER_ALIASES = {"control": "ctrl", "cmd": "meta", "command": "meta", "option": "alt"}
KNOWN_MODIFIERS = frozenset({"ctrl", "shift", "alt", "meta"})


def _normalize_modifiers(modifiers: Iterable[str]) -> tuple[str, ...]:
    values = []
    for raw in modifiers:
        name = raw.strip().lower()
        if not name:
            continue
        name = MODIFIER_ALIASES.get(name, name)
        if name not in KNOWN_MODIFIERS:
            raise ValueError(f"unknown modifier '{raw}'")
        values.append(name)
    return tuple(sorted(dict.fromkeys(values)))


@dataclass(frozen=True, slots=True)
class KeyStroke:
    """Single normalized chord such as ``ctrl+b`` or ``ctrl+shift+7``."""

    key: str
    modifiers: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.key:
            raise ValueError("key cannot be empty")
        object.__setattr__(self, "key", self.key.lower())
        object.__setattr__(self, "modifiers", _normalize_modifiers(self.modifiers))

    @property
    def token(self) -> str:
        return "+".join((*self.modifiers, self.key))

    @classmethod
    def parse(cls, chord: str) -> "KeyStroke":
        """Parse ``"ctrl+shift+x"``; a literal ``+`` key is written ``ctrl++``."""

        text = chord.strip()
        if not text:
            raise ValueError("chord cannot be empty")
        if text.endswith("++"):
            head, key = text[:-2], "+"
        else:
            head, _, key = text.rpartition("+")
        modifiers = [part for part in head.split("+") if part]
        return cls(key=key, modifiers=tuple(modifiers))


@dataclass(frozen=True, slots=True)
class ActionRef:
    """Named command invoked with an ``EditorSession``."""

    id: str
    handler: Callable[..., object]
    telemetry_name: str | None = None
    description: str = ""
    metadata: Mapping[str, object] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("ActionRef id cannot be empty")
        if not callable(self.handler):
            raise TypeError("handler must be callable")
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))
        if self.telemetry_name is None:
            object.__setattr__(self, "telemetry_name", self.id)

    def __call__(self, *args: object, **kwargs: object) -> object:
        return self.handler(*args, **kwargs)


@dataclass(frozen=True, slots=True)
class Binding:
    """Associates a keystroke with an action id."""

    id: str
    stroke: KeyStroke
    action_id: str
    description: str = ""
    source: str | None = None

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("binding id cannot be empty")
        if not self.action_id:
            raise ValueError("binding action_id cannot be empty")
        if isinstance(self.stroke, str):
            object.__setattr__(self, "stroke", KeyStroke.parse(self.stroke))

    @property
    def key_signature(self) -> str:
        return self.stroke.token


__all__ = ["ActionRef", "Binding", "KeyStroke"]
