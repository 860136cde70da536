"""Keymap registry storing shortcut actions and bindings."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Dict, Iterable, Iterator, Optional

from markdown_engine.runtime.telemetry import span

from .models import ActionRef, Binding, KeyStroke


@dataclass(slots=True)
class RegistryStats:
    action_count: int
    binding_count: int


class KeymapConflictError(RuntimeError):
    """Raised when a binding reuses a keystroke that is already taken."""

    def __init__(self, binding: Binding, conflicts: Iterable[Binding]):
        conflicts_tuple = tuple(conflicts)
        message = (
            f"Binding '{binding.id}' ({binding.key_signature}) conflicts with "
            f"{[b.id for b in conflicts_tuple]}"
        )
        super().__init__(message)
        self.binding = binding
        self.conflicts = conflicts_tuple


class KeymapRegistry:
    """Owns action references and the keystroke index."""

    def __init__(self, *, logger_name: str | None = None) -> None:
        self._actions: Dict[str, ActionRef] = {}
        self._bindings: Dict[str, Binding] = {}
        self._by_signature: Dict[str, str] = {}
        self._logger_name = logger_name
        self._revision = 0

    def revision(self) -> int:
        return self._revision

    def get_action(self, action_id: str) -> ActionRef:
        try:
            return self._actions[action_id]
        except KeyError as exc:
            raise KeyError(f"Action '{action_id}' is not registered") from exc

    def get_binding(self, binding_id: str) -> Binding:
        try:
            return self._bindings[binding_id]
        except KeyError as exc:
            raise KeyError(f"Binding '{binding_id}' is not registered") from exc

    def register_action(self, action: ActionRef, *, replace: bool = False) -> ActionRef:
        with span(
            "keymaps::register_action",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"action_id": action.id},
        ):
            if not replace and action.id in self._actions:
                raise ValueError(f"Action '{action.id}' already registered")
            self._actions[action.id] = action
            return action

    def register_binding(self, binding: Binding, *, replace: bool = False) -> Binding:
        with span(
            "keymaps::register_binding",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"binding_id": binding.id, "stroke": binding.key_signature},
        ) as handle:
            if binding.action_id not in self._actions:
                handle.add_metadata("missing_action", binding.action_id)
                raise KeyError(
                    f"Binding '{binding.id}' references unknown action '{binding.action_id}'"
                )

            conflict = self.binding_for(binding.stroke)
            if conflict is not None and conflict.id != binding.id and not replace:
                handle.add_metadata("conflicts", conflict.id)
                raise KeymapConflictError(binding, (conflict,))
            if binding.id in self._bindings and not replace:
                raise ValueError(f"Binding id '{binding.id}' already registered")

            if conflict is not None:
                self._drop(conflict.id)
            if binding.id in self._bindings:
                self._drop(binding.id)
            self._bindings[binding.id] = binding
            self._by_signature[binding.key_signature] = binding.id
            self._revision += 1
            return binding

    def unregister_binding(self, binding_id: str) -> Optional[Binding]:
        with span(
            "keymaps::unregister_binding",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"binding_id": binding_id},
        ):
            if binding_id not in self._bindings:
                return None
            binding = self._drop(binding_id)
            self._revision += 1
            return binding

    def rebind(self, binding_id: str, stroke: KeyStroke | str) -> Binding:
        """Move an existing binding to a new keystroke."""

        current = self.get_binding(binding_id)
        if isinstance(stroke, str):
            stroke = KeyStroke.parse(stroke)
        return self.register_binding(replace(current, stroke=stroke), replace=True)

    def binding_for(self, stroke: KeyStroke | str) -> Optional[Binding]:
        if isinstance(stroke, str):
            stroke = KeyStroke.parse(stroke)
        binding_id = self._by_signature.get(stroke.token)
        return self._bindings.get(binding_id) if binding_id else None

    def resolve(self, stroke: KeyStroke | str) -> Optional[ActionRef]:
        binding = self.binding_for(stroke)
        if binding is None:
            return None
        return self.get_action(binding.action_id)

    def iter_bindings(self) -> Iterator[Binding]:
        yield from self._bindings.values()

    def stats(self) -> RegistryStats:
        return RegistryStats(
            action_count=len(self._actions),
            binding_count=len(self._bindings),
        )

    def _drop(self, binding_id: str) -> Binding:
        binding = self._bindings.pop(binding_id)
        if self._by_signature.get(binding.key_signature) == binding_id:
            del self._by_signature[binding.key_signature]
        return binding


__all__ = ["KeymapConflictError", "KeymapRegistry", "RegistryStats"]
