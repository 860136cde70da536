"""Declarative keyboard shortcuts for formatting commands."""

from .defaults import (
    CLEAR_ACTION_ID,
    DEFAULT_ACTIONS,
    DEFAULT_BINDINGS,
    action_id_for,
    load_default_keymaps,
)
from .models import ActionRef, Binding, KeyStroke
from .registry import KeymapConflictError, KeymapRegistry, RegistryStats

__all__ = [
    "CLEAR_ACTION_ID",
    "DEFAULT_ACTIONS",
    "DEFAULT_BINDINGS",
    "ActionRef",
    "Binding",
    "KeyStroke",
    "KeymapConflictError",
    "KeymapRegistry",
    "RegistryStats",
    "action_id_for",
    "load_default_keymaps",
]
