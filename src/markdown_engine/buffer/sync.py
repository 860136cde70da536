"""Adapter boundary types for syncing the engine with host text widgets."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

from .state import Selection


@dataclass(slots=True)
class BufferMirror:
    """Host-friendly snapshot of the authoritative buffer."""

    text: str
    selection: Selection
    version: int = 0
    attributes: dict[str, str] = field(default_factory=dict)


class BufferSync(Protocol):
    """How adapters exchange buffer state with a session."""

    def pull_buffer(self) -> BufferMirror:
        """Return the snapshot the host should render."""
        ...

    def push_host_edit(self, mirror: BufferMirror) -> None:
        """Submit an edit made directly in the widget (typing, paste, AI rewrite)."""
        ...


class InvalidSelectionError(RuntimeError):
    """Raised when offsets fall outside the buffer or are reversed."""

    def __init__(
        self, message: str, *, selection: tuple[int, int] | None = None
    ) -> None:
        super().__init__(message)
        self.selection = selection
