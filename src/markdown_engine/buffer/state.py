"""Selection and edit-result values exchanged with the host editor."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

Location = Tuple[int, int]  # (row, column)


@dataclass(frozen=True, slots=True)
class Selection:
    """Half-open offset range ``[start, end)``; ``start == end`` is a caret."""

    start: int
    end: int

    @property
    def is_caret(self) -> bool:
        return self.start == self.end

    @property
    def length(self) -> int:
        return self.end - self.start

    def as_tuple(self) -> tuple[int, int]:
        return (self.start, self.end)


@dataclass(frozen=True, slots=True)
class EditResult:
    """New buffer plus the selection the host should move to.

    ``changed`` is False when the operation was a defined no-op (for example
    clearing formatting over a caret).
    """

    text: str
    start: int
    end: int
    label: str = ""
    changed: bool = True

    @classmethod
    def unchanged(cls, text: str, start: int, end: int, *, label: str = "") -> "EditResult":
        return cls(text=text, start=start, end=end, label=label, changed=False)

    @property
    def selection(self) -> Selection:
        return Selection(self.start, self.end)

    @property
    def selected_text(self) -> str:
        return self.text[self.start : self.end]
