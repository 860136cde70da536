"""Active-style snapshot returned to toolbars."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional

from markdown_engine.catalog import HEADINGS, FormatId


@dataclass(frozen=True, slots=True)
class StyleSet:
    """Inline styles wrapping a selection plus the style of its line."""

    inline: frozenset[FormatId] = frozenset()
    line: Optional[FormatId] = None

    @property
    def active(self) -> frozenset[FormatId]:
        if self.line is None:
            return self.inline
        return self.inline | {self.line}

    @property
    def heading_level(self) -> int:
        if self.line in HEADINGS:
            return self.line.heading_level
        return 0

    def __contains__(self, item: object) -> bool:
        try:
            key = FormatId(item)
        except ValueError:
            return False
        return key in self.active

    def __iter__(self) -> Iterator[FormatId]:
        return iter(sorted(self.active, key=lambda style: style.value))

    def __len__(self) -> int:
        return len(self.active)

    def names(self) -> tuple[str, ...]:
        return tuple(style.value for style in self)
