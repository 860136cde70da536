"""Word/character/line counts for status displays."""

from __future__ import annotations

import math
from dataclasses import dataclass

WORDS_PER_MINUTE = 200


@dataclass(frozen=True, slots=True)
class DocumentStats:
    words: int
    characters: int
    lines: int
    reading_minutes: int


def document_stats(text: str) -> DocumentStats:
    """Counts over ``text``; an empty or whitespace-only buffer is all zeros."""

    trimmed = text.strip()
    if not trimmed:
        return DocumentStats(words=0, characters=0, lines=0, reading_minutes=0)
    words = len(trimmed.split())
    return DocumentStats(
        words=words,
        characters=len(trimmed),
        lines=text.count("\n") + 1,
        reading_minutes=max(1, math.ceil(words / WORDS_PER_MINUTE)),
    )
