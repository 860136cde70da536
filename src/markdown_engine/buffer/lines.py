"""Physical-line helpers over a flat text buffer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List

from .state import Location


@dataclass(frozen=True, slots=True)
class LineSpan:
    """One physical line: ``text == buffer[start:end]`` without the newline."""

    start: int
    end: int
    text: str

    @property
    def is_blank(self) -> bool:
        return not self.text.strip()


def line_start(text: str, offset: int) -> int:
    return text.rfind("\n", 0, offset) + 1


def line_end(text: str, offset: int) -> int:
    found = text.find("\n", offset)
    return len(text) if found == -1 else found


def line_at(text: str, offset: int) -> LineSpan:
    start = line_start(text, offset)
    end = line_end(text, offset)
    return LineSpan(start, end, text[start:end])


def next_line(text: str, line: LineSpan) -> LineSpan | None:
    if line.end >= len(text):
        return None
    return line_at(text, line.end + 1)


def block_bounds(text: str, start: int, end: int) -> tuple[int, int]:
    """Start of the first and end of the last line touched by ``[start, end)``.

    A non-empty selection ending right after a newline does not pull in the
    following line.
    """

    last = end
    if end > start and text[end - 1] == "\n":
        last = end - 1
    return line_start(text, start), line_end(text, last)


def iter_lines(text: str, start: int, end: int) -> Iterator[LineSpan]:
    """Yield every physical line between ``block_bounds(text, start, end)``."""

    block_start, block_end = block_bounds(text, start, end)
    offset = block_start
    for chunk in text[block_start:block_end].split("\n"):
        yield LineSpan(offset, offset + len(chunk), chunk)
        offset += len(chunk) + 1


def split_lines(text: str) -> List[str]:
    """``str.split('\\n')``; unlike ``splitlines`` it keeps a trailing empty line."""

    return text.split("\n")


def offset_to_location(text: str, offset: int) -> Location:
    running = 0
    lines = split_lines(text)
    for row, line in enumerate(lines):
        if offset <= running + len(line):
            return (row, max(0, offset - running))
        running += len(line) + 1
    return (len(lines) - 1, len(lines[-1]))


def location_to_offset(text: str, location: Location) -> int:
    row, col = location
    lines = split_lines(text)
    row = max(0, min(row, len(lines) - 1))
    offset = sum(len(line) + 1 for line in lines[:row])
    return offset + max(0, min(col, len(lines[row])))


__all__ = [
    "LineSpan",
    "block_bounds",
    "iter_lines",
    "line_at",
    "line_end",
    "line_start",
    "location_to_offset",
    "next_line",
    "offset_to_location",
    "split_lines",
]
