"""Inline marker detection around and inside a selection.

Two placements count as "wrapped":

* ``outside`` -- the characters just before ``start`` end with the prefix and
  the characters just after ``end`` begin with the suffix (``**|x|**``).
* ``inside`` -- the selected text itself starts with the prefix and ends with
  the suffix and still has content in between (``|**x**|``).

``*`` and ``_`` are ambiguous between bold and italic, so for those the length
of the marker run decides: a run of 2 is bold, 1 is italic, 3 or more is both.
An ``_`` run touching a letter or digit on its outer side is part of a word
and wraps nothing.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional

from markdown_engine.catalog import FormatId, FormatSpec, resolve_format

LOOKAROUND = 10

EMPHASIS = frozenset({FormatId.BOLD, FormatId.ITALIC})

Placement = Literal["outside", "inside"]


@dataclass(frozen=True, slots=True)
class InlineContext:
    """Selected text plus a bounded window on either side."""

    before: str
    selected: str
    after: str

    @classmethod
    def capture(
        cls, text: str, start: int, end: int, *, window: int = LOOKAROUND
    ) -> "InlineContext":
        return cls(
            before=text[max(0, start - window) : start],
            selected=text[start:end],
            after=text[end : end + window],
        )


@dataclass(frozen=True, slots=True)
class Wrap:
    """Which marker pair wraps the selection, and where it sits."""

    placement: Placement
    prefix: str
    suffix: str


def _is_word(char: str) -> bool:
    return char.isalnum() or char == "_"


def _intraword(char: str, ahead: str, behind: str) -> bool:
    # ``_`` only delimits emphasis at word boundaries (``snake_case`` is text).
    return char == "_" and (_is_word(ahead) or _is_word(behind))


def _outer_run(before: str, after: str, char: str) -> int:
    left = len(before) - len(before.rstrip(char))
    right = len(after) - len(after.lstrip(char))
    if _intraword(char, before[: len(before) - left][-1:], after[right : right + 1]):
        return 0
    return min(left, right)


def _inner_run(context: InlineContext, char: str) -> int:
    selected = context.selected
    stripped = selected.lstrip(char)
    if not stripped:
        return 0
    if _intraword(char, context.before[-1:], context.after[:1]):
        return 0
    left = len(selected) - len(stripped)
    right = len(selected) - len(selected.rstrip(char))
    return min(left, right)


def _emphasis_matches(run: int, width: int) -> bool:
    if width == 2:
        return run >= 2
    return run == 1 or run >= 3


def _emphasis_wrap(context: InlineContext, char: str, width: int) -> Optional[Wrap]:
    marker = char * width
    if _emphasis_matches(_outer_run(context.before, context.after, char), width):
        return Wrap("outside", marker, marker)
    if _emphasis_matches(_inner_run(context, char), width):
        return Wrap("inside", marker, marker)
    return None


def _fixed_wrap(context: InlineContext, prefix: str, suffix: str) -> Optional[Wrap]:
    if context.before.endswith(prefix) and context.after.startswith(suffix):
        return Wrap("outside", prefix, suffix)
    selected = context.selected
    if (
        len(selected) > len(prefix) + len(suffix)
        and selected.startswith(prefix)
        and selected.endswith(suffix)
    ):
        return Wrap("inside", prefix, suffix)
    return None


def find_wrap(context: InlineContext, spec: FormatSpec) -> Optional[Wrap]:
    """Return the first marker pair of ``spec`` wrapping the selection."""

    for prefix, suffix in spec.markers:
        if spec.id in EMPHASIS:
            found = _emphasis_wrap(context, prefix[0], len(prefix))
        else:
            found = _fixed_wrap(context, prefix, suffix)
        if found is not None:
            return found
    return None


INLINE_ORDER = (
    FormatId.BOLD,
    FormatId.ITALIC,
    FormatId.STRIKETHROUGH,
    FormatId.CODE,
    FormatId.SUBSCRIPT,
    FormatId.SUPERSCRIPT,
    FormatId.HIGHLIGHT,
)


def inline_styles(context: InlineContext) -> frozenset[FormatId]:
    return frozenset(
        style
        for style in INLINE_ORDER
        if find_wrap(context, resolve_format(style)) is not None
    )


__all__ = [
    "EMPHASIS",
    "INLINE_ORDER",
    "InlineContext",
    "LOOKAROUND",
    "Wrap",
    "find_wrap",
    "inline_styles",
]
