"""The built-in marker catalog."""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Mapping

from .models import FormatId, FormatKind, FormatSpec, UnknownFormatError

TABLE_TEMPLATE_HEAD = "| Header | Header |\n| ------ | ------ |\n| "
TABLE_TEMPLATE_TAIL = " | Cell |"


def _heading(level: int) -> FormatSpec:
    return FormatSpec(
        id=FormatId(f"h{level}"),
        kind=FormatKind.LINE,
        prefix="#" * level + " ",
        placeholder=f"Heading {level}",
    )


def _build_catalog(specs: Iterable[FormatSpec]) -> Mapping[FormatId, FormatSpec]:
    table = {spec.id: spec for spec in specs}
    missing = set(FormatId) - set(table)
    if missing:
        names = sorted(item.value for item in missing)
        raise RuntimeError(f"catalog is missing formats: {names}")
    return MappingProxyType(table)


CATALOG: Mapping[FormatId, FormatSpec] = _build_catalog(
    (
        FormatSpec(
            FormatId.BOLD,
            FormatKind.INLINE,
            "**",
            "**",
            "bold text",
            alternate_prefix="__",
            alternate_suffix="__",
        ),
        FormatSpec(
            FormatId.ITALIC,
            FormatKind.INLINE,
            "*",
            "*",
            "italic text",
            alternate_prefix="_",
            alternate_suffix="_",
        ),
        FormatSpec(FormatId.CODE, FormatKind.INLINE, "`", "`", "code"),
        FormatSpec(
            FormatId.STRIKETHROUGH, FormatKind.INLINE, "~~", "~~", "strikethrough"
        ),
        FormatSpec(
            FormatId.SUBSCRIPT, FormatKind.INLINE, "<sub>", "</sub>", "subscript"
        ),
        FormatSpec(
            FormatId.SUPERSCRIPT, FormatKind.INLINE, "<sup>", "</sup>", "superscript"
        ),
        FormatSpec(
            FormatId.HIGHLIGHT, FormatKind.INLINE, "<mark>", "</mark>", "highlight"
        ),
        *(_heading(level) for level in range(1, 7)),
        FormatSpec(FormatId.PARAGRAPH, FormatKind.LINE),
        FormatSpec(FormatId.QUOTE, FormatKind.LINE, "> ", placeholder="quote"),
        FormatSpec(FormatId.LIST, FormatKind.LINE, "- ", placeholder="list item"),
        FormatSpec(
            FormatId.ORDERED_LIST, FormatKind.LINE, "1. ", placeholder="list item"
        ),
        FormatSpec(FormatId.TASK, FormatKind.LINE, "- [ ] ", placeholder="task"),
        FormatSpec(FormatId.HR, FormatKind.BLOCK, "\n---\n"),
        FormatSpec(
            FormatId.TABLE,
            FormatKind.BLOCK,
            TABLE_TEMPLATE_HEAD,
            TABLE_TEMPLATE_TAIL,
            "Cell",
        ),
        FormatSpec(
            FormatId.CODE_BLOCK, FormatKind.BLOCK, "```\n", "\n```", "code here"
        ),
        FormatSpec(FormatId.FOOTNOTE, FormatKind.BLOCK, "[^", "]", "note"),
    )
)


def resolve_format(format_id: FormatId | str) -> FormatSpec:
    """Return the catalog entry for ``format_id``.

    Accepts the enum member or its string value (``"orderedList"``).
    """

    try:
        key = FormatId(format_id)
    except ValueError as exc:
        raise UnknownFormatError(format_id) from exc
    return CATALOG[key]


def iter_formats(kind: FormatKind | None = None) -> Iterable[FormatSpec]:
    for spec in CATALOG.values():
        if kind is None or spec.kind is kind:
            yield spec


__all__ = ["CATALOG", "iter_formats", "resolve_format"]
