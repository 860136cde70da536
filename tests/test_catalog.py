import pytest

from markdown_engine.catalog import (
    CATALOG,
    FormatId,
    FormatKind,
    FormatSpec,
    UnknownFormatError,
    iter_formats,
    resolve_format,
)


def test_every_format_id_has_a_catalog_entry() -> None:
    assert set(CATALOG) == set(FormatId)
    assert all(CATALOG[format_id].id is format_id for format_id in FormatId)


def test_resolve_accepts_string_values() -> None:
    spec = resolve_format("orderedList")

    assert spec.id is FormatId.ORDERED_LIST
    assert spec.prefix == "1. "
    assert spec.is_line_prefix


def test_bold_and_italic_carry_alternate_markers() -> None:
    assert resolve_format(FormatId.BOLD).markers == (("**", "**"), ("__", "__"))
    assert resolve_format(FormatId.ITALIC).markers == (("*", "*"), ("_", "_"))
    assert resolve_format(FormatId.CODE).markers == (("`", "`"),)


@pytest.mark.parametrize("level", range(1, 7))
def test_heading_prefixes(level: int) -> None:
    spec = resolve_format(f"h{level}")

    assert spec.prefix == "#" * level + " "
    assert spec.id.heading_level == level


def test_unknown_format_is_rejected() -> None:
    with pytest.raises(UnknownFormatError) as excinfo:
        resolve_format("underline")

    assert excinfo.value.format_id == "underline"


def test_inline_spec_requires_both_markers() -> None:
    with pytest.raises(ValueError):
        FormatSpec(FormatId.BOLD, FormatKind.INLINE, "**", "")


def test_iter_formats_filters_by_kind() -> None:
    inline = {spec.id for spec in iter_formats(FormatKind.INLINE)}

    assert inline == {
        FormatId.BOLD,
        FormatId.ITALIC,
        FormatId.CODE,
        FormatId.STRIKETHROUGH,
        FormatId.SUBSCRIPT,
        FormatId.SUPERSCRIPT,
        FormatId.HIGHLIGHT,
    }
    assert FormatId.PARAGRAPH.heading_level == 0
