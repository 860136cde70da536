import pytest

from markdown_engine import (
    FormatId,
    InvalidSelectionError,
    UnknownFormatError,
    apply_format,
    detect_styles,
)

INLINE_FORMATS = [
    FormatId.BOLD,
    FormatId.ITALIC,
    FormatId.CODE,
    FormatId.STRIKETHROUGH,
    FormatId.SUBSCRIPT,
    FormatId.SUPERSCRIPT,
    FormatId.HIGHLIGHT,
]


def test_bold_wraps_selection_and_selects_inner_text() -> None:
    result = apply_format("hello world", 0, 5, "bold")

    assert result.text == "**hello** world"
    assert (result.start, result.end) == (2, 7)
    assert result.selected_text == "hello"


def test_caret_inserts_placeholder() -> None:
    result = apply_format("ab", 1, 1, FormatId.BOLD)

    assert result.text == "a**bold text**b"
    assert (result.start, result.end) == (3, 12)
    assert result.selected_text == "bold text"


@pytest.mark.parametrize("format_id", INLINE_FORMATS)
def test_applied_format_is_detected(format_id: FormatId) -> None:
    result = apply_format("one two three", 4, 7, format_id)

    assert format_id in detect_styles(result.text, result.start, result.end)


@pytest.mark.parametrize("format_id", INLINE_FORMATS)
def test_double_toggle_restores_buffer_and_selection(format_id: FormatId) -> None:
    once = apply_format("one two three", 4, 7, format_id)
    twice = apply_format(once.text, once.start, once.end, format_id)

    assert twice.text == "one two three"
    assert (twice.start, twice.end) == (4, 7)
    assert twice.label.endswith(":off")


def test_unwraps_markers_inside_selection() -> None:
    result = apply_format("say **hi**", 4, 10, "bold")

    assert result.text == "say hi"
    assert (result.start, result.end) == (4, 6)


def test_italic_on_bold_then_bold_off() -> None:
    italic = apply_format("**x**", 2, 3, "italic")
    assert italic.text == "***x***"
    assert (italic.start, italic.end) == (3, 4)
    assert {FormatId.BOLD, FormatId.ITALIC} <= detect_styles(
        italic.text, italic.start, italic.end
    ).inline

    plain_bold_off = apply_format(italic.text, italic.start, italic.end, "bold")
    assert plain_bold_off.text == "*x*"
    assert (plain_bold_off.start, plain_bold_off.end) == (1, 2)


def test_alternate_bold_marker_toggles_off() -> None:
    result = apply_format("__x__", 2, 3, "bold")

    assert result.text == "x"
    assert (result.start, result.end) == (0, 1)


def test_html_tag_formats_wrap() -> None:
    result = apply_format("H2O", 1, 2, "subscript")

    assert result.text == "H<sub>2</sub>O"
    assert result.selected_text == "2"


def test_unknown_format_fails_before_edit() -> None:
    with pytest.raises(UnknownFormatError):
        apply_format("abc", 0, 1, "blink")


@pytest.mark.parametrize("start,end", [(2, 1), (0, 10), (-1, 0)])
def test_invalid_selection_fails(start: int, end: int) -> None:
    with pytest.raises(InvalidSelectionError):
        apply_format("abc", start, end, "bold")


def test_italic_inside_snake_case_wraps_instead_of_unwrapping() -> None:
    result = apply_format("snake_case_x", 6, 10, "italic")

    assert result.text == "snake_*case*_x"
    assert result.selected_text == "case"
