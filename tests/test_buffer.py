import pytest

from markdown_engine.buffer import (
    EditResult,
    InvalidSelectionError,
    Selection,
    block_bounds,
    clamp_selection,
    document_stats,
    ensure_selection,
    iter_lines,
    location_to_offset,
    offset_to_location,
)


def test_ensure_selection_accepts_caret_and_range() -> None:
    assert ensure_selection("abc", 1, 1).is_caret
    assert ensure_selection("abc", 0, 3) == Selection(0, 3)


@pytest.mark.parametrize("start,end", [(2, 1), (-1, 1), (0, 4)])
def test_ensure_selection_rejects_bad_offsets(start: int, end: int) -> None:
    with pytest.raises(InvalidSelectionError) as excinfo:
        ensure_selection("abc", start, end)

    assert excinfo.value.selection == (start, end)


def test_clamp_selection_orders_and_bounds() -> None:
    assert clamp_selection("abc", -5, 10) == Selection(0, 3)
    assert clamp_selection("abc", 3, 1) == Selection(1, 3)
    assert clamp_selection("abc", 2) == Selection(2, 2)


def test_block_bounds_ignores_line_after_trailing_newline() -> None:
    assert block_bounds("a\nb\nc", 0, 2) == (0, 1)
    assert block_bounds("a\nb\nc", 1, 3) == (0, 3)


def test_iter_lines_reports_offsets() -> None:
    lines = list(iter_lines("one\n\nthree", 1, 8))

    assert [line.text for line in lines] == ["one", "", "three"]
    assert [(line.start, line.end) for line in lines] == [(0, 3), (4, 4), (5, 10)]
    assert lines[1].is_blank


def test_offset_location_conversion() -> None:
    text = "ab\ncd"

    assert offset_to_location(text, 2) == (0, 2)
    assert offset_to_location(text, 3) == (1, 0)
    assert offset_to_location(text, 4) == (1, 1)
    assert location_to_offset(text, (1, 1)) == 4
    assert location_to_offset(text, (9, 9)) == 5


def test_edit_result_helpers() -> None:
    result = EditResult("a **b** c", 4, 5, label="format::bold")
    noop = EditResult.unchanged("abc", 1, 1)

    assert result.selected_text == "b"
    assert result.selection == Selection(4, 5)
    assert noop.changed is False


def test_document_stats() -> None:
    stats = document_stats("hello world\nsecond line")

    assert stats.words == 4
    assert stats.characters == 23
    assert stats.lines == 2
    assert stats.reading_minutes == 1
    assert document_stats("   \n ").words == 0
    assert document_stats(" ".join(["word"] * 401)).reading_minutes == 3
