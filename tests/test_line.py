from __future__ import annotations

import pytest

from textline_reader.text import (
    TextLine,
    TextRange,
    line_at,
    line_from_range,
    segment_lines,
)


def test_text_content_strips_one_newline() -> None:
    line = TextLine(offset=5, full_text="abc\n")

    assert line.has_trailing_newline is True
    assert line.text_content == "abc"
    assert line.end == 9
    assert line.range == TextRange(5, 9)


def test_unterminated_line_keeps_its_text() -> None:
    line = TextLine(offset=0, full_text="abc")

    assert line.has_trailing_newline is False
    assert line.text_content == "abc"


def test_lines_compare_by_value() -> None:
    assert TextLine(3, "x\n") == TextLine(3, "x\n")
    assert TextLine(3, "x\n") != TextLine(4, "x\n")


@pytest.mark.parametrize("text", ["", "a\nb\n", "\n\n", "one\ntwo\nthree", "x\n\n"])
def test_every_line_round_trips_to_the_text(text: str) -> None:
    ranges = segment_lines(text)
    lines = [line_at(text, ranges, index) for index in range(len(ranges))]

    for line in lines:
        suffix = "\n" if line.has_trailing_newline else ""
        assert line.text_content + suffix == line.full_text
        assert text[line.offset : line.offset + len(line.full_text)] == line.full_text
    assert "".join(line.full_text for line in lines) == text


def test_line_from_range_slices_the_text() -> None:
    assert line_from_range("0123\n4567", TextRange(5, 9)) == TextLine(5, "4567")


def test_line_at_invalid_index_raises_index_error() -> None:
    with pytest.raises(IndexError):
        line_at("abc", segment_lines("abc"), 3)
