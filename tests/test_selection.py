from __future__ import annotations

import pytest

from textline_reader.runtime import telemetry
from textline_reader.text import SelectionInfo, TextRange, map_selection, segment_lines

TEXT = "0123\n6789\nabcde"


@pytest.mark.parametrize(
    ("selection", "expected"),
    [
        (TextRange(2, 3), (0, 0, 0, 5, 2, 3)),
        (TextRange(2, 9), (0, 1, 0, 10, 2, 4)),
        (TextRange(6, 11), (1, 2, 5, 15, 1, 1)),
        (TextRange(5), (1, 1, 5, 10, 0, 0)),
        (TextRange(15), (2, 2, 10, 15, 5, 5)),
        (TextRange(0), (0, 0, 0, 5, 0, 0)),
        (TextRange(4), (0, 0, 0, 5, 4, 4)),
        (TextRange(0, 15), (0, 2, 0, 15, 0, 5)),
    ],
)
def test_selection_boundaries(selection: TextRange, expected: tuple[int, ...]) -> None:
    info = map_selection(segment_lines(TEXT), selection)

    assert info is not None
    assert info.as_tuple() == expected


def test_end_on_line_boundary_closes_that_line() -> None:
    info = map_selection(segment_lines(TEXT), TextRange(1, 5))

    assert info is not None
    assert info.start_line_index == 0
    assert info.end_line_index == 0
    assert info.selection_end_relative_to_end_line == 5


def test_start_on_line_boundary_opens_next_line() -> None:
    info = map_selection(segment_lines(TEXT), TextRange(5, 7))

    assert info is not None
    assert info.start_line_index == 1
    assert info.end_line_index == 1
    assert info.selection_start_relative_to_start_line == 0
    assert info.selection_end_relative_to_end_line == 2


@pytest.mark.parametrize(
    "selection", [TextRange(16), TextRange(3, 16), TextRange(20, 25)]
)
def test_out_of_range_selection_is_absent(selection: TextRange) -> None:
    assert map_selection(segment_lines(TEXT), selection) is None


def test_duck_typed_negative_offsets_are_absent() -> None:
    class Raw:
        start = -1
        end = 2

    assert map_selection(segment_lines(TEXT), Raw()) is None


def test_empty_text_caret_maps_to_first_line() -> None:
    info = map_selection(segment_lines(""), TextRange(0))

    assert info == SelectionInfo(0, 0, 0, 0, 0, 0)


def test_empty_text_rejects_any_other_offset() -> None:
    assert map_selection(segment_lines(""), TextRange(1)) is None


def test_empty_line_list_is_absent() -> None:
    assert map_selection((), TextRange(0)) is None


def test_trailing_newline_caret_at_end() -> None:
    text = "01\n34\n"
    info = map_selection(segment_lines(text), TextRange(len(text)))

    assert info is not None
    assert info.as_tuple() == (1, 1, 3, 6, 3, 3)


def test_padded_trailing_newline_caret_lands_on_empty_line() -> None:
    text = "01\n34\n\n"
    info = map_selection(segment_lines(text), TextRange(6))

    assert info is not None
    assert info.as_tuple() == (2, 2, 6, 7, 0, 0)


def test_selection_info_helpers() -> None:
    info = SelectionInfo(1, 3, 5, 20, 0, 2)

    assert info.line_indexes == (1, 2, 3)
    assert info.line_count == 3


def test_out_of_range_selection_is_logged(monkeypatch: pytest.MonkeyPatch) -> None:
    events: list[tuple[str, str, dict[str, int]]] = []
    monkeypatch.setattr(
        telemetry,
        "record_event",
        lambda name, *, level="info", data=None, logger_name=None: events.append(
            (name, level, dict(data or {}))
        ),
    )

    assert map_selection(segment_lines(TEXT), TextRange(16)) is None

    assert events == [
        ("selection.out_of_range", "debug", {"start": 16, "end": 16, "length": 15})
    ]


def test_in_range_selection_is_not_logged(monkeypatch: pytest.MonkeyPatch) -> None:
    events: list[str] = []
    monkeypatch.setattr(
        telemetry, "record_event", lambda name, **kwargs: events.append(name)
    )

    assert map_selection(segment_lines(TEXT), TextRange(15)) is not None
    assert events == []
