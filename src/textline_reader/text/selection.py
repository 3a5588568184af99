"""Map a selection range onto segmented lines."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from textline_reader.runtime import telemetry

from .ranges import RangeLike


@dataclass(frozen=True, slots=True)
class SelectionInfo:
    """Where a selection lands relative to the lines it touches.

    ``start_line_index``/``end_line_index`` are inclusive line indexes.
    ``start_position_of_selected_lines``/``end_position_of_selected_lines``
    bound the touched lines in absolute offsets (end exclusive).
    ``selection_start_relative_to_start_line`` is measured from the start of
    the start line and ``selection_end_relative_to_end_line`` from the start
    of the end line.
    """

    start_line_index: int
    end_line_index: int
    start_position_of_selected_lines: int
    end_position_of_selected_lines: int
    selection_start_relative_to_start_line: int
    selection_end_relative_to_end_line: int

    @property
    def line_indexes(self) -> Tuple[int, ...]:
        return tuple(range(self.start_line_index, self.end_line_index + 1))

    @property
    def line_count(self) -> int:
        return self.end_line_index - self.start_line_index + 1

    def as_tuple(self) -> Tuple[int, int, int, int, int, int]:
        return (
            self.start_line_index,
            self.end_line_index,
            self.start_position_of_selected_lines,
            self.end_position_of_selected_lines,
            self.selection_start_relative_to_start_line,
            self.selection_end_relative_to_end_line,
        )


def _log_out_of_range(selection: RangeLike, total: int) -> None:
    telemetry.record_event(
        "selection.out_of_range",
        level="debug",
        data={"start": selection.start, "end": selection.end, "length": total},
    )


def _find_start_line(lines: Sequence[RangeLike], position: int) -> Optional[int]:
    # Strict upper bound: the offset right after a newline is the first
    # position of the following line.
    for index, line in enumerate(lines):
        if line.start <= position < line.end:
            return index
    if position == lines[-1].end:
        return len(lines) - 1
    return None


def _find_end_line(
    lines: Sequence[RangeLike], position: int, first: int
) -> Optional[int]:
    # Inclusive upper bound: an end sitting right after a newline still closes
    # that line, unless the start search already moved past it.
    for index in range(first, len(lines)):
        line = lines[index]
        if line.start <= position <= line.end:
            return index
    return None


def map_selection(
    lines: Sequence[RangeLike], selection: RangeLike
) -> Optional[SelectionInfo]:
    """Locate ``selection`` within ``lines``.

    Returns ``None`` when either end of the selection falls outside
    ``[0, len(buffer)]``; that is an expected state (the buffer may have
    shrunk since the selection was captured), not an error.
    """

    if not lines:
        return None

    total = lines[-1].end
    start, end = selection.start, selection.end
    if not (0 <= start <= total and 0 <= end <= total):
        _log_out_of_range(selection, total)
        return None

    start_index = _find_start_line(lines, start)
    if start_index is None:
        _log_out_of_range(selection, total)
        return None

    end_index = _find_end_line(lines, end, start_index)
    if end_index is None:
        _log_out_of_range(selection, total)
        return None

    start_line = lines[start_index]
    end_line = lines[end_index]
    return SelectionInfo(
        start_line_index=start_index,
        end_line_index=end_index,
        start_position_of_selected_lines=start_line.start,
        end_position_of_selected_lines=end_line.end,
        selection_start_relative_to_start_line=start - start_line.start,
        selection_end_relative_to_end_line=end - end_line.start,
    )


__all__ = ["SelectionInfo", "map_selection"]
