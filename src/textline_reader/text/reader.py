"""Line-oriented view over a text buffer and one selection."""

from __future__ import annotations

from typing import Iterator, List, Optional, Tuple, Union

from textline_reader.runtime.telemetry import span

from .accessor import line_at, line_from_range
from .errors import UnsupportedOperationError
from .line import TextLine
from .ranges import RangeLike, TextRange, is_collapsed
from .segmenter import LineRanges, segment_lines
from .selection import SelectionInfo, map_selection
from .validation import ensure_text


class _EndOfLines:
    """Sentinel returned by ``LineCursor.advance`` once the cursor is spent."""

    _instance: Optional["_EndOfLines"] = None

    def __new__(cls) -> "_EndOfLines":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "END_OF_LINES"


END_OF_LINES = _EndOfLines()

CursorStep = Union[TextLine, _EndOfLines]


class LineCursor:
    """Reads lines forward from a starting index.

    Each cursor owns its position; advancing it never touches the reader or
    any other cursor.
    """

    def __init__(self, reader: "TextLineReader", position: int, stop: int) -> None:
        self._reader = reader
        self._position = position
        self._stop = stop

    @property
    def position(self) -> int:
        return self._position

    @property
    def stop(self) -> int:
        return self._stop

    @property
    def exhausted(self) -> bool:
        return self._position >= self._stop

    def advance(self) -> CursorStep:
        """Return the current line and move on, or ``END_OF_LINES``."""

        if self.exhausted:
            return END_OF_LINES
        line = self._reader.line_at(self._position)
        self._position += 1
        return line

    def __iter__(self) -> Iterator[TextLine]:
        return self

    def __next__(self) -> TextLine:
        step = self.advance()
        if isinstance(step, _EndOfLines):
            raise StopIteration
        return step


class TextLineReader:
    """Segments ``text`` and maps ``selection`` onto the resulting lines.

    Everything is computed once in the constructor. Queries that depend on
    the selection return ``None`` when the selection lies outside the text;
    single-line operations raise ``UnsupportedOperationError`` when the
    selection spans several lines.
    """

    segment = staticmethod(segment_lines)
    map_selection = staticmethod(map_selection)
    line_at_index = staticmethod(line_at)
    line_from_range = staticmethod(line_from_range)

    def __init__(self, text: str, selection: Optional[RangeLike] = None) -> None:
        text = ensure_text(text)
        self._build(text, selection, segment_lines(text))

    @classmethod
    def _from_parts(
        cls, text: str, selection: RangeLike, lines: LineRanges
    ) -> "TextLineReader":
        # lines must be the segmentation of text
        reader = cls.__new__(cls)
        reader._build(text, selection, lines)
        return reader

    def _build(
        self, text: str, selection: Optional[RangeLike], lines: LineRanges
    ) -> None:
        selection = selection if selection is not None else TextRange(0)
        with span(
            "reader::build",
            component="reader",
            metadata={
                "length": len(text),
                "start": selection.start,
                "end": selection.end,
            },
        ) as handle:
            self._text = text
            self._selection = selection
            self._lines: LineRanges = lines
            self._selection_info = map_selection(self._lines, selection)
            self._selected_line_indexes: Optional[Tuple[int, ...]] = None
            if self._selection_info is not None:
                self._selected_line_indexes = self._selection_info.line_indexes
            handle.add_metadata("line_count", len(self._lines))
            handle.add_metadata("in_range", self._selection_info is not None)

    def __repr__(self) -> str:
        return (
            f"TextLineReader(line_count={self.line_count}, "
            f"selection=({self._selection.start}, {self._selection.end}))"
        )

    @property
    def text(self) -> str:
        return self._text

    @property
    def selection(self) -> RangeLike:
        return self._selection

    @property
    def lines(self) -> LineRanges:
        return self._lines

    @property
    def line_count(self) -> int:
        return len(self._lines)

    @property
    def selection_info(self) -> Optional[SelectionInfo]:
        return self._selection_info

    @property
    def selected_line_indexes(self) -> Optional[Tuple[int, ...]]:
        return self._selected_line_indexes

    @property
    def is_multiple_lines(self) -> bool:
        indexes = self._selected_line_indexes
        return indexes is not None and len(indexes) > 1

    @property
    def is_collapsed(self) -> bool:
        return is_collapsed(self._selection)

    def with_selection(self, selection: RangeLike) -> "TextLineReader":
        """Return a reader over the same text, reusing this segmentation."""

        return type(self)._from_parts(self._text, selection, self._lines)

    def line_at(self, index: int) -> TextLine:
        return line_at(self._text, self._lines, index)

    def lines_in_range(self, start: int, stop: int) -> List[TextLine]:
        return [self.line_at(index) for index in range(start, stop)]

    def all_lines(self) -> List[TextLine]:
        return self.lines_in_range(0, self.line_count)

    def selected_line(self) -> Optional[TextLine]:
        """The line holding a single-line selection, or ``None`` if out of range."""

        self._require_single_line("selected_line")
        if self._selected_line_indexes is None:
            return None
        return self.line_at(self._selected_line_indexes[0])

    current_line = selected_line

    def selected_lines(self) -> Optional[List[TextLine]]:
        if self._selected_line_indexes is None:
            return None
        return [self.line_at(index) for index in self._selected_line_indexes]

    def read_from_selected_line(self) -> Optional[LineCursor]:
        """Fresh cursor starting at the selected line and running to the end."""

        self._require_single_line("read_from_selected_line")
        if self._selected_line_indexes is None:
            return None
        return LineCursor(self, self._selected_line_indexes[0], self.line_count)

    def _require_single_line(self, operation: str) -> None:
        if self.is_multiple_lines:
            raise UnsupportedOperationError(
                "The text selection contains multiple lines.",
                operation=operation,
                selection_info=self._selection_info,
            )


__all__ = ["END_OF_LINES", "CursorStep", "LineCursor", "TextLineReader"]
