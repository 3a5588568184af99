"""Line-oriented view of a text buffer and its selection."""

from .text import (
    END_OF_LINES,
    InvalidArgumentError,
    LineCursor,
    SelectionInfo,
    TextLine,
    TextLineReader,
    TextLineReaderError,
    TextRange,
    UnsupportedOperationError,
    is_collapsed,
    line_at,
    line_from_range,
    map_selection,
    pad_trailing_newline,
    segment_lines,
)

__all__ = [
    "TextRange",
    "TextLine",
    "SelectionInfo",
    "TextLineReader",
    "LineCursor",
    "END_OF_LINES",
    "TextLineReaderError",
    "InvalidArgumentError",
    "UnsupportedOperationError",
    "is_collapsed",
    "segment_lines",
    "pad_trailing_newline",
    "map_selection",
    "line_at",
    "line_from_range",
    "text",
    "runtime",
]

__version__ = "0.1.0"
