"""Line segmentation, selection mapping, and the line reader."""

from .accessor import line_at, line_from_range
from .errors import InvalidArgumentError, TextLineReaderError, UnsupportedOperationError
from .line import TextLine
from .ranges import RangeLike, TextRange, is_collapsed
from .reader import END_OF_LINES, CursorStep, LineCursor, TextLineReader
from .segmenter import LineRanges, pad_trailing_newline, segment_lines
from .selection import SelectionInfo, map_selection
from .validation import ensure_text

__all__ = [
    "TextRange",
    "RangeLike",
    "is_collapsed",
    "TextLine",
    "LineRanges",
    "segment_lines",
    "pad_trailing_newline",
    "SelectionInfo",
    "map_selection",
    "line_at",
    "line_from_range",
    "TextLineReader",
    "LineCursor",
    "CursorStep",
    "END_OF_LINES",
    "TextLineReaderError",
    "InvalidArgumentError",
    "UnsupportedOperationError",
    "ensure_text",
]
