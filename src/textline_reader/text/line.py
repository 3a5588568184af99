"""Single line of text sliced out of a buffer."""

from __future__ import annotations

from dataclasses import dataclass

from .ranges import TextRange


@dataclass(frozen=True, slots=True)
class TextLine:
    """One line of a buffer.

    ``offset`` is the absolute position of the line's first character and
    ``full_text`` keeps the terminating ``\\n`` when the line has one.
    """

    offset: int
    full_text: str

    @property
    def has_trailing_newline(self) -> bool:
        return self.full_text.endswith("\n")

    @property
    def text_content(self) -> str:
        """The line without its trailing newline."""

        if self.has_trailing_newline:
            return self.full_text[:-1]
        return self.full_text

    @property
    def end(self) -> int:
        return self.offset + len(self.full_text)

    @property
    def range(self) -> TextRange:
        return TextRange(self.offset, self.end)


__all__ = ["TextLine"]
