from dataclasses import dataclass
import re
from typing import Final


@dataclass(frozen=True, slots=True, order=True)
class SourcePosition:
    """Zero-based line/character position in a document."""

    line: int
    character: int

    def __post_init__(self):
        if self.line < 0 or self.character < 0:
            raise ValueError("SourcePosition cannot be negative")

    def __repr__(self) -> str:
        return f"SourcePosition({self.line}, {self.character})"


@dataclass(frozen=True, slots=True, order=True)
class SourceRange:
    """
    Half-open range [start, end) over line/character positions.

    Invariant:
    - start <= end

    Ranges produced by detectors never span lines, but the type does not forbid it.
    """

    start: SourcePosition
    end: SourcePosition

    def __post_init__(self):
        if self.start > self.end:
            raise ValueError("SourceRange invariant violated: start > end")

    @staticmethod
    def on_line(line: int, start_column: int, end_column: int) -> "SourceRange":
        """Create a SourceRange confined to one line."""
        return SourceRange(SourcePosition(line, start_column), SourcePosition(line, end_column))

    @staticmethod
    def empty(line: int, column: int) -> "SourceRange":
        """Create a zero-width SourceRange at the given column."""
        return SourceRange.on_line(line, column, column)

    def is_empty(self) -> bool:
        """Check if the range is empty."""
        return self.start == self.end

    def as_tuple(self) -> tuple[int, int, int, int]:
        """Get the range as (start_line, start_column, end_line, end_column)."""
        return (self.start.line, self.start.character, self.end.line, self.end.character)

    def contains(self, position: SourcePosition) -> bool:
        """Check if the range contains the given position."""
        return self.start <= position < self.end

    def contains_inclusive(self, position: SourcePosition) -> bool:
        """Check if the range contains the given position, inclusive of end."""
        return self.start <= position <= self.end

    def __repr__(self) -> str:
        return f"SourceRange({self.start.line}:{self.start.character}, {self.end.line}:{self.end.character})"


WORD_PATTERN: Final[re.Pattern[str]] = re.compile(r"\w+")
"""Identifier-like token used to resolve the word under a cursor."""


def to_range(line_index: int, start_column: int, end_column: int) -> SourceRange:
    """Map a line index and a column span within that line to a SourceRange.

    Passing `end_column=len(line)` gives a range reaching end-of-line.
    """
    if start_column > end_column:
        raise ValueError(f"start column {start_column} is after end column {end_column}")
    return SourceRange.on_line(line_index, start_column, end_column)


def word_range_at(line_text: str, line_index: int, character: int) -> SourceRange | None:
    """Return the range of the word touching `character`, if any.

    A cursor placed right after the last character of a word still touches it.
    """
    if character < 0 or character > len(line_text):
        raise ValueError(f"character {character} is outside line {line_index} (length {len(line_text)})")
    for match in WORD_PATTERN.finditer(line_text):
        if match.start() <= character <= match.end():
            return to_range(line_index, match.start(), match.end())
        if match.start() > character:
            break
    return None


def slice_line(line_text: str, range: SourceRange) -> str:
    """Get the substring of one line covered by the given SourceRange.

    Coord system matches python string indices so we can just do this.
    """
    if range.start.line != range.end.line:
        raise ValueError("slice_line only supports single-line ranges")
    return line_text[range.start.character : range.end.character]
