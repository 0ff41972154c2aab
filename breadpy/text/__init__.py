"""Source positions and ranges."""

from breadpy.text.text import (
    WORD_PATTERN,
    SourcePosition,
    SourceRange,
    slice_line,
    to_range,
    word_range_at,
)

__all__ = [
    "WORD_PATTERN",
    "SourcePosition",
    "SourceRange",
    "slice_line",
    "to_range",
    "word_range_at",
]
