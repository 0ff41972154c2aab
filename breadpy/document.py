"""Read-only document snapshots and Bread file association."""

from __future__ import annotations

from dataclasses import dataclass, field
import re
from typing import Final
from urllib.parse import unquote, urlparse

LANGUAGE_ID: Final[str] = "bread"
FILE_EXTENSION: Final[str] = ".bread"

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


@dataclass(frozen=True, slots=True)
class TextDocument:
    """Snapshot of a host-owned buffer. The engine never mutates or caches it across calls.

    `is_dirty` mirrors the host's unsaved-changes flag. It is host-only state:
    analysis results depend on `text` alone, whether or not the buffer is saved.
    """

    uri: str
    text: str
    language_id: str = LANGUAGE_ID
    version: int | None = None
    is_dirty: bool = False
    _lines: tuple[str, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "_lines", tuple(_LINE_BREAK.split(self.text)))

    @property
    def lines(self) -> tuple[str, ...]:
        """Lines without their terminators; an empty text has one empty line."""
        return self._lines

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def line_at(self, index: int) -> str:
        if index < 0 or index >= len(self._lines):
            raise IndexError(f"Line {index} is out of range for {self.uri} ({len(self._lines)} lines)")
        return self._lines[index]

    @property
    def is_bread(self) -> bool:
        return is_bread_document(self.uri, self.language_id)


def is_bread_document(uri: str, language_id: str | None = None) -> bool:
    """Whether the analysis functions apply to this document."""
    if language_id == LANGUAGE_ID:
        return True
    return uri_to_path(uri).endswith(FILE_EXTENSION)


def uri_to_path(uri: str) -> str:
    """Convert a file URI (or plain path) to a filesystem path."""
    parsed = urlparse(uri)
    if parsed.scheme == "file":
        return unquote(parsed.path)
    return uri
