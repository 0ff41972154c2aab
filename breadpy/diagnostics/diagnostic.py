"""Diagnostics core types."""

from dataclasses import dataclass
from enum import StrEnum

from breadpy.text import SourceRange


class Severity(StrEnum):
    """Diagnostic severity, ordered from most to least severe."""

    ERROR = "error"
    WARNING = "warning"
    INFORMATION = "information"
    HINT = "hint"


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic emitted by lint rules."""

    code: str
    message: str
    range: SourceRange
    severity: Severity = Severity.ERROR
    hint: str | None = None
    category: str | None = None
