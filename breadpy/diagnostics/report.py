"""Diagnostics helpers."""

from __future__ import annotations

from collections.abc import Iterable

from breadpy.diagnostics.diagnostic import Diagnostic, Severity


def has_errors(diagnostics: Iterable[Diagnostic]) -> bool:
    return any(d.severity == Severity.ERROR for d in diagnostics)


def format_diagnostic(diagnostic: Diagnostic, source: str = "<memory>") -> str:
    """Render one diagnostic as `source:line:col: severity[code] message` (1-based)."""
    start = diagnostic.range.start
    return (
        f"{source}:{start.line + 1}:{start.character + 1}: "
        f"{diagnostic.severity}[{diagnostic.code}] {diagnostic.message}"
    )
