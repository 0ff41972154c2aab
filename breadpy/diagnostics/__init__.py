"""Diagnostics."""

from breadpy.diagnostics.codes import (
    LINT_DEPRECATED_KEYWORD,
    LINT_MISSING_SEMICOLON,
    LINT_MISSING_TYPE_ANNOTATION,
    DiagnosticSpec,
)
from breadpy.diagnostics.diagnostic import Diagnostic, Severity
from breadpy.diagnostics.report import format_diagnostic, has_errors
from breadpy.diagnostics.store import DiagnosticSink, DiagnosticStore

__all__ = [
    "LINT_DEPRECATED_KEYWORD",
    "LINT_MISSING_SEMICOLON",
    "LINT_MISSING_TYPE_ANNOTATION",
    "Diagnostic",
    "DiagnosticSink",
    "DiagnosticSpec",
    "DiagnosticStore",
    "Severity",
    "format_diagnostic",
    "has_errors",
]
