"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final

from breadpy.diagnostics.diagnostic import Severity


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = Severity.ERROR
    category: str | None = None


LINT_DEPRECATED_KEYWORD: Final[DiagnosticSpec] = DiagnosticSpec(
    code="deprecated-keyword",
    message="Use '{replacement}' instead of '{legacy}' to declare functions",
    hint="Replace the legacy keyword; both spellings compile today.",
    severity=Severity.WARNING,
    category="lint/deprecation",
)

LINT_MISSING_TYPE_ANNOTATION: Final[DiagnosticSpec] = DiagnosticSpec(
    code="missing-type-annotation",
    message="Consider adding type annotation for better code clarity",
    hint="Declare the variable as `let name: Type = value`.",
    severity=Severity.INFORMATION,
    category="lint/style",
)

LINT_MISSING_SEMICOLON: Final[DiagnosticSpec] = DiagnosticSpec(
    code="missing-semicolon",
    message="Consider adding semicolon for consistency",
    hint="End the declaration with `;`.",
    severity=Severity.HINT,
    category="lint/style",
)
