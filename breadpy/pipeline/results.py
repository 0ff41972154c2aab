"""Pipeline run result carriers for tool entrypoints."""

from __future__ import annotations

from dataclasses import dataclass

from breadpy.diagnostics import Diagnostic, has_errors
from breadpy.document import TextDocument


@dataclass(frozen=True, slots=True)
class LintRunResult:
    """Result of running lint rules over one document snapshot."""

    document: TextDocument
    diagnostics: list[Diagnostic]

    @property
    def has_errors(self) -> bool:
        return has_errors(self.diagnostics)


@dataclass(frozen=True, slots=True)
class AnalysisResult:
    """Result of linting a document and publishing it to a sink."""

    lint: LintRunResult | None
    published: bool

    @property
    def skipped(self) -> bool:
        """True when the document is not a Bread document and was not linted."""
        return self.lint is None
