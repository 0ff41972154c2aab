"""Pipeline carriers and lazy entrypoint exports."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from breadpy.features import complete, hover, signature_help
from breadpy.pipeline.results import AnalysisResult, LintRunResult

if TYPE_CHECKING:
    from breadpy.diagnostics import DiagnosticSink
    from breadpy.document import TextDocument
    from breadpy.lint import LintOptions, LintRule


def run_lint(
    source: TextDocument | str,
    options: LintOptions | None = None,
    *,
    rules: Sequence[LintRule] | None = None,
) -> LintRunResult:
    from breadpy.pipeline.entrypoints import run_lint as _run_lint

    return _run_lint(source, options, rules=rules)


def analyze_document(
    document: TextDocument,
    sink: DiagnosticSink,
    options: LintOptions | None = None,
    *,
    rules: Sequence[LintRule] | None = None,
) -> AnalysisResult:
    from breadpy.pipeline.entrypoints import analyze_document as _analyze_document

    return _analyze_document(document, sink, options, rules=rules)


__all__ = [
    "AnalysisResult",
    "LintRunResult",
    "analyze_document",
    "complete",
    "hover",
    "run_lint",
    "signature_help",
]
