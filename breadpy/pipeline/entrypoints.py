"""Single-call tool entrypoints over document snapshots."""

from __future__ import annotations

from collections.abc import Sequence
import logging

from breadpy.diagnostics import DiagnosticSink
from breadpy.document import TextDocument
from breadpy.lint import LintOptions, LintRule
from breadpy.lint import run_lint as _run_lint
from breadpy.pipeline.results import AnalysisResult, LintRunResult

logger = logging.getLogger(__name__)


def run_lint(
    source: TextDocument | str,
    options: LintOptions | None = None,
    *,
    rules: Sequence[LintRule] | None = None,
) -> LintRunResult:
    return _run_lint(source, options, rules=rules)


def analyze_document(
    document: TextDocument,
    sink: DiagnosticSink,
    options: LintOptions | None = None,
    *,
    rules: Sequence[LintRule] | None = None,
) -> AnalysisResult:
    """Lint a Bread document and replace whatever the sink holds for it."""
    if not document.is_bread:
        logger.debug("Skipping non-Bread document %s (%s)", document.uri, document.language_id)
        return AnalysisResult(lint=None, published=False)
    result = _run_lint(document, options, rules=rules)
    published = sink.publish(document.uri, result.diagnostics, document.version)
    return AnalysisResult(lint=result, published=published)
