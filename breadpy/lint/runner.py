"""Lint runner over one document snapshot."""

from __future__ import annotations

from collections.abc import Sequence
import logging

from breadpy.diagnostics import Diagnostic
from breadpy.document import TextDocument
from breadpy.lint.options import LintOptions
from breadpy.lint.rules import (
    LintRule,
    default_lint_rules,
    validate_lint_rules,
)
from breadpy.pipeline.results import LintRunResult

logger = logging.getLogger(__name__)


def run_lint(
    source: TextDocument | str,
    options: LintOptions | None = None,
    *,
    rules: Sequence[LintRule] | None = None,
) -> LintRunResult:
    """Apply every rule to every line, rule by rule, top to bottom.

    The result is a full replacement for any earlier result on the same document.
    """
    document = _resolve_document(source)
    if rules is not None and options is not None:
        raise ValueError("Pass either rules or options, not both")
    resolved_rules = tuple(rules) if rules is not None else default_lint_rules(options)
    validate_lint_rules(resolved_rules)

    diagnostics: list[Diagnostic] = []
    for rule in resolved_rules:
        for line_index, line in enumerate(document.lines):
            diagnostics.extend(rule.run(line, line_index))

    logger.debug(
        "Linted %s (%d lines, %d rules): %d diagnostics",
        document.uri,
        document.line_count,
        len(resolved_rules),
        len(diagnostics),
    )
    return LintRunResult(document=document, diagnostics=diagnostics)


def _resolve_document(source: TextDocument | str) -> TextDocument:
    if isinstance(source, TextDocument):
        return source
    return TextDocument(uri="<memory>", text=source)
