"""Pattern-based lint engine."""

from breadpy.lint.options import LintOptions
from breadpy.lint.rules import (
    DeprecatedKeywordRule,
    LintConfidence,
    LintRule,
    MissingSemicolonRule,
    MissingTypeAnnotationRule,
    default_lint_rules,
    validate_lint_rules,
)
from breadpy.lint.runner import run_lint

__all__ = [
    "DeprecatedKeywordRule",
    "LintConfidence",
    "LintOptions",
    "LintRule",
    "MissingSemicolonRule",
    "MissingTypeAnnotationRule",
    "default_lint_rules",
    "run_lint",
    "validate_lint_rules",
]
