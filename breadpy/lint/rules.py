"""Lint rules and rule contracts."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from functools import lru_cache
import re
from types import MappingProxyType
from typing import Literal, Protocol, TypeAlias

from breadpy.diagnostics import (
    LINT_DEPRECATED_KEYWORD,
    LINT_MISSING_SEMICOLON,
    LINT_MISSING_TYPE_ANNOTATION,
    Diagnostic,
)
from breadpy.lint.options import LintOptions
from breadpy.text import to_range

LintConfidence: TypeAlias = Literal["policy", "heuristic"]


class LintRule(Protocol):
    """Line detector contract: one line of text in, zero or more diagnostics out."""

    @property
    def code(self) -> str: ...

    @property
    def name(self) -> str: ...

    @property
    def category(self) -> str: ...

    @property
    def confidence(self) -> LintConfidence: ...

    def run(self, line: str, line_index: int) -> list[Diagnostic]: ...


@dataclass(frozen=True, slots=True)
class DeprecatedKeywordRule:
    """Flags the first whole-word use of each legacy function keyword on a line."""

    code: str = LINT_DEPRECATED_KEYWORD.code
    name: str = "deprecatedFunctionKeyword"
    category: str = "deprecation"
    confidence: LintConfidence = "policy"
    replacements: Mapping[str, str] = field(
        default_factory=lambda: MappingProxyType({"func": "fn"})
    )

    def run(self, line: str, line_index: int) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        for legacy, replacement in self.replacements.items():
            match = _whole_word(legacy).search(line)
            if match is None:
                continue
            diagnostics.append(
                Diagnostic(
                    code=self.code,
                    message=LINT_DEPRECATED_KEYWORD.message.format(replacement=replacement, legacy=legacy),
                    range=to_range(line_index, match.start(), match.end()),
                    severity=LINT_DEPRECATED_KEYWORD.severity,
                    hint=f"Replace `{legacy}` with `{replacement}`.",
                    category=LINT_DEPRECATED_KEYWORD.category,
                )
            )
        return diagnostics


@dataclass(frozen=True, slots=True)
class MissingTypeAnnotationRule:
    """Flags `let name = ...` declarations on lines without any `:`.

    The colon check covers the whole line, so a `:` inside a trailing comment
    also suppresses the finding. Known limitation of the heuristic.
    """

    code: str = LINT_MISSING_TYPE_ANNOTATION.code
    name: str = "missingTypeAnnotation"
    category: str = "style"
    confidence: LintConfidence = "heuristic"
    keyword: str = "let"

    def run(self, line: str, line_index: int) -> list[Diagnostic]:
        if ":" in line:
            return []
        match = _declaration(self.keyword).search(line)
        if match is None:
            return []
        return [
            Diagnostic(
                code=self.code,
                message=LINT_MISSING_TYPE_ANNOTATION.message,
                range=to_range(line_index, match.start(), len(line)),
                severity=LINT_MISSING_TYPE_ANNOTATION.severity,
                hint=LINT_MISSING_TYPE_ANNOTATION.hint,
                category=LINT_MISSING_TYPE_ANNOTATION.category,
            )
        ]


@dataclass(frozen=True, slots=True)
class MissingSemicolonRule:
    """Flags single-line declarations that do not end in the statement terminator."""

    code: str = LINT_MISSING_SEMICOLON.code
    name: str = "missingSemicolon"
    category: str = "style"
    confidence: LintConfidence = "heuristic"
    keywords: tuple[str, ...] = ("let", "const")
    terminator: str = ";"
    block_open: str = "{"

    def run(self, line: str, line_index: int) -> list[Diagnostic]:
        stripped = line.strip()
        if not stripped or self.block_open in line:
            return []
        if not any(_leading_keyword(keyword).match(stripped) for keyword in self.keywords):
            return []
        if stripped[-1] in (self.terminator, self.block_open):
            return []
        # Zero-width marker at the last non-whitespace character.
        column = len(line.rstrip()) - 1
        return [
            Diagnostic(
                code=self.code,
                message=LINT_MISSING_SEMICOLON.message,
                range=to_range(line_index, column, column),
                severity=LINT_MISSING_SEMICOLON.severity,
                hint=LINT_MISSING_SEMICOLON.hint,
                category=LINT_MISSING_SEMICOLON.category,
            )
        ]


def default_lint_rules(options: LintOptions | None = None) -> tuple[LintRule, ...]:
    """Rules in priority order; the runner reports findings in this order."""
    resolved = options if options is not None else LintOptions()
    return (
        DeprecatedKeywordRule(replacements=resolved.legacy_keywords),
        MissingTypeAnnotationRule(keyword=resolved.mutable_keyword),
        MissingSemicolonRule(
            keywords=resolved.declaration_keywords,
            terminator=resolved.terminator,
            block_open=resolved.block_open,
        ),
    )


def validate_lint_rules(rules: tuple[LintRule, ...]) -> None:
    allowed_confidence = {"policy", "heuristic"}
    seen_codes: set[str] = set()
    for rule in rules:
        if rule.confidence not in allowed_confidence:
            raise ValueError(
                f"Lint rule `{rule.name}` has invalid confidence `{rule.confidence}`; expected policy/heuristic."
            )
        if not rule.code:
            raise ValueError(f"Lint rule `{rule.name}` has an empty code.")
        if rule.code in seen_codes:
            raise ValueError(f"Lint rule `{rule.name}` reuses code `{rule.code}`.")
        seen_codes.add(rule.code)


@lru_cache(maxsize=32)
def _whole_word(word: str) -> re.Pattern[str]:
    return re.compile(rf"(?<!\w){re.escape(word)}(?!\w)")


@lru_cache(maxsize=32)
def _declaration(keyword: str) -> re.Pattern[str]:
    return re.compile(rf"(?<!\w){re.escape(keyword)}\s+\w+\s*=")


@lru_cache(maxsize=32)
def _leading_keyword(keyword: str) -> re.Pattern[str]:
    return re.compile(rf"{re.escape(keyword)}(?!\w)")
