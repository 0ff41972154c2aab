"""Lint configuration options."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any


@dataclass(frozen=True, slots=True)
class LintOptions:
    """Knobs for the pattern-based lint rules.

    `legacy_keywords` maps a deprecated function keyword to its replacement.
    """

    legacy_keywords: Mapping[str, str] = field(
        default_factory=lambda: MappingProxyType({"func": "fn"})
    )
    mutable_keyword: str = "let"
    declaration_keywords: tuple[str, ...] = ("let", "const")
    terminator: str = ";"
    block_open: str = "{"

    def __post_init__(self):
        if not self.mutable_keyword:
            raise ValueError("mutable_keyword cannot be empty")
        if not self.declaration_keywords or not all(self.declaration_keywords):
            raise ValueError("declaration_keywords cannot be empty or contain empty keywords")
        if not all(self.legacy_keywords) or not all(self.legacy_keywords.values()):
            raise ValueError("legacy_keywords cannot contain empty keywords or replacements")
        if len(self.terminator) != 1 or len(self.block_open) != 1:
            raise ValueError("terminator and block_open must be single characters")
        if not isinstance(self.legacy_keywords, MappingProxyType):
            object.__setattr__(self, "legacy_keywords", MappingProxyType(dict(self.legacy_keywords)))

    @staticmethod
    def from_mapping(data: Mapping[str, Any] | None) -> "LintOptions":
        """Build options from camelCase client settings; unknown keys are ignored."""
        if not data:
            return LintOptions()
        defaults = LintOptions()

        legacy = data.get("legacyKeywords", defaults.legacy_keywords)
        if not isinstance(legacy, Mapping) or not all(
            isinstance(key, str) and isinstance(value, str) for key, value in legacy.items()
        ):
            raise ValueError("`legacyKeywords` must map keyword strings to replacement strings")

        declaration_keywords = data.get("declarationKeywords", defaults.declaration_keywords)
        if not isinstance(declaration_keywords, (list, tuple)) or not all(
            isinstance(keyword, str) for keyword in declaration_keywords
        ):
            raise ValueError("`declarationKeywords` must be a list of strings")

        return LintOptions(
            legacy_keywords=legacy,
            mutable_keyword=_string_setting(data, "mutableKeyword", defaults.mutable_keyword),
            declaration_keywords=tuple(declaration_keywords),
            terminator=_string_setting(data, "terminator", defaults.terminator),
            block_open=_string_setting(data, "blockOpen", defaults.block_open),
        )


def _string_setting(data: Mapping[str, Any], key: str, default: str) -> str:
    value = data.get(key, default)
    if not isinstance(value, str):
        raise ValueError(f"`{key}` must be a string, got {type(value).__name__}")
    return value
