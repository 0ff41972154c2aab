"""Catalog-backed completion candidates."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Final

from breadpy.catalog import CatalogKind, SymbolCatalog, default_catalog
from breadpy.document import TextDocument
from breadpy.text import SourcePosition

TRIGGER_CHARACTERS: Final[tuple[str, ...]] = (".",)


class CompletionKind(StrEnum):
    KEYWORD = "keyword"
    CLASS = "class"
    FUNCTION = "function"
    PROPERTY = "property"


_KIND_BY_CATALOG_KIND: Final[dict[CatalogKind, CompletionKind]] = {
    CatalogKind.KEYWORD: CompletionKind.KEYWORD,
    CatalogKind.TYPE: CompletionKind.CLASS,
    CatalogKind.BUILTIN_FUNCTION: CompletionKind.FUNCTION,
    CatalogKind.PROPERTY: CompletionKind.PROPERTY,
}


@dataclass(frozen=True, slots=True)
class CompletionCandidate:
    label: str
    kind: CompletionKind
    detail: str


def complete(
    document: TextDocument,
    position: SourcePosition,
    *,
    catalog: SymbolCatalog | None = None,
) -> list[CompletionCandidate]:
    """Return every catalog entry as a candidate.

    Neither the position nor the typed prefix narrows the result; the editor's
    own fuzzy matching does that.
    """
    resolved = catalog if catalog is not None else default_catalog()
    return [
        CompletionCandidate(
            label=entry.name,
            kind=_KIND_BY_CATALOG_KIND[entry.kind],
            detail=entry.detail,
        )
        for entry in resolved.entries()
    ]
