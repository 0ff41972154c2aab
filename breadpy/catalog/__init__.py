"""Symbol catalog."""

from breadpy.catalog.catalog import (
    CatalogEntry,
    CatalogKind,
    Signature,
    SymbolCatalog,
    build_default_entries,
    default_catalog,
    lookup,
)

__all__ = [
    "CatalogEntry",
    "CatalogKind",
    "Signature",
    "SymbolCatalog",
    "build_default_entries",
    "default_catalog",
    "lookup",
]
