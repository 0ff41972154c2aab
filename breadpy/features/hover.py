"""Hover documentation for the word under the cursor."""

from __future__ import annotations

from breadpy.catalog import SymbolCatalog, default_catalog
from breadpy.document import TextDocument
from breadpy.text import SourcePosition, slice_line, word_range_at


def hover(
    document: TextDocument,
    position: SourcePosition,
    *,
    catalog: SymbolCatalog | None = None,
) -> str | None:
    """Documentation of the catalog entry named by the word touching `position`."""
    line = document.line_at(position.line)
    word_range = word_range_at(line, position.line, position.character)
    if word_range is None:
        return None
    resolved = catalog if catalog is not None else default_catalog()
    entry = resolved.lookup(slice_line(line, word_range))
    if entry is None:
        return None
    return entry.documentation
