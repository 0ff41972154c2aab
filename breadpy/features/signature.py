"""Signature help for calls to catalog builtins."""

from __future__ import annotations

from dataclasses import dataclass
import re
from typing import Final

from breadpy.catalog import SymbolCatalog, default_catalog
from breadpy.document import TextDocument
from breadpy.text import SourcePosition

TRIGGER_CHARACTERS: Final[tuple[str, ...]] = ("(", ",")

_OPEN_CALL: Final[re.Pattern[str]] = re.compile(r"(\w+)\s*\($")


@dataclass(frozen=True, slots=True)
class SignatureInfo:
    label: str
    documentation: str
    active_signature: int = 0
    active_parameter: int = 0


def signature_help(
    document: TextDocument,
    position: SourcePosition,
    *,
    catalog: SymbolCatalog | None = None,
) -> SignatureInfo | None:
    """Signature of the callable whose `(` sits immediately before the cursor.

    Argument position is not tracked: `active_parameter` stays 0 even after commas.
    """
    line = document.line_at(position.line)
    if position.character > len(line):
        raise ValueError(
            f"character {position.character} is outside line {position.line} (length {len(line)})"
        )
    match = _OPEN_CALL.search(line[: position.character])
    if match is None:
        return None
    resolved = catalog if catalog is not None else default_catalog()
    entry = resolved.lookup(match.group(1))
    if entry is None or entry.signature is None:
        return None
    return SignatureInfo(label=entry.signature.label, documentation=entry.signature.documentation)
