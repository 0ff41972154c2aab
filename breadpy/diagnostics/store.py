"""Per-document diagnostic publication."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
import logging
from typing import Protocol

from breadpy.diagnostics.diagnostic import Diagnostic

logger = logging.getLogger(__name__)


class DiagnosticSink(Protocol):
    """Replace-only destination for a document's diagnostics (e.g. an editor's problems panel)."""

    def publish(
        self,
        document_id: str,
        diagnostics: Sequence[Diagnostic],
        version: int | None = None,
    ) -> bool: ...

    def clear(self, document_id: str) -> None: ...


@dataclass(slots=True)
class _StoredDiagnostics:
    diagnostics: tuple[Diagnostic, ...]
    version: int | None


@dataclass(slots=True)
class DiagnosticStore:
    """In-memory sink keyed by document identity.

    Every publish replaces the previous list for that document. When both the
    stored and the incoming result carry a version, an older incoming version
    is dropped so that a stale run never overwrites a fresher one.
    """

    _entries: dict[str, _StoredDiagnostics] = field(default_factory=dict)

    def publish(
        self,
        document_id: str,
        diagnostics: Sequence[Diagnostic],
        version: int | None = None,
    ) -> bool:
        current = self._entries.get(document_id)
        if (
            current is not None
            and current.version is not None
            and version is not None
            and version < current.version
        ):
            logger.warning(
                "Dropping stale diagnostics for %s (version %d < %d)",
                document_id,
                version,
                current.version,
            )
            return False
        self._entries[document_id] = _StoredDiagnostics(tuple(diagnostics), version)
        logger.debug("Stored %d diagnostics for %s", len(diagnostics), document_id)
        return True

    def clear(self, document_id: str) -> None:
        self._entries.pop(document_id, None)

    def get(self, document_id: str) -> tuple[Diagnostic, ...]:
        entry = self._entries.get(document_id)
        if entry is None:
            return ()
        return entry.diagnostics

    def version_of(self, document_id: str) -> int | None:
        entry = self._entries.get(document_id)
        return None if entry is None else entry.version

    def document_ids(self) -> Iterator[str]:
        return iter(sorted(self._entries))

    def __contains__(self, document_id: object) -> bool:
        return document_id in self._entries

    def __len__(self) -> int:
        return len(self._entries)
