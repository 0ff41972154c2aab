"""
Bread language server.

Wires the lint engine, the symbol catalog providers and the build planner into
pygls. Every handler runs to completion before the next message is read, so
results for one document are naturally serialized.
"""

from __future__ import annotations

from collections.abc import Sequence
import logging
from typing import Any, Final

from lsprotocol import types as lsp
from pygls.lsp.server import LanguageServer
from pygls.workspace import PositionCodec

from breadpy import __version__
from breadpy.build import BuildError, plan_build
from breadpy.diagnostics import Diagnostic, DiagnosticStore, Severity
from breadpy.document import TextDocument, is_bread_document, uri_to_path
from breadpy.features import (
    CompletionCandidate,
    CompletionKind,
    SignatureInfo,
    complete,
    hover,
    signature_help,
)
from breadpy.features.completion import TRIGGER_CHARACTERS as COMPLETION_TRIGGERS
from breadpy.features.signature import TRIGGER_CHARACTERS as SIGNATURE_TRIGGERS
from breadpy.lint import LintOptions
from breadpy.pipeline import analyze_document
from breadpy.text import SourcePosition, SourceRange

logger = logging.getLogger(__name__)

SOURCE_NAME: Final[str] = "bread"

_SEVERITY: Final[dict[Severity, lsp.DiagnosticSeverity]] = {
    Severity.ERROR: lsp.DiagnosticSeverity.Error,
    Severity.WARNING: lsp.DiagnosticSeverity.Warning,
    Severity.INFORMATION: lsp.DiagnosticSeverity.Information,
    Severity.HINT: lsp.DiagnosticSeverity.Hint,
}

_COMPLETION_KIND: Final[dict[CompletionKind, lsp.CompletionItemKind]] = {
    CompletionKind.KEYWORD: lsp.CompletionItemKind.Keyword,
    CompletionKind.CLASS: lsp.CompletionItemKind.Class,
    CompletionKind.FUNCTION: lsp.CompletionItemKind.Function,
    CompletionKind.PROPERTY: lsp.CompletionItemKind.Property,
}


# ---------------------------------------------------------------------------
# Core <-> LSP conversions
#
# The core works in code points. Client positions arrive in the negotiated
# encoding (UTF-16 by default) and go back out in it, so every position crosses
# the workspace `PositionCodec`.
# ---------------------------------------------------------------------------


def to_source_position(
    position: lsp.Position,
    lines: Sequence[str],
    codec: PositionCodec,
) -> SourcePosition:
    # The codec clamps by mutating its argument; leave the request params untouched.
    converted = codec.position_from_client_units(
        lines, lsp.Position(line=position.line, character=position.character)
    )
    return SourcePosition(converted.line, converted.character)


def to_lsp_range(range: SourceRange, lines: Sequence[str], codec: PositionCodec) -> lsp.Range:
    return codec.range_to_client_units(
        lines,
        lsp.Range(
            start=lsp.Position(line=range.start.line, character=range.start.character),
            end=lsp.Position(line=range.end.line, character=range.end.character),
        ),
    )


def to_lsp_diagnostic(diagnostic: Diagnostic, lines: Sequence[str], codec: PositionCodec) -> lsp.Diagnostic:
    return lsp.Diagnostic(
        range=to_lsp_range(diagnostic.range, lines, codec),
        message=diagnostic.message,
        severity=_SEVERITY[diagnostic.severity],
        code=diagnostic.code,
        source=SOURCE_NAME,
    )


def to_lsp_completion_item(candidate: CompletionCandidate) -> lsp.CompletionItem:
    return lsp.CompletionItem(
        label=candidate.label,
        kind=_COMPLETION_KIND[candidate.kind],
        detail=candidate.detail,
    )


def to_lsp_signature_help(info: SignatureInfo) -> lsp.SignatureHelp:
    return lsp.SignatureHelp(
        signatures=[lsp.SignatureInformation(label=info.label, documentation=info.documentation)],
        active_signature=info.active_signature,
        active_parameter=info.active_parameter,
    )


# ---------------------------------------------------------------------------
# Server
# ---------------------------------------------------------------------------


class LspDiagnosticSink:
    """Pushes diagnostics to the client, dropping results older than the last published version."""

    def __init__(self, server: BreadLanguageServer):
        self._server = server
        self._store = DiagnosticStore()

    def publish(
        self,
        document_id: str,
        diagnostics: Sequence[Diagnostic],
        version: int | None = None,
    ) -> bool:
        if not self._store.publish(document_id, diagnostics, version):
            return False
        logger.debug("Publishing %d diagnostics for %s", len(diagnostics), document_id)
        lines = self._server.snapshot(document_id).lines
        codec = self._server.workspace.position_codec
        self._server.text_document_publish_diagnostics(
            lsp.PublishDiagnosticsParams(
                uri=document_id,
                diagnostics=[to_lsp_diagnostic(diagnostic, lines, codec) for diagnostic in diagnostics],
                version=version,
            )
        )
        return True

    def clear(self, document_id: str) -> None:
        self._store.clear(document_id)
        self._server.text_document_publish_diagnostics(
            lsp.PublishDiagnosticsParams(uri=document_id, diagnostics=[])
        )


class BreadLanguageServer(LanguageServer):
    def __init__(self, *args: Any, **kwargs: Any):
        super().__init__(*args, **kwargs)
        self.lint_options = LintOptions()
        self.sink = LspDiagnosticSink(self)

    def snapshot(self, uri: str) -> TextDocument:
        """Fresh snapshot of the client's buffer; never reused across requests."""
        document = self.workspace.get_text_document(uri)
        return TextDocument(
            uri=uri,
            text=document.source,
            language_id=document.language_id or "",
            version=document.version,
        )

    def source_position(self, document: TextDocument, position: lsp.Position) -> SourcePosition:
        return to_source_position(position, document.lines, self.workspace.position_codec)

    def lint(self, uri: str) -> None:
        analyze_document(self.snapshot(uri), self.sink, self.lint_options)


server = BreadLanguageServer(
    "breadpy",
    __version__,
    text_document_sync_kind=lsp.TextDocumentSyncKind.Full,
)


@server.feature(lsp.INITIALIZE)
def on_initialize(ls: BreadLanguageServer, params: lsp.InitializeParams) -> None:
    options = params.initialization_options
    try:
        ls.lint_options = LintOptions.from_mapping(options if isinstance(options, dict) else None)
    except ValueError as exc:
        logger.warning("Ignoring invalid initialization options: %s", exc)
        ls.lint_options = LintOptions()


@server.feature(lsp.TEXT_DOCUMENT_DID_OPEN)
def did_open(ls: BreadLanguageServer, params: lsp.DidOpenTextDocumentParams) -> None:
    ls.lint(params.text_document.uri)


@server.feature(lsp.TEXT_DOCUMENT_DID_CHANGE)
def did_change(ls: BreadLanguageServer, params: lsp.DidChangeTextDocumentParams) -> None:
    ls.lint(params.text_document.uri)


@server.feature(lsp.TEXT_DOCUMENT_DID_CLOSE)
def did_close(ls: BreadLanguageServer, params: lsp.DidCloseTextDocumentParams) -> None:
    ls.sink.clear(params.text_document.uri)


@server.feature(
    lsp.TEXT_DOCUMENT_COMPLETION,
    lsp.CompletionOptions(trigger_characters=list(COMPLETION_TRIGGERS)),
)
def on_completion(ls: BreadLanguageServer, params: lsp.CompletionParams) -> lsp.CompletionList | None:
    document = ls.snapshot(params.text_document.uri)
    if not document.is_bread:
        return None
    candidates = complete(document, ls.source_position(document, params.position))
    return lsp.CompletionList(
        is_incomplete=False,
        items=[to_lsp_completion_item(candidate) for candidate in candidates],
    )


@server.feature(lsp.TEXT_DOCUMENT_HOVER)
def on_hover(ls: BreadLanguageServer, params: lsp.HoverParams) -> lsp.Hover | None:
    document = ls.snapshot(params.text_document.uri)
    if not document.is_bread:
        return None
    documentation = hover(document, ls.source_position(document, params.position))
    if documentation is None:
        return None
    return lsp.Hover(contents=lsp.MarkupContent(kind=lsp.MarkupKind.PlainText, value=documentation))


@server.feature(
    lsp.TEXT_DOCUMENT_SIGNATURE_HELP,
    lsp.SignatureHelpOptions(trigger_characters=list(SIGNATURE_TRIGGERS)),
)
def on_signature_help(ls: BreadLanguageServer, params: lsp.SignatureHelpParams) -> lsp.SignatureHelp | None:
    document = ls.snapshot(params.text_document.uri)
    if not document.is_bread:
        return None
    info = signature_help(document, ls.source_position(document, params.position))
    if info is None:
        return None
    return to_lsp_signature_help(info)


@server.command("bread.build")
def cmd_build(ls: BreadLanguageServer, uri: str) -> dict[str, str] | None:
    return _plan_for_client(ls, uri, run=False)


@server.command("bread.buildAndRun")
def cmd_build_and_run(ls: BreadLanguageServer, uri: str) -> dict[str, str] | None:
    return _plan_for_client(ls, uri, run=True)


def _plan_for_client(ls: BreadLanguageServer, uri: str, *, run: bool) -> dict[str, str] | None:
    """Plan the build and hand the shell command back to the client.

    Nothing is executed here: the client runs `command` from `cwd` in its own
    terminal. Failed preconditions are shown as error messages and yield `None`.
    """
    if not is_bread_document(uri):
        _show(ls, lsp.MessageType.Error, "Selected file is not a Bread file")
        return None
    root = ls.workspace.root_path
    if root is None:
        _show(ls, lsp.MessageType.Error, "File must be in a workspace to build")
        return None
    try:
        plan = plan_build(uri_to_path(uri), root, run=run)
    except BuildError as exc:
        _show(ls, lsp.MessageType.Error, f"Build failed: {exc}")
        return None
    _show(ls, lsp.MessageType.Info, plan.description)
    return {
        "strategy": str(plan.strategy),
        "command": plan.command,
        "cwd": root,
        "output": plan.output_name,
    }


def _show(ls: BreadLanguageServer, kind: lsp.MessageType, message: str) -> None:
    ls.window_show_message(lsp.ShowMessageParams(type=kind, message=message))


def main() -> None:
    server.start_io()
