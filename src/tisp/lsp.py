"""Minimal LSP server for Tisp — lexical diagnostics only."""

from __future__ import annotations

from lsprotocol.types import (
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_OPEN,
    Diagnostic,
    DiagnosticSeverity,
    DidChangeTextDocumentParams,
    DidOpenTextDocumentParams,
    Position,
    PublishDiagnosticsParams,
    Range,
    TextDocumentSyncKind,
)
from pygls.lsp.server import LanguageServer

from tisp import __version__
from tisp.errors import LexError
from tisp.scanner import Scanner

server = LanguageServer("tisp-lsp", __version__, text_document_sync_kind=TextDocumentSyncKind.Full)


def _utf16_len(text: str) -> int:
    return len(text.encode("utf-16-le")) // 2


def _to_diagnostic(err: LexError, lines: list[str]) -> Diagnostic:
    # 1-based code-point positions → 0-based UTF-16 LSP positions
    line = max(0, err.line - 1)
    col = max(0, err.column - 1)
    text = lines[line] if line < len(lines) else ""
    start = _utf16_len(text[:col]) + max(0, col - len(text))
    end = start + max(1, _utf16_len(text[col : col + 1]))
    return Diagnostic(
        range=Range(
            start=Position(line=line, character=start),
            end=Position(line=line, character=end),
        ),
        message=err.message,
        severity=DiagnosticSeverity.Error,
        source="tisp",
        code=err.kind.name,
    )


def _validate(ls: LanguageServer, uri: str) -> None:
    """Scan the document and publish every lexical error as a diagnostic."""
    doc = ls.workspace.get_text_document(uri)
    result = Scanner(doc.source).scan()
    lines = doc.source.split("\n")
    diagnostics = [_to_diagnostic(err, lines) for err in result.errors]

    ls.text_document_publish_diagnostics(
        PublishDiagnosticsParams(uri=uri, diagnostics=diagnostics)
    )


@server.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(ls: LanguageServer, params: DidOpenTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


@server.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(ls: LanguageServer, params: DidChangeTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


def main() -> None:
    server.start_io()
