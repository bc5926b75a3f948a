"""Minimal LSP server for Monkey: diagnostics only."""

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

from monkey import __version__
from monkey.lexer import tokenize
from monkey.parser import parse
from monkey.tokens import Position as SourcePosition
from monkey.tokens import TokenType

server = LanguageServer(
    "monkey-lsp", __version__, text_document_sync_kind=TextDocumentSyncKind.Full
)


def _range(position: SourcePosition | None, length: int) -> Range:
    """Convert a 1-based source position into a 0-based single-line LSP range."""
    if position is None:
        return Range(start=Position(line=0, character=0), end=Position(line=0, character=0))
    line = position.line - 1
    col = position.column - 1
    return Range(
        start=Position(line=line, character=col),
        end=Position(line=line, character=col + length),
    )


def _validate(ls: LanguageServer, uri: str) -> None:
    """Run the Monkey front end and publish diagnostics."""
    doc = ls.workspace.get_text_document(uri)
    source = doc.source
    diagnostics: list[Diagnostic] = []

    # Syntax errors → Error severity
    _, parse_diagnostics = parse(source)
    for diag in parse_diagnostics:
        diagnostics.append(
            Diagnostic(
                range=_range(diag.position, diag.length),
                message=diag.message,
                severity=DiagnosticSeverity.Error,
                source="monkey",
            )
        )

    # Illegal characters → Warning severity
    for tok in tokenize(source):
        if tok.type == TokenType.ILLEGAL:
            diagnostics.append(
                Diagnostic(
                    range=_range(tok.position, len(tok.literal)),
                    message=f"illegal character '{tok.literal}'",
                    severity=DiagnosticSeverity.Warning,
                    source="monkey",
                )
            )

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
