"""Minimal LSP server for Monkey source: lexer diagnostics only."""

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

from monkeylex import __version__
from monkeylex.lexer import tokenize_all
from monkeylex.tokens import LineIndex, TokenType

server = LanguageServer(
    "monkeylex-lsp", __version__, text_document_sync_kind=TextDocumentSyncKind.Full
)


def _range(line: int, column: int, length: int) -> Range:
    # 1-based source positions -> 0-based LSP positions
    return Range(
        start=Position(line=line - 1, character=column - 1),
        end=Position(line=line - 1, character=column - 1 + length),
    )


def _validate(ls: LanguageServer, uri: str) -> None:
    """Scan the document and publish one diagnostic per error or illegal character."""
    doc = ls.workspace.get_text_document(uri)
    source = doc.source
    filename = uri.rsplit("/", 1)[-1] if "/" in uri else uri
    diagnostics: list[Diagnostic] = []

    tokens, errors = tokenize_all(source, filename)

    for exc in errors:
        # Keep the underline on the error's own line
        line_text = exc.text.split("\n", 1)[0]
        diagnostics.append(
            Diagnostic(
                range=_range(exc.position.line, exc.position.column, max(1, len(line_text))),
                message=exc.message,
                severity=DiagnosticSeverity.Error,
                source="monkeylex",
            )
        )

    index = LineIndex(source)
    for tok in tokens:
        if tok.type is not TokenType.ILLEGAL:
            continue
        pos = index.position(tok.offset)
        diagnostics.append(
            Diagnostic(
                range=_range(pos.line, pos.column, 1),
                message=f"illegal character {tok.value!r}",
                severity=DiagnosticSeverity.Warning,
                source="monkeylex",
            )
        )

    diagnostics.sort(key=lambda d: (d.range.start.line, d.range.start.character))
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
