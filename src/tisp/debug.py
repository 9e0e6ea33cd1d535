"""Human-readable and JSON dumps of scan results."""

from __future__ import annotations

import json
import sys
from typing import Any, TextIO

from tisp.errors import LexError
from tisp.scanner import ScanResult
from tisp.tokens import Token, TokenKind


def dump_tokens(tokens: list[Token], *, file: TextIO = sys.stdout) -> None:
    """Print one ``KIND lexeme line:column`` row per token to *file*."""
    for tok in tokens:
        _dump_token(tok, file)


def _dump_token(tok: Token, f: TextIO) -> None:
    if tok.kind == TokenKind.EOF:
        f.write(f"{tok.kind.name}\n")
        return
    f.write(f"{tok.kind.name} {tok.lexeme!r} {tok.line}:{tok.column}\n")


def dump_errors(
    errors: list[LexError],
    source: str,
    filename: str = "<input>",
    *,
    file: TextIO = sys.stderr,
) -> None:
    """Print each error as a caret report to *file*."""
    for err in errors:
        file.write(err.format(source, filename))
        file.write("\n")


def result_to_json(result: ScanResult) -> dict[str, Any]:
    """Return a JSON-serializable dict for a scan result."""
    return {
        "tokens": [_token_dict(t) for t in result.tokens],
        "errors": [_error_dict(e) for e in result.errors],
    }


def dump_json(result: ScanResult, *, file: TextIO = sys.stdout) -> None:
    json.dump(result_to_json(result), file, indent=2)
    file.write("\n")


def _token_dict(tok: Token) -> dict[str, Any]:
    return {
        "kind": tok.kind.name,
        "lexeme": tok.lexeme,
        "line": tok.line,
        "column": tok.column,
        "offset": tok.offset,
        "end": tok.end,
    }


def _error_dict(err: LexError) -> dict[str, Any]:
    return {
        "kind": err.kind.name,
        "message": err.message,
        "line": err.line,
        "column": err.column,
    }
