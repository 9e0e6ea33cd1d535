"""Tisp scanner — converts source text into a flat token stream."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import NamedTuple

from tisp.errors import LexError, LexErrorKind, ScanError
from tisp.tokens import KEYWORDS, PUNCTUATION, Token, TokenKind, is_alpha, is_digit

logger = logging.getLogger(__name__)

# Skipped between tokens; newline bookkeeping happens in _advance()
_WHITESPACE = frozenset(" \t\r\n")


@dataclass(slots=True)
class _Cursor:
    """Mutable scan position. One instance per Scanner, updated in place."""

    start: int = 0
    current: int = 0
    line: int = 1
    column: int = 0
    start_line: int = 1
    start_column: int = 0


class ScanResult(NamedTuple):
    """Tokens and lexical errors from one scan.

    Unpacks as ``tokens, errors = scan(source)``.
    """

    tokens: list[Token]
    errors: list[LexError]

    @property
    def ok(self) -> bool:
        return not self.errors

    def raise_for_errors(self, source: str, filename: str = "<input>") -> None:
        """Raise ScanError if any lexical errors were recorded for *source*."""
        if self.errors:
            raise ScanError(list(self.errors), source, filename)


class Scanner:
    """Tokenize Tisp source text. Single-shot: call scan() once per instance."""

    def __init__(self, source: str) -> None:
        self._source = source
        self._cursor = _Cursor()
        self._tokens: list[Token] = []
        self._errors: list[LexError] = []
        self._scanned = False

    def scan(self) -> ScanResult:
        """Scan the full source and return its tokens and errors."""
        if self._scanned:
            raise RuntimeError("Scanner.scan() can only run once; create a new Scanner")
        self._scanned = True

        while not self._at_end():
            self._mark_start()
            self._scan_token()

        end = len(self._source)
        self._tokens.append(Token(TokenKind.EOF, "", 0, 0, end, end))
        logger.debug(
            "scanned %d characters: %d tokens, %d errors",
            end,
            len(self._tokens),
            len(self._errors),
        )
        return ScanResult(self._tokens, self._errors)

    # ------------------------------------------------------------------
    # Cursor helpers
    # ------------------------------------------------------------------

    def _at_end(self) -> bool:
        return self._cursor.current >= len(self._source)

    def _peek(self) -> str:
        if self._at_end():
            return ""
        return self._source[self._cursor.current]

    def _advance(self) -> str:
        cur = self._cursor
        ch = self._source[cur.current]
        cur.current += 1
        if ch == "\n":
            cur.line += 1
            cur.column = 0
        else:
            cur.column += 1
        return ch

    def _mark_start(self) -> None:
        cur = self._cursor
        cur.start = cur.current
        cur.start_line = cur.line
        cur.start_column = cur.column + 1

    def _emit(self, kind: TokenKind, lexeme: str | None = None) -> None:
        cur = self._cursor
        if lexeme is None:
            lexeme = self._source[cur.start : cur.current]
        self._tokens.append(
            Token(kind, lexeme, cur.start_line, cur.start_column, cur.start, cur.current)
        )

    def _error(self, kind: LexErrorKind, message: str, line: int, column: int) -> None:
        self._errors.append(LexError(kind, message, line, column))

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def _scan_token(self) -> None:
        ch = self._advance()

        kind = PUNCTUATION.get(ch)
        if kind is not None:
            self._emit(kind)
            return

        if ch == '"':
            self._lex_string()
            return

        if ch in _WHITESPACE:
            return

        if is_digit(ch):
            self._lex_integer()
            return

        if is_alpha(ch):
            self._lex_identifier()
            return

        cur = self._cursor
        self._error(
            LexErrorKind.UNEXPECTED_CHARACTER,
            f"Unexpected character {ch}",
            cur.start_line,
            cur.start_column,
        )

    # ------------------------------------------------------------------
    # Literals
    # ------------------------------------------------------------------

    def _lex_string(self) -> None:
        # No escapes: the first quote after the opening one closes the literal
        while not self._at_end() and self._peek() != '"':
            self._advance()

        cur = self._cursor
        if self._at_end():
            self._error(
                LexErrorKind.UNTERMINATED_STRING,
                "unterminated string literal",
                cur.line,
                cur.column + 1,
            )
            return

        self._advance()  # consume closing quote
        self._emit(TokenKind.STRING_LITERAL, self._source[cur.start + 1 : cur.current - 1])

    def _lex_integer(self) -> None:
        while is_digit(self._peek()):
            self._advance()
        self._emit(TokenKind.INTEGER_LITERAL)

    def _lex_identifier(self) -> None:
        while is_alpha(self._peek()):
            self._advance()
        text = self._source[self._cursor.start : self._cursor.current]
        self._emit(KEYWORDS.get(text, TokenKind.IDENTIFIER), text)


def scan(source: str) -> ScanResult:
    """Convenience function: scan source text with a fresh Scanner."""
    return Scanner(source).scan()
