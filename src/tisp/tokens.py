"""Token kinds, token values, and character classification helpers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from types import MappingProxyType


class TokenKind(Enum):
    # Single-character punctuation
    LEFT_PAREN = auto()  # (
    RIGHT_PAREN = auto()  # )
    PIPE = auto()  # |
    DOUBLE_QUOTE = auto()  # " (reserved; a quote always opens a string literal)
    QUESTION_MARK = auto()  # ?
    EXCLAMATION_MARK = auto()  # !
    DOUBLE_COLON = auto()  # :

    # Literals
    STRING_LITERAL = auto()  # "..." (lexeme excludes the quotes)
    INTEGER_LITERAL = auto()  # [0-9]+

    IDENTIFIER = auto()  # [A-Za-z]+

    # Keywords
    IF = auto()
    AND = auto()
    OR = auto()

    EOF = auto()


@dataclass(frozen=True, slots=True)
class Token:
    """A classified slice of source text.

    ``line`` and ``column`` are 1-based and point at the token's first
    character. ``offset``/``end`` delimit the full matched span, so for a
    string literal ``source[offset:end]`` still includes both quotes.
    """

    kind: TokenKind
    lexeme: str
    line: int
    column: int
    offset: int
    end: int

    def __str__(self) -> str:
        return f"{self.kind.name} {self.lexeme}"


KEYWORDS = MappingProxyType(
    {
        "if": TokenKind.IF,
        "and": TokenKind.AND,
        "or": TokenKind.OR,
    }
)

PUNCTUATION = MappingProxyType(
    {
        "|": TokenKind.PIPE,
        "(": TokenKind.LEFT_PAREN,
        ")": TokenKind.RIGHT_PAREN,
        "?": TokenKind.QUESTION_MARK,
        "!": TokenKind.EXCLAMATION_MARK,
        ":": TokenKind.DOUBLE_COLON,
    }
)


def is_digit(ch: str) -> bool:
    """Return True if ch is an ASCII decimal digit."""
    return len(ch) == 1 and "0" <= ch <= "9"


def is_alpha(ch: str) -> bool:
    """Return True if ch is an ASCII letter."""
    return len(ch) == 1 and ("a" <= ch <= "z" or "A" <= ch <= "Z")
