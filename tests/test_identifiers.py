"""Test identifier lexing, keyword lookup, and boundaries."""

import pytest

from tisp.scanner import scan
from tisp.tokens import TokenKind

from .conftest import assert_kinds, assert_lexemes


class TestIdentifierLexing:
    def test_simple_word(self, lex):
        tokens = lex("foo")
        assert_kinds(tokens, [TokenKind.IDENTIFIER])
        assert_lexemes(tokens, ["foo"])

    def test_mixed_case(self, lex):
        assert_lexemes(lex("FooBar"), ["FooBar"])

    def test_digits_end_identifier(self, lex):
        tokens = lex("h2")
        assert_kinds(tokens, [TokenKind.IDENTIFIER, TokenKind.INTEGER_LITERAL])
        assert_lexemes(tokens, ["h", "2"])

    def test_underscore_not_allowed(self):
        tokens, errors = scan("foo_bar")
        assert_kinds(tokens, [TokenKind.IDENTIFIER, TokenKind.IDENTIFIER, TokenKind.EOF])
        assert_lexemes(tokens[:-1], ["foo", "bar"])
        assert [e.message for e in errors] == ["Unexpected character _"]

    def test_non_ascii_letter_rejected(self):
        tokens, errors = scan("café")
        assert_lexemes(tokens[:-1], ["caf"])
        assert [e.message for e in errors] == ["Unexpected character é"]

    def test_position(self, lex):
        tok = lex("(  name")[1]
        assert (tok.line, tok.column) == (1, 4)
        assert (tok.offset, tok.end) == (3, 7)


class TestKeywords:
    @pytest.mark.parametrize(
        ("source", "kind"),
        [("if", TokenKind.IF), ("and", TokenKind.AND), ("or", TokenKind.OR)],
    )
    def test_keyword(self, source, kind):
        tokens, errors = scan(source)
        assert_kinds(tokens, [kind, TokenKind.EOF])
        assert tokens[0].lexeme == source
        assert errors == []

    @pytest.mark.parametrize("source", ["IF", "And", "oR"])
    def test_case_sensitive(self, lex, source):
        assert_kinds(lex(source), [TokenKind.IDENTIFIER])

    @pytest.mark.parametrize("source", ["iff", "i", "andor", "ifand", "orange", "nor"])
    def test_exact_match_only(self, lex, source):
        tokens = lex(source)
        assert_kinds(tokens, [TokenKind.IDENTIFIER])
        assert_lexemes(tokens, [source])

    def test_keyword_expression(self, lex):
        tokens = lex("if (a and b) or !c")
        assert_kinds(
            tokens,
            [
                TokenKind.IF,
                TokenKind.LEFT_PAREN,
                TokenKind.IDENTIFIER,
                TokenKind.AND,
                TokenKind.IDENTIFIER,
                TokenKind.RIGHT_PAREN,
                TokenKind.OR,
                TokenKind.EXCLAMATION_MARK,
                TokenKind.IDENTIFIER,
            ],
        )
