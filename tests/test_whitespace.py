"""Test whitespace skipping, newlines, and line/column tracking."""

import pytest

from tisp.scanner import scan
from tisp.tokens import TokenKind

from .conftest import assert_kinds


class TestSkipping:
    @pytest.mark.parametrize("source", ["", " ", "\t\t", "\r", "\n", " \t\r\n \n", "\r\n\r\n"])
    def test_whitespace_only(self, source):
        tokens, errors = scan(source)
        assert_kinds(tokens, [TokenKind.EOF])
        assert errors == []

    def test_spaces_between_tokens(self, lex):
        tokens = lex("  a   b  ")
        assert_kinds(tokens, [TokenKind.IDENTIFIER, TokenKind.IDENTIFIER])
        assert [t.column for t in tokens] == [3, 7]

    def test_tab_counts_as_one_column(self, lex):
        tokens = lex("\ta")
        assert tokens[0].column == 2


class TestNewlines:
    def test_identifier_after_newline(self, lex):
        tokens = lex("\na")
        assert tokens[0].line == 2
        assert tokens[0].column == 1

    def test_column_resets_per_line(self, lex):
        tokens = lex("ab\n  cd")
        assert [(t.line, t.column) for t in tokens] == [(1, 1), (2, 3)]

    def test_multiple_newlines(self, lex):
        tokens = lex("\n\n\n(")
        assert tokens[0].line == 4

    def test_crlf_line_endings(self, lex):
        tokens = lex("a\r\nb")
        assert [(t.line, t.column) for t in tokens] == [(1, 1), (2, 1)]

    def test_many_lines_do_not_wrap(self, lex):
        tokens = lex("\n" * 300 + "x")
        assert tokens[0].line == 301

    def test_long_line_does_not_wrap(self, lex):
        tokens = lex(" " * 1000 + "x")
        assert tokens[0].column == 1001
