"""Tests for the escape-aware lexer."""

from __future__ import annotations

import pytest

from ipmetaindex.ingest.lexer import CsvLexer, Token, TokenKind, lex_fields
from ipmetaindex.ingest.splitter import split_column_values


class TestCsvLexer:
    """Token stream produced for single lines."""

    def test_plain_and_quoted_tokens(self) -> None:
        tokens = list(CsvLexer('a,"b,c"'))

        assert tokens == [
            Token(TokenKind.STRING, "a"),
            Token(TokenKind.DELIMITER, ","),
            Token(TokenKind.STRING, "b,c"),
        ]

    def test_escape_inside_quotes(self) -> None:
        tokens = [token for token in CsvLexer('"x\\ty"') if token.kind is TokenKind.STRING]

        assert [token.value for token in tokens] == ["x\ty"]

    def test_adjacent_strings_are_separate_tokens(self) -> None:
        tokens = list(CsvLexer('"ab"cd'))

        assert tokens == [Token(TokenKind.STRING, "ab"), Token(TokenKind.STRING, "cd")]

    def test_quote_after_closed_span_is_literal(self) -> None:
        tokens = list(CsvLexer('"ab""cd",e'))

        assert tokens == [
            Token(TokenKind.STRING, "ab"),
            Token(TokenKind.STRING, '"cd"'),
            Token(TokenKind.DELIMITER, ","),
            Token(TokenKind.STRING, "e"),
        ]

    def test_empty_input_has_no_tokens(self) -> None:
        lexer = CsvLexer("")

        assert lexer.next_token() is None
        assert list(lexer) == []

    def test_next_token_advances_position(self) -> None:
        lexer = CsvLexer("a,b")

        assert lexer.next_token() == Token(TokenKind.STRING, "a")
        assert lexer.position == 1
        assert lexer.next_token() == Token(TokenKind.DELIMITER, ",")
        assert lexer.next_token() == Token(TokenKind.STRING, "b")
        assert lexer.next_token() is None

    def test_dangling_escape_keeps_backslash(self) -> None:
        assert [token.value for token in CsvLexer('"abc\\')] == ["abc\\"]


class TestLexFieldsMatchesSplitter:
    """Grouping tokens into fields gives the splitter's answer."""

    @pytest.mark.parametrize(
        "line",
        [
            '1.9.0.0/16,4788,"TM Net, Internet Service Provider"',
            '2057192,en,OC,Oceania,AU,Australia,SA,"South Australia",,,Yunta,,Australia/Adelaide,0',
            "a,b,",
            "",
            '"ab"cd,e',
            'ab"cd",e',
            '"ab""cd",e',
            '"a\\*b","c\\\\d"',
            '"say \\"hi\\""',
        ],
    )
    def test_same_fields(self, line: str) -> None:
        assert lex_fields(line) == split_column_values(line)
