"""Tests for the vendor CSV field splitter."""

from __future__ import annotations

import pytest

from ipmetaindex.ingest.splitter import escape_field, join_fields, split_column_values, unescape


class TestSplitColumnValues:
    """Splitting single lines of the vendor dialect."""

    def test_quoted_field_keeps_embedded_delimiter(self) -> None:
        line = '1.9.0.0/16,4788,"TM Net, Internet Service Provider"'

        assert split_column_values(line) == ["1.9.0.0/16", "4788", "TM Net, Internet Service Provider"]

    def test_city_location_row_positions(self) -> None:
        """Empty fields keep their positions so later columns stay addressable."""
        line = '2057192,en,OC,Oceania,AU,Australia,SA,"South Australia",,,Yunta,,Australia/Adelaide,0'

        values = split_column_values(line)

        assert len(values) == 14
        assert values[7] == "South Australia"
        assert values[10] == "Yunta"
        assert values[12] == "Australia/Adelaide"

    def test_trailing_delimiter_yields_empty_field(self) -> None:
        assert split_column_values("a,b,") == ["a", "b", ""]

    def test_empty_line_is_one_empty_field(self) -> None:
        assert split_column_values("") == [""]

    def test_line_without_delimiter_is_one_field(self) -> None:
        assert split_column_values("GeoLite2") == ["GeoLite2"]

    def test_escaped_quote_does_not_end_span(self) -> None:
        assert split_column_values('"say \\"hi\\", ok",x') == ['say "hi", ok', "x"]

    @pytest.mark.parametrize(
        ("line", "expected"),
        [
            ('"a\\nb"', "a\nb"),
            ('"a\\tb"', "a\tb"),
            ('"a\\rb"', "a\rb"),
            ('"a\\0b"', "a\0b"),
            ('"a\\\\b"', "a\\b"),
        ],
    )
    def test_escape_sequences(self, line: str, expected: str) -> None:
        assert split_column_values(line) == [expected]

    def test_star_escape_keeps_backslash(self) -> None:
        assert split_column_values('"a\\*b"') == ["a\\*b"]

    def test_characters_after_closing_quote_are_appended(self) -> None:
        assert split_column_values('"ab"cd,e') == ["abcd", "e"]

    def test_quote_inside_unquoted_field_is_literal(self) -> None:
        assert split_column_values('ab"cd",e') == ['ab"cd"', "e"]

    def test_unterminated_quote_runs_to_end_of_line(self) -> None:
        assert split_column_values('"a,b') == ["a,b"]

    def test_dangling_escape_keeps_backslash(self) -> None:
        assert split_column_values('"abc\\') == ["abc\\"]

    def test_custom_delimiter(self) -> None:
        assert split_column_values('a;"b;c";d', delimiter=";") == ["a", "b;c", "d"]


class TestUnescape:
    """Escape table lookups."""

    def test_known_escapes(self) -> None:
        assert unescape("n") == "\n"
        assert unescape("0") == "\0"

    def test_unknown_character_maps_to_itself(self) -> None:
        assert unescape('"') == '"'
        assert unescape("x") == "x"

    def test_star_is_not_an_escape(self) -> None:
        assert unescape("*") == "\\*"


class TestRoundTrip:
    """Escaping then splitting returns the original values."""

    VALUES = [
        "plain",
        "",
        "with, comma",
        'embedded "quotes"',
        '"leading quote',
        "back\\slash",
        "back\\*star",
        "multi\nline\ttab\rreturn\0nul",
        "Mega Cable, S.A. de C.V.",
    ]

    def test_join_then_split(self) -> None:
        assert split_column_values(join_fields(self.VALUES)) == self.VALUES

    @pytest.mark.parametrize("value", VALUES)
    def test_single_field(self, value: str) -> None:
        assert split_column_values(escape_field(value)) == [value]

    def test_plain_values_are_not_quoted(self) -> None:
        assert escape_field("Oceania") == "Oceania"
        assert escape_field("with, comma") == '"with, comma"'
