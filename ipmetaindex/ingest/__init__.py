"""Text-level building blocks: CSV dialect splitting, lexing and canonicalization."""

from .canonical import SharedString, canonical, is_shared
from .lexer import CsvLexer, Token, TokenKind, lex_fields
from .reader import iter_columns
from .splitter import escape_field, join_fields, split_column_values

__all__ = [
    "CsvLexer",
    "SharedString",
    "Token",
    "TokenKind",
    "canonical",
    "escape_field",
    "is_shared",
    "iter_columns",
    "join_fields",
    "lex_fields",
    "split_column_values",
]
