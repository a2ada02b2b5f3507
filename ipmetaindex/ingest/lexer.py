"""Escape-aware tokenizer for delimited values.

A more general sibling of :func:`~ipmetaindex.ingest.splitter.split_column_values`:
instead of returning fields it yields delimiter and string tokens, which lets
callers see where quoted segments begin and end. Escape handling is shared
with the splitter through :func:`~ipmetaindex.ingest.splitter.unescape`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Optional

from .splitter import BACKSLASH, DELIMITER, QUOTE, unescape


class TokenKind(str, Enum):
    """Kinds of token produced by :class:`CsvLexer`."""

    DELIMITER = "delimiter"
    STRING = "string"


@dataclass(slots=True, frozen=True)
class Token:
    """A lexed token; ``value`` holds the unescaped text of string tokens."""

    kind: TokenKind
    value: str = ""


class _State(Enum):
    PLAIN = "plain"
    QUOTED = "quoted"
    ESCAPE = "quoted-pending-escape"


class CsvLexer:
    """Character-position state machine over one input string.

    A quote opens a quoted token only at the start of a field; anywhere else it
    is an ordinary character, as in the field splitter.

    Example:
        >>> [t.value for t in CsvLexer('a,"b\\\\tc"') if t.kind is TokenKind.STRING]
        ['a', 'b\\tc']
    """

    def __init__(self, text: str, delimiter: str = DELIMITER) -> None:
        """Create a lexer positioned at the start of ``text``."""
        self.text = text
        self.delimiter = delimiter
        self.position = 0
        self.at_field_start = True

    def __iter__(self) -> Iterator[Token]:
        token = self.next_token()
        while token is not None:
            yield token
            token = self.next_token()

    def next_token(self) -> Optional[Token]:
        """Return the next token, or None once the input is exhausted."""
        if self.position >= len(self.text):
            return None

        ch = self.text[self.position]
        if ch == self.delimiter:
            self.position += 1
            self.at_field_start = True
            return Token(TokenKind.DELIMITER, ch)
        if ch == QUOTE and self.at_field_start:
            self.at_field_start = False
            self.position += 1
            return Token(TokenKind.STRING, self._read(_State.QUOTED))
        self.at_field_start = False
        return Token(TokenKind.STRING, self._read(_State.PLAIN))

    def _read(self, state: _State) -> str:
        out: List[str] = []
        text = self.text
        while self.position < len(text):
            ch = text[self.position]
            if state is _State.PLAIN:
                if ch == self.delimiter:
                    break
                out.append(ch)
            elif state is _State.ESCAPE:
                out.append(unescape(ch))
                state = _State.QUOTED
            elif ch == BACKSLASH:
                state = _State.ESCAPE
            elif ch == QUOTE:
                self.position += 1
                break
            else:
                out.append(ch)
            self.position += 1

        if state is _State.ESCAPE:
            out.append(BACKSLASH)
        return "".join(out)


def lex_fields(text: str, delimiter: str = DELIMITER) -> List[str]:
    """Group lexer output into field values.

    Adjacent string tokens belong to one field, so the result matches
    :func:`~ipmetaindex.ingest.splitter.split_column_values` for the same line.
    """
    fields: List[str] = []
    current: List[str] = []
    for token in CsvLexer(text, delimiter):
        if token.kind is TokenKind.DELIMITER:
            fields.append("".join(current))
            current = []
        else:
            current.append(token.value)
    fields.append("".join(current))
    return fields


__all__ = ["TokenKind", "Token", "CsvLexer", "lex_fields"]
