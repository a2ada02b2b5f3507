"""Field splitter for the vendor CSV dialect.

The dialect is comma separated with double-quoted spans that may contain the
delimiter. Inside a quoted span a backslash escapes the next character, so a
literal quote never ends the span. Fields that start unquoted are taken
verbatim up to the next delimiter.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

DELIMITER = ","
QUOTE = '"'
BACKSLASH = "\\"

# Characters following a backslash inside a quoted span. A value of None marks
# a sequence that is not an escape: the backslash and the character are kept.
ESCAPE_TABLE = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "0": "\0",
    "*": None,
}

_REVERSE_ESCAPES = {"\n": "\\n", "\t": "\\t", "\r": "\\r", "\0": "\\0", QUOTE: '\\"', BACKSLASH: "\\\\"}


def unescape(ch: str) -> str:
    """Return the text an escaped ``ch`` stands for."""
    if ch not in ESCAPE_TABLE:
        return ch
    mapped: Optional[str] = ESCAPE_TABLE[ch]
    if mapped is None:
        return BACKSLASH + ch
    return mapped


def split_column_values(line: str, delimiter: str = DELIMITER) -> List[str]:
    """Split one line into its field values.

    Args:
        line: A single line without its terminator
        delimiter: Field separator character

    Returns:
        Field values in order. A trailing delimiter yields a trailing empty
        field; a line without delimiters yields exactly one field.

    Example:
        >>> split_column_values('1.9.0.0/16,4788,"TM Net, Internet Service Provider"')
        ['1.9.0.0/16', '4788', 'TM Net, Internet Service Provider']
    """
    fields: List[str] = []
    current: List[str] = []
    at_field_start = True
    in_quotes = False
    escaped = False

    for ch in line:
        if in_quotes:
            if escaped:
                current.append(unescape(ch))
                escaped = False
            elif ch == BACKSLASH:
                escaped = True
            elif ch == QUOTE:
                in_quotes = False
            else:
                current.append(ch)
            continue

        if ch == delimiter:
            fields.append("".join(current))
            current = []
            at_field_start = True
        elif ch == QUOTE and at_field_start:
            in_quotes = True
            at_field_start = False
        else:
            current.append(ch)
            at_field_start = False

    if escaped:
        current.append(BACKSLASH)
    fields.append("".join(current))
    return fields


def escape_field(value: str, delimiter: str = DELIMITER) -> str:
    """Quote and escape ``value`` so that splitting returns it unchanged."""
    needs_quotes = (
        delimiter in value
        or value.startswith(QUOTE)
        or any(ch in _REVERSE_ESCAPES for ch in value)
    )
    if not needs_quotes:
        return value
    escaped = "".join(_REVERSE_ESCAPES.get(ch, ch) for ch in value)
    return f"{QUOTE}{escaped}{QUOTE}"


def join_fields(values: Iterable[str], delimiter: str = DELIMITER) -> str:
    """Inverse of :func:`split_column_values` for arbitrary field values."""
    return delimiter.join(escape_field(value, delimiter) for value in values)


__all__ = ["ESCAPE_TABLE", "unescape", "split_column_values", "escape_field", "join_fields"]
