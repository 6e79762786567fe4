"""CSV tokenizer for Toast exports.

Single left-to-right scan with one character of lookahead. Quoted fields may
contain commas, newlines and doubled quotes. CRLF, LF and bare CR all end a
row. Rows whose fields are all empty are dropped, which is how trailing blank
lines disappear. Fields are returned untrimmed.
"""

from __future__ import annotations

from toastpay.core.types import Row


def _has_content(row: Row) -> bool:
    return any(field.strip() for field in row)


def tokenize(text: str) -> list[Row]:
    """Split raw file text into rows of string fields."""
    rows: list[Row] = []
    row: Row = []
    field: list[str] = []
    in_quotes = False
    i = 0
    n = len(text)

    while i < n:
        char = text[i]
        if char == '"':
            if in_quotes and i + 1 < n and text[i + 1] == '"':
                field.append('"')
                i += 1
            else:
                in_quotes = not in_quotes
        elif char == "," and not in_quotes:
            row.append("".join(field))
            field = []
        elif char in "\r\n" and not in_quotes:
            if char == "\r" and i + 1 < n and text[i + 1] == "\n":
                i += 1
            row.append("".join(field))
            if _has_content(row):
                rows.append(row)
            row = []
            field = []
        else:
            field.append(char)
        i += 1

    # no trailing newline
    if field or row:
        row.append("".join(field))
        if _has_content(row):
            rows.append(row)

    return rows
