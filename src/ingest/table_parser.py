"""Tolerant delimited-text table parser.

This module splits comma-separated, double-quote-quoted feed text
into rows of trimmed string cells. It never fails on malformed input.
"""

from __future__ import annotations


def parse_table(text: str) -> list[list[str]]:
    """Parse delimited text into rows of trimmed cells.

    Quoting starts on a ``"`` and ends on a single ``"``; a doubled
    ``""`` inside quotes is a literal quote. Line breaks inside quotes
    are kept as cell content. Rows made only of empty cells are dropped.

    Args:
        text: Complete feed document.

    Returns:
        Ordered rows of cells.
    """
    rows: list[list[str]] = []
    row: list[str] = []
    cell: list[str] = []
    in_quotes = False
    index = 0
    length = len(text)
    while index < length:
        char = text[index]
        next_char = text[index + 1] if index + 1 < length else ""
        if in_quotes:
            if char == '"' and next_char == '"':
                cell.append('"')
                index += 1
            elif char == '"':
                in_quotes = False
            else:
                cell.append(char)
        elif char == '"':
            in_quotes = True
        elif char == ",":
            row.append("".join(cell).strip())
            cell = []
        elif char in "\r\n":
            row.append("".join(cell).strip())
            _append_row(rows, row)
            row = []
            cell = []
            if char == "\r" and next_char == "\n":
                index += 1
        else:
            cell.append(char)
        index += 1
    if cell or row:
        row.append("".join(cell).strip())
        _append_row(rows, row)
    return rows


def _append_row(rows: list[list[str]], row: list[str]) -> None:
    """Append a row unless every cell is empty."""
    if any(value != "" for value in row):
        rows.append(row)
