"""
Parser for comma-separated sheet exports.

Sheet exports are edited by hand, so the parser never rejects input:
    - A leading byte-order marker is dropped
    - Fields may be quoted with ", and "" inside quotes is a literal quote
    - Rows end at \\n, \\r\\n or a bare \\r
    - Blank rows (every cell empty) are skipped
    - An unterminated quote swallows the rest of the input as field content

Example:
    name en,notes en
    Mew,"He said ""hi"", ok"

    -> [["name en", "notes en"], ["Mew", 'He said "hi", ok']]
"""

BOM = "\ufeff"
QUOTE = '"'
DELIMITER = ","


def strip_bom(text: str) -> str:
    """Remove a leading byte-order marker, if any."""
    if text.startswith(BOM):
        return text[1:]
    return text


def parse_rows(text: str) -> list[list[str]]:
    """
    Split delimited text into rows of trimmed cells.

    Args:
        text: Raw sheet export

    Returns:
        List of rows, each a list of cell strings. Empty list for empty input.
    """
    text = strip_bom(text or "")
    rows: list[list[str]] = []
    row: list[str] = []
    field: list[str] = []
    in_quotes = False
    i = 0
    length = len(text)

    while i < length:
        ch = text[i]

        if in_quotes:
            if ch == QUOTE:
                if i + 1 < length and text[i + 1] == QUOTE:
                    field.append(QUOTE)
                    i += 2
                    continue
                in_quotes = False
            else:
                field.append(ch)
            i += 1
            continue

        if ch == QUOTE:
            in_quotes = True
        elif ch == DELIMITER:
            row.append("".join(field).strip())
            field = []
        elif ch in "\r\n":
            # \r\n counts as a single break
            if ch == "\r" and i + 1 < length and text[i + 1] == "\n":
                i += 1
            row.append("".join(field).strip())
            field = []
            _append_row(rows, row)
            row = []
        else:
            field.append(ch)
        i += 1

    row.append("".join(field).strip())
    _append_row(rows, row)
    return rows


def _append_row(rows: list[list[str]], row: list[str]) -> None:
    """Keep the row unless every cell is empty."""
    if any(cell for cell in row):
        rows.append(row)
