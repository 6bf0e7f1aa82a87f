"""
Helpers for querying sheet data that has already been fetched.

A table is a list of rows. Row 0 is the header row. Rows can be ragged:
the Sheets API leaves off trailing empty cells, so ``row[i]`` may not exist.
Every comparison goes through ``normalize``. Returned rows are the original,
unmodified values.
"""
from typing import List, Optional, Sequence

Row = List[str]
Table = List[Row]


def normalize(value: Optional[str]) -> str:
    if value is None:
        return ""
    return str(value).strip().lower()


def cell(row: Sequence[str], index: int) -> Optional[str]:
    if 0 <= index < len(row):
        return row[index]
    return None


def resolve_column(header: Sequence[str], name: str) -> Optional[int]:
    """Index of the first header matching ``name`` ignoring case and whitespace, else None."""
    target = normalize(name)
    for index, heading in enumerate(header or []):
        if normalize(heading) == target:
            return index
    return None


def filter_by_column(table: Table, column: str, value: str) -> Table:
    """Header plus the rows whose ``column`` cell matches ``value``.

    An empty or header-only table, or a header missing ``column``, gives an
    empty table instead of an error.
    """
    if len(table) <= 1:
        return []
    header = table[0]
    index = resolve_column(header, column)
    if index is None:
        return []

    wanted = normalize(value)
    return [header] + [row for row in table[1:] if normalize(cell(row, index)) == wanted]


def distinct_column_values(table: Table, column: str, raw: bool = False) -> List[str]:
    """Distinct non-empty values of ``column``, in the order they first appear.

    Values are deduplicated by their normalized form. By default the
    normalized form is returned. With ``raw=True`` the first original cell
    seen for each key is returned instead.
    """
    if len(table) <= 1:
        return []
    index = resolve_column(table[0], column)
    if index is None:
        return []

    seen = {}
    for row in table[1:]:
        original = cell(row, index)
        key = normalize(original)
        if key and key not in seen:
            seen[key] = original
    return list(seen.values()) if raw else list(seen.keys())


def cross_validate(table: Table, column: str, candidate: Optional[str]) -> bool:
    return normalize(candidate) in distinct_column_values(table, column)
