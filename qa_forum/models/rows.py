"""
models/rows.py
--------------
Field-by-field readers used by each entity's ``from_row`` mapping.
Every reader fails with RowMappingError instead of letting a missing or
mistyped column leak into a domain object.
"""

from typing import Any, Mapping, Optional

from qa_forum.exceptions import RowMappingError


def _get(row: Mapping[str, Any], column: str, table: str) -> Any:
    try:
        return row[column]
    except (KeyError, IndexError):
        raise RowMappingError(table, column, "is missing") from None


def require_int(row: Mapping[str, Any], column: str, table: str) -> int:
    """Read a non-null integer column."""
    value = _get(row, column, table)
    if value is None:
        raise RowMappingError(table, column, "is NULL")
    if isinstance(value, bool) or not isinstance(value, int):
        raise RowMappingError(table, column, f"is not an integer ({value!r})")
    return value


def optional_int(row: Mapping[str, Any], column: str, table: str) -> Optional[int]:
    """Read a nullable integer column."""
    if _get(row, column, table) is None:
        return None
    return require_int(row, column, table)


def require_str(row: Mapping[str, Any], column: str, table: str) -> str:
    """Read a non-null text column."""
    value = _get(row, column, table)
    if not isinstance(value, str):
        raise RowMappingError(table, column, f"is not text ({value!r})")
    return value
