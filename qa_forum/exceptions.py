"""
qa_forum/exceptions.py
----------------------
Error taxonomy of the data-access layer.

Backend failures (``sqlite3.Error``, ``psycopg2.Error``) are never wrapped:
they reach the caller unchanged. Everything raised by the layer itself
derives from ``ForumError``.
"""

from typing import Any, Mapping, Optional


def _describe(criteria: Mapping[str, Any]) -> str:
    return ", ".join(f"{k}={v!r}" for k, v in criteria.items())


class ForumError(Exception):
    """Base class for errors raised by the forum data-access layer."""


class RecordNotFoundError(ForumError):
    """A lookup that must produce a row produced none."""

    def __init__(
        self, table: str, criteria: Mapping[str, Any], message: Optional[str] = None
    ):
        self.table = table
        self.criteria = dict(criteria)
        super().__init__(message or f"No row in '{table}' matching {_describe(criteria)}")


class NoParentReplyError(RecordNotFoundError):
    """``parent_reply`` was requested for a top-level reply."""

    def __init__(self, reply_id: Optional[int]):
        self.reply_id = reply_id
        super().__init__(
            "replies",
            {"parent_reply_id": None},
            f"Reply #{reply_id} is a top-level reply and has no parent",
        )


class AmbiguousMatchError(ForumError):
    """A single-result lookup matched more than one row."""

    def __init__(self, table: str, criteria: Mapping[str, Any], count: int):
        self.table = table
        self.criteria = dict(criteria)
        self.count = count
        super().__init__(
            f"{count} rows in '{table}' match {_describe(criteria)}, expected one"
        )


class RowMappingError(ForumError):
    """A row returned by the backend cannot be mapped onto an entity."""

    def __init__(self, table: str, column: str, reason: str):
        self.table = table
        self.column = column
        super().__init__(f"Bad row from '{table}': column '{column}' {reason}")


class ReplyCycleError(ForumError):
    """Saving a reply would make it its own ancestor."""


class ConfigurationError(ForumError, ValueError):
    """The storage configuration cannot be turned into a backend."""
