"""
qa_forum/db/sqlite_backend.py
-----------------------------
Storage backend over a single SQLite database file (or ``:memory:``).
"""

import sqlite3
from typing import Any, Optional, Sequence

from qa_forum.db.backend import StatementResult, StorageBackend


class SQLiteBackend(StorageBackend):
    """
    SQLite implementation of the storage backend.

    The connection runs in autocommit mode; ``transaction()`` scopes issue an
    explicit ``BEGIN``. Foreign keys declared in the schema are not enforced
    (SQLite's default), so dangling references are stored as given.
    """

    id_column_ddl = "INTEGER PRIMARY KEY AUTOINCREMENT"

    def __init__(self, path: str = "questions.db", timeout: Optional[float] = None):
        super().__init__(timeout)
        self.path = path

    def _connect(self) -> sqlite3.Connection:
        kwargs = {"isolation_level": None}
        if self.timeout is not None:
            kwargs["timeout"] = self.timeout
        conn = sqlite3.connect(self.path, **kwargs)
        conn.row_factory = sqlite3.Row
        return conn

    def _run(self, sql: str, params: Sequence[Any]) -> StatementResult:
        cur = self.connection.execute(sql.replace("%s", "?"), params)
        try:
            rows = [dict(r) for r in cur.fetchall()] if cur.description else []
            return StatementResult(rows, cur.rowcount, cur.lastrowid)
        finally:
            cur.close()

    def _run_script(self, script: str) -> None:
        # executescript() commits any open transaction before it runs.
        self.connection.executescript(script)

    def _begin(self) -> None:
        self.connection.execute("BEGIN")

    def _commit(self) -> None:
        self.connection.commit()

    def _rollback(self) -> None:
        self.connection.rollback()

    def __repr__(self) -> str:
        return f"<SQLiteBackend(path={self.path!r})>"
