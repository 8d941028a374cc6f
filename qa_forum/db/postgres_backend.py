"""
qa_forum/db/postgres_backend.py
-------------------------------
Storage backend over a PostgreSQL database, using psycopg2.
Rows come back through ``extras.RealDictCursor`` so they are keyed by column name.
"""

from typing import Any, Optional, Sequence

import psycopg2
from psycopg2 import extras

from qa_forum.db.backend import StatementResult, StorageBackend
from qa_forum.utils.logger import get_logger

logger = get_logger(__name__)


class PostgresBackend(StorageBackend):
    """PostgreSQL implementation of the storage backend."""

    id_column_ddl = "SERIAL PRIMARY KEY"

    def __init__(self, dsn: str, timeout: Optional[float] = None):
        super().__init__(timeout)
        self.dsn = dsn

    def _connect(self):
        """
        Open the connection.

        Raises:
            psycopg2.OperationalError: If the database is unreachable.
        """
        kwargs = {"cursor_factory": extras.RealDictCursor}
        if self.timeout is not None:
            kwargs["connect_timeout"] = max(1, int(self.timeout))
            kwargs["options"] = f"-c statement_timeout={int(self.timeout * 1000)}"
        try:
            return psycopg2.connect(self.dsn, **kwargs)
        except psycopg2.OperationalError as e:
            logger.error(f"Failed to connect to PostgreSQL: {e}")
            raise

    def _run(self, sql: str, params: Sequence[Any]) -> StatementResult:
        with self.connection.cursor() as cur:
            cur.execute(sql, params or None)
            rows = [dict(r) for r in cur.fetchall()] if cur.description else []
            return StatementResult(rows, cur.rowcount, None)

    def _run_script(self, script: str) -> None:
        with self.connection.cursor() as cur:
            cur.execute(script)

    def _prepare_insert(self, sql: str) -> str:
        return sql.rstrip().rstrip(";") + " RETURNING id;"

    def _inserted_id(self, result: StatementResult) -> int:
        return result.rows[0]["id"]

    def _begin(self) -> None:
        # psycopg2 opens a transaction implicitly with the first statement.
        pass

    def _commit(self) -> None:
        self.connection.commit()

    def _rollback(self) -> None:
        self.connection.rollback()

    def __repr__(self) -> str:
        return f"<PostgresBackend(dsn={self.dsn.split('@')[-1]!r})>"
