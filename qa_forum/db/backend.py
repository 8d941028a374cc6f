"""
qa_forum/db/backend.py
----------------------
The Storage Backend contract consumed by every repository.

A backend owns exactly one connection, opened lazily on first use and kept
for the backend's lifetime. Outside a ``transaction()`` scope every statement
is its own atomic round-trip: committed right away, rolled back on failure.
Inside a scope nothing is committed until the outermost scope exits cleanly.

Queries are written with ``%s`` placeholders; implementations translate to
their driver's paramstyle when it differs.

Concurrent use of one backend from several threads is not coordinated here.
"""

from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Any, Callable, Iterator, NamedTuple, Optional, Sequence

from qa_forum.utils.logger import get_logger

logger = get_logger(__name__)

Row = dict[str, Any]


class StatementResult(NamedTuple):
    """What a single statement produced."""
    rows: list[Row]
    rowcount: int
    lastrowid: Optional[int]


class StorageBackend(ABC):
    """Interface that all storage backends must implement."""

    #: DDL fragment for an auto-generated integer primary key.
    id_column_ddl: str = "INTEGER PRIMARY KEY"

    def __init__(self, timeout: Optional[float] = None):
        self.timeout = timeout
        self._conn = None
        self._depth = 0
        self._last_insert_id: Optional[int] = None
        self._rollback_hooks: list[Callable[[], None]] = []

    # ── Driver hooks ──────────────────────────────────────

    @abstractmethod
    def _connect(self):
        """Open and return a new driver connection."""

    @abstractmethod
    def _run(self, sql: str, params: Sequence[Any]) -> StatementResult:
        """Execute one statement on the open connection."""

    @abstractmethod
    def _run_script(self, script: str) -> None:
        """Execute several ``;``-separated statements."""

    @abstractmethod
    def _begin(self) -> None:
        """Start a transaction scope."""

    @abstractmethod
    def _commit(self) -> None:
        """Make pending work durable."""

    @abstractmethod
    def _rollback(self) -> None:
        """Discard pending work."""

    def _prepare_insert(self, sql: str) -> str:
        """Rewrite an INSERT so that its result carries the generated id."""
        return sql

    def _inserted_id(self, result: StatementResult) -> int:
        return result.lastrowid

    # ── Connection lifecycle ──────────────────────────────

    @property
    def connection(self):
        """The driver connection, opened on first access."""
        if self._conn is None:
            self._conn = self._connect()
            logger.info(f"{type(self).__name__} connection opened.")
        return self._conn

    @property
    def in_transaction(self) -> bool:
        return self._depth > 0

    def close(self) -> None:
        """Close the connection (a later call reopens it)."""
        if self._conn is not None:
            self._conn.close()
            self._conn = None
            logger.info(f"{type(self).__name__} connection closed.")

    # ── Public contract ───────────────────────────────────

    def execute(self, sql: str, params: Sequence[Any] = ()) -> list[Row]:
        """
        Run a parameterized statement and return its rows.

        Args:
            sql: Statement text with ``%s`` placeholders.
            params: Positional parameters, one per placeholder.

        Returns:
            Rows as dicts keyed by column name (empty for non-queries).
        """
        return self._statement(sql, params).rows

    def execute_update(self, sql: str, params: Sequence[Any] = ()) -> int:
        """Run an UPDATE/DELETE and return the number of affected rows."""
        return self._statement(sql, params).rowcount

    def insert(self, sql: str, params: Sequence[Any] = ()) -> int:
        """
        Run an INSERT and return the identifier the backend generated.

        The id is also remembered for ``last_insert_id()``.
        """
        result = self._statement(self._prepare_insert(sql), params)
        self._last_insert_id = self._inserted_id(result)
        return self._last_insert_id

    def last_insert_id(self) -> Optional[int]:
        """Identifier generated by the most recent ``insert`` on this backend."""
        return self._last_insert_id

    def execute_script(self, script: str) -> None:
        """Run multi-statement DDL (used by the schema provisioner)."""
        try:
            self._run_script(script)
            if not self.in_transaction:
                self._commit()
        except Exception as e:
            if not self.in_transaction and self._conn is not None:
                self._rollback()
            logger.error(f"Script failed: {e}")
            raise

    @contextmanager
    def transaction(self) -> Iterator["StorageBackend"]:
        """
        Scoped transaction. Nested scopes join the outermost one.

        Commits when the outermost scope exits normally; rolls back and
        re-raises when any exception escapes it.
        """
        outermost = self._depth == 0
        if outermost:
            self._begin()
        self._depth += 1
        try:
            yield self
        except BaseException:
            self._depth -= 1
            if outermost:
                self._rollback()
                self._run_rollback_hooks()
                logger.warning("Transaction rolled back.")
            raise
        else:
            self._depth -= 1
            if outermost:
                try:
                    self._commit()
                except Exception:
                    self._run_rollback_hooks()
                    raise
                self._rollback_hooks.clear()

    def on_rollback(self, hook: Callable[[], None]) -> None:
        """
        Register a callback for when the open transaction scope rolls back.

        Used to undo in-memory effects of discarded writes, such as an id
        adopted from an insert. Hooks are dropped once the scope commits.
        Outside a scope the hook is ignored: every statement is already final.
        """
        if self.in_transaction:
            self._rollback_hooks.append(hook)

    def _run_rollback_hooks(self) -> None:
        hooks, self._rollback_hooks = self._rollback_hooks, []
        for hook in reversed(hooks):
            hook()

    # ── Internals ─────────────────────────────────────────

    def _statement(self, sql: str, params: Sequence[Any]) -> StatementResult:
        params = tuple(params)
        logger.debug(f"SQL {' '.join(sql.split())} | params={params}")
        try:
            result = self._run(sql, params)
            if not self.in_transaction:
                self._commit()
            return result
        except Exception as e:
            if not self.in_transaction and self._conn is not None:
                self._rollback()
            logger.error(f"Statement failed: {e}")
            raise
