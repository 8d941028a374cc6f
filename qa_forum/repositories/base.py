"""
repositories/base.py
--------------------
Shared plumbing for all entity repositories: the save contract
(insert when the entity has no id yet, update otherwise), id lookup,
and single/multi-row result handling.
"""

from typing import Any, Callable, Generic, Mapping, Sequence, TypeVar

from qa_forum.db.backend import Row, StorageBackend
from qa_forum.exceptions import AmbiguousMatchError, RecordNotFoundError
from qa_forum.utils.logger import get_logger

logger = get_logger(__name__)

ModelType = TypeVar("ModelType")


class BaseRepository(Generic[ModelType]):
    """
    Generic repository over one table.

    Subclasses set ``model`` (a dataclass with ``TABLE``, ``id`` and
    ``from_row``) and ``columns`` (the mutable columns, in DDL order).
    """

    model: type
    columns: tuple[str, ...] = ()

    def __init__(self, backend: StorageBackend):
        self.backend = backend

    @property
    def table(self) -> str:
        return self.model.TABLE

    # ── SAVE ──────────────────────────────────────────────

    def save(self, entity: ModelType) -> ModelType:
        """
        Persist an entity: insert it when it has no id, update it otherwise.

        Args:
            entity: The domain object to persist.

        Returns:
            The same object; after an insert its ``id`` holds the generated key.

        Raises:
            RecordNotFoundError: If a persisted entity's row no longer exists.
        """
        if entity.id is None:
            self._create(entity)
        else:
            self._update(entity)
        return entity

    def _values(self, entity: ModelType) -> list[Any]:
        return [getattr(entity, column) for column in self.columns]

    def _create(self, entity: ModelType) -> None:
        sql = (
            f"INSERT INTO {self.table} ({', '.join(self.columns)}) "
            f"VALUES ({', '.join(['%s'] * len(self.columns))});"
        )
        try:
            entity.id = self.backend.insert(sql, self._values(entity))
        except Exception as e:
            logger.error(f"Failed to insert into {self.table}: {e}")
            raise
        self.backend.on_rollback(lambda: setattr(entity, "id", None))
        logger.info(f"Created {self.table} #{entity.id}")

    def _update(self, entity: ModelType) -> None:
        assignments = ", ".join(f"{column} = %s" for column in self.columns)
        sql = f"UPDATE {self.table} SET {assignments} WHERE id = %s;"
        try:
            updated = self.backend.execute_update(sql, self._values(entity) + [entity.id])
        except Exception as e:
            logger.error(f"Failed to update {self.table} #{entity.id}: {e}")
            raise
        if updated == 0:
            raise RecordNotFoundError(self.table, {"id": entity.id})
        logger.info(f"Updated {self.table} #{entity.id}")

    # ── READ ──────────────────────────────────────────────

    def find_by_id(self, id: int) -> ModelType:
        """
        Fetch a single entity by primary key.

        Raises:
            RecordNotFoundError: If no row has this id.
        """
        rows = self.backend.execute(f"SELECT * FROM {self.table} WHERE id = %s;", (id,))
        return self._one(rows, {"id": id})

    # ── HELPERS ───────────────────────────────────────────

    def _one(
        self,
        rows: Sequence[Row],
        criteria: Mapping[str, Any],
        table: str | None = None,
        mapper: Callable[[Row], Any] | None = None,
    ) -> Any:
        """Map exactly one row, failing loudly on zero or several."""
        table = table or self.table
        if not rows:
            raise RecordNotFoundError(table, criteria)
        if len(rows) > 1:
            raise AmbiguousMatchError(table, criteria, len(rows))
        return (mapper or self.model.from_row)(rows[0])

    def _many(self, rows: Sequence[Row], mapper: Callable[[Row], Any] | None = None) -> list:
        return [(mapper or self.model.from_row)(row) for row in rows]

    @staticmethod
    def _check_limit(n: int) -> int:
        if isinstance(n, bool) or not isinstance(n, int) or n < 0:
            raise ValueError(f"n must be a non-negative integer, got {n!r}")
        return n
