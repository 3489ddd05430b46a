from __future__ import annotations

import logging
import os
from contextlib import contextmanager
from typing import Generator, List, Optional

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import QueuePool

from .errors import StorageError
from .mapper import COLS, ROW_ORDER, encode_completed, entity_to_row, row_to_entity
from .models import TodoEntity
from .repositories import Repository

logger = logging.getLogger(__name__)

_SELECT_COLUMNS = ", ".join(ROW_ORDER)
_INSERT_PARAMS = ", ".join(f":{c}" for c in ROW_ORDER)


# PUBLIC_INTERFACE
def create_sqlite_engine(db_path: str, pool_size: int = 5) -> Engine:
    """
    Create the process-wide engine for ``db_path``. The engine's QueuePool keeps
    up to ``pool_size`` connections open and is shared by all requests.
    """
    os.makedirs(os.path.dirname(db_path) or ".", exist_ok=True)
    return create_engine(
        f"sqlite:///{db_path}",
        poolclass=QueuePool,
        pool_size=max(pool_size, 1),
        connect_args={"check_same_thread": False},
    )


@contextmanager
def _storage_errors(action: str) -> Generator[None, None, None]:
    try:
        yield
    except SQLAlchemyError as exc:
        raise StorageError(f"{action} failed: {exc}") from exc


class SQLiteStore(Repository):
    """
    SQLite implementation of the Repository contract on a SQLAlchemy engine.
    Each operation runs in its own ``engine.begin()`` transaction.
    """

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    @property
    def engine(self) -> Engine:
        return self._engine

    def close(self) -> None:
        self._engine.dispose()

    def init_schema(self) -> None:
        """Create the todos table if it does not exist yet."""
        with _storage_errors("schema setup"), self._engine.begin() as conn:
            conn.execute(
                text(
                    f"""
                    CREATE TABLE IF NOT EXISTS {COLS.table} (
                        {COLS.id} TEXT PRIMARY KEY,
                        {COLS.title} TEXT NOT NULL,
                        {COLS.completed} INTEGER NOT NULL DEFAULT 0,
                        {COLS.created_at} TEXT NOT NULL
                    )
                    """
                )
            )
        logger.info("Todo table ready in %s", self._engine.url.database)

    def list(self) -> List[TodoEntity]:
        with _storage_errors("list todos"), self._engine.begin() as conn:
            rows = conn.execute(
                text(f"SELECT {_SELECT_COLUMNS} FROM {COLS.table} ORDER BY {COLS.created_at} DESC")
            ).mappings().all()
        return [row_to_entity(r) for r in rows]

    def insert(self, entity: TodoEntity) -> None:
        with _storage_errors("insert todo"), self._engine.begin() as conn:
            conn.execute(
                text(f"INSERT INTO {COLS.table} ({_SELECT_COLUMNS}) VALUES ({_INSERT_PARAMS})"),
                dict(zip(ROW_ORDER, entity_to_row(entity))),
            )

    def find(self, todo_id: str) -> Optional[TodoEntity]:
        with _storage_errors("find todo"), self._engine.begin() as conn:
            row = conn.execute(
                text(f"SELECT {_SELECT_COLUMNS} FROM {COLS.table} WHERE {COLS.id} = :id"),
                {"id": todo_id},
            ).mappings().first()
        return row_to_entity(row) if row is not None else None

    def update(self, todo_id: str, title: str, completed: bool) -> int:
        with _storage_errors("update todo"), self._engine.begin() as conn:
            result = conn.execute(
                text(
                    f"UPDATE {COLS.table} SET {COLS.title} = :title, {COLS.completed} = :completed "
                    f"WHERE {COLS.id} = :id"
                ),
                {"title": title, "completed": encode_completed(completed), "id": todo_id},
            )
            return result.rowcount

    def delete(self, todo_id: str) -> int:
        with _storage_errors("delete todo"), self._engine.begin() as conn:
            result = conn.execute(
                text(f"DELETE FROM {COLS.table} WHERE {COLS.id} = :id"),
                {"id": todo_id},
            )
            return result.rowcount


# PUBLIC_INTERFACE
def open_store(db_path: str, pool_size: int = 5) -> SQLiteStore:
    """Create the engine for ``db_path`` and make sure the schema exists."""
    store = SQLiteStore(create_sqlite_engine(db_path, pool_size))
    store.init_schema()
    return store
