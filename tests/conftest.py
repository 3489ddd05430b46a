"""Shared fixtures: an app over a throwaway SQLite file per test."""

from typing import List, Optional

import pytest
from fastapi.testclient import TestClient

from todo_api.errors import StorageError
from todo_api.main import create_app
from todo_api.models import TodoEntity
from todo_api.repositories import Repository
from todo_api.settings import Settings


class FailingStore(Repository):
    """Store whose every operation fails like a lost database."""

    def list(self) -> List[TodoEntity]:
        raise StorageError("list todos failed: disk I/O error")

    def insert(self, entity: TodoEntity) -> None:
        raise StorageError("insert todo failed: disk I/O error")

    def find(self, todo_id: str) -> Optional[TodoEntity]:
        raise StorageError("find todo failed: disk I/O error")

    def update(self, todo_id: str, title: str, completed: bool) -> int:
        raise StorageError("update todo failed: disk I/O error")

    def delete(self, todo_id: str) -> int:
        raise StorageError("delete todo failed: disk I/O error")


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        static_dir=str(tmp_path / "static"),
        database_path=str(tmp_path / "data" / "todos.db"),
        db_pool_size=2,
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    """TestClient with the app lifespan (store open) running."""
    with TestClient(app) as c:
        yield c


@pytest.fixture
def failing_store() -> FailingStore:
    return FailingStore()


class UpdateFailingStore(FailingStore):
    """Store that can read a todo but fails when writing it back."""

    def __init__(self, existing: TodoEntity) -> None:
        self.existing = existing

    def find(self, todo_id: str) -> Optional[TodoEntity]:
        return self.existing if todo_id == self.existing["id"] else None


@pytest.fixture
def update_failing_store() -> UpdateFailingStore:
    return UpdateFailingStore(
        {"id": "a", "title": "read ok", "completed": False, "created_at": "2025-01-01T00:00:00.000000+00:00"}
    )
