from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

from fastapi import Request

from .models import TodoEntity


# PUBLIC_INTERFACE
class Repository(ABC):
    """
    Storage contract for todo records.

    Every method raises ``StorageError`` when the backend fails.
    """

    @abstractmethod
    def list(self) -> List[TodoEntity]:
        """Return all todos ordered by created_at descending (empty list if none)."""

    @abstractmethod
    def insert(self, entity: TodoEntity) -> None:
        """Persist a new todo."""

    @abstractmethod
    def find(self, todo_id: str) -> Optional[TodoEntity]:
        """Return a todo by id, or None if not found."""

    @abstractmethod
    def update(self, todo_id: str, title: str, completed: bool) -> int:
        """Overwrite the mutable fields of a todo. Return the number of rows affected."""

    @abstractmethod
    def delete(self, todo_id: str) -> int:
        """Delete a todo by id. Return the number of rows affected (0 or 1)."""


# PUBLIC_INTERFACE
def get_repository(request: Request) -> Repository:
    """
    FastAPI dependency returning the store opened by the application lifespan.
    Tests swap it through ``app.dependency_overrides``.
    """
    return request.app.state.store
