"""
Todo operations behind the HTTP routes.

Each operation takes the store explicitly and returns a ``Result`` instead of
raising, so the router can turn outcomes into status codes in one place.
Request bodies arrive already validated; client errors never get this far.
"""
from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Generic, List, Optional, TypeVar

from .errors import StorageError
from .models import TodoEntity
from .repositories import Repository
from .schemas import TodoCreate, TodoUpdate

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Outcome(str, Enum):
    OK = "ok"
    NOT_FOUND = "not_found"
    STORAGE_ERROR = "storage_error"


@dataclass(frozen=True)
class Result(Generic[T]):
    outcome: Outcome
    value: Optional[T] = None

    @classmethod
    def ok(cls, value: Optional[T] = None) -> "Result[T]":
        return cls(Outcome.OK, value)

    @classmethod
    def not_found(cls) -> "Result[T]":
        return cls(Outcome.NOT_FOUND)

    @classmethod
    def storage_error(cls) -> "Result[T]":
        return cls(Outcome.STORAGE_ERROR)


def _now() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="microseconds")


def _new_id() -> str:
    return str(uuid.uuid4())


# PUBLIC_INTERFACE
def list_todos(store: Repository) -> Result[List[TodoEntity]]:
    """Return every todo, newest first."""
    try:
        return Result.ok(store.list())
    except StorageError:
        logger.exception("Listing todos failed")
        return Result.storage_error()


# PUBLIC_INTERFACE
def create_todo(store: Repository, payload: TodoCreate) -> Result[TodoEntity]:
    """
    Create a todo with a fresh id and creation timestamp.
    New todos always start with completed=False.
    """
    entity: TodoEntity = {
        "id": _new_id(),
        "title": payload.title,
        "completed": False,
        "created_at": _now(),
    }
    try:
        store.insert(entity)
    except StorageError:
        logger.exception("Creating todo failed")
        return Result.storage_error()
    return Result.ok(entity)


# PUBLIC_INTERFACE
def update_todo(store: Repository, todo_id: str, payload: TodoUpdate) -> Result[TodoEntity]:
    """
    Merge the supplied fields into an existing todo.

    Fields left out of the payload keep their stored values; id and
    created_at never change. The read and the write are two separate
    statements, so a concurrent update of the same todo can be overwritten.
    """
    try:
        existing = store.find(todo_id)
    except StorageError:
        logger.exception("Loading todo %s for update failed", todo_id)
        return Result.storage_error()
    if existing is None:
        return Result.not_found()

    merged: TodoEntity = {
        "id": existing["id"],
        "title": payload.title if payload.title is not None else existing["title"],
        "completed": payload.completed if payload.completed is not None else existing["completed"],
        "created_at": existing["created_at"],
    }
    try:
        # Row count ignored: a todo deleted since the find still answers with the merged record.
        store.update(todo_id, merged["title"], merged["completed"])
    except StorageError:
        logger.exception("Updating todo %s failed", todo_id)
        return Result.storage_error()
    return Result.ok(merged)


# PUBLIC_INTERFACE
def delete_todo(store: Repository, todo_id: str) -> Result[None]:
    """Delete a todo; NOT_FOUND when no row matched."""
    try:
        deleted = store.delete(todo_id)
    except StorageError:
        logger.exception("Deleting todo %s failed", todo_id)
        return Result.storage_error()
    if deleted == 0:
        return Result.not_found()
    return Result.ok()
