"""
Conversion between stored todo rows and TodoEntity.

Rows keep ``completed`` as INTEGER 0/1; entities and the JSON wire format use
a boolean. Nothing here touches the database.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Tuple

from .models import TodoEntity


@dataclass(frozen=True)
class _Cols:
    table: str = "todos"
    id: str = "id"
    title: str = "title"
    completed: str = "completed"
    created_at: str = "created_at"


COLS = _Cols()

# Column order used by INSERT statements and entity_to_row.
ROW_ORDER = (COLS.id, COLS.title, COLS.completed, COLS.created_at)


def encode_completed(completed: bool) -> int:
    return 1 if completed else 0


def decode_completed(value: Any) -> bool:
    return int(value) == 1


# PUBLIC_INTERFACE
def row_to_entity(row: Mapping[str, Any]) -> TodoEntity:
    """Map a stored row (``sqlite3.Row`` or mapping) to a TodoEntity."""
    return {
        "id": str(row[COLS.id]),
        "title": str(row[COLS.title]),
        "completed": decode_completed(row[COLS.completed]),
        "created_at": str(row[COLS.created_at]),
    }


# PUBLIC_INTERFACE
def entity_to_row(entity: TodoEntity) -> Tuple[str, str, int, str]:
    """Map a TodoEntity to a tuple of column values in ROW_ORDER."""
    return (
        entity["id"],
        entity["title"],
        encode_completed(entity["completed"]),
        entity["created_at"],
    )
