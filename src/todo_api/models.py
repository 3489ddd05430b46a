from __future__ import annotations

from typing import TypedDict


# PUBLIC_INTERFACE
class TodoEntity(TypedDict):
    """
    Domain model of a Todo item as handed between the store and the API.

    Fields:
    - id: Server-generated UUID4 string, immutable
    - title: Non-empty title
    - completed: Boolean completion flag
    - created_at: RFC3339 creation timestamp (UTC), immutable
    """

    id: str
    title: str
    completed: bool
    created_at: str
