from __future__ import annotations

from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field, StringConstraints

# Titles must be JSON strings; surrounding whitespace is stripped and the
# remainder must not be empty.
Title = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, strict=True)]


# PUBLIC_INTERFACE
class TodoCreate(BaseModel):
    """
    Schema for creating a new Todo item. Unknown fields are ignored.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Buy groceries",
            }
        }
    )

    title: Title = Field(..., description="Short title for the todo item")


# PUBLIC_INTERFACE
class TodoUpdate(BaseModel):
    """
    Schema for updating an existing Todo item.
    Both fields are optional; omitted or null fields keep their stored value.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Buy groceries and supplies",
                "completed": True,
            }
        }
    )

    title: Optional[Title] = Field(default=None, description="Short title for the todo item")
    completed: Optional[bool] = Field(default=None, strict=True, description="Completion status flag")


# PUBLIC_INTERFACE
class TodoOut(BaseModel):
    """
    Schema returned by the API for a Todo item.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "6f1c1d2e-3b4a-4c5d-8e9f-0a1b2c3d4e5f",
                "title": "Buy groceries",
                "completed": False,
                "created_at": "2025-01-25T10:15:30.123456+00:00",
            }
        }
    )

    id: str = Field(..., description="Unique identifier of the todo item")
    title: str = Field(..., description="Short title for the todo item")
    completed: bool = Field(..., description="Completion status flag")
    created_at: str = Field(..., description="RFC3339 creation timestamp")
