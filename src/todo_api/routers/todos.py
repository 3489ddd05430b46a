from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from ..repositories import Repository, get_repository
from ..schemas import TodoCreate, TodoOut, TodoUpdate
from .. import services
from ..services import Outcome, Result

router = APIRouter(
    prefix="/api/todos",
    tags=["todos"],
)


def _unwrap(result: Result):
    """
    Translate a service Result into the HTTP response value, raising
    HTTPException for NOT_FOUND and STORAGE_ERROR. Storage failures carry
    no detail beyond the status phrase.
    """
    if result.outcome is Outcome.NOT_FOUND:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Todo not found")
    if result.outcome is Outcome.STORAGE_ERROR:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
    return result.value


# PUBLIC_INTERFACE
@router.get(
    "",
    response_model=List[TodoOut],
    summary="List Todos",
    description="List all todos, newest first.",
    responses={
        200: {"description": "List retrieved successfully"},
        500: {"description": "Storage failure"},
    },
)
def list_todos(repo: Repository = Depends(get_repository)) -> List[TodoOut]:
    """
    List every todo ordered by created_at descending.
    """
    items = _unwrap(services.list_todos(repo))
    return [TodoOut(**it) for it in items]


# PUBLIC_INTERFACE
@router.post(
    "",
    response_model=TodoOut,
    summary="Create Todo",
    description="Create a new Todo item and return it.",
    responses={
        200: {"description": "Todo created successfully"},
        400: {"description": "Validation error"},
        500: {"description": "Storage failure"},
    },
)
def create_todo(payload: TodoCreate, repo: Repository = Depends(get_repository)) -> TodoOut:
    """
    Create a new Todo. The server assigns id and created_at.
    """
    created = _unwrap(services.create_todo(repo, payload))
    return TodoOut(**created)


# PUBLIC_INTERFACE
@router.put(
    "/{todo_id}",
    response_model=TodoOut,
    summary="Update Todo",
    description="Update the title and/or completed flag of a Todo item.",
    responses={
        200: {"description": "Todo updated"},
        400: {"description": "Validation error"},
        404: {"description": "Todo not found"},
        500: {"description": "Storage failure"},
    },
)
def update_todo(todo_id: str, payload: TodoUpdate, repo: Repository = Depends(get_repository)) -> TodoOut:
    """
    Partial update; omitted fields keep their stored values.
    """
    updated = _unwrap(services.update_todo(repo, todo_id, payload))
    return TodoOut(**updated)


# PUBLIC_INTERFACE
@router.delete(
    "/{todo_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Todo",
    description="Delete a Todo item by ID.",
    responses={
        204: {"description": "Todo deleted"},
        404: {"description": "Todo not found"},
        500: {"description": "Storage failure"},
    },
)
def delete_todo(todo_id: str, repo: Repository = Depends(get_repository)) -> None:
    """
    Delete a Todo. Returns 204 on success, 404 if not found.
    """
    _unwrap(services.delete_todo(repo, todo_id))
    return None
