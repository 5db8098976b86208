"""Todo CRUD endpoints.

- GET    /lists/{list_id}/todos  - Todos in a list
- POST   /lists/{list_id}/todos  - Create todo in a list
- GET    /todos/{id}             - Get single todo
- PUT    /todos/{id}             - Update todo
- DELETE /todos/{id}             - Delete todo

Routes addressed by list id check list ownership first (404 when not
owned). Routes addressed by todo id answer 404 for a missing todo and 403
for a todo whose list belongs to another user.
"""

import logging

from flask import Blueprint, g, jsonify

from ..db import get_request_core
from .ownership import get_owned_list, get_owned_todo
from .schemas import TodoCreate, TodoResponse, TodoUpdate
from .validation import path_id, validate_request

logger = logging.getLogger(__name__)


# Create Blueprint
todos_bp = Blueprint("todos", __name__)


@todos_bp.get("/lists/<list_id>/todos")
@path_id("list_id", "list")
def list_todos(list_id: int):
    """
    Get all todos for a list owned by the current user.

    Returns:
        200: Array of TodoResponse objects
        400: Invalid list ID
        404: List not found
    """
    core = get_request_core()
    get_owned_list(core, list_id, g.user_id)
    rows = core.todos.list_for_list(list_id)

    return jsonify([TodoResponse.from_row(row).to_json() for row in rows])


@todos_bp.post("/lists/<list_id>/todos")
@path_id("list_id", "list")
@validate_request
def create_todo(list_id: int, data: TodoCreate):
    """
    Create a todo in a list owned by the current user.

    Returns:
        201: TodoResponse with created todo
        400: Invalid list ID or validation error
        404: List not found
    """
    core = get_request_core()
    get_owned_list(core, list_id, g.user_id)
    todo_pk = core.todos.create(list_id, data.title)

    logger.info(f"Todo {todo_pk} created in list {list_id}")

    row = core.todos.get_by_id(todo_pk)
    return jsonify(TodoResponse.from_row(row).to_json()), 201


@todos_bp.get("/todos/<todo_id>")
@path_id("todo_id", "todo")
def get_todo(todo_id: int):
    """
    Get a single todo.

    Returns:
        200: TodoResponse
        400: Invalid todo ID
        403: Todo belongs to another user's list
        404: Todo not found
    """
    core = get_request_core()
    row = get_owned_todo(core, todo_id, g.user_id)

    return jsonify(TodoResponse.from_row(row).to_json())


@todos_bp.put("/todos/<todo_id>")
@path_id("todo_id", "todo")
@validate_request
def update_todo(todo_id: int, data: TodoUpdate):
    """
    Update a todo. Only provided fields are updated (partial update).

    Returns:
        200: TodoResponse with updated todo
        400: Invalid todo ID or validation error
        403: Todo belongs to another user's list
        404: Todo not found
    """
    core = get_request_core()
    get_owned_todo(core, todo_id, g.user_id)

    update_data = data.model_dump(exclude_unset=True)
    if update_data:
        core.todos.update(todo_id, update_data)

    row = core.todos.get_by_id(todo_id)
    return jsonify(TodoResponse.from_row(row).to_json())


@todos_bp.delete("/todos/<todo_id>")
@path_id("todo_id", "todo")
def delete_todo(todo_id: int):
    """
    Delete a todo.

    Returns:
        200: {"message": "Todo deleted successfully"}
        400: Invalid todo ID
        403: Todo belongs to another user's list
        404: Todo not found
    """
    core = get_request_core()
    get_owned_todo(core, todo_id, g.user_id)
    core.todos.delete(todo_id)

    logger.info(f"Todo {todo_id} deleted by user {g.user_id}")

    return jsonify({"message": "Todo deleted successfully"})
