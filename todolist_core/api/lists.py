"""List CRUD endpoints.

This module implements RESTful endpoints for list management:
- GET    /lists          - Lists owned by the current user
- GET    /lists/{id}     - Get single list
- POST   /lists          - Create list
- PUT    /lists/{id}     - Update list
- DELETE /lists/{id}     - Delete list (and its todos)

All routes run behind the blueprint-level authentication gate. Another
user's list answers exactly like a missing one (404).
"""

import logging

from flask import Blueprint, g, jsonify

from ..db import get_request_core
from .ownership import get_owned_list
from .schemas import ListCreate, ListResponse, ListUpdate
from .validation import path_id, validate_request

logger = logging.getLogger(__name__)


# Create Blueprint
lists_bp = Blueprint("lists", __name__, url_prefix="/lists")


@lists_bp.get("")
def list_lists():
    """
    List all lists created by the current user.

    Returns:
        200: Array of ListResponse objects
    """
    core = get_request_core()
    rows = core.lists.list_for_owner(g.user_id)

    return jsonify([ListResponse.from_row(row).to_json() for row in rows])


@lists_bp.get("/<list_id>")
@path_id("list_id", "list")
def get_list(list_id: int):
    """
    Get a single list.

    Returns:
        200: ListResponse
        400: Invalid list ID
        404: List not found (or owned by another user)
    """
    core = get_request_core()
    row = get_owned_list(core, list_id, g.user_id)

    return jsonify(ListResponse.from_row(row).to_json())


@lists_bp.post("")
@validate_request
def create_list(data: ListCreate):
    """
    Create a new list owned by the current user.

    Request Body (ListCreate):
        - title: str (required, non-empty)
        - description: str | None

    Returns:
        201: ListResponse with created list
        400: Validation error
    """
    core = get_request_core()
    list_pk = core.lists.create(
        title=data.title,
        description=data.description,
        created_by=g.user_id,
    )

    logger.info(f"List {list_pk} created by user {g.user_id}")

    row = core.lists.get_by_id(list_pk)
    return jsonify(ListResponse.from_row(row).to_json()), 201


@lists_bp.put("/<list_id>")
@path_id("list_id", "list")
@validate_request
def update_list(list_id: int, data: ListUpdate):
    """
    Update a list. Only provided fields are updated (partial update).

    Returns:
        200: ListResponse with updated list
        400: Invalid list ID or validation error
        404: List not found (or owned by another user)
    """
    core = get_request_core()
    get_owned_list(core, list_id, g.user_id)

    update_data = data.model_dump(exclude_unset=True)
    if update_data:
        core.lists.update(list_id, update_data)

    row = core.lists.get_by_id(list_id)
    return jsonify(ListResponse.from_row(row).to_json())


@lists_bp.delete("/<list_id>")
@path_id("list_id", "list")
def delete_list(list_id: int):
    """
    Delete a list. Its todos are deleted with it.

    Returns:
        200: {"message": "List deleted successfully"}
        400: Invalid list ID
        404: List not found (or owned by another user)
    """
    core = get_request_core()
    get_owned_list(core, list_id, g.user_id)
    core.lists.delete(list_id)

    logger.info(f"List {list_id} deleted by user {g.user_id}")

    return jsonify({"message": "List deleted successfully"})
