"""Ownership checks for lists and todos.

A list is visible only to the user who created it. A todo is visible only
through its list, so its owner is resolved as todo -> list -> created_by.

The two checks fail differently:
- list not found, or owned by someone else: ResourceNotFound (404), so the
  existence of another user's list is never revealed
- todo not found: ResourceNotFound (404); todo found but its list belongs
  to someone else: Forbidden (403)

Existing clients depend on the 403 for todos, so it is kept as is.
"""

import logging
import sqlite3

from ..db import Core
from ..exceptions import Forbidden, ResourceNotFound

logger = logging.getLogger(__name__)


def get_owned_list(core: Core, list_id: int, user_id: int) -> sqlite3.Row:
    """
    Return the list if user_id owns it.

    Raises:
        ResourceNotFound: If the list is missing or owned by another user
    """
    row = core.lists.find_owned(list_id, user_id)
    if row is None:
        raise ResourceNotFound("List not found", {"list_id": list_id})
    return row


def get_owned_todo(core: Core, todo_id: int, user_id: int) -> sqlite3.Row:
    """
    Return the todo if user_id owns its parent list.

    Raises:
        ResourceNotFound: If the todo does not exist
        Forbidden: If the todo's list belongs to another user
    """
    todo = core.todos.get_by_id(todo_id)

    if core.lists.find_owned(todo["list_id"], user_id) is None:
        logger.warning(f"User {user_id} denied access to todo {todo_id}")
        raise Forbidden("Forbidden")

    return todo
