"""Todo operations.

IMPORT CONVENTION:
- Core accesses these through the core.todos property
- Ownership is not checked here; see api.ownership
"""

import sqlite3
from typing import Any

from . import query
from ..exceptions import ResourceNotFound


class TodoOperations:
    """CRUD for the todos table."""

    def __init__(self, conn: sqlite3.Connection):
        self._conn = conn

    def create(self, list_id: int, title: str) -> int:
        """Insert a todo (done=false) under list_id and return its id."""
        cursor = self._conn.execute(
            "INSERT INTO todos (list_id, title, done) VALUES (?, ?, 0)",
            (list_id, title)
        )
        return cursor.lastrowid

    def get_by_id(self, todo_id: int) -> sqlite3.Row:
        """Get todo by ID.

        Raises:
            ResourceNotFound: If todo_id doesn't exist
        """
        row = self._conn.execute(
            "SELECT * FROM todos WHERE id = ?",
            (todo_id,)
        ).fetchone()

        if not row:
            raise ResourceNotFound("Todo not found", {"todo_id": todo_id})

        return row

    def list_for_list(self, list_id: int) -> list[sqlite3.Row]:
        """All todos in a list, oldest first."""
        return self._conn.execute(
            "SELECT * FROM todos WHERE list_id = ? ORDER BY id",
            (list_id,)
        ).fetchall()

    def update(self, todo_id: int, data: dict[str, Any]) -> None:
        """Update todo with partial data. Booleans are stored as 0/1."""
        if data.get("done") is not None:
            data["done"] = int(bool(data["done"]))

        update_clause, params = query.build_update_clause(
            data,
            exclude={"id", "list_id"}
        )

        if update_clause:
            params.append(todo_id)
            self._conn.execute(
                f"UPDATE todos SET {update_clause} WHERE id = ?",
                params
            )

    def delete(self, todo_id: int) -> None:
        self._conn.execute("DELETE FROM todos WHERE id = ?", (todo_id,))
