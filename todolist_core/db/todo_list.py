"""List operations.

IMPORT CONVENTION:
- Core accesses these through the core.lists property

OWNERSHIP:
find_owned() filters on created_by in the same query, so a list owned by
someone else is indistinguishable from a missing one.
"""

import sqlite3
from typing import Any

from . import query
from ..exceptions import ResourceNotFound
from ..utils import isodatetime


class ListOperations:
    """CRUD for the lists table."""

    def __init__(self, conn: sqlite3.Connection):
        self._conn = conn

    def create(self, title: str, created_by: int, description: str | None = None) -> int:
        """Insert a list owned by created_by and return its id."""
        cursor = self._conn.execute(
            """INSERT INTO lists (title, description, created_by, created_at)
               VALUES (?, ?, ?, ?)""",
            (title, description, created_by, isodatetime.now())
        )
        return cursor.lastrowid

    def get_by_id(self, list_id: int) -> sqlite3.Row:
        """Get list by ID regardless of owner.

        Raises:
            ResourceNotFound: If list_id doesn't exist
        """
        row = self._conn.execute(
            "SELECT * FROM lists WHERE id = ?",
            (list_id,)
        ).fetchone()

        if not row:
            raise ResourceNotFound("List not found", {"list_id": list_id})

        return row

    def find_owned(self, list_id: int, owner_id: int) -> sqlite3.Row | None:
        """Get list by ID only if owner_id created it, else None."""
        where_clause, params = query.build_where_clause(
            {"id": list_id, "created_by": owner_id}
        )
        return self._conn.execute(
            f"SELECT * FROM lists WHERE {where_clause}",
            params
        ).fetchone()

    def list_for_owner(self, owner_id: int) -> list[sqlite3.Row]:
        """All lists created by owner_id, oldest first."""
        return self._conn.execute(
            "SELECT * FROM lists WHERE created_by = ? ORDER BY id",
            (owner_id,)
        ).fetchall()

    def update(self, list_id: int, data: dict[str, Any]) -> None:
        """Update list with partial data. 'id' and 'created_by' are never changed."""
        update_clause, params = query.build_update_clause(
            data,
            exclude={"id", "created_by", "created_at"}
        )

        if update_clause:
            params.append(list_id)
            self._conn.execute(
                f"UPDATE lists SET {update_clause} WHERE id = ?",
                params
            )

    def delete(self, list_id: int) -> None:
        """Delete a list. Its todos are removed by ON DELETE CASCADE."""
        self._conn.execute("DELETE FROM lists WHERE id = ?", (list_id,))
