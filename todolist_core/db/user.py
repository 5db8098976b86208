"""User account operations.

IMPORT CONVENTION:
- Core accesses these through the core.users property
- Password hashing happens in auth.service; this layer only stores the hash
"""

import sqlite3

from ..exceptions import ResourceNotFound
from ..utils import isodatetime


class UserOperations:
    """CRUD for the users table."""

    def __init__(self, conn: sqlite3.Connection):
        self._conn = conn

    def create(self, name: str, username: str, email: str, password_hash: str) -> int:
        """Insert a user and return the new autoincrement id.

        Raises:
            sqlite3.IntegrityError: If username or email is already taken
        """
        cursor = self._conn.execute(
            """INSERT INTO users (name, username, email, password_hash, registered_at)
               VALUES (?, ?, ?, ?, ?)""",
            (name, username, email, password_hash, isodatetime.now())
        )
        return cursor.lastrowid

    def get_by_id(self, user_id: int) -> sqlite3.Row:
        """Get user by ID.

        Raises:
            ResourceNotFound: If no user has this id
        """
        row = self._conn.execute(
            "SELECT * FROM users WHERE id = ?",
            (user_id,)
        ).fetchone()

        if not row:
            raise ResourceNotFound("User not found", {"user_id": user_id})

        return row

    def find_by_email(self, email: str) -> sqlite3.Row | None:
        """Get user by email, or None. Emails are matched case-insensitively."""
        return self._conn.execute(
            "SELECT * FROM users WHERE lower(email) = lower(?)",
            (email,)
        ).fetchone()

    def delete(self, user_id: int) -> None:
        """Delete a user. Their lists and todos are removed by ON DELETE CASCADE.

        Raises:
            ResourceNotFound: If no user has this id
        """
        cursor = self._conn.execute("DELETE FROM users WHERE id = ?", (user_id,))
        if cursor.rowcount == 0:
            raise ResourceNotFound("User not found", {"user_id": user_id})
