"""Database module for the to-do list API.

Request handlers, the seed command and tests all reach sqlite through Core.
Core owns one sqlite3 connection and exposes per-table operation classes:

    core = get_core()
    row = core.lists.get_by_id(list_id)

CONNECTION LIFECYCLE:
- atomic=False (default): the connection runs in autocommit mode, so every
  statement is its own transaction. Request handlers use this mode.
- atomic=True: Core MUST be used as a context manager; all statements in the
  block commit together on exit, or roll back if the block raises.

Connections are request-scoped. Nothing is cached across requests.
"""

import sqlite3
from pathlib import Path
from typing import TYPE_CHECKING

from flask import current_app, g, has_app_context

if TYPE_CHECKING:
    from .todo import TodoOperations
    from .todo_list import ListOperations
    from .user import UserOperations

SCHEMA_PATH = Path(__file__).parent.parent / "schema" / "schema.sql"


class Core:
    """
    Database Core with per-table operations.

    Provides access to user, list and todo operations through properties.
    """

    def __init__(self, connection: sqlite3.Connection, atomic: bool = False):
        """
        Args:
            connection: Open sqlite3 connection returning sqlite3.Row rows
            atomic: Whether statements are grouped into one transaction that
                    the with-block commits. Autocommit otherwise.
        """
        self._conn = connection
        self._atomic = atomic
        self._user_ops = None
        self._list_ops = None
        self._todo_ops = None

    @property
    def users(self) -> "UserOperations":
        """User account operations (lazy-loaded)."""
        if self._user_ops is None:
            from .user import UserOperations
            self._user_ops = UserOperations(self._conn)
        return self._user_ops

    @property
    def lists(self) -> "ListOperations":
        """List operations (lazy-loaded)."""
        if self._list_ops is None:
            from .todo_list import ListOperations
            self._list_ops = ListOperations(self._conn)
        return self._list_ops

    @property
    def todos(self) -> "TodoOperations":
        """Todo operations (lazy-loaded)."""
        if self._todo_ops is None:
            from .todo import TodoOperations
            self._todo_ops = TodoOperations(self._conn)
        return self._todo_ops

    def __enter__(self) -> "Core":
        """Start the grouped transaction.

        Raises:
            RuntimeError: On an autocommit Core, where there is nothing to group
        """
        if not self._atomic:
            raise RuntimeError(
                "Autocommit Core cannot be used in a with-block; "
                "open it with get_core(atomic=True)"
            )
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Commit on clean exit, roll back on exception, always close."""
        try:
            if exc_type is None:
                self._conn.commit()
            else:
                self._conn.rollback()
        finally:
            self._conn.close()

    def close(self) -> None:
        self._conn.close()


def _resolve_path(database_path: str | None) -> str:
    if database_path is not None:
        return database_path
    if has_app_context():
        return current_app.config["DATABASE_PATH"]
    raise RuntimeError("No database path given and no application context available")


def _create_connection(database_path: str, atomic: bool) -> sqlite3.Connection:
    """Open the database file, creating its directory if needed.

    Foreign keys are switched on per connection, which the cascading
    deletes depend on.
    """
    db_path = Path(database_path)
    db_path.parent.mkdir(parents=True, exist_ok=True)

    # isolation_level=None puts sqlite3 in autocommit mode
    conn = sqlite3.connect(str(db_path), isolation_level="DEFERRED" if atomic else None)
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys = ON")
    return conn


def get_core(atomic: bool = False, database_path: str | None = None) -> Core:
    """
    Open a Core on its own connection. The caller closes it.

    Args:
        atomic: Group all statements into one transaction; the Core must
                then be used in a with-block.
        database_path: SQLite file to open. Defaults to the current app's
                       DATABASE_PATH config value.

    Examples:
        >>> core = get_core(database_path="./data/todolist.db")
        >>> rows = core.lists.list_for_owner(1)

        >>> with get_core(atomic=True) as core:
        ...     core.users.create(...)
        ...     core.users.create(...)
    """
    conn = _create_connection(_resolve_path(database_path), atomic)
    return Core(conn, atomic=atomic)


def get_request_core() -> Core:
    """
    Get the autocommit Core for the current request.

    Stored on flask.g so one connection serves the whole request; it is
    closed by close_request_core(), registered with teardown_appcontext.
    """
    if "core" not in g:
        g.core = get_core()
    return g.core


def close_request_core(e=None) -> None:
    """Close the request connection at the end of the app context."""
    core = g.pop("core", None)
    if core is not None:
        core.close()


# ============================================================================
# DATABASE INITIALIZATION
# ============================================================================

def init_db(database_path: str) -> None:
    """Apply schema.sql to a new database file. Existing databases are left alone."""
    db_path = Path(database_path)
    db_path.parent.mkdir(parents=True, exist_ok=True)

    conn = sqlite3.connect(str(db_path))
    try:
        cursor = conn.execute(
            "SELECT name FROM sqlite_master WHERE type='table' AND name='_schema_metadata'"
        )
        if cursor.fetchone():
            return

        with open(SCHEMA_PATH, "r") as f:
            schema_sql = f.read()
        conn.executescript(schema_sql)
        conn.commit()
    finally:
        conn.close()
