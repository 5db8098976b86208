"""Utility functions for the to-do list API.

Import convention: use module-level imports for clarity.

    from utils import isodatetime, ids
    timestamp = isodatetime.now()
    list_id = ids.parse_numeric_id(raw, "list")
"""

from . import ids, isodatetime

__all__ = ["ids", "isodatetime"]
