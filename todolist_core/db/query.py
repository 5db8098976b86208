"""SQL fragment builders for parameterized queries."""

from typing import Any


def build_where_clause(conditions: dict[str, Any]) -> tuple[str, list[Any]]:
    """
    Build a WHERE clause from a dict of conditions.

    Every key becomes an equality test "<key> = ?". None values are skipped.

    Returns:
        Tuple of (clause, params). An empty condition set yields "1=1".
    """
    fragments = []
    params = []

    for key, value in conditions.items():
        if value is None:
            continue
        fragments.append(f"{key} = ?")
        params.append(value)

    if not fragments:
        return "1=1", []

    return " AND ".join(fragments), params


def build_update_clause(
    data: dict[str, Any],
    exclude: set[str] | None = None,
) -> tuple[str, list[Any]]:
    """
    Build the SET portion of an UPDATE statement.

    Keys in exclude are skipped, as are None values.

    Returns:
        Tuple of (clause, params). Nothing to update yields ("", []).
    """
    exclude = exclude or set()
    fragments = []
    params = []

    for key, value in data.items():
        if key in exclude or value is None:
            continue
        fragments.append(f"{key} = ?")
        params.append(value)

    return ", ".join(fragments), params
