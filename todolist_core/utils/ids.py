"""Path parameter parsing."""

from ..exceptions import ValidationError

# Largest value an SQLite INTEGER column holds
MAX_ID = 2**63 - 1


def parse_numeric_id(raw: str, label: str) -> int:
    """
    Parse a positive integer id from a URL segment.

    Args:
        raw: The path segment as received
        label: Resource name used in the error message (e.g. "list")

    Raises:
        ValidationError: If raw is not a base-10 integer in 1..MAX_ID
    """
    if not raw.isascii() or not raw.isdigit():
        raise ValidationError(f"Invalid {label} ID", {"id": raw})
    value = int(raw)
    if value < 1 or value > MAX_ID:
        raise ValidationError(f"Invalid {label} ID", {"id": raw})
    return value
