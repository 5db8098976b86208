"""Authentication service: password hashing and user lookups.

Passwords are hashed with bcrypt. The salt is generated per call and is
embedded in the resulting "$2b$..." string, so only the hash is stored.
"""

import logging
from functools import lru_cache

import bcrypt

from ..db import Core
from .schemas import UserCreate, UserResponse

logger = logging.getLogger(__name__)

DEFAULT_WORK_FACTOR = 10

# bcrypt ignores input past 72 bytes
_BCRYPT_MAX_BYTES = 72


# ============================================================================
# Password Hashing
# ============================================================================


def _encode_password(password: str) -> bytes:
    return password.encode("utf-8")[:_BCRYPT_MAX_BYTES]


def hash_password(password: str, rounds: int = DEFAULT_WORK_FACTOR) -> str:
    """Hash a plaintext password with bcrypt at the given cost factor."""
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(_encode_password(password), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Check a plaintext password against a bcrypt hash.

    bcrypt.checkpw compares in constant time. A corrupt stored hash counts
    as a mismatch.
    """
    try:
        return bcrypt.checkpw(_encode_password(password), password_hash.encode("utf-8"))
    except (ValueError, TypeError):
        return False


@lru_cache(maxsize=None)
def _dummy_hash(rounds: int) -> str:
    return hash_password("dummy-password-for-timing", rounds)


# ============================================================================
# User Operations
# ============================================================================


def to_user_response(row) -> UserResponse:
    """Project a users row to its public fields."""
    return UserResponse(
        id=row["id"],
        email=row["email"],
        username=row["username"],
        name=row["name"],
    )


def create_user(core: Core, data: UserCreate, rounds: int = DEFAULT_WORK_FACTOR) -> UserResponse:
    """Create a user with a hashed password.

    Raises:
        sqlite3.IntegrityError: If the username or email already exists
    """
    user_id = core.users.create(
        name=data.name,
        username=data.username,
        email=data.email,
        password_hash=hash_password(data.password, rounds),
    )
    return to_user_response(core.users.get_by_id(user_id))


def get_user_by_id(core: Core, user_id: int) -> UserResponse:
    """Live profile lookup.

    Raises:
        ResourceNotFound: If the account no longer exists
    """
    return to_user_response(core.users.get_by_id(user_id))


def verify_credentials(
    core: Core,
    email: str,
    password: str,
    rounds: int = DEFAULT_WORK_FACTOR,
) -> UserResponse | None:
    """
    Verify an email/password pair.

    Returns the user on success and None on any failure. When the email is
    unknown a comparison against a dummy hash still runs, so both failure
    causes take the same time.
    """
    row = core.users.find_by_email(email)
    if row is None:
        verify_password(password, _dummy_hash(rounds))
        return None

    if not verify_password(password, row["password_hash"]):
        return None

    return to_user_response(row)
