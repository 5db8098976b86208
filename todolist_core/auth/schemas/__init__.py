"""Authentication Pydantic schemas for API validation."""

from .auth import (
    LoginResponse,
    MessageResponse,
    UserBase,
    UserCreate,
    UserLogin,
    UserResponse,
)

__all__ = [
    "UserBase",
    "UserCreate",
    "UserLogin",
    "UserResponse",
    "LoginResponse",
    "MessageResponse",
]
