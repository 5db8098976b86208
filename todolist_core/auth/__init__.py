"""Authentication module for the to-do list API.

This module provides authentication and authorization functionality:
- Schema validation for auth operations
- JWT access/refresh token issuing and verification
- Password hashing and verification
- Session cookie handling
- Authentication gate for protected endpoints

Auth endpoints (top-level routes):
- POST /auth/login - Verify credentials and set session cookies
- POST /auth/refresh - Exchange the refresh cookie for a new token pair
- POST /auth/logout - Clear session cookies
- GET /auth/me - Get current user info
"""

from . import schemas, token

__all__ = ["schemas", "token"]
