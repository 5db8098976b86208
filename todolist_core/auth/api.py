"""Authentication API endpoints.

Session lifecycle:
- Login mints an access/refresh pair and sets both as HttpOnly cookies
- Refresh exchanges the refresh cookie for a brand new pair
- Logout clears both cookies; tokens themselves are not revoked
- /auth/me re-reads the user row for the identity in the access token

Token bodies are never returned in JSON; they only travel as cookies.
"""

import logging

from flask import Blueprint, current_app, jsonify, request

from ..api.validation import validate_request
from ..db import get_request_core
from ..exceptions import InvalidCredentials, InvalidRefreshToken, NoRefreshToken
from . import service
from .cookies import REFRESH_COOKIE, clear_session_cookies, set_session_cookies
from .decorators import auth_required, current_identity, current_token_service
from .schemas import LoginResponse, MessageResponse, UserLogin
from .token import IdentityClaim, TokenError

logger = logging.getLogger(__name__)


# Create blueprint
auth_bp = Blueprint("auth", __name__, url_prefix="/auth")


def _secure_cookies() -> bool:
    return current_app.config["SECURE_COOKIES"]


# ============================================================================
# Authentication Endpoints
# ============================================================================


@auth_bp.post("/login")
@validate_request
def login(data: UserLogin):
    """
    Authenticate user and set session cookies.

    Unknown email and wrong password produce the same 401 response.

    Example request:
    ```json
    {"email": "john@example.com", "password": "password123"}
    ```

    Example response (cookies accessToken and refreshToken are set):
    ```json
    {"user": {"id": 1, "email": "john@example.com", "username": "john", "name": "John Smith"}}
    ```
    """
    core = get_request_core()
    user = service.verify_credentials(
        core,
        data.email,
        data.password,
        rounds=current_app.config["BCRYPT_WORK_FACTOR"],
    )
    if user is None:
        logger.warning(f"Failed login attempt for email: {data.email}")
        raise InvalidCredentials("Invalid credentials")

    tokens = current_token_service()
    claim = IdentityClaim(user_id=user.id, email=user.email, username=user.username)
    pair = tokens.issue_pair(claim)

    logger.info(f"Successful login: {user.username}")

    response = jsonify(LoginResponse(user=user).model_dump())
    set_session_cookies(response, pair, tokens.keys, secure=_secure_cookies())
    return response, 200


@auth_bp.post("/refresh")
def refresh():
    """
    Exchange the refresh cookie for a new access/refresh pair.

    The new tokens are minted from the claim inside the refresh token, not
    from a fresh user lookup. Expired, forged and malformed refresh tokens
    all produce the same InvalidRefreshToken response.
    """
    token_str = request.cookies.get(REFRESH_COOKIE)
    if not token_str:
        raise NoRefreshToken("No refresh token")

    tokens = current_token_service()
    try:
        claim = tokens.verify_refresh_token(token_str)
    except TokenError as e:
        logger.warning(f"Refresh rejected: {e.__class__.__name__}")
        raise InvalidRefreshToken("Invalid refresh token")

    pair = tokens.issue_pair(claim)

    logger.info(f"Tokens refreshed for user {claim.user_id}")

    response = jsonify(MessageResponse(message="Tokens refreshed").model_dump())
    set_session_cookies(response, pair, tokens.keys, secure=_secure_cookies())
    return response, 200


@auth_bp.post("/logout")
def logout():
    """
    Clear both session cookies.

    Idempotent: succeeds whether or not a session existed. Tokens already
    copied elsewhere stay valid until they expire.
    """
    response = jsonify(MessageResponse(message="Logged out successfully").model_dump())
    clear_session_cookies(response, secure=_secure_cookies())
    return response, 200


# ============================================================================
# User Profile Endpoints
# ============================================================================


@auth_bp.get("/me")
@auth_required
def get_current_user():
    """
    Get current user info.

    Reads the live row, so this returns 404 when the account was deleted
    after the token was issued.

    Example response:
    ```json
    {"id": 1, "email": "john@example.com", "username": "john", "name": "John Smith"}
    ```
    """
    core = get_request_core()
    user = service.get_user_by_id(core, current_identity().user_id)
    return jsonify(user.model_dump()), 200
