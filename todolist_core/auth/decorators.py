"""Authentication gate for protected endpoints.

The gate reads the access token from the ``accessToken`` cookie, verifies
it, and stores the decoded IdentityClaim in flask.g:
- g.identity: IdentityClaim (userId, email, username)
- g.user_id: the claim's user id

It never refreshes tokens. An expired access token is reported as
TokenExpired and the client is expected to call POST /auth/refresh.

Use either the @auth_required decorator on a single view or call
authenticate_request() from a blueprint's before_request handler.
"""

import logging
from functools import wraps

from flask import current_app, g, request

from ..exceptions import InvalidToken, NotAuthenticated, TokenExpired
from .cookies import ACCESS_COOKIE
from .token import (
    IdentityClaim,
    InvalidSignatureError,
    MalformedTokenError,
    TokenExpiredError,
    TokenService,
)

logger = logging.getLogger(__name__)

TOKEN_SERVICE_EXTENSION = "token_service"


def current_token_service() -> TokenService:
    """The TokenService built by the app factory for this application."""
    return current_app.extensions[TOKEN_SERVICE_EXTENSION]


def current_identity() -> IdentityClaim:
    """The identity attached by the gate for the current request."""
    return g.identity


# ============================================================================
# Shared Authentication Logic
# ============================================================================


def authenticate_request(tokens: TokenService | None = None) -> IdentityClaim:
    """
    Verify the request's access cookie and attach the identity to flask.g.

    Args:
        tokens: Token service to verify with. Defaults to the current app's.

    Raises:
        NotAuthenticated: No access cookie was sent
        TokenExpired: The access token is past its expiry
        InvalidToken: The access token is malformed or has a bad signature

    Any other failure (for example a missing secret) propagates and is
    rendered as a 500 by the application error boundary.
    """
    tokens = tokens or current_token_service()

    token_str = request.cookies.get(ACCESS_COOKIE)
    if not token_str:
        logger.warning("Unauthenticated request to protected endpoint")
        raise NotAuthenticated("Not authenticated")

    try:
        claim = tokens.verify_access_token(token_str)
    except TokenExpiredError:
        logger.warning("Access token expired")
        raise TokenExpired("Token expired", {"code": "token_expired"})
    except (InvalidSignatureError, MalformedTokenError) as e:
        logger.warning(f"Invalid access token: {e.__class__.__name__}")
        raise InvalidToken("Invalid token", {"code": "invalid_token"})

    g.identity = claim
    g.user_id = claim.user_id
    return claim


# ============================================================================
# Auth Required Decorator
# ============================================================================


def auth_required(f):
    """
    Decorator to require a valid access cookie for endpoint access.

    Example:
    ```python
    @auth_required
    def protected_endpoint():
        user_id = g.user_id
        ...
    ```
    """
    @wraps(f)
    def wrapper(*args, **kwargs):
        authenticate_request()
        return f(*args, **kwargs)

    return wrapper
