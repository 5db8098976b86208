"""Session cookie contract.

accessToken:  HttpOnly, SameSite=Strict, path "/", 15 minutes
refreshToken: HttpOnly, SameSite=Strict, path "/auth/refresh", 7 days

Both are Secure in production. Clearing must repeat the exact path, or the
browser keeps the original cookie.
"""

from flask import Response

from .token import TokenKeys, TokenPair

ACCESS_COOKIE = "accessToken"
REFRESH_COOKIE = "refreshToken"
ACCESS_COOKIE_PATH = "/"
REFRESH_COOKIE_PATH = "/auth/refresh"


def set_session_cookies(response: Response, pair: TokenPair, keys: TokenKeys, secure: bool) -> None:
    """Attach both session cookies, lifetimes matching the token expiries."""
    response.set_cookie(
        ACCESS_COOKIE,
        pair.access_token,
        max_age=int(keys.access_ttl.total_seconds()),
        path=ACCESS_COOKIE_PATH,
        secure=secure,
        httponly=True,
        samesite="Strict",
    )
    response.set_cookie(
        REFRESH_COOKIE,
        pair.refresh_token,
        max_age=int(keys.refresh_ttl.total_seconds()),
        path=REFRESH_COOKIE_PATH,
        secure=secure,
        httponly=True,
        samesite="Strict",
    )


def clear_session_cookies(response: Response, secure: bool) -> None:
    """Expire both session cookies on the client."""
    response.delete_cookie(
        ACCESS_COOKIE,
        path=ACCESS_COOKIE_PATH,
        secure=secure,
        httponly=True,
        samesite="Strict",
    )
    response.delete_cookie(
        REFRESH_COOKIE,
        path=REFRESH_COOKIE_PATH,
        secure=secure,
        httponly=True,
        samesite="Strict",
    )
