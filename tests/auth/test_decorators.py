"""Tests for the authentication gate.

Tests authenticate_request() directly inside a request context, and the
blueprint-level gate through the list and todo routes it protects.
"""

import pytest
from flask import g

from todolist_core.auth import decorators
from todolist_core.auth.cookies import ACCESS_COOKIE
from todolist_core.auth.token import TokenKeys, TokenService
from todolist_core.exceptions import (
    ConfigurationError,
    InvalidToken,
    NotAuthenticated,
    TokenExpired,
)


def _cookie_header(token: str) -> dict:
    return {"Cookie": f"{ACCESS_COOKIE}={token}"}


class TestAuthenticateRequest:
    """Tests for authenticate_request()."""

    def test_valid_token_sets_identity(self, app, token_service, john_claim):
        token = token_service.issue_access_token(john_claim)

        with app.test_request_context("/lists", headers=_cookie_header(token)):
            claim = decorators.authenticate_request()

            assert claim == john_claim
            assert g.identity == john_claim
            assert g.user_id == 1
            assert decorators.current_identity() == john_claim

    def test_missing_cookie(self, app):
        with app.test_request_context("/lists"):
            with pytest.raises(NotAuthenticated) as exc_info:
                decorators.authenticate_request()

        assert exc_info.value.message == "Not authenticated"

    def test_expired_token(self, app, expired_access_token):
        with app.test_request_context("/lists", headers=_cookie_header(expired_access_token)):
            with pytest.raises(TokenExpired) as exc_info:
                decorators.authenticate_request()

        assert exc_info.value.details == {"code": "token_expired"}

    def test_malformed_token(self, app):
        with app.test_request_context("/lists", headers=_cookie_header("not-a-jwt")):
            with pytest.raises(InvalidToken) as exc_info:
                decorators.authenticate_request()

        assert exc_info.value.details == {"code": "invalid_token"}

    def test_refresh_token_is_not_an_access_token(self, app, token_service, john_claim):
        token = token_service.issue_refresh_token(john_claim)

        with app.test_request_context("/lists", headers=_cookie_header(token)):
            with pytest.raises(InvalidToken):
                decorators.authenticate_request()

    def test_explicit_token_service(self, app, john_claim):
        """A caller-supplied service is used instead of the app's."""
        other = TokenService(TokenKeys(
            access_secret="other-access-secret-0123456789abcdef",
            refresh_secret="other-refresh-secret-0123456789abcdef",
        ))
        token = other.issue_access_token(john_claim)

        with app.test_request_context("/lists", headers=_cookie_header(token)):
            assert decorators.authenticate_request(other) == john_claim
            with pytest.raises(InvalidToken):
                decorators.authenticate_request()

    def test_missing_secret_is_not_an_auth_error(self, app, token_service, john_claim):
        token = token_service.issue_access_token(john_claim)
        broken = TokenService(TokenKeys(access_secret="", refresh_secret="r"))

        with app.test_request_context("/lists", headers=_cookie_header(token)):
            with pytest.raises(ConfigurationError):
                decorators.authenticate_request(broken)

    def test_current_token_service(self, app):
        with app.app_context():
            service = decorators.current_token_service()
        assert service is app.extensions[decorators.TOKEN_SERVICE_EXTENSION]


class TestBlueprintGate:
    """The gate runs before every list and todo route."""

    @pytest.mark.parametrize("method,path", [
        ("get", "/lists"),
        ("post", "/lists"),
        ("get", "/lists/1"),
        ("put", "/lists/1"),
        ("delete", "/lists/1"),
        ("get", "/lists/1/todos"),
        ("post", "/lists/1/todos"),
        ("get", "/todos/1"),
        ("put", "/todos/1"),
        ("delete", "/todos/1"),
    ])
    def test_requires_cookie(self, client, method, path):
        response = getattr(client, method)(path, json={"title": "x"})

        assert response.status_code == 401
        assert response.get_json() == {
            "error": {"type": "NotAuthenticated", "message": "Not authenticated"}
        }

    def test_gate_runs_before_id_validation(self, client):
        response = client.get("/lists/abc")
        assert response.status_code == 401

    def test_expired_token(self, client, seeded, expired_access_token):
        client.set_cookie(ACCESS_COOKIE, expired_access_token)

        response = client.get("/lists")

        assert response.status_code == 401
        data = response.get_json()
        assert data["error"]["type"] == "TokenExpired"
        assert data["error"]["message"] == "Token expired"

    def test_invalid_token(self, client, seeded):
        client.set_cookie(ACCESS_COOKIE, "invalid.token.here")

        response = client.get("/lists")

        assert response.status_code == 401
        data = response.get_json()
        assert data["error"]["type"] == "InvalidToken"
        assert data["error"]["message"] == "Invalid token"

    def test_valid_token(self, client, seeded, token_service, john_claim):
        client.set_cookie(ACCESS_COOKIE, token_service.issue_access_token(john_claim))

        response = client.get("/lists")

        assert response.status_code == 200
        assert response.get_json() == []

    def test_missing_secret_is_internal_error(self, app, client, token_service, john_claim):
        client.set_cookie(ACCESS_COOKIE, token_service.issue_access_token(john_claim))
        app.extensions[decorators.TOKEN_SERVICE_EXTENSION] = TokenService(
            TokenKeys(access_secret="", refresh_secret="r")
        )

        response = client.get("/lists")

        assert response.status_code == 500
        assert response.get_json() == {
            "error": {"type": "InternalError", "message": "An internal error occurred"}
        }

    def test_public_routes_skip_gate(self, client):
        assert client.get("/health").status_code == 200
        assert client.get("/").status_code == 200
