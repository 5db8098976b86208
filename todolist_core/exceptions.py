"""Custom exceptions for the to-do list API.

Every domain error carries its HTTP status and a stable ``error_type`` tag.
The app registers a single handler for TodoListError, so the status and
body shape are decided in one place instead of at each call site.
"""


class TodoListError(Exception):
    """Base exception for all application errors."""

    status_code = 500
    error_type = "InternalError"

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ValidationError(TodoListError):
    """Request body or path parameter failed validation."""

    status_code = 400
    error_type = "ValidationError"


class AuthenticationError(TodoListError):
    """Base class for 401 responses."""

    status_code = 401
    error_type = "AuthenticationError"


class NotAuthenticated(AuthenticationError):
    """No session cookie was presented."""

    error_type = "NotAuthenticated"


class InvalidCredentials(AuthenticationError):
    """Login failed. Deliberately the same for unknown email and wrong password."""

    error_type = "InvalidCredentials"


class InvalidToken(AuthenticationError):
    """Access token is malformed or carries a bad signature."""

    error_type = "InvalidToken"


class TokenExpired(AuthenticationError):
    """Access token is past its expiry; the client should refresh and retry."""

    error_type = "TokenExpired"


class NoRefreshToken(AuthenticationError):
    """Refresh was requested without a refresh cookie."""

    error_type = "NoRefreshToken"


class InvalidRefreshToken(AuthenticationError):
    """Refresh token failed verification for any reason."""

    error_type = "InvalidRefreshToken"


class Forbidden(TodoListError):
    """Resource exists but belongs to another user."""

    status_code = 403
    error_type = "Forbidden"


class ResourceNotFound(TodoListError):
    """Resource does not exist or is hidden by ownership."""

    status_code = 404
    error_type = "NotFound"


class ConfigurationError(TodoListError):
    """Server-side misconfiguration detected while handling a request."""

    status_code = 500
    error_type = "InternalError"
