"""Resource API for lists and todos.

This module provides the api blueprint that aggregates the list and todo
resources and applies the authentication gate to every one of them.
"""

from flask import Blueprint, request

from ..auth.decorators import authenticate_request
from . import lists, todos

# Create the api blueprint (routes keep their own paths, no shared prefix)
api_bp = Blueprint("api", __name__)


# ============================================================================
# Authentication Middleware (blueprint-level)
# ============================================================================


@api_bp.before_request
def authenticate():
    """
    Require a valid access cookie for all list and todo endpoints.

    CORS preflight requests carry no cookies and are let through.

    Raises:
        NotAuthenticated, InvalidToken, TokenExpired: See authenticate_request()
    """
    if request.method == "OPTIONS":
        return
    authenticate_request()


api_bp.register_blueprint(lists.lists_bp)
api_bp.register_blueprint(todos.todos_bp)

__all__ = ["api_bp"]
