"""Flask application factory."""

import logging

from flask import Flask, jsonify
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from .config import Settings, load_settings
from .db import close_request_core, init_db
from .exceptions import TodoListError
from .auth.decorators import TOKEN_SERVICE_EXTENSION
from .auth.token import TokenService

__version__ = "1.0.0"

logger = logging.getLogger(__name__)


# ============================================================================
# Error handlers
# ============================================================================


def _error_body(error_type: str, message: str, details: dict | None = None) -> dict:
    body = {"error": {"type": error_type, "message": message}}
    if details:
        body["error"]["details"] = details
    return body


def handle_todolist_error(error: TodoListError):
    """Render any domain error using the status and tag it carries."""
    if error.status_code >= 500:
        logger.error(f"{error.__class__.__name__}: {error.message}")
        # Server faults never expose internals to the client
        return jsonify(_error_body(error.error_type, "An internal error occurred")), error.status_code
    return jsonify(_error_body(error.error_type, error.message, error.details)), error.status_code


def handle_http_exception(error: HTTPException):
    """Render werkzeug errors (unknown route, bad method) in the same envelope."""
    return jsonify(_error_body(error.name.replace(" ", ""), error.description)), error.code


def handle_internal_error(error: Exception):
    """Catch-all boundary for unexpected faults."""
    logger.exception(f"Internal error: {error}")
    return jsonify(_error_body("InternalError", "An internal error occurred")), 500


# ============================================================================
# Application factory
# ============================================================================


def create_app(settings: Settings | None = None) -> Flask:
    """
    Create and configure the Flask app.

    Args:
        settings: Pre-built settings. When omitted they are loaded from the
                  environment, and a missing JWT secret aborts startup.
    """
    settings = settings or load_settings()

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    app = Flask(__name__)
    app.config.update(
        DATABASE_PATH=settings.database_path,
        BCRYPT_WORK_FACTOR=settings.bcrypt_work_factor,
        SECURE_COOKIES=settings.is_production,
    )
    app.extensions[TOKEN_SERVICE_EXTENSION] = TokenService(settings.token_keys())

    # Cookies must cross origins for the browser client
    CORS(app, origins=settings.cors_origins, supports_credentials=True)

    init_db(settings.database_path)
    logger.info("Database initialized successfully")

    app.teardown_appcontext(close_request_core)

    app.register_error_handler(TodoListError, handle_todolist_error)
    app.register_error_handler(HTTPException, handle_http_exception)
    app.register_error_handler(Exception, handle_internal_error)

    @app.route("/")
    def index():
        return jsonify({"message": "To-do List API", "version": __version__})

    @app.route("/health")
    def health():
        """Health check endpoint."""
        return jsonify({"status": "ok"})

    from .api import api_bp
    from .auth.api import auth_bp
    from .db.seed import seed_command

    app.register_blueprint(auth_bp)
    app.register_blueprint(api_bp)
    app.cli.add_command(seed_command)

    return app
