"""
Entrypoint for running the API in development.

In production run the factory under a WSGI server instead, e.g.
``gunicorn "todolist_core.main:create_app()"``.
"""
import os

from .main import create_app

app = create_app()

if __name__ == "__main__":
    host = os.getenv("FLASK_RUN_HOST", "127.0.0.1")
    port = int(os.getenv("FLASK_RUN_PORT", "3000"))
    debug = os.getenv("FLASK_DEBUG", "false").lower() in ("1", "true", "yes")
    app.run(host=host, port=port, debug=debug)
