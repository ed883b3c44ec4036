"""
project: mazegen
module: __init__.py
License: MIT

Flask application and configuration setup.

The maze engine itself lives in ``mazegen.maze`` and has no web concerns; this
module wires the JSON API blueprint onto a Flask app whose configuration is
sourced from environment variables (optionally via a ``.env`` file) with
development defaults.
"""

import logging
import os
import uuid

from dotenv import load_dotenv
from flask import Flask, jsonify, request

# Load .env if present so SECRET_KEY / MAZE_* defaults can be supplied
# without exporting shell variables during development.
load_dotenv()

app = Flask(__name__, instance_relative_config=True)

try:
    os.makedirs(app.instance_path, exist_ok=True)
except OSError:
    # Read-only checkouts still work; only the rotating log file needs it.
    pass


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes", "on")


app.config.update(
    SECRET_KEY=os.getenv("SECRET_KEY", "dev-secret-change-me"),
    JSON_SORT_KEYS=False,
    MAZE_DEFAULT_WIDTH=int(os.getenv("MAZE_DEFAULT_WIDTH", "7")),
    MAZE_DEFAULT_HEIGHT=int(os.getenv("MAZE_DEFAULT_HEIGHT", "5")),
    MAZE_DEFAULT_ROOMS=int(os.getenv("MAZE_DEFAULT_ROOMS", "2")),
    MAZE_DEFAULT_BIAS=os.getenv("MAZE_DEFAULT_BIAS", "none"),
    MAZE_CACHE_MAX=int(os.getenv("MAZE_CACHE_MAX", "8")),
    MAZE_ENABLE_GENERATION_METRICS=_env_flag("MAZE_ENABLE_GENERATION_METRICS", "1"),
)

# Register HTTP blueprints (import after app is configured)
from mazegen.logging_utils import get_logger  # noqa: E402
from mazegen.maze import MazeError  # noqa: E402
from mazegen.routes.maze_api import bp_maze  # noqa: E402

app.register_blueprint(bp_maze)


@app.errorhandler(MazeError)
def maze_error(e):
    status = 404 if e.code == "not_in_tree" else 400
    get_logger("mazegen.api").warn(event="maze_error", code=e.code, path=request.path, status=status)
    return jsonify({"error": e.code, "message": str(e)}), status


@app.errorhandler(500)
def internal_error(e):
    error_id = uuid.uuid4().hex[:8]
    logging.exception("Unhandled exception (id=%s)", error_id)
    return jsonify({"error": "internal", "error_id": error_id}), 500


def create_app():
    """Return the configured Flask app instance."""
    return app
