"""
project: mazegen
module: server.py
License: MIT

Server bootstrap helpers: start the Flask development server with logging
configured to a rotating file under instance/ plus the console.
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler

from mazegen import app, logging_utils


def start_server(host="0.0.0.0", port=5000, debug: bool = False):  # pragma: no cover (runtime only)
    """Configure logging and serve the maze API until interrupted."""
    _configure_logging()
    try:
        print(f"[INFO] Starting maze API server on {host}:{port}")
        app.run(host=host, port=port, debug=debug)
    except KeyboardInterrupt:
        print("\n[INFO] Server stopped by user (Ctrl+C)")
        sys.exit(0)


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _configure_logging(log_dir=None) -> str:
    """Route stdlib logging (Flask, werkzeug, 500 handler) to console and ``<log_dir>/app.log``.

    ``log_dir`` defaults to the app's instance folder. The threshold follows
    ``MAZEGEN_LOG_LEVEL`` so both log streams agree. Existing root handlers are
    replaced, making repeated calls safe. Returns the log file path.
    """
    log_dir = log_dir or app.instance_path
    os.makedirs(log_dir, exist_ok=True)
    log_path = os.path.join(log_dir, "app.log")

    level = logging_utils.CURRENT_LEVEL
    formatter = logging.Formatter(LOG_FORMAT)
    handlers = [
        RotatingFileHandler(log_path, maxBytes=1_000_000, backupCount=3),
        logging.StreamHandler(),
    ]

    root = logging.getLogger()
    for h in list(root.handlers):
        root.removeHandler(h)
    root.setLevel(level)
    for h in handlers:
        h.setLevel(level)
        h.setFormatter(formatter)
        root.addHandler(h)
    return log_path
