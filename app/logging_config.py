"""
Logging setup for the front door.

run.py and the gunicorn entrypoint both call ``setup_logging`` before the
app is created, so every module logger inherits the same handlers.
"""

import os
import sys
import logging
from pathlib import Path
from typing import Optional


def setup_logging(log_level: str = "INFO", log_file: str = "app.log") -> logging.Logger:
    """
    Send log records to stdout and to ``log_file``.

    Args:
        log_level (str): Level name; unknown names mean INFO
        log_file (str): Log file path, parent directories are created
    """
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    Path(log_file).parent.mkdir(parents=True, exist_ok=True)

    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout), logging.FileHandler(log_file)],
        force=True,  # replaces handlers left by an earlier call
    )

    # Werkzeug writes one line per request
    if os.environ.get("FLASK_ENV", "development") == "development":
        logging.getLogger("werkzeug").setLevel(logging.INFO)
        logging.getLogger("flask.app").setLevel(numeric_level)
    else:
        logging.getLogger("werkzeug").setLevel(logging.WARNING)
        logging.getLogger("flask.app").setLevel(logging.WARNING)

    # Startup banner is reported at every level
    logging.getLogger("app.server").setLevel(logging.INFO)

    return logging.getLogger(__name__)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the named logger, or this module's logger."""
    return logging.getLogger(name or __name__)
