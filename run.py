#!/usr/bin/env python3
"""
Front Door Runner

This file starts the Flask application on its own listener for local use,
and exposes ``app`` for WSGI servers (``gunicorn -c gunicorn.conf.py run:app``).
"""

import os
from typing import Optional
from app import create_app
from app.config import get_config
from app.logging_config import get_logger, setup_logging
from app.server import FrontDoor

logger = get_logger("run")


def main(port: Optional[int] = None) -> None:
    """Main function to run the application"""
    config_name = os.environ.get("FLASK_ENV") or "development"
    # Keep FLASK_ENV in sync so logging_config can determine environment-specific logger levels
    os.environ["FLASK_ENV"] = config_name
    config_class = get_config(config_name)

    setup_logging(config_class.LOG_LEVEL, config_class.LOG_FILE)

    app = create_app(config_name)
    front_door = FrontDoor(app, host=config_class.HOST)

    # A bind failure propagates and ends the process
    listener = front_door.start(config_class.PORT if port is None else port)

    try:
        listener.serve_forever()
    except KeyboardInterrupt:
        pass
    finally:
        logger.info("Shutting down")
        listener.shutdown()


# Create the app instance for WSGI servers (Gunicorn)
app = None

if __name__ == "__main__":
    main()
else:
    # When imported by WSGI server, create app without running server
    config_name = os.environ.get("FLASK_ENV", "production")
    config_class = get_config(config_name)
    setup_logging(config_class.LOG_LEVEL, config_class.LOG_FILE)
    app = create_app(config_name)
