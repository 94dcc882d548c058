"""Application Factory Module

This module contains the application factory function for creating Flask app instances.
"""

from flask import Flask
from .config import get_config
from typing import Optional, Union


def create_app(config_name: Optional[Union[str, type]] = None) -> Flask:
    """Create and configure a Flask application instance.

    Static assets are mounted at the URL root, so any file under the
    configured static directory is reachable by its relative path.
    Paths matching neither ``/`` nor a static file get Flask's default 404.

    Args:
        config_name: Configuration name, or a configuration class

    Returns:
        Flask: Configured Flask application
    """
    if isinstance(config_name, type):
        config_class = config_name
    else:
        config_class = get_config(config_name or "development")

    app = Flask(
        __name__,
        static_folder=config_class.STATIC_DIR,
        static_url_path="",
        template_folder=config_class.TEMPLATE_DIR,
    )
    config_class.init_app(app)  # type: ignore

    # Register blueprints
    from .routes import main_bp

    app.register_blueprint(main_bp)

    return app
