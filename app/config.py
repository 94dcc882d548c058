# config.py - Single source of truth for all configuration
import os
from pathlib import Path
from dotenv import load_dotenv
from flask import Flask
from typing import Any, Optional

# Load environment variables from .env file
load_dotenv()

PACKAGE_DIR = Path(__file__).resolve().parent
PROJECT_ROOT = PACKAGE_DIR.parent


def resolve_static_dir(value: Optional[str] = None) -> str:
    """Resolve the static asset directory against the project root.

    Relative paths are anchored at the directory one level above the
    ``app`` package, matching where the front-end build writes ``dist/``.
    """
    path = Path(value or "dist")
    if not path.is_absolute():
        path = PROJECT_ROOT / path
    return str(path.resolve())


class Config:
    """Base configuration class - all config should be defined here"""

    # Server Configuration
    HOST = os.environ.get("HOST", "0.0.0.0")
    PORT = int(os.environ.get("PORT", 3000))

    # Asset Configuration
    STATIC_DIR = resolve_static_dir(os.environ.get("STATIC_DIR"))
    TEMPLATE_DIR = str(PACKAGE_DIR / "templates")
    INDEX_TEMPLATE = "index.html"

    # Logging Configuration
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
    LOG_FILE = os.environ.get("LOG_FILE", "app.log")

    # Default values for subclasses
    DEBUG = False
    TESTING = False

    @classmethod
    def init_app(cls, app: Flask) -> None:
        """Initialize application with this config"""
        app.config.update(
            {
                "HOST": cls.HOST,
                "PORT": cls.PORT,
                "STATIC_DIR": cls.STATIC_DIR,
                "TEMPLATE_DIR": cls.TEMPLATE_DIR,
                "INDEX_TEMPLATE": cls.INDEX_TEMPLATE,
                "LOG_LEVEL": cls.LOG_LEVEL,
                "LOG_FILE": cls.LOG_FILE,
                "DEBUG": cls.DEBUG,
                "TESTING": cls.TESTING,
            }
        )

        # Call subclass-specific initialization
        cls._init_subclass_specific(app)

    @classmethod
    def _init_subclass_specific(cls, app: Flask) -> None:
        pass


class DevelopmentConfig(Config):
    """Development configuration"""

    DEBUG = True
    TESTING = False
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "DEBUG")

    @classmethod
    def _init_subclass_specific(cls, app: Flask) -> None:
        """Development-specific initialization"""
        app.logger.debug("Development mode active")
        app.logger.debug("Static assets served from %s", cls.STATIC_DIR)


class ProductionConfig(Config):
    """Production configuration"""

    DEBUG = False
    TESTING = False
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "WARNING")

    # Production security headers
    SECURITY_HEADERS = {
        "X-Content-Type-Options": "nosniff",
        "X-Frame-Options": "DENY",
        "X-XSS-Protection": "1; mode=block",
    }

    @classmethod
    def _init_subclass_specific(cls, app: Flask) -> None:
        """Production-specific initialization"""

        # Add security headers middleware
        @app.after_request
        def set_security_headers(response: Any) -> Any:
            for header, value in cls.SECURITY_HEADERS.items():
                response.headers[header] = value
            return response


class TestingConfig(Config):
    """Testing configuration"""

    TESTING = True
    DEBUG = True
    HOST = "127.0.0.1"
    PORT = 0


# Configuration registry
config = {
    "development": DevelopmentConfig,
    "production": ProductionConfig,
    "testing": TestingConfig,
    "default": DevelopmentConfig,
}


def get_config(config_name: Optional[str] = None) -> type:
    """Get configuration class by name"""
    if config_name is None:
        config_name = os.environ.get("FLASK_ENV", "development")
    return config.get(config_name, config["default"])
