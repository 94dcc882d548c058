"""
Routes Package

This package contains all route definitions for the application.
"""

from .web import main_bp

# Export blueprints
__all__ = ["main_bp"]
