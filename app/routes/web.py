"""
Web Routes Module

This module contains the page route for the application.
"""

from flask import Blueprint, current_app, render_template

# Create blueprint for web routes
main_bp = Blueprint("main", __name__)


@main_bp.route("/")
def index():
    """Serve the main page"""
    return render_template(current_app.config["INDEX_TEMPLATE"])
