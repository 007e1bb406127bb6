"""
Flask route blueprints for the vending machine.

- main: Landing redirect and health check
- api: Read-only inventory and balance endpoints
- purchase: Selection, quantity, deposit and purchase actions

Each blueprint is registered with the Flask app in create_app().
"""

from .main import main_bp
from .api import api_bp
from .purchase import purchase_bp

__all__ = [
    "main_bp",
    "api_bp",
    "purchase_bp",
]


def register_blueprints(app):
    """
    Register all blueprints with the Flask app.

    Args:
        app: Flask application instance
    """
    app.register_blueprint(main_bp)
    app.register_blueprint(api_bp)
    app.register_blueprint(purchase_bp)
