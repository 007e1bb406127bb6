"""
Configuration for the vending machine web app.

Values come from the environment, with a .env file loaded first.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env file early so environment variables are available for Config class
load_dotenv(override=True)

# Base directory (where this file lives)
BASE_DIR = Path(__file__).resolve().parent


class Config:
    """Default configuration for the Flask application."""

    # Flask settings
    SECRET_KEY = os.environ.get("FLASK_SECRET_KEY", "dev-secret-key")
    SESSION_COOKIE_NAME = "vending_session"
    ENVIRONMENT = os.environ.get("FLASK_ENV", "development")
    DEBUG = os.environ.get("FLASK_DEBUG", "1") == "1"

    # ==========================================================================
    # Machine Configuration
    # ==========================================================================
    # INVENTORY_FILE: plist or JSON file mapping selection -> {price, quantity}
    # INITIAL_BALANCE: amount already deposited when the machine starts
    # DEPOSIT_INCREMENT: amount added by the "deposit funds" button
    # ==========================================================================
    INVENTORY_FILE = os.environ.get(
        "VENDING_INVENTORY_FILE",
        str(BASE_DIR / "data" / "vending_inventory.plist")
    )
    INITIAL_BALANCE = float(os.environ.get("VENDING_INITIAL_BALANCE", "10.0"))
    DEPOSIT_INCREMENT = float(os.environ.get("VENDING_DEPOSIT_INCREMENT", "5.00"))


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False
    TESTING = False
    SESSION_COOKIE_SECURE = True
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True
    TESTING = False


class TestingConfig(Config):
    """Testing configuration."""
    DEBUG = False
    TESTING = True
    SECRET_KEY = "test-secret-key"
