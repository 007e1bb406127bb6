"""
Vending Machine - Flask Application Entry Point.

A slim app factory that:
1. Loads the inventory file (fail-fast on any loader error)
2. Builds the VendingMachine with the configured starting balance
3. Registers route blueprints
4. Sets up JSON error handlers

ARCHITECTURE:
    Main Thread
    ├── Inventory load (startup only)
    └── Flask request handling

    Request threads share ONE VendingMachine. The machine does no locking
    of its own, so every vend/deposit runs under MACHINE_LOCK.
"""

from __future__ import annotations

import logging
import os
import threading
from typing import Optional

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from logging_config import setup_logging, get_logger
from core.exceptions import InventoryError
from services.inventory_loader import load_inventory
from services.vending_machine import VendingMachine, VendingMachineType
from routes import register_blueprints


# Module logger (configured after setup_logging)
logger = get_logger(__name__)


def create_app(
    config_object: str = "config.Config",
    machine: Optional[VendingMachineType] = None,
) -> Flask:
    """
    Application factory - creates and configures Flask app.

    FAIL-FAST: If the inventory cannot be loaded, the app will not start.

    Args:
        config_object: Import path of the config class to load
        machine: Prebuilt machine to serve instead of loading INVENTORY_FILE

    Returns:
        Configured Flask application

    Raises:
        InventoryError: If the inventory file is missing or malformed
    """
    app = Flask(__name__)
    app.config.from_object(config_object)

    # Configure logging
    log_level = logging.DEBUG if app.config.get("DEBUG") else logging.INFO
    enable_file_logging = app.config.get("ENVIRONMENT") == "production"

    root_logger = setup_logging(
        log_level=log_level,
        enable_file_logging=enable_file_logging
    )

    # Set Flask's logger to use our configured logger
    app.logger.handlers = root_logger.handlers
    app.logger.setLevel(log_level)

    logger.info(f"Starting vending machine in {app.config.get('ENVIRONMENT')} mode")

    # =========================================================================
    # CORE INITIALIZATION (FAIL-FAST)
    # =========================================================================

    if machine is None:
        inventory_file = app.config["INVENTORY_FILE"]
        try:
            inventory = load_inventory(inventory_file)
        except InventoryError as e:
            logger.error(f"FATAL: Cannot start application - {e}")
            raise

        machine = VendingMachine(
            inventory, amount_deposited=app.config["INITIAL_BALANCE"]
        )

    app.config["VENDING_MACHINE"] = machine
    app.config["MACHINE_LOCK"] = threading.Lock()

    # =========================================================================
    # REGISTER BLUEPRINTS
    # =========================================================================

    register_blueprints(app)

    # =========================================================================
    # ERROR HANDLERS
    # =========================================================================

    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        return jsonify({"error": e.name, "message": e.description}), e.code

    @app.errorhandler(500)
    def handle_server_error(e):
        logger.error(f"500 error: {e}", exc_info=True)
        return jsonify({
            "error": "Internal Server Error",
            "message": "An unexpected error occurred. Please try again.",
        }), 500

    logger.info("Application initialized successfully")
    return app


if __name__ == "__main__":
    app = create_app()
    debug_mode = os.environ.get("FLASK_DEBUG", "1") == "1"
    app.run(debug=debug_mode)
