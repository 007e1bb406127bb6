"""Accessors for the app-wide machine and its lock."""

from threading import Lock

from flask import current_app

from services.vending_machine import VendingMachineType


def get_machine() -> VendingMachineType:
    """The machine served by the current app."""
    return current_app.config["VENDING_MACHINE"]


def get_machine_lock() -> Lock:
    """Lock that must be held around every vend/deposit call."""
    return current_app.config["MACHINE_LOCK"]
