"""
Main routes (landing, health).
"""

from flask import Blueprint, jsonify, redirect, url_for

from .context import get_machine, get_machine_lock

main_bp = Blueprint("main", __name__)


@main_bp.route("/")
def index():
    """Redirect root to the selection grid data."""
    return redirect(url_for("api.selections"))


@main_bp.route("/health", methods=["GET"])
def health():
    """Health check: the machine is loaded and reports its balance."""
    machine = get_machine()
    with get_machine_lock():
        items = len(machine.inventory)
        balance = machine.amount_deposited

    return jsonify({
        "status": "ok",
        "items": items,
        "amount_deposited": balance,
    })
