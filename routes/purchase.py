"""
Purchase routes.

Handles:
- /api/select   - Pick a selection (quantity resets to 1)
- /api/quantity - Change the requested quantity
- /api/deposit  - Add funds to the machine
- /api/purchase - Vend the current selection
- /api/reset    - Return the quantity to 1

The customer's selection and quantity live in the Flask session. The
machine itself is shared by every session; every read and write of it
happens under MACHINE_LOCK.
"""

import math
from numbers import Real

from flask import (
    Blueprint,
    current_app,
    jsonify,
    request,
    session,
)

from core.exceptions import InsufficientFundsError, VendingError
from models.purchase import PurchaseSession
from models.selection import VendingSelection
from logging_config import get_logger
from .context import get_machine, get_machine_lock


# Module logger
logger = get_logger(__name__)

purchase_bp = Blueprint("purchase", __name__, url_prefix="/api")

SESSION_KEY = "purchase"


def _load_purchase() -> PurchaseSession:
    return PurchaseSession.from_dict(session.get(SESSION_KEY))


def _save_purchase(purchase: PurchaseSession) -> None:
    session[SESSION_KEY] = purchase.to_dict()
    session.modified = True


def _purchase_payload(purchase: PurchaseSession) -> dict:
    machine = get_machine()
    with get_machine_lock():
        return {
            **purchase.to_dict(),
            "total_price": purchase.total_price(machine),
            "amount_deposited": machine.amount_deposited,
        }


def _bad_request(error: str, title: str):
    return jsonify({"error": error, "title": title}), 400


def _number_from_body(field: str):
    """Numeric field from the JSON body, None if missing, False if invalid."""
    body = request.get_json(silent=True) or {}
    if not isinstance(body, dict):
        return False
    if field not in body:
        return None
    value = body[field]
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    # Flask's JSON parser accepts NaN and Infinity
    if not math.isfinite(value):
        return False
    return float(value)


def alert_for(error: VendingError) -> dict:
    """
    Map a vend failure to the alert shown to the customer.

    Returns:
        Dict with machine-readable ``error``, alert ``title`` and ``message``
    """
    alert = {
        "error": error.kind,
        "title": error.title,
        "message": None,
    }
    if isinstance(error, InsufficientFundsError):
        alert["message"] = error.message
        alert["required"] = error.required
    return alert


@purchase_bp.route("/select", methods=["POST"])
def select():
    """Pick a grid cell. Unstocked selections are allowed; vend rejects them."""
    body = request.get_json(silent=True) or {}
    name = body.get("selection") if isinstance(body, dict) else None
    selection = VendingSelection.from_name(name) if isinstance(name, str) else None
    if selection is None:
        return _bad_request("unknown_selection", f"Unknown selection: {name}")

    purchase = _load_purchase()
    purchase.select(selection)
    _save_purchase(purchase)

    return jsonify(_purchase_payload(purchase))


@purchase_bp.route("/quantity", methods=["POST"])
def quantity():
    value = _number_from_body("quantity")
    if not value or value <= 0:
        return _bad_request("invalid_quantity", "Quantity must be a positive number")

    purchase = _load_purchase()
    purchase.quantity = value
    _save_purchase(purchase)

    return jsonify(_purchase_payload(purchase))


@purchase_bp.route("/reset", methods=["POST"])
def reset():
    purchase = _load_purchase()
    purchase.reset()
    _save_purchase(purchase)
    return jsonify(_purchase_payload(purchase))


@purchase_bp.route("/deposit", methods=["POST"])
def deposit():
    """
    Add funds.

    Without an ``amount`` in the body, deposits the configured
    DEPOSIT_INCREMENT (the "deposit funds" button).
    """
    amount = _number_from_body("amount")
    if amount is False:
        return _bad_request("invalid_amount", "Amount must be a number")
    if amount is None:
        amount = current_app.config["DEPOSIT_INCREMENT"]

    machine = get_machine()
    with get_machine_lock():
        machine.deposit(amount)
        balance = machine.amount_deposited

    return jsonify({"deposited": amount, "amount_deposited": balance})


@purchase_bp.route("/purchase", methods=["POST"])
def purchase():
    """
    Vend the session's current selection and quantity.

    Returns:
        200 with the new balance on success
        400 if nothing is selected
        409 with an alert payload if the machine rejects the vend
    """
    current = _load_purchase()
    selection = current.current_selection
    if selection is None:
        return _bad_request("no_selection", "No selection made")

    machine = get_machine()
    try:
        with get_machine_lock():
            machine.vend(selection, current.quantity)
            balance = machine.amount_deposited
            item = machine.item_for_selection(selection)
            item_data = item.to_dict() if item is not None else None
    except VendingError as e:
        logger.info(f"Purchase rejected: {e.kind}")
        # Dismissing the alert starts the customer over at one unit
        current.reset()
        _save_purchase(current)
        return jsonify(alert_for(e)), 409

    return jsonify({
        "status": "vended",
        "selection": selection.value,
        "quantity": current.quantity,
        "amount_deposited": balance,
        "item": item_data,
    })
