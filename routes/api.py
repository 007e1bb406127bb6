"""
API routes (read-only).

Handles:
- /api/selections - Every selection in display order, with stock if any
- /api/items/<selection> - One inventory entry
- /api/balance - Current deposited balance
"""

from flask import Blueprint, abort, jsonify

from models.selection import VendingSelection
from .context import get_machine, get_machine_lock


api_bp = Blueprint("api", __name__, url_prefix="/api")


def _item_payload(selection: VendingSelection, item) -> dict:
    payload = {"selection": selection.value, "stocked": item is not None}
    if item is not None:
        payload.update(item.to_dict())
    else:
        payload.update({"price": None, "quantity": None})
    return payload


@api_bp.route("/selections", methods=["GET"])
def selections():
    """
    List the grid cells.

    Order comes from the machine's canonical selection list, which does not
    depend on what is stocked; unstocked cells have null price/quantity.
    """
    machine = get_machine()
    with get_machine_lock():
        cells = [
            _item_payload(selection, machine.item_for_selection(selection))
            for selection in machine.selections()
        ]
        balance = machine.amount_deposited

    return jsonify({"selections": cells, "amount_deposited": balance})


@api_bp.route("/items/<name>", methods=["GET"])
def item(name: str):
    """Return price and quantity for one selection, 404 if unknown or unstocked."""
    selection = VendingSelection.from_name(name)
    if selection is None:
        abort(404, description=f"Unknown selection: {name}")

    with get_machine_lock():
        found = get_machine().item_for_selection(selection)
        payload = _item_payload(selection, found) if found is not None else None

    if payload is None:
        abort(404, description=f"Selection {name} is not stocked")

    return jsonify(payload)


@api_bp.route("/balance", methods=["GET"])
def balance():
    with get_machine_lock():
        amount = get_machine().amount_deposited
    return jsonify({"amount_deposited": amount})
