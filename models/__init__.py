"""
Data models for the vending machine.

- VendingSelection / SELECTIONS: the closed set of product kinds and their
  display order
- ItemType / VendingItem: price and stock for one selection
- VendPlan: frozen outcome of validating a vend request
- PurchaseSession: a customer's in-progress selection, kept in the session
"""

from .selection import VendingSelection, SELECTIONS
from .item import ItemType, VendingItem
from .vend_plan import VendPlan
from .purchase import PurchaseSession

__all__ = [
    # Selection models
    "VendingSelection",
    "SELECTIONS",
    # Item models
    "ItemType",
    "VendingItem",
    # Vend models
    "VendPlan",
    "PurchaseSession",
]
