"""
Purchase session model.

Tracks what a customer has picked on the selection grid and how many units
they want, stored in the Flask session between requests.

Lifecycle:
    1. Customer picks a selection -> quantity resets to 1
    2. Customer adjusts quantity with the stepper
    3. Purchase is attempted; on an alert dismissal the quantity resets
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Dict, Any, Optional

from models.selection import VendingSelection


DEFAULT_QUANTITY = 1.0


@dataclass
class PurchaseSession:
    """A customer's in-progress purchase."""

    selection: Optional[str] = None
    """Raw selection name (e.g., 'soda'), or None before anything is picked."""

    quantity: float = DEFAULT_QUANTITY
    """Units to vend."""

    @property
    def current_selection(self) -> Optional[VendingSelection]:
        """The picked selection as an enum member, or None."""
        if self.selection is None:
            return None
        return VendingSelection.from_name(self.selection)

    def select(self, selection: VendingSelection) -> None:
        """Pick a selection and start over at a quantity of one."""
        self.selection = selection.value
        self.reset()

    def reset(self) -> None:
        self.quantity = DEFAULT_QUANTITY

    def total_price(self, machine) -> Optional[float]:
        """
        Price of the current selection times the requested quantity.

        Args:
            machine: Any VendingMachineType to look the item up in

        Returns:
            Total price, or None if nothing is selected or not stocked
        """
        selection = self.current_selection
        if selection is None:
            return None
        item = machine.item_for_selection(selection)
        if item is None:
            return None
        return item.price * self.quantity

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for session storage."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "PurchaseSession":
        """Create from dictionary (e.g., from session)."""
        data = data or {}
        return cls(
            selection=data.get("selection"),
            quantity=float(data.get("quantity", DEFAULT_QUANTITY)),
        )
