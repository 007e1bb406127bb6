"""
Vending selections.

The set of product kinds is closed: inventory files may only reference
these names. ``SELECTIONS`` fixes the order collaborators display them in.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional, Tuple


class VendingSelection(Enum):
    """A product kind sold by the machine. Values match inventory file keys."""

    SODA = "soda"
    DIET_SODA = "dietSoda"
    CHIPS = "chips"
    COOKIE = "cookie"
    SANDWICH = "sandwich"
    WRAP = "wrap"
    CANDY_BAR = "candyBar"
    POP_TART = "popTart"
    WATER = "water"
    FRUIT_JUICE = "fruitJuice"
    SPORTS_DRINK = "sportsDrink"
    GUM = "gum"

    @classmethod
    def from_name(cls, name: str) -> Optional["VendingSelection"]:
        """
        Look up a selection by its inventory key.

        Args:
            name: Raw key (e.g., 'dietSoda')

        Returns:
            Matching VendingSelection, or None if the name is unknown
        """
        try:
            return cls(name)
        except ValueError:
            return None


# Canonical display order. Read-only; never reorder at runtime.
SELECTIONS: Tuple[VendingSelection, ...] = (
    VendingSelection.SODA,
    VendingSelection.DIET_SODA,
    VendingSelection.CHIPS,
    VendingSelection.COOKIE,
    VendingSelection.SANDWICH,
    VendingSelection.WRAP,
    VendingSelection.CANDY_BAR,
    VendingSelection.POP_TART,
    VendingSelection.WATER,
    VendingSelection.FRUIT_JUICE,
    VendingSelection.SPORTS_DRINK,
    VendingSelection.GUM,
)
