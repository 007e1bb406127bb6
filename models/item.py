"""
Item data models.

``ItemType`` is the capability every inventory entry provides: a fixed
price and a mutable stock quantity. ``VendingItem`` is the only concrete
implementation; tests may substitute their own.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, Any


class ItemType(ABC):
    """Price and stock record for one selection."""

    @property
    @abstractmethod
    def price(self) -> float:
        """Unit price."""

    @property
    @abstractmethod
    def quantity(self) -> float:
        """Units currently in stock."""

    @quantity.setter
    @abstractmethod
    def quantity(self, value: float) -> None:
        ...

    def has_any_stock(self) -> bool:
        """Whether at least some stock remains. This is the check vend uses."""
        return self.quantity > 0

    def has_sufficient_stock(self, requested: float) -> bool:
        """Whether stock covers ``requested`` units."""
        return self.quantity >= requested

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON responses."""
        return {"price": self.price, "quantity": self.quantity}


class VendingItem(ItemType):
    """
    A stocked item.

    Quantity is a float to match the inventory file format, although it
    only ever holds whole counts in practice.
    """

    __slots__ = ("_price", "_quantity")

    def __init__(self, price: float, quantity: float):
        self._price = float(price)
        self._quantity = float(quantity)

    @property
    def price(self) -> float:
        return self._price

    @property
    def quantity(self) -> float:
        return self._quantity

    @quantity.setter
    def quantity(self, value: float) -> None:
        self._quantity = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VendingItem):
            return NotImplemented
        return self._price == other._price and self._quantity == other._quantity

    def __repr__(self) -> str:
        return f"VendingItem(price={self._price}, quantity={self._quantity})"
