"""
Vending machine service.

Owns the inventory and the deposited balance. ``vend`` is the only
operation that changes stock; ``deposit`` and ``vend`` are the only ones
that change the balance.

Vend Flow:
    plan_vend()  - pure validation, returns a VendPlan
    _apply()     - writes the plan's stock and balance changes
    vend()       - plan, apply, then raise the plan's error if any

Ordering:
    A request that passes the selection and stock checks has its stock
    decremented before funds are checked, and the decrement stays in place
    when funds are insufficient. The stock check only requires the item to
    have some stock (``has_any_stock``), not enough for the request.

Thread Safety:
    None. Callers serving concurrent requests must hold a lock around
    vend() and deposit() (the Flask app keeps one in MACHINE_LOCK).
"""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from typing import Dict, Mapping, Optional, Tuple

from core.exceptions import (
    CorruptInventoryError,
    InsufficientFundsError,
    InvalidSelectionError,
    OutOfStockError,
)
from models.item import ItemType
from models.selection import SELECTIONS, VendingSelection
from models.vend_plan import VendPlan
from logging_config import get_logger


# Module logger
logger = get_logger(__name__)

DEFAULT_AMOUNT_DEPOSITED = 10.0


class VendingMachineType(ABC):
    """Operations every vending machine offers to its collaborators."""

    inventory: Dict[VendingSelection, ItemType]
    amount_deposited: float

    @abstractmethod
    def selections(self) -> Tuple[VendingSelection, ...]:
        """All selections in canonical display order."""

    @abstractmethod
    def vend(self, selection: VendingSelection, quantity: float) -> None:
        """Dispense ``quantity`` units of ``selection`` against the balance."""

    @abstractmethod
    def deposit(self, amount: float) -> None:
        """Add ``amount`` to the balance."""

    @abstractmethod
    def item_for_selection(self, selection: VendingSelection) -> Optional[ItemType]:
        """Inventory entry for ``selection``, or None."""


class VendingMachine(VendingMachineType):
    """
    The vending machine core.

    Attributes:
        inventory: Selection -> item mapping, mutated in place by vend()
        amount_deposited: Current balance
    """

    def __init__(
        self,
        inventory: Mapping[VendingSelection, ItemType],
        amount_deposited: float = DEFAULT_AMOUNT_DEPOSITED,
    ):
        """
        Initialize the machine.

        Args:
            inventory: Fully built selection -> item mapping
            amount_deposited: Starting balance

        Raises:
            CorruptInventoryError: If a key is not a VendingSelection or a
                value is not an ItemType
        """
        for key, item in inventory.items():
            if not isinstance(key, VendingSelection):
                raise CorruptInventoryError(f"key {key!r} is not a VendingSelection")
            if not isinstance(item, ItemType):
                raise CorruptInventoryError(
                    f"value for {key.value!r} is {type(item).__name__}, not an item"
                )

        # Items are copied so callers cannot change stock behind vend()
        self.inventory: Dict[VendingSelection, ItemType] = {
            key: copy.copy(item) for key, item in inventory.items()
        }
        self.amount_deposited = amount_deposited

        logger.info(
            f"VendingMachine initialized with {len(self.inventory)} items, "
            f"balance {self.amount_deposited}"
        )

    def selections(self) -> Tuple[VendingSelection, ...]:
        return SELECTIONS

    def item_for_selection(self, selection: VendingSelection) -> Optional[ItemType]:
        return self.inventory.get(selection)

    def deposit(self, amount: float) -> None:
        """
        Add funds to the balance.

        No validation is applied: any amount, including zero or negative,
        is added as given.
        """
        self.amount_deposited += amount
        logger.info(f"Deposited {amount}, balance now {self.amount_deposited}")

    def plan_vend(self, selection: VendingSelection, quantity: float) -> VendPlan:
        """
        Decide the outcome of a vend request without changing any state.

        Args:
            selection: Selection to vend
            quantity: Units requested

        Returns:
            VendPlan describing the stock and balance changes and any error

        Raises:
            TypeError: If selection is not a VendingSelection
        """
        if not isinstance(selection, VendingSelection):
            raise TypeError(
                f"selection must be a VendingSelection, got {type(selection).__name__}"
            )

        item = self.inventory.get(selection)
        if item is None:
            return VendPlan(
                selection=selection,
                quantity=quantity,
                error=InvalidSelectionError(selection.value),
            )

        if not item.has_any_stock():
            return VendPlan(
                selection=selection,
                quantity=quantity,
                error=OutOfStockError(selection.value),
            )

        total_price = item.price * quantity
        if self.amount_deposited >= total_price:
            return VendPlan(
                selection=selection,
                quantity=quantity,
                decrement_stock=True,
                charge=total_price,
            )

        return VendPlan(
            selection=selection,
            quantity=quantity,
            decrement_stock=True,
            error=InsufficientFundsError(total_price - self.amount_deposited),
        )

    def _apply(self, plan: VendPlan) -> None:
        if plan.decrement_stock:
            item = self.inventory[plan.selection]
            item.quantity -= plan.quantity
            self.inventory[plan.selection] = item
        if plan.charge:
            self.amount_deposited -= plan.charge

    def vend(self, selection: VendingSelection, quantity: float) -> None:
        """
        Dispense items, charging the deposited balance.

        Args:
            selection: Selection to vend
            quantity: Units requested

        Raises:
            InvalidSelectionError: Selection not in inventory
            OutOfStockError: Item has no stock
            InsufficientFundsError: Balance below price * quantity (stock is
                still decremented)
            TypeError: If selection is not a VendingSelection
        """
        plan = self.plan_vend(selection, quantity)
        self._apply(plan)

        if plan.error is not None:
            logger.warning(f"Vend of {quantity} x {selection.value} failed: {plan.error}")
            raise plan.error

        logger.info(
            f"Vended {quantity} x {selection.value} for {plan.charge}, "
            f"balance now {self.amount_deposited}"
        )
