"""
Vend decision model.

A VendPlan is the outcome of validating a vend request against the current
machine state, computed without touching that state. The machine then
applies the plan in a separate step.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from core.exceptions import VendingError
from models.selection import VendingSelection


@dataclass(frozen=True)
class VendPlan:
    """
    Immutable result of validating one vend request.

    ``decrement_stock`` and ``error`` are independent: a request that passes
    the selection and stock checks always decrements stock, even when it
    then fails the funds check.
    """

    selection: VendingSelection
    """Selection requested."""

    quantity: float
    """Units requested."""

    decrement_stock: bool = False
    """Whether the item's quantity is reduced by ``quantity``."""

    charge: float = 0.0
    """Amount taken from the deposited balance (0 unless the vend succeeds)."""

    error: Optional[VendingError] = None
    """Error to raise once the plan is applied, or None on success."""

    @property
    def succeeded(self) -> bool:
        return self.error is None
