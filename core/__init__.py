"""
Core module for the vending machine.

Contains the exception hierarchy shared by the loader, the machine and
the web layer.
"""

from .exceptions import (
    VendingMachineAppError,
    InventoryError,
    InvalidResourceError,
    ConversionError,
    InvalidKeyError,
    VendingError,
    InvalidSelectionError,
    OutOfStockError,
    InsufficientFundsError,
    CorruptInventoryError,
)

__all__ = [
    "VendingMachineAppError",
    "InventoryError",
    "InvalidResourceError",
    "ConversionError",
    "InvalidKeyError",
    "VendingError",
    "InvalidSelectionError",
    "OutOfStockError",
    "InsufficientFundsError",
    "CorruptInventoryError",
]
