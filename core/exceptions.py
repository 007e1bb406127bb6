"""
Custom exceptions for the vending machine.

Exception Hierarchy:
    VendingMachineAppError (base)
    ├── InventoryError            - Inventory could not be loaded (startup failure)
    │   ├── InvalidResourceError  - Backing data file not found
    │   ├── ConversionError       - Data could not be parsed into items
    │   └── InvalidKeyError       - Entry key is not a known selection
    ├── VendingError              - Vend request rejected (runtime, recoverable)
    │   ├── InvalidSelectionError - Selection has no inventory entry
    │   ├── OutOfStockError       - Selection has no units left
    │   └── InsufficientFundsError - Deposited balance too low
    └── CorruptInventoryError     - Machine handed a malformed mapping (programmer error)

Usage:
    Startup errors (InventoryError) cause the app to fail fast.
    VendingError subclasses are normal outcomes of a purchase; callers
    branch on the specific kind and retry with corrected input.
"""

from typing import Optional, Dict, Any


class VendingMachineAppError(Exception):
    """
    Base exception for all vending machine errors.

    All custom exceptions inherit from this class, allowing callers to catch
    all application-specific errors with a single except clause if needed.
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        """
        Initialize the exception.

        Args:
            message: Human-readable error message
            details: Optional dictionary with additional context for debugging
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


# =============================================================================
# STARTUP ERRORS - Application will not start if these occur
# =============================================================================

class InventoryError(VendingMachineAppError):
    """
    Base class for inventory loading failures.

    These are FATAL - no machine may be built from partial inventory.
    """


class InvalidResourceError(InventoryError):
    """
    The inventory data file could not be located.

    Typical causes:
    - VENDING_INVENTORY_FILE points to a missing path
    - Packaged data file was not installed
    """

    def __init__(self, resource: str):
        message = f"Inventory resource not found: {resource}"
        details = {
            "resource": resource,
            "resolution": "Check VENDING_INVENTORY_FILE in .env",
        }
        super().__init__(message, details)
        self.resource = resource


class ConversionError(InventoryError):
    """
    The inventory data could not be parsed into the expected shape.

    The file must hold a mapping of selection name to a dictionary with
    numeric ``price`` and ``quantity`` entries.
    """

    def __init__(self, reason: str, resource: Optional[str] = None):
        message = f"Inventory data could not be converted: {reason}"
        details = {}
        if resource:
            details["resource"] = resource
        super().__init__(message, details)
        self.reason = reason
        self.resource = resource


class InvalidKeyError(InventoryError):
    """An inventory entry is keyed by a name that is not a known selection."""

    def __init__(self, key: str):
        message = f"Unknown vending selection: {key!r}"
        super().__init__(message, {"key": key})
        self.key = key


# =============================================================================
# RUNTIME ERRORS - Vend fails, machine state stays usable
# =============================================================================

class VendingError(VendingMachineAppError):
    """
    Base class for vend failures.

    Each subclass carries a short ``title`` for alerts and ``kind`` for
    machine-readable responses.
    """

    kind = "vending_error"
    title = "Vend failed"


class InvalidSelectionError(VendingError):
    """The requested selection has no entry in the inventory."""

    kind = "invalid_selection"
    title = "Invalid Selection!"

    def __init__(self, selection: str):
        super().__init__(
            f"Selection {selection!r} is not stocked in this machine",
            {"selection": selection},
        )
        self.selection = selection


class OutOfStockError(VendingError):
    """The requested selection has no units left."""

    kind = "out_of_stock"
    title = "Out of Stock"

    def __init__(self, selection: str):
        super().__init__(
            f"Selection {selection!r} is out of stock",
            {"selection": selection},
        )
        self.selection = selection


class InsufficientFundsError(VendingError):
    """
    Not enough deposited to pay for the requested quantity.

    ``required`` is the additional amount the customer must deposit.
    """

    kind = "insufficient_funds"
    title = "Insufficient funds"

    def __init__(self, required: float):
        message = f"Additional ${required} needed to complete the transaction"
        details = {
            "required": required,
            "resolution": "Deposit more funds and try again",
        }
        super().__init__(message, details)
        self.required = required


# =============================================================================
# PROGRAMMER ERRORS - Distinct from the recoverable vend taxonomy
# =============================================================================

class CorruptInventoryError(VendingMachineAppError):
    """
    The machine was constructed with a mapping it cannot work with.

    Raised for keys that are not VendingSelection members or values that do
    not provide price and quantity. This indicates a bug in the caller,
    not a customer-facing failure.
    """

    def __init__(self, reason: str):
        super().__init__(f"Corrupt inventory mapping: {reason}")
        self.reason = reason
