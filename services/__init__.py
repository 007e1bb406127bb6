"""
Services layer for the vending machine.

- inventory_loader: Reads the inventory file into typed items
- VendingMachine: Inventory and balance owner; vend and deposit
"""

from .inventory_loader import load_inventory
from .vending_machine import VendingMachine, VendingMachineType

__all__ = [
    "load_inventory",
    "VendingMachine",
    "VendingMachineType",
]
