"""
Inventory loader.

Reads the packaged inventory file and builds the typed mapping the
vending machine is constructed with.

File Format:
    A dictionary keyed by selection name, each value holding numeric
    ``price`` and ``quantity`` entries. Both property-list (.plist) and
    JSON (.json) files are accepted:

        <dict>
            <key>soda</key>
            <dict>
                <key>price</key><real>1.25</real>
                <key>quantity</key><real>10</real>
            </dict>
            ...
        </dict>

Errors:
    InvalidResourceError - file does not exist
    ConversionError      - file unreadable, or an entry has the wrong shape
    InvalidKeyError      - entry key is not a VendingSelection value
"""

from __future__ import annotations

import json
import plistlib
from pathlib import Path
from typing import Any, Dict, Union
from xml.parsers.expat import ExpatError

from core.exceptions import ConversionError, InvalidKeyError, InvalidResourceError
from models.item import ItemType, VendingItem
from models.selection import VendingSelection
from logging_config import get_logger


# Module logger
logger = get_logger(__name__)


def dictionary_from_file(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Read a plist or JSON file into a dictionary.

    Args:
        path: Path to the inventory file

    Returns:
        Top-level dictionary from the file

    Raises:
        InvalidResourceError: If the file does not exist
        ConversionError: If the file cannot be parsed, or its top level is
            not a dictionary
    """
    path = Path(path)
    if not path.is_file():
        raise InvalidResourceError(str(path))

    try:
        if path.suffix.lower() == ".json":
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        else:
            with open(path, "rb") as f:
                data = plistlib.load(f)
    except (OSError, ValueError, ExpatError) as e:
        raise ConversionError(str(e), resource=str(path)) from e

    if not isinstance(data, dict):
        raise ConversionError(
            f"expected a dictionary, got {type(data).__name__}", resource=str(path)
        )

    return data


def _number(entry: Dict[str, Any], field: str, key: str) -> float:
    value = entry.get(field)
    # bool is an int subclass; plist <true/> must not pass as 1
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConversionError(f"{key!r} has no numeric {field!r}")
    if value < 0:
        raise ConversionError(f"{key!r} has negative {field!r}: {value}")
    return float(value)


def inventory_from_dictionary(
    dictionary: Dict[str, Any],
) -> Dict[VendingSelection, ItemType]:
    """
    Convert a raw dictionary into typed inventory records.

    Args:
        dictionary: Selection name -> {"price": ..., "quantity": ...}

    Returns:
        Selection -> VendingItem mapping

    Raises:
        InvalidKeyError: If a key is not a known selection
        ConversionError: If an entry is not a dictionary with non-negative
            numeric price and quantity
    """
    inventory: Dict[VendingSelection, ItemType] = {}

    for key, value in dictionary.items():
        selection = VendingSelection.from_name(key)
        if selection is None:
            raise InvalidKeyError(key)

        if not isinstance(value, dict):
            raise ConversionError(f"{key!r} is not a dictionary")

        item = VendingItem(
            price=_number(value, "price", key),
            quantity=_number(value, "quantity", key),
        )
        logger.debug(f"Loaded {key}: {item}")
        inventory[selection] = item

    return inventory


def load_inventory(path: Union[str, Path]) -> Dict[VendingSelection, ItemType]:
    """
    Load the inventory file at ``path``.

    Any InventoryError propagates: callers must not build a machine from
    partial data.
    """
    inventory = inventory_from_dictionary(dictionary_from_file(path))
    logger.info(f"Loaded {len(inventory)} inventory items from {path}")
    return inventory
