"""
Unit tests for the inventory loader.

Tests plist and JSON parsing and each loader failure.
"""

import json
from pathlib import Path

import pytest

from config import BASE_DIR
from core.exceptions import (
    ConversionError,
    InvalidKeyError,
    InvalidResourceError,
    InventoryError,
)
from models.item import VendingItem
from models.selection import SELECTIONS, VendingSelection
from services.inventory_loader import (
    dictionary_from_file,
    inventory_from_dictionary,
    load_inventory,
)


def _write_json(tmp_path: Path, data) -> Path:
    path = tmp_path / "inventory.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


class TestDictionaryFromFile:
    """Test reading raw files."""

    def test_reads_plist(self, plist_inventory_file):
        data = dictionary_from_file(plist_inventory_file)
        assert data["soda"] == {"price": 1.25, "quantity": 10.0}
        assert data["gum"]["quantity"] == 20

    def test_reads_json(self, tmp_path):
        path = _write_json(tmp_path, {"water": {"price": 0.75, "quantity": 3}})
        assert dictionary_from_file(path) == {"water": {"price": 0.75, "quantity": 3}}

    def test_missing_file(self, tmp_path):
        with pytest.raises(InvalidResourceError) as exc_info:
            dictionary_from_file(tmp_path / "nope.plist")
        assert "nope.plist" in exc_info.value.resource

    def test_directory_is_not_a_resource(self, tmp_path):
        with pytest.raises(InvalidResourceError):
            dictionary_from_file(tmp_path)

    def test_garbage_plist(self, tmp_path):
        path = tmp_path / "broken.plist"
        path.write_text("this is not a plist", encoding="utf-8")
        with pytest.raises(ConversionError):
            dictionary_from_file(path)

    def test_garbage_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ConversionError):
            dictionary_from_file(path)

    def test_top_level_must_be_dict(self, tmp_path):
        path = _write_json(tmp_path, [1, 2, 3])
        with pytest.raises(ConversionError) as exc_info:
            dictionary_from_file(path)
        assert "list" in exc_info.value.reason


class TestInventoryFromDictionary:
    """Test conversion into typed items."""

    def test_converts_entries(self):
        inventory = inventory_from_dictionary({
            "soda": {"price": 1.25, "quantity": 10},
            "candyBar": {"price": 1, "quantity": 0},
        })

        assert inventory == {
            VendingSelection.SODA: VendingItem(price=1.25, quantity=10),
            VendingSelection.CANDY_BAR: VendingItem(price=1.0, quantity=0.0),
        }
        assert isinstance(inventory[VendingSelection.CANDY_BAR].quantity, float)

    def test_empty_dictionary(self):
        assert inventory_from_dictionary({}) == {}

    def test_unknown_key(self):
        with pytest.raises(InvalidKeyError) as exc_info:
            inventory_from_dictionary({"pizza": {"price": 3.0, "quantity": 1}})
        assert exc_info.value.key == "pizza"

    def test_key_is_case_sensitive(self):
        with pytest.raises(InvalidKeyError):
            inventory_from_dictionary({"DietSoda": {"price": 1.0, "quantity": 1}})

    @pytest.mark.parametrize("value", [
        "1.25",
        {"price": 1.25},
        {"quantity": 3},
        {"price": "1.25", "quantity": 3},
        {"price": True, "quantity": 3},
        {"price": 1.25, "quantity": -1},
    ])
    def test_malformed_entry(self, value):
        with pytest.raises(ConversionError):
            inventory_from_dictionary({"soda": value})


class TestLoadInventory:
    """Test the full load path."""

    def test_load_plist(self, plist_inventory_file):
        inventory = load_inventory(plist_inventory_file)
        assert set(inventory) == {VendingSelection.SODA, VendingSelection.GUM}
        assert inventory[VendingSelection.GUM].price == 0.5

    def test_packaged_inventory_covers_every_selection(self):
        inventory = load_inventory(BASE_DIR / "data" / "vending_inventory.plist")
        assert set(inventory) == set(SELECTIONS)
        assert all(item.quantity > 0 for item in inventory.values())

    def test_errors_share_base(self, tmp_path):
        path = _write_json(tmp_path, {"pizza": {"price": 1, "quantity": 1}})
        with pytest.raises(InventoryError):
            load_inventory(path)
