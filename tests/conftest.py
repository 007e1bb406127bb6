"""Shared fixtures for vending machine tests."""

import pytest

from app import create_app
from models.item import VendingItem
from models.selection import VendingSelection
from services.vending_machine import VendingMachine


@pytest.fixture
def soda_inventory():
    """One selection stocked: soda at 1.50, five units."""
    return {VendingSelection.SODA: VendingItem(price=1.50, quantity=5)}


@pytest.fixture
def machine(soda_inventory):
    """Machine with the soda inventory and the default 10.0 balance."""
    return VendingMachine(soda_inventory)


@pytest.fixture
def mixed_machine():
    """Machine with stocked, sold-out and absent selections, balance 10.0."""
    return VendingMachine({
        VendingSelection.SODA: VendingItem(price=1.50, quantity=5),
        VendingSelection.CHIPS: VendingItem(price=2.00, quantity=1),
        VendingSelection.COOKIE: VendingItem(price=1.00, quantity=0),
    })


@pytest.fixture
def app(mixed_machine):
    """Flask app serving ``mixed_machine``."""
    return create_app("config.TestingConfig", machine=mixed_machine)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def plist_inventory_file(tmp_path):
    """Write a small plist inventory and return its path."""
    path = tmp_path / "inventory.plist"
    path.write_text(
        """<?xml version="1.0" encoding="UTF-8"?>
<!DOCTYPE plist PUBLIC "-//Apple//DTD PLIST 1.0//EN" "http://www.apple.com/DTDs/PropertyList-1.0.dtd">
<plist version="1.0">
<dict>
    <key>soda</key>
    <dict>
        <key>price</key>
        <real>1.25</real>
        <key>quantity</key>
        <real>10</real>
    </dict>
    <key>gum</key>
    <dict>
        <key>price</key>
        <real>0.5</real>
        <key>quantity</key>
        <integer>20</integer>
    </dict>
</dict>
</plist>
""",
        encoding="utf-8",
    )
    return path
