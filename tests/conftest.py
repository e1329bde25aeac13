"""Pytest fixtures for the vending ledger."""

from decimal import Decimal

import pytest

from vending_demo.ledger import VendingMachine
from vending_demo.models import VendingSelection
from vending_demo.store import InventoryStore


@pytest.fixture
def store() -> InventoryStore:
    store = InventoryStore()

    store.add_item(VendingSelection.SODA, price=Decimal("1.00"), quantity=Decimal("5"))
    store.add_item(VendingSelection.CHIPS, price=Decimal("1.50"), quantity=Decimal("10"))
    store.add_item(VendingSelection.SANDWICH, price=Decimal("4.25"), quantity=Decimal("3"))
    store.add_item(VendingSelection.GUM, price=Decimal("0.75"), quantity=Decimal("0"))  # Out of stock

    return store


@pytest.fixture
def machine(store: InventoryStore) -> VendingMachine:
    return VendingMachine(store, initial_balance=Decimal("10.00"))


@pytest.fixture
def plist_file(tmp_path):
    def write(content: bytes, name: str = "VendingInventory.plist"):
        path = tmp_path / name
        path.write_bytes(content)
        return path

    return write
