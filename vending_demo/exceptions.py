"""Error kinds raised by the vending ledger and the catalog loader."""

from __future__ import annotations

from decimal import Decimal
from typing import Any


class VendingError(Exception):
    """Base exception for all vending errors."""


class InvalidSelectionError(VendingError):
    """Requested product is not present in the inventory."""

    def __init__(self, selection: Any) -> None:
        self.selection = selection
        super().__init__(f"Invalid selection: {selection}")


class OutOfStockError(VendingError):
    """The item's slot is empty."""

    def __init__(self, selection: Any) -> None:
        self.selection = selection
        super().__init__(f"Out of stock: {selection}")


class InsufficientStockError(VendingError):
    """Fewer units remain than were requested."""

    def __init__(self, selection: Any, *, requested: Decimal, available: Decimal) -> None:
        self.selection = selection
        self.requested = requested
        self.available = available
        super().__init__(f"Insufficient stock for {selection}: have={available}, need={requested}")


class InsufficientFundsError(VendingError):
    """Deposited balance does not cover the purchase.

    ``shortfall`` is the exact additional amount the caller has to deposit
    before the same request can succeed.
    """

    def __init__(self, shortfall: Decimal) -> None:
        self.shortfall = shortfall
        super().__init__(f"Insufficient funds: deposit {shortfall} more")


class InvalidAmountError(VendingError, ValueError):
    """Negative deposit, non-positive quantity or a value that is not a number."""


class ConfigError(VendingError):
    """Invalid configuration value."""


class CatalogError(VendingError):
    """Catalog resource could not be turned into an inventory."""


class ResourceNotFoundError(CatalogError):
    """The catalog resource is missing or unreadable."""

    def __init__(self, path: Any) -> None:
        self.path = path
        super().__init__(f"Catalog resource not found: {path}")


class MalformedResourceError(CatalogError):
    """The catalog document does not have the expected structure."""


class UnknownProductKeyError(CatalogError):
    """The catalog document names a product the machine does not know."""

    def __init__(self, key: Any) -> None:
        self.key = key
        super().__init__(f"Unknown product key: {key!r}")
