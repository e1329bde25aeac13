"""Catalog loader: property-list document to a validated InventoryStore.

The document maps product keys (``"Soda"``, ``"DietSoda"``, ...) to
dictionaries with ``price`` and ``quantity``. Failures are reported as one
of three kinds so the caller can tell them apart:

* :class:`ResourceNotFoundError` - the file is missing or unreadable.
* :class:`MalformedResourceError` - the document or an entry has the wrong shape.
* :class:`UnknownProductKeyError` - a key does not name a known product.

Nothing is returned unless the whole document is valid.
"""

from __future__ import annotations

import logging
import plistlib
from decimal import Decimal
from pathlib import Path
from typing import Any, Dict, Optional
from xml.parsers.expat import ExpatError

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from vending_demo.exceptions import MalformedResourceError, ResourceNotFoundError
from vending_demo.models import VendingSelection
from vending_demo.store import InventoryStore

logger = logging.getLogger(__name__)

DEFAULT_INVENTORY_PATH = Path(__file__).parent / "data" / "VendingInventory.plist"


class CatalogEntry(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    price: Decimal = Field(ge=0, allow_inf_nan=False)
    quantity: Decimal = Field(ge=0, allow_inf_nan=False)


def dictionary_from_file(path: Optional[Path] = None) -> Dict[str, Any]:
    """Read a plist document and return its top-level dictionary."""
    path = Path(path) if path is not None else DEFAULT_INVENTORY_PATH
    logger.debug("Loading catalog from %s", path)
    try:
        raw = path.read_bytes()
    except OSError as exc:
        raise ResourceNotFoundError(path) from exc

    try:
        data = plistlib.loads(raw)
    except (plistlib.InvalidFileException, ExpatError, ValueError) as exc:
        raise MalformedResourceError(f"{path}: not a property list") from exc

    if not isinstance(data, dict):
        raise MalformedResourceError(f"{path}: expected a dictionary, got {type(data).__name__}")
    return data


def inventory_from_dictionary(data: Dict[str, Any]) -> InventoryStore:
    """Validate a catalog dictionary and build the store from it."""
    if not isinstance(data, dict):
        raise MalformedResourceError(f"expected a dictionary, got {type(data).__name__}")

    entries: Dict[VendingSelection, CatalogEntry] = {}
    for key, value in data.items():
        selection = VendingSelection.from_key(key)
        if not isinstance(value, dict):
            raise MalformedResourceError(f"{key}: expected a dictionary, got {type(value).__name__}")
        try:
            entries[selection] = CatalogEntry.model_validate(value)
        except ValidationError as exc:
            raise MalformedResourceError(f"{key}: {exc.error_count()} invalid field(s): {exc}") from exc

    store = InventoryStore()
    for selection, entry in entries.items():
        store.add_item(selection, price=entry.price, quantity=entry.quantity)
    logger.debug("Catalog loaded with %d item(s)", len(store))
    return store


def load_inventory(path: Optional[Path] = None) -> InventoryStore:
    return inventory_from_dictionary(dictionary_from_file(path))
