from __future__ import annotations

import logging
from decimal import Decimal
from typing import Dict, Iterator, List, Optional, Tuple

from vending_demo.models import VendingItem, VendingSelection

logger = logging.getLogger(__name__)


class InventoryStore:
    """
    In-memory catalog: one VendingItem per VendingSelection.

    The key set is fixed once the store has been built; afterwards only the
    ledger writes to it, through ``set``, once per successful vend.

    Log lines are also kept in ``logs`` (handy for demos and tests).
    """

    def __init__(self) -> None:
        self._items: Dict[VendingSelection, VendingItem] = {}

        self.logs: List[str] = []

    def log(self, message: str) -> None:
        self.logs.append(message)
        logger.info(message)

    def get(self, selection: VendingSelection) -> Optional[VendingItem]:
        return self._items.get(selection)

    def set(self, selection: VendingSelection, item: VendingItem) -> None:
        if selection not in self._items:
            raise KeyError(selection)
        self._items[selection] = item

    def items(self) -> Iterator[Tuple[VendingSelection, VendingItem]]:
        return iter(list(self._items.items()))

    def __contains__(self, selection: object) -> bool:
        return selection in self._items

    def __len__(self) -> int:
        return len(self._items)

    # Seed helper (loader/tests/demo), not for use after the ledger owns the store
    def add_item(self, selection: VendingSelection, price: Decimal, quantity: Decimal) -> None:
        self._items[selection] = VendingItem(price=Decimal(price), quantity=Decimal(quantity))
