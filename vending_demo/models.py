from __future__ import annotations

import dataclasses
import enum
from dataclasses import dataclass
from decimal import Decimal

from vending_demo.exceptions import UnknownProductKeyError

DEFAULT_ICON = "Default"


class VendingSelection(enum.Enum):
    SODA = "Soda"
    DIET_SODA = "DietSoda"
    CHIPS = "Chips"
    COOKIE = "Cookie"
    SANDWICH = "Sandwich"
    WRAP = "Wrap"
    CANDY_BAR = "CandyBar"
    POP_TART = "PopTart"
    WATER = "Water"
    FRUIT_JUICE = "FruitJuice"
    SPORTS_DRINK = "SportsDrink"
    GUM = "Gum"

    @classmethod
    def from_key(cls, key: str) -> VendingSelection:
        """Resolve a catalog document key (e.g. ``"DietSoda"``)."""
        try:
            return cls(key)
        except ValueError:
            raise UnknownProductKeyError(key) from None

    def icon(self) -> str:
        """Image name for this selection, or ``DEFAULT_ICON`` if none is registered."""
        return _ICONS.get(self, DEFAULT_ICON)


# Gum ships without artwork and falls back to the default image.
_ICONS = {
    selection: selection.value
    for selection in VendingSelection
    if selection is not VendingSelection.GUM
}


@dataclass(slots=True, frozen=True)
class VendingItem:
    price: Decimal
    quantity: Decimal

    def __post_init__(self) -> None:
        if self.price < 0:
            raise ValueError(f"price must be >= 0, got {self.price}")
        if self.quantity < 0:
            raise ValueError(f"quantity must be >= 0, got {self.quantity}")

    def with_quantity(self, quantity: Decimal) -> VendingItem:
        return dataclasses.replace(self, quantity=quantity)


@dataclass(slots=True)
class VendReceipt:
    """
    Result of a successful vend: what was bought, what it cost,
    and the state left behind (balance, remaining units of that item).
    """

    selection: VendingSelection
    quantity: Decimal
    unit_price: Decimal
    total: Decimal
    balance: Decimal
    remaining: Decimal
