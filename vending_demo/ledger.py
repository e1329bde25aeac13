from __future__ import annotations

import logging
import threading
from decimal import Decimal, InvalidOperation
from typing import Iterable, List, Optional

from vending_demo.exceptions import (
    InsufficientFundsError,
    InsufficientStockError,
    InvalidAmountError,
    InvalidSelectionError,
    OutOfStockError,
    VendingError,
)
from vending_demo.models import VendingItem, VendingSelection, VendReceipt
from vending_demo.store import InventoryStore

logger = logging.getLogger(__name__)

DEFAULT_INITIAL_BALANCE = Decimal("10.00")


def to_decimal(value: object, what: str = "amount") -> Decimal:
    """Coerce user input to a finite Decimal (floats go through ``str``)."""
    if isinstance(value, bool):
        raise InvalidAmountError(f"{what} must be a number, got {value!r}")
    try:
        result = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError, TypeError):
        raise InvalidAmountError(f"{what} must be a number, got {value!r}") from None
    if not result.is_finite():
        raise InvalidAmountError(f"{what} must be finite, got {value!r}")
    return result


class VendingMachine:
    """
    Transactional ledger over an InventoryStore and a deposited balance.

    ``vend`` is all-or-nothing: every check runs before the first mutation,
    and the balance and the item record are updated together. A single lock
    covers the check-then-mutate sequence, so the machine can be shared
    between threads without overselling or overspending.
    """

    def __init__(
        self,
        inventory: InventoryStore,
        initial_balance: Decimal = DEFAULT_INITIAL_BALANCE,
        selection: Optional[Iterable[VendingSelection]] = None,
    ):
        balance = to_decimal(initial_balance, "initial balance")
        if balance < 0:
            raise InvalidAmountError(f"initial balance must be >= 0, got {balance}")

        self.inventory = inventory
        self._balance = balance
        self._selection: List[VendingSelection] = list(selection) if selection is not None else list(VendingSelection)
        self._lock = threading.Lock()

    @property
    def balance(self) -> Decimal:
        return self._balance

    @property
    def selection(self) -> List[VendingSelection]:
        """Display order of the products."""
        return list(self._selection)

    def peek(self, selection: VendingSelection) -> Optional[VendingItem]:
        return self.inventory.get(selection)

    def item_total(self, selection: VendingSelection, quantity: object) -> Optional[Decimal]:
        item = self.inventory.get(selection)
        if item is None:
            return None
        return item.price * to_decimal(quantity, "quantity")

    def deposit(self, amount: object) -> Decimal:
        value = to_decimal(amount)
        if value < 0:
            raise InvalidAmountError(f"deposit must be >= 0, got {value}")
        with self._lock:
            self._balance += value
            self.inventory.log(f"[deposit] amount={value} (balance={self._balance})")
            return self._balance

    def vend(self, selection: VendingSelection, quantity: object = 1) -> VendReceipt:
        with self._lock:
            try:
                return self._vend_locked(selection, quantity)
            except VendingError as e:
                self.inventory.log(f"[vend] FAILED {selection} qty={quantity}: {e}")
                raise

    def _vend_locked(self, selection: VendingSelection, quantity: object) -> VendReceipt:
        item = self.inventory.get(selection)
        if item is None:
            raise InvalidSelectionError(selection)
        if item.quantity <= 0:
            raise OutOfStockError(selection)

        qty = to_decimal(quantity, "quantity")
        if qty <= 0:
            raise InvalidAmountError(f"quantity must be > 0, got {qty}")
        if item.quantity < qty:
            raise InsufficientStockError(selection, requested=qty, available=item.quantity)

        total = item.price * qty
        if self._balance < total:
            raise InsufficientFundsError(total - self._balance)

        updated = item.with_quantity(item.quantity - qty)
        self._balance -= total
        self.inventory.set(selection, updated)
        self.inventory.log(
            f"[vend] {selection.value} qty={qty} total={total} "
            f"(balance={self._balance}, remaining={updated.quantity})"
        )
        return VendReceipt(
            selection=selection,
            quantity=qty,
            unit_price=item.price,
            total=total,
            balance=self._balance,
            remaining=updated.quantity,
        )
