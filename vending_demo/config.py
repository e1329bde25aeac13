"""Runtime configuration for the vending machine."""

from __future__ import annotations

import dataclasses
import os
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Any, Optional

from vending_demo.exceptions import ConfigError
from vending_demo.ledger import DEFAULT_INITIAL_BALANCE, VendingMachine
from vending_demo.loader import load_inventory


@dataclasses.dataclass(frozen=True)
class LedgerConfig:
    """Machine configuration.

    Parameters
    ----------
    initial_balance : Decimal
        Balance the machine starts with. Defaults to ``10.00``.
    inventory_path : Path or None
        Catalog plist to load. ``None`` uses the bundled resource.
    log_level : str
        Level name passed to ``logging.basicConfig`` by the runner.
    """

    initial_balance: Decimal = DEFAULT_INITIAL_BALANCE
    inventory_path: Optional[Path] = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, **overrides: Any) -> LedgerConfig:
        """Create configuration from ``VENDING_*`` environment variables.

        Reads ``VENDING_INITIAL_BALANCE``, ``VENDING_INVENTORY_PATH`` and
        ``VENDING_LOG_LEVEL``. Explicit keyword arguments override
        environment values.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        balance_env = env.get("VENDING_INITIAL_BALANCE")
        if balance_env is not None and "initial_balance" not in overrides:
            try:
                config_kwargs["initial_balance"] = Decimal(balance_env.strip())
            except InvalidOperation:
                raise ConfigError(f"VENDING_INITIAL_BALANCE is not a number: {balance_env!r}") from None

        path_env = env.get("VENDING_INVENTORY_PATH")
        if path_env:
            config_kwargs["inventory_path"] = Path(path_env)

        level_env = env.get("VENDING_LOG_LEVEL")
        if level_env:
            config_kwargs["log_level"] = level_env.strip().upper()

        config_kwargs.update(overrides)

        return cls(**config_kwargs)


def build_machine(config: Optional[LedgerConfig] = None) -> VendingMachine:
    """Load the catalog and construct the ledger. Loader errors propagate."""
    config = config or LedgerConfig()
    inventory = load_inventory(config.inventory_path)
    return VendingMachine(inventory, initial_balance=config.initial_balance)
