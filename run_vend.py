from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from vending_demo.config import LedgerConfig, build_machine
from vending_demo.exceptions import CatalogError, InsufficientFundsError, VendingError
from vending_demo.ledger import VendingMachine
from vending_demo.models import VendingSelection


def print_machine(machine: VendingMachine) -> None:
    for selection in machine.selection:
        item = machine.peek(selection)
        if item is None:
            continue
        print(f"  {selection.value:<12} $ {item.price:<6} qty={item.quantity:<5} icon={selection.icon()}")


def main() -> None:
    p = argparse.ArgumentParser(description="Deposit money and vend one product, then print the machine state.")
    p.add_argument("--inventory", type=Path, default=None, help="Catalog plist (defaults to the bundled one)")
    p.add_argument("--balance", type=str, default=None, help="Initial balance")
    p.add_argument("--deposit", type=str, default=None)
    p.add_argument("--selection", type=str, default=None, choices=[s.value for s in VendingSelection])
    p.add_argument("--quantity", type=str, default="1")
    p.add_argument("--list", action="store_true", help="Only print the catalog")
    args = p.parse_args()

    overrides = {}
    if args.inventory is not None:
        overrides["inventory_path"] = args.inventory
    if args.balance is not None:
        overrides["initial_balance"] = args.balance
    try:
        config = LedgerConfig.from_env(**overrides)
        logging.basicConfig(level=config.log_level, format="%(message)s")
        machine = build_machine(config)
    except CatalogError as e:
        sys.exit(f"cannot load catalog: {e}")
    except VendingError as e:
        sys.exit(f"cannot start: {e}")

    if args.list:
        print_machine(machine)
        return

    ok = True
    try:
        if args.deposit is not None:
            machine.deposit(args.deposit)
        if args.selection is not None:
            receipt = machine.vend(VendingSelection(args.selection), args.quantity)
            print("\n=== RECEIPT ===")
            print(f"{receipt.selection.value} x{receipt.quantity} = $ {receipt.total}")
    except InsufficientFundsError as e:
        ok = False
        print(f"\nplease deposit $ {e.shortfall} more")
    except VendingError as e:
        ok = False
        print(f"\nerror: {e}")

    print("\n=== RESULT ===")
    print("success:", ok)
    print("balance:", machine.balance)
    print_machine(machine)

    if not ok:
        sys.exit(1)


if __name__ == "__main__":
    main()
