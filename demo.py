"""
Scripted walk-through of one card cycle against the demo ledger.

Wrong PIN, correct PIN, balance, deposit, withdrawal, an overdraft
attempt, then ejection. Exits with status 1 on the first mismatch.
"""

import sys
from typing import Any

from configs import DEMO_ACCOUNT_ID
from core.value_objects import ErrorKind, OperationResult
from domain.atm_controller import ATMController
from domain.device_adapters import build_demo_collaborators
from loggers import logger


def expect(step: str, result: OperationResult, value: Any = None, error: ErrorKind | None = None) -> None:
    """Check a step's outcome and abort the walk-through on mismatch."""
    if error is not None:
        ok = not result.success and result.error is error
    else:
        ok = result.success and (value is None or result.value == value)

    if not ok:
        logger.error(f"{step}: unexpected result {result.to_dict()}")
        sys.exit(1)
    logger.info(f"{step}: {result.message}")


def run() -> None:
    bank, dispenser, reader = build_demo_collaborators()
    atm = ATMController(bank, dispenser, reader)

    expect("enter PIN without card", atm.enter_pin("4321"), error=ErrorKind.NO_CARD_INSERTED)

    expect("insert card", atm.insert_card())
    expect("wrong PIN", atm.enter_pin("0000"), value=False)
    expect("correct PIN", atm.enter_pin("4321"), value=True)

    expect("select account", atm.select_account(DEMO_ACCOUNT_ID))
    expect("opening balance", atm.get_balance(), value=100)

    expect("deposit 50", atm.deposit(50))
    expect("balance after deposit", atm.get_balance(), value=150)

    expect("withdraw 70", atm.withdraw(70))
    expect("balance after withdrawal", atm.get_balance(), value=80)

    expect("withdraw 200", atm.withdraw(200), error=ErrorKind.INSUFFICIENT_FUNDS)

    expect("eject card", atm.eject_card())
    expect("balance after eject", atm.get_balance(), error=ErrorKind.NO_ACCOUNT_SELECTED)

    logger.info("All ATM controller checks passed")


if __name__ == "__main__":
    run()
