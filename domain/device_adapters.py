"""
In-memory collaborators for the ATM controller.

Dictionary-backed implementations of the bank gateway, cash dispenser
and card reader contracts, used by tests, the demo script and the
command listener when no shared store is configured.
"""

from __future__ import annotations

from typing import Optional

from configs import (
    DEMO_ACCOUNT_ID,
    DEMO_BALANCE,
    DEMO_CARD_ID,
    DEMO_CASH_ON_HAND,
    DEMO_PIN,
)
from core.exceptions import CardReadError, DispenseError, UnknownAccountError
from core.interfaces import BankGateway, CardReader, CashDispenser
from loggers import logger


# =============================================================================
# Bank Gateway
# =============================================================================


class InMemoryBankGateway(BankGateway):
    """Bank gateway backed by PIN and balance dictionaries."""

    def __init__(
        self,
        pins: Optional[dict[str, str]] = None,
        balances: Optional[dict[str, int]] = None,
    ) -> None:
        """
        Args:
            pins: Registered PIN per card identifier.
            balances: Opening balance per account identifier.
        """
        self._pins = dict(pins or {})
        self._balances = dict(balances or {})

    def validate_pin(self, card_id: str, pin: str) -> bool:
        registered = self._pins.get(card_id)
        return registered is not None and registered == pin

    def get_balance(self, account_id: str) -> int:
        try:
            return self._balances[account_id]
        except KeyError:
            raise UnknownAccountError(account_id) from None

    def debit(self, account_id: str, amount: int) -> None:
        self._balances[account_id] = self.get_balance(account_id) - amount
        logger.debug(f"Ledger debit {account_id}: -{amount}")

    def credit(self, account_id: str, amount: int) -> None:
        self._balances[account_id] = self.get_balance(account_id) + amount
        logger.debug(f"Ledger credit {account_id}: +{amount}")


# =============================================================================
# Cash Dispenser
# =============================================================================


class InMemoryCashDispenser(CashDispenser):
    """Cash dispenser with a single integer stock."""

    def __init__(self, cash_on_hand: int = DEMO_CASH_ON_HAND) -> None:
        self._cash_on_hand = cash_on_hand

    @property
    def cash_on_hand(self) -> int:
        """Get the current stock."""
        return self._cash_on_hand

    def has_cash(self, amount: int) -> bool:
        return amount <= self._cash_on_hand

    def dispense_cash(self, amount: int) -> None:
        if amount > self._cash_on_hand:
            raise DispenseError(
                "Not enough ATM cash",
                requested=amount,
                available=self._cash_on_hand,
            )
        self._cash_on_hand -= amount
        logger.debug(f"Dispensed {amount}, {self._cash_on_hand} left")


# =============================================================================
# Card Reader
# =============================================================================


class InMemoryCardReader(CardReader):
    """
    Card slot holding at most one card.

    load_card() simulates the customer pushing a card into the slot;
    eject_card() hands it back and empties the slot.
    """

    def __init__(self, card_id: Optional[str] = None) -> None:
        self._card_id = card_id
        self.eject_count = 0

    @property
    def card_id(self) -> Optional[str]:
        """Get the identifier of the card in the slot, if any."""
        return self._card_id

    def load_card(self, card_id: str) -> None:
        """Place a card in the slot."""
        self._card_id = card_id

    def read_card(self) -> str:
        if not self._card_id:
            raise CardReadError("No card in reader")
        return self._card_id

    def eject_card(self) -> None:
        if self._card_id:
            self.eject_count += 1
        self._card_id = None


# =============================================================================
# Demo Wiring
# =============================================================================


def build_demo_collaborators() -> tuple[InMemoryBankGateway, InMemoryCashDispenser, InMemoryCardReader]:
    """
    Create collaborators seeded with the demo ledger.

    Card CARD-1234 with PIN 4321, account ACC-111 holding 100, and a
    dispenser stocked with 200. The card is already in the slot.
    """
    bank = InMemoryBankGateway(
        pins={DEMO_CARD_ID: DEMO_PIN},
        balances={DEMO_ACCOUNT_ID: DEMO_BALANCE},
    )
    dispenser = InMemoryCashDispenser(DEMO_CASH_ON_HAND)
    reader = InMemoryCardReader(DEMO_CARD_ID)
    return bank, dispenser, reader
