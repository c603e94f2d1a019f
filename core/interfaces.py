"""
Interfaces for the ATM terminal collaborators.

The session state machine depends only on these contracts. Each one has
an in-memory implementation for tests and demos and a Redis-backed
implementation for a terminal wired to a shared store.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


# =============================================================================
# Bank Gateway
# =============================================================================


class BankGateway(ABC):
    """
    Authentication and ledger service.

    Amounts are integers in the smallest currency unit.
    """

    @abstractmethod
    def validate_pin(self, card_id: str, pin: str) -> bool:
        """
        Check a PIN against the card's registered PIN.

        Returns:
            True iff the PIN matches. A mismatch has no side effects.
        """
        ...

    @abstractmethod
    def get_balance(self, account_id: str) -> int:
        """
        Get the current balance of an account.

        Raises:
            UnknownAccountError: If the account does not exist.
        """
        ...

    @abstractmethod
    def debit(self, account_id: str, amount: int) -> None:
        """
        Decrease the balance by amount.

        No lower bound is enforced here; the caller checks funds.

        Raises:
            UnknownAccountError: If the account does not exist.
        """
        ...

    @abstractmethod
    def credit(self, account_id: str, amount: int) -> None:
        """
        Increase the balance by amount.

        Raises:
            UnknownAccountError: If the account does not exist.
        """
        ...


# =============================================================================
# Cash Dispenser
# =============================================================================


class CashDispenser(ABC):
    """Cash inventory device."""

    @abstractmethod
    def has_cash(self, amount: int) -> bool:
        """Check whether amount does not exceed the current stock."""
        ...

    @abstractmethod
    def dispense_cash(self, amount: int) -> None:
        """
        Release amount and decrease the stock.

        Raises:
            DispenseError: If amount exceeds the stock.
        """
        ...


# =============================================================================
# Card Reader
# =============================================================================


class CardReader(ABC):
    """Card slot device."""

    @abstractmethod
    def read_card(self) -> str:
        """
        Read the identifier of the inserted card.

        Raises:
            CardReadError: If no readable card is present.
        """
        ...

    @abstractmethod
    def eject_card(self) -> None:
        """Eject the card. Does nothing when the slot is empty."""
        ...
