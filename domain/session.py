"""
Session - Mutable state of one card-insertion-to-ejection cycle.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any


class SessionState(Enum):
    """Phases of a terminal session."""

    IDLE = auto()              # No card in the reader
    CARD_PRESENT = auto()      # Card read, PIN not yet accepted
    AUTHENTICATED = auto()     # PIN accepted, no account chosen
    ACCOUNT_SELECTED = auto()  # Ready for transactions


@dataclass
class Session:
    """
    State tracked by the controller for the current card.

    Empty strings mean "absent". The session is created once per
    controller and reset between cards, never replaced.

    Attributes:
        card_id: Identifier of the card in the reader.
        authenticated: Whether a PIN was accepted for card_id.
        selected_account: Account chosen for transactions.
    """

    card_id: str = ""
    authenticated: bool = False
    selected_account: str = ""

    @property
    def state(self) -> SessionState:
        """Get the session state derived from the fields."""
        if self.selected_account:
            return SessionState.ACCOUNT_SELECTED
        if self.authenticated:
            return SessionState.AUTHENTICATED
        if self.card_id:
            return SessionState.CARD_PRESENT
        return SessionState.IDLE

    @property
    def has_card(self) -> bool:
        return bool(self.card_id)

    @property
    def has_account(self) -> bool:
        return bool(self.selected_account)

    def start(self, card_id: str) -> None:
        """Begin a session for a freshly read card."""
        self.card_id = card_id
        self.authenticated = False
        self.selected_account = ""

    def set_authenticated(self, authenticated: bool) -> None:
        # A rejected PIN also drops a previously chosen account
        self.authenticated = authenticated
        if not authenticated:
            self.selected_account = ""

    def select_account(self, account_id: str) -> None:
        self.selected_account = account_id

    def reset(self) -> None:
        """Return to the idle state."""
        self.card_id = ""
        self.authenticated = False
        self.selected_account = ""

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for command responses."""
        return {
            "state": self.state.name,
            "card_id": self.card_id,
            "authenticated": self.authenticated,
            "selected_account": self.selected_account,
        }
