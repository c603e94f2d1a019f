"""
Domain layer - Business logic and domain models.

Contains:
- Session state and the ATM controller state machine
- In-memory collaborator implementations
"""

from .session import (
    Session,
    SessionState,
)
from .atm_controller import ATMController
from .device_adapters import (
    InMemoryBankGateway,
    InMemoryCashDispenser,
    InMemoryCardReader,
    build_demo_collaborators,
)


__all__ = [
    # Session State
    "Session",
    "SessionState",
    "ATMController",
    # Collaborators
    "InMemoryBankGateway",
    "InMemoryCashDispenser",
    "InMemoryCardReader",
    "build_demo_collaborators",
]
