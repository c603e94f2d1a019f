"""
Core module - Foundation layer with no external dependencies.

Contains:
- Exceptions
- Collaborator interfaces
- Value Objects
"""

from .exceptions import (
    AtmError,
    SessionError,
    NoCardInsertedError,
    NotAuthenticatedError,
    NoAccountSelectedError,
    InvalidAmountError,
    InsufficientFundsError,
    InsufficientCashError,
    CollaboratorError,
    CardReadError,
    BankGatewayError,
    UnknownAccountError,
    CashDispenserError,
    DispenseError,
    RepositoryError,
    RedisConnectionError,
)
from .interfaces import (
    BankGateway,
    CashDispenser,
    CardReader,
)
from .value_objects import (
    ErrorKind,
    OperationResult,
)


__all__ = [
    # Exceptions
    "AtmError",
    "SessionError",
    "NoCardInsertedError",
    "NotAuthenticatedError",
    "NoAccountSelectedError",
    "InvalidAmountError",
    "InsufficientFundsError",
    "InsufficientCashError",
    "CollaboratorError",
    "CardReadError",
    "BankGatewayError",
    "UnknownAccountError",
    "CashDispenserError",
    "DispenseError",
    "RepositoryError",
    "RedisConnectionError",
    # Interfaces
    "BankGateway",
    "CashDispenser",
    "CardReader",
    # Value Objects
    "ErrorKind",
    "OperationResult",
]
