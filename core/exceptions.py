"""
Custom exceptions for the ATM terminal.

Provides a hierarchy of typed exceptions. Session errors describe a
violated precondition of the session state machine; collaborator errors
are raised by the bank gateway, cash dispenser and card reader.
"""

from typing import Any, Optional


class AtmError(Exception):
    """Base exception for all ATM terminal errors."""

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        """
        Initialize the exception.

        Args:
            message: Human-readable error message.
            code: Optional error code for programmatic handling.
            details: Optional additional error details.
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for command responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


# =============================================================================
# Session Errors
# =============================================================================


class SessionError(AtmError):
    """Base exception for session precondition violations."""

    pass


class NoCardInsertedError(SessionError):
    """PIN entry attempted without a card in the reader."""

    pass


class NotAuthenticatedError(SessionError):
    """Account selection attempted before a valid PIN."""

    pass


class NoAccountSelectedError(SessionError):
    """Transaction attempted before an account was selected."""

    pass


class InvalidAmountError(SessionError):
    """Deposit or withdrawal amount is not a positive integer."""

    pass


class InsufficientFundsError(SessionError):
    """Withdrawal exceeds the account balance."""

    def __init__(
        self,
        message: str,
        required: int = 0,
        available: int = 0,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.details["required"] = required
        self.details["available"] = available


class InsufficientCashError(SessionError):
    """Withdrawal exceeds the cash stocked in the dispenser."""

    def __init__(self, message: str, required: int = 0, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.details["required"] = required


# =============================================================================
# Collaborator Errors
# =============================================================================


class CollaboratorError(AtmError):
    """Base exception for errors raised by terminal collaborators."""

    pass


class CardReadError(CollaboratorError):
    """Card reader could not read a card."""

    pass


class BankGatewayError(CollaboratorError):
    """Base exception for bank gateway errors."""

    pass


class UnknownAccountError(BankGatewayError):
    """Account is not known to the bank gateway."""

    def __init__(self, account_id: str, **kwargs: Any) -> None:
        super().__init__(f"Unknown account: {account_id}", **kwargs)
        self.account_id = account_id
        self.details["account_id"] = account_id


class CashDispenserError(CollaboratorError):
    """Base exception for cash dispenser errors."""

    pass


class DispenseError(CashDispenserError):
    """Dispenser could not release the requested amount."""

    def __init__(
        self,
        message: str,
        requested: int = 0,
        available: int = 0,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.details["requested"] = requested
        self.details["available"] = available


# =============================================================================
# Repository Errors
# =============================================================================


class RepositoryError(CollaboratorError):
    """Base exception for repository errors."""

    pass


class RedisConnectionError(RepositoryError):
    """Error connecting to Redis."""

    pass
