"""
Value Objects for the ATM terminal.

Every session operation reports its outcome as an OperationResult
instead of raising, so callers handle failure paths explicitly.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Optional

from .exceptions import (
    AtmError,
    CollaboratorError,
    InsufficientCashError,
    InsufficientFundsError,
    InvalidAmountError,
    NoAccountSelectedError,
    NoCardInsertedError,
    NotAuthenticatedError,
)


# =============================================================================
# Enums
# =============================================================================


class ErrorKind(Enum):
    """Reason a session operation failed."""

    NO_CARD_INSERTED = auto()
    NOT_AUTHENTICATED = auto()
    NO_ACCOUNT_SELECTED = auto()
    INVALID_AMOUNT = auto()
    INSUFFICIENT_FUNDS = auto()
    INSUFFICIENT_CASH = auto()
    COLLABORATOR_FAILURE = auto()


_ERROR_TYPES: dict[ErrorKind, type[AtmError]] = {
    ErrorKind.NO_CARD_INSERTED: NoCardInsertedError,
    ErrorKind.NOT_AUTHENTICATED: NotAuthenticatedError,
    ErrorKind.NO_ACCOUNT_SELECTED: NoAccountSelectedError,
    ErrorKind.INVALID_AMOUNT: InvalidAmountError,
    ErrorKind.INSUFFICIENT_FUNDS: InsufficientFundsError,
    ErrorKind.INSUFFICIENT_CASH: InsufficientCashError,
    ErrorKind.COLLABORATOR_FAILURE: CollaboratorError,
}


# =============================================================================
# Operation Result
# =============================================================================


@dataclass(frozen=True)
class OperationResult:
    """
    Outcome of a session operation.

    Attributes:
        success: Whether the operation succeeded.
        value: Operation output (PIN check outcome, balance), if any.
        error: Failure reason; None on success.
        message: Human-readable message.
        details: Additional failure data (amounts involved).
        cause: Collaborator exception behind a COLLABORATOR_FAILURE.
    """

    success: bool
    value: Any = None
    error: Optional[ErrorKind] = None
    message: str = ""
    details: dict[str, Any] = field(default_factory=dict, compare=False)
    cause: Optional[AtmError] = field(default=None, compare=False)

    @classmethod
    def ok(cls, value: Any = None, message: str = "") -> "OperationResult":
        """Create a successful result."""
        return cls(success=True, value=value, message=message)

    @classmethod
    def failed(
        cls,
        error: ErrorKind,
        message: str,
        details: Optional[dict[str, Any]] = None,
        cause: Optional[AtmError] = None,
    ) -> "OperationResult":
        """Create a failed result."""
        return cls(
            success=False,
            error=error,
            message=message,
            details=details or {},
            cause=cause,
        )

    @classmethod
    def from_error(cls, error: CollaboratorError) -> "OperationResult":
        """Wrap a collaborator exception without altering it."""
        return cls.failed(
            ErrorKind.COLLABORATOR_FAILURE,
            error.message,
            details=dict(error.details),
            cause=error,
        )

    def to_exception(self) -> AtmError:
        """
        Get the typed exception equivalent of a failed result.

        Collaborator failures return the original exception instance.
        """
        if self.success or self.error is None:
            raise ValueError("Successful result has no exception")
        if self.cause is not None:
            return self.cause
        exc = _ERROR_TYPES[self.error](self.message)
        exc.details.update(self.details)
        return exc

    def unwrap(self) -> Any:
        """
        Get the value of a successful result.

        Raises:
            AtmError: The typed exception for a failed result.
        """
        if self.success:
            return self.value
        raise self.to_exception()

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for command responses."""
        result: dict[str, Any] = {
            "success": self.success,
            "message": self.message,
        }
        if self.value is not None:
            result["value"] = self.value
        if self.error is not None:
            result["error"] = self.error.name
        if self.details:
            result["details"] = dict(self.details)
        return result
