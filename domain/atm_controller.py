"""
ATM Controller - Session state machine for a teller terminal.

Gates which collaborator calls are permitted in which order:
insert_card -> enter_pin -> select_account -> {get_balance, deposit,
withdraw}* -> eject_card. Money lives in the bank gateway and cash in
the dispenser; the controller only holds the session identifiers.
"""

from __future__ import annotations

from typing import Any

from core.exceptions import CollaboratorError
from core.interfaces import BankGateway, CardReader, CashDispenser
from core.value_objects import ErrorKind, OperationResult
from domain.session import Session, SessionState
from loggers import logger


class ATMController:
    """
    State machine for a single terminal session.

    Operations never raise for a violated precondition; they return a
    failed OperationResult. Collaborator errors are captured unchanged in
    the result's cause. One controller serves one terminal and is reused
    across card cycles.
    """

    def __init__(
        self,
        bank: BankGateway,
        dispenser: CashDispenser,
        reader: CardReader,
    ) -> None:
        """
        Initialize the controller in the idle state.

        Args:
            bank: Authentication and ledger service.
            dispenser: Cash inventory device.
            reader: Card slot device.
        """
        self._bank = bank
        self._dispenser = dispenser
        self._reader = reader
        self._session = Session()

    @property
    def session(self) -> Session:
        """Get the current session."""
        return self._session

    @property
    def state(self) -> SessionState:
        """Get the current session state."""
        return self._session.state

    # =========================================================================
    # Card and authentication
    # =========================================================================

    def insert_card(self) -> OperationResult:
        """
        Read the card in the slot and start a new session.

        Any previous authentication or account selection is discarded.
        """
        try:
            card_id = self._reader.read_card()
        except CollaboratorError as e:
            return self._collaborator_failure("insert_card", e)

        self._session.start(card_id)
        logger.info(f"Card inserted: {card_id}")
        return OperationResult.ok(message="Card inserted")

    def enter_pin(self, pin: str) -> OperationResult:
        """
        Validate a PIN for the inserted card.

        A rejected PIN keeps the card in the session so the customer can
        retry. The result value is the validation outcome.
        """
        if not self._session.has_card:
            return self._rejected(ErrorKind.NO_CARD_INSERTED, "No card inserted")

        try:
            valid = self._bank.validate_pin(self._session.card_id, pin)
        except CollaboratorError as e:
            return self._collaborator_failure("enter_pin", e)

        self._session.set_authenticated(bool(valid))
        if valid:
            logger.info(f"PIN accepted for card {self._session.card_id}")
            return OperationResult.ok(True, "PIN accepted")

        logger.warning(f"PIN rejected for card {self._session.card_id}")
        return OperationResult.ok(False, "PIN rejected")

    def select_account(self, account_id: str) -> OperationResult:
        """
        Choose the account for subsequent transactions.

        The account is not checked here; the first ledger call on it does.
        An empty account_id clears the selection and leaves the session
        authenticated with no account selected.
        """
        if not self._session.authenticated:
            return self._rejected(ErrorKind.NOT_AUTHENTICATED, "Not authenticated")

        self._session.select_account(account_id)
        if not account_id:
            logger.info("Account selection cleared")
            return OperationResult.ok(message="No account selected")
        logger.info(f"Account selected: {account_id}")
        return OperationResult.ok(message=f"Account {account_id} selected")

    # =========================================================================
    # Transactions
    # =========================================================================

    def get_balance(self) -> OperationResult:
        """Get the selected account's balance from the bank gateway."""
        if not self._session.has_account:
            return self._rejected(ErrorKind.NO_ACCOUNT_SELECTED, "No account selected")

        account = self._session.selected_account
        try:
            balance = self._bank.get_balance(account)
        except CollaboratorError as e:
            return self._collaborator_failure("get_balance", e)

        logger.info(f"Balance inquiry on {account}: {balance}")
        return OperationResult.ok(balance, f"Balance: {balance}")

    def deposit(self, amount: int) -> OperationResult:
        """Credit a positive amount to the selected account."""
        rejection = self._check_transaction(amount, "deposit")
        if rejection is not None:
            return rejection

        account = self._session.selected_account
        try:
            self._bank.credit(account, amount)
        except CollaboratorError as e:
            return self._collaborator_failure("deposit", e)

        logger.info(f"Deposited {amount} to {account}")
        return OperationResult.ok(message=f"Deposited {amount}")

    def withdraw(self, amount: int) -> OperationResult:
        """
        Withdraw a positive amount from the selected account.

        Funds and dispenser stock are both checked before anything moves.
        The account is debited before cash is dispensed: a dispenser fault
        after the debit leaves the account charged and is reported as a
        collaborator failure.
        """
        rejection = self._check_transaction(amount, "withdraw")
        if rejection is not None:
            return rejection

        account = self._session.selected_account
        try:
            balance = self._bank.get_balance(account)
        except CollaboratorError as e:
            return self._collaborator_failure("withdraw", e)

        if amount > balance:
            return self._rejected(
                ErrorKind.INSUFFICIENT_FUNDS,
                "Insufficient funds",
                {"required": amount, "available": balance},
            )

        try:
            has_cash = self._dispenser.has_cash(amount)
        except CollaboratorError as e:
            return self._collaborator_failure("withdraw", e)

        if not has_cash:
            return self._rejected(
                ErrorKind.INSUFFICIENT_CASH,
                "ATM has insufficient cash",
                {"required": amount},
            )

        try:
            self._bank.debit(account, amount)
        except CollaboratorError as e:
            return self._collaborator_failure("withdraw", e)

        try:
            self._dispenser.dispense_cash(amount)
        except CollaboratorError as e:
            logger.critical(
                f"Account {account} debited {amount} but dispensing failed: {e}"
            )
            return OperationResult.from_error(e)

        logger.info(f"Withdrew {amount} from {account}")
        return OperationResult.ok(message=f"Withdrew {amount}")

    # =========================================================================
    # Ejection
    # =========================================================================

    def eject_card(self) -> OperationResult:
        """
        End the session and eject the card.

        Valid in any state. The session is reset even if the reader fails.
        """
        had_card = self._session.has_card
        self._session.reset()

        try:
            self._reader.eject_card()
        except CollaboratorError as e:
            return self._collaborator_failure("eject_card", e)

        if had_card:
            logger.info("Card ejected, session reset")
        return OperationResult.ok(message="Card ejected")

    # =========================================================================
    # Helpers
    # =========================================================================

    def _check_transaction(self, amount: Any, operation: str) -> OperationResult | None:
        if not self._session.has_account:
            return self._rejected(ErrorKind.NO_ACCOUNT_SELECTED, "No account selected")
        if isinstance(amount, bool) or not isinstance(amount, int) or amount <= 0:
            return self._rejected(
                ErrorKind.INVALID_AMOUNT,
                f"Invalid {operation} amount: {amount!r}",
            )
        return None

    def _rejected(
        self,
        error: ErrorKind,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> OperationResult:
        logger.warning(f"{message} (state: {self.state.name})")
        return OperationResult.failed(error, message, details)

    def _collaborator_failure(
        self,
        operation: str,
        error: CollaboratorError,
    ) -> OperationResult:
        logger.error(f"{operation} failed: {error}")
        return OperationResult.from_error(error)
