"""
Command Handler - Routes terminal commands to the ATM controller.

Provides command routing with argument validation for drivers that
receive commands as dictionaries (Redis pub/sub, test harnesses).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional

from core.value_objects import OperationResult
from domain.atm_controller import ATMController
from domain.device_adapters import InMemoryCardReader
from loggers import logger


# Type alias for command handlers
CommandHandlerFunc = Callable[..., OperationResult]


@dataclass
class CommandResponse:
    """
    Standardized response for command execution.

    Attributes:
        command_id: The ID of the executed command.
        success: Whether the command succeeded.
        message: Human-readable message.
        data: Optional response data.
        error: Error kind name for a failed operation.
    """

    command_id: Optional[int] = None
    success: bool = False
    message: Optional[str] = None
    data: Any = None
    error: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        """Convert the response to a dictionary."""
        return {
            "command_id": self.command_id,
            "success": self.success,
            "message": self.message,
            "data": self.data,
            "error": self.error,
        }


@dataclass
class CommandDefinition:
    """
    Definition of a command.

    Attributes:
        name: Command name.
        handler: Handler function.
        required_args: List of required argument names.
        description: Human-readable description.
    """

    name: str
    handler: CommandHandlerFunc
    required_args: list[str]
    description: str = ""


class CommandHandler:
    """
    Routes commands to controller operations.

    When a card reader is given, a load_card command is registered that
    places a card in the simulated slot before insert_card reads it.
    """

    def __init__(
        self,
        controller: ATMController,
        card_reader: Optional[InMemoryCardReader] = None,
    ) -> None:
        """
        Initialize the command handler.

        Args:
            controller: The ATMController to drive.
            card_reader: Simulated card slot, if the terminal has one.
        """
        self._controller = controller
        self._card_reader = card_reader
        self._commands: dict[str, CommandDefinition] = {}
        self._register_default_commands()

    def _register_default_commands(self) -> None:
        """Register all default command handlers."""
        if self._card_reader is not None:
            self.register(
                "load_card",
                self._load_card,
                ["card_id"],
                "Place a card in the simulated card slot",
            )

        # Card and authentication
        self.register(
            "insert_card",
            self._controller.insert_card,
            [],
            "Read the card and start a session",
        )
        self.register(
            "enter_pin",
            self._enter_pin,
            ["pin"],
            "Validate the PIN for the inserted card",
        )
        self.register(
            "select_account",
            self._select_account,
            ["account_id"],
            "Choose the account for transactions",
        )

        # Transactions
        self.register(
            "get_balance",
            self._controller.get_balance,
            [],
            "Get the selected account's balance",
        )
        self.register(
            "deposit",
            self._controller.deposit,
            ["amount"],
            "Deposit into the selected account",
        )
        self.register(
            "withdraw",
            self._controller.withdraw,
            ["amount"],
            "Withdraw cash from the selected account",
        )

        # Session
        self.register(
            "eject_card",
            self._controller.eject_card,
            [],
            "Eject the card and reset the session",
        )
        self.register(
            "session_status",
            self._session_status,
            [],
            "Get the current session state",
        )

    def register(
        self,
        command_name: str,
        handler: CommandHandlerFunc,
        required_args: list[str],
        description: str = "",
    ) -> None:
        """
        Register a command handler.

        Args:
            command_name: The name of the command.
            handler: Function returning an OperationResult.
            required_args: List of required argument names.
            description: Human-readable description.
        """
        self._commands[command_name] = CommandDefinition(
            name=command_name,
            handler=handler,
            required_args=required_args,
            description=description,
        )

    def get_available_commands(self) -> list[dict[str, Any]]:
        """Get list of available commands with their descriptions."""
        return [
            {
                "name": cmd.name,
                "required_args": cmd.required_args,
                "description": cmd.description,
            }
            for cmd in self._commands.values()
        ]

    def execute(self, command_data: dict[str, Any]) -> dict[str, Any]:
        """
        Execute a command based on command data.

        Args:
            command_data: Dictionary containing 'command', 'command_id', and 'data'.

        Returns:
            Response dictionary with execution result.
        """
        command = command_data.get("command")
        command_id = command_data.get("command_id")
        data = command_data.get("data", {}) or {}

        response = CommandResponse(command_id=command_id)

        if not isinstance(command, str) or command not in self._commands:
            logger.warning(f"Unknown command: {command}")
            response.message = f"Unknown command: {command}"
            return response.to_dict()

        definition = self._commands[command]

        if not isinstance(data, dict):
            logger.warning(f"Invalid data for command '{command}': {type(data).__name__}")
            response.message = "Command data must be an object"
            return response.to_dict()

        kwargs = {arg: data.get(arg) for arg in definition.required_args}
        missing = [arg for arg in definition.required_args if kwargs.get(arg) is None]
        if missing:
            response.message = f"Missing required arguments: {missing}"
            return response.to_dict()

        try:
            result = definition.handler(**kwargs)
        except Exception as e:
            logger.error(f"Error executing command '{command}': {e}")
            response.message = f"Error: {e}"
            return response.to_dict()

        response.success = result.success
        response.message = result.message
        response.data = result.value
        if result.error is not None:
            response.error = result.error.name
        return response.to_dict()

    def _enter_pin(self, pin: str) -> OperationResult:
        return self._controller.enter_pin(str(pin))

    def _select_account(self, account_id: str) -> OperationResult:
        return self._controller.select_account(str(account_id))

    def _load_card(self, card_id: str) -> OperationResult:
        self._card_reader.load_card(str(card_id))
        logger.debug(f"Card placed in slot: {card_id}")
        return OperationResult.ok(message="Card loaded")

    def _session_status(self) -> OperationResult:
        return OperationResult.ok(self._controller.session.to_dict(), self._controller.state.name)
