"""
Unit tests for the command handler driver.
"""

from unittest.mock import MagicMock

import pytest

from application.command_handler import CommandHandler, CommandResponse
from domain.atm_controller import ATMController
from domain.device_adapters import InMemoryCardReader, build_demo_collaborators


@pytest.fixture
def terminal():
    bank, dispenser, _ = build_demo_collaborators()
    reader = InMemoryCardReader()
    controller = ATMController(bank, dispenser, reader)
    return CommandHandler(controller, card_reader=reader), controller


def run(handler, command, command_id=1, **data):
    return handler.execute({"command": command, "command_id": command_id, "data": data})


class TestCommandResponse:
    """Tests for CommandResponse."""

    def test_to_dict(self):
        response = CommandResponse(command_id=7, success=True, message="ok", data=5)
        assert response.to_dict() == {
            "command_id": 7,
            "success": True,
            "message": "ok",
            "data": 5,
            "error": None,
        }


class TestCommandHandler:
    """Tests for CommandHandler."""

    def test_available_commands(self, terminal):
        handler, _ = terminal
        names = {cmd["name"] for cmd in handler.get_available_commands()}
        assert names == {
            "load_card",
            "insert_card",
            "enter_pin",
            "select_account",
            "get_balance",
            "deposit",
            "withdraw",
            "eject_card",
            "session_status",
        }

    def test_no_load_card_without_reader(self):
        """Test load_card is only offered for a simulated card slot."""
        handler = CommandHandler(MagicMock(spec=ATMController))
        names = {cmd["name"] for cmd in handler.get_available_commands()}
        assert "load_card" not in names

    def test_unknown_command(self, terminal):
        handler, _ = terminal
        response = run(handler, "format_disk")
        assert response["success"] is False
        assert response["message"] == "Unknown command: format_disk"

    def test_missing_arguments(self, terminal):
        handler, controller = terminal
        response = run(handler, "deposit")
        assert response["success"] is False
        assert "amount" in response["message"]

    def test_full_session(self, terminal):
        """Test a card cycle driven entirely through commands."""
        handler, controller = terminal

        assert run(handler, "load_card", card_id="CARD-1234")["success"] is True
        assert run(handler, "insert_card")["success"] is True
        assert run(handler, "enter_pin", pin="0000")["data"] is False
        assert run(handler, "enter_pin", pin="4321")["data"] is True
        assert run(handler, "select_account", account_id="ACC-111")["success"] is True
        assert run(handler, "deposit", amount=50)["success"] is True
        assert run(handler, "withdraw", amount=70)["success"] is True

        balance = run(handler, "get_balance", command_id=42)
        assert balance["command_id"] == 42
        assert balance["data"] == 80

        status = run(handler, "session_status")
        assert status["data"]["state"] == "ACCOUNT_SELECTED"

        assert run(handler, "eject_card")["success"] is True
        assert controller.session.card_id == ""

    def test_failed_operation_reports_error_kind(self, terminal):
        handler, _ = terminal
        response = run(handler, "enter_pin", pin="4321")
        assert response["success"] is False
        assert response["error"] == "NO_CARD_INSERTED"

    def test_collaborator_failure(self, terminal):
        """Test an empty card slot is reported through the response."""
        handler, _ = terminal
        response = run(handler, "insert_card")
        assert response["success"] is False
        assert response["error"] == "COLLABORATOR_FAILURE"
        assert response["message"] == "No card in reader"

    def test_handler_exception(self, terminal):
        """Test unexpected handler errors become failed responses."""
        handler, _ = terminal
        handler.register("explode", MagicMock(side_effect=RuntimeError("boom")), [])
        response = run(handler, "explode")
        assert response["success"] is False
        assert response["message"] == "Error: boom"

    def test_numeric_pin_and_account(self, terminal):
        """Test JSON numbers for pin and account_id are read as text."""
        handler, controller = terminal
        run(handler, "load_card", card_id="CARD-1234")
        run(handler, "insert_card")

        response = run(handler, "enter_pin", pin=4321)
        assert response["success"] is True
        assert response["data"] is True

        assert run(handler, "select_account", account_id=111)["success"] is True
        assert controller.session.selected_account == "111"

    @pytest.mark.parametrize("data", [[50], "50", 50])
    def test_data_not_an_object(self, terminal, data):
        """Test a non-object data payload is rejected with a failed response."""
        handler, controller = terminal
        response = handler.execute({"command": "deposit", "command_id": 5, "data": data})
        assert response["success"] is False
        assert response["command_id"] == 5
        assert response["message"] == "Command data must be an object"

    def test_command_name_not_a_string(self, terminal):
        handler, _ = terminal
        response = handler.execute({"command": ["deposit"], "command_id": 6})
        assert response["success"] is False
        assert response["message"].startswith("Unknown command")
