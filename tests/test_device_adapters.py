"""
Unit tests for the in-memory collaborators.
"""

import pytest

from core.exceptions import CardReadError, DispenseError, UnknownAccountError
from core.interfaces import BankGateway, CardReader, CashDispenser
from domain.device_adapters import (
    InMemoryBankGateway,
    InMemoryCardReader,
    InMemoryCashDispenser,
)


class TestInMemoryBankGateway:
    """Tests for InMemoryBankGateway."""

    def test_implements_contract(self, bank):
        assert isinstance(bank, BankGateway)

    def test_validate_pin(self, bank):
        """Test only the registered PIN for a known card is accepted."""
        assert bank.validate_pin("CARD-1234", "4321") is True
        assert bank.validate_pin("CARD-1234", "0000") is False
        assert bank.validate_pin("CARD-0000", "4321") is False

    def test_balance_and_movements(self, bank):
        """Test credit and debit adjust the balance."""
        bank.credit("ACC-111", 50)
        bank.debit("ACC-111", 30)
        assert bank.get_balance("ACC-111") == 120

    def test_debit_has_no_lower_bound(self, bank):
        """Test the gateway itself allows a negative balance."""
        bank.debit("ACC-111", 150)
        assert bank.get_balance("ACC-111") == -50

    @pytest.mark.parametrize("operation", ["get_balance", "debit", "credit"])
    def test_unknown_account(self, operation):
        """Test every ledger call on an unknown account raises."""
        bank = InMemoryBankGateway()
        args = ("ACC-404",) if operation == "get_balance" else ("ACC-404", 10)
        with pytest.raises(UnknownAccountError) as exc_info:
            getattr(bank, operation)(*args)
        assert exc_info.value.account_id == "ACC-404"

    def test_seed_is_copied(self):
        """Test the gateway does not mutate the caller's dictionaries."""
        balances = {"ACC-1": 10}
        bank = InMemoryBankGateway(balances=balances)
        bank.credit("ACC-1", 5)
        assert balances == {"ACC-1": 10}


class TestInMemoryCashDispenser:
    """Tests for InMemoryCashDispenser."""

    def test_implements_contract(self, dispenser):
        assert isinstance(dispenser, CashDispenser)

    def test_has_cash(self, dispenser):
        assert dispenser.has_cash(200) is True
        assert dispenser.has_cash(201) is False

    def test_dispense(self, dispenser):
        dispenser.dispense_cash(70)
        assert dispenser.cash_on_hand == 130

    def test_dispense_more_than_stock(self):
        """Test dispensing beyond the stock raises and leaves it unchanged."""
        dispenser = InMemoryCashDispenser(50)
        with pytest.raises(DispenseError) as exc_info:
            dispenser.dispense_cash(60)
        assert exc_info.value.details == {"requested": 60, "available": 50}
        assert dispenser.cash_on_hand == 50


class TestInMemoryCardReader:
    """Tests for InMemoryCardReader."""

    def test_implements_contract(self, reader):
        assert isinstance(reader, CardReader)

    def test_read_loaded_card(self, reader):
        assert reader.read_card() == "CARD-1234"

    def test_read_empty_slot(self):
        """Test reading with no card raises CardReadError."""
        with pytest.raises(CardReadError):
            InMemoryCardReader().read_card()

    def test_load_and_eject(self):
        """Test a loaded card is read until ejected."""
        reader = InMemoryCardReader()
        reader.load_card("CARD-7")
        assert reader.read_card() == "CARD-7"

        reader.eject_card()
        assert reader.card_id is None
        assert reader.eject_count == 1

        reader.eject_card()
        assert reader.eject_count == 1
