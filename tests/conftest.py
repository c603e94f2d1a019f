"""
Pytest configuration for ATM terminal tests.

Adds the project root to sys.path so that tests can import the
top-level packages, and provides collaborator fixtures.
"""

import sys
from pathlib import Path

import pytest


# Add the project root to sys.path for proper imports
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from domain.atm_controller import ATMController  # noqa: E402
from domain.device_adapters import build_demo_collaborators  # noqa: E402


@pytest.fixture
def collaborators():
    """Demo bank, dispenser and reader with CARD-1234 in the slot."""
    return build_demo_collaborators()


@pytest.fixture
def bank(collaborators):
    return collaborators[0]


@pytest.fixture
def dispenser(collaborators):
    return collaborators[1]


@pytest.fixture
def reader(collaborators):
    return collaborators[2]


@pytest.fixture
def atm(bank, dispenser, reader):
    """Controller in the idle state."""
    return ATMController(bank, dispenser, reader)


@pytest.fixture
def ready_atm(atm):
    """Controller with CARD-1234 authenticated and ACC-111 selected."""
    atm.insert_card()
    atm.enter_pin("4321")
    atm.select_account("ACC-111")
    return atm
