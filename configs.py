"""
Configuration module for the ATM terminal.

This module provides centralized constants for Redis, logging
and the demo ledger used by the in-memory collaborators.
"""

import os
from typing import Final, Optional


# =============================================================================
# Redis Configuration
# =============================================================================

REDIS_HOST: Final[str] = os.environ.get("ATM_REDIS_HOST", "localhost")
REDIS_PORT: Final[int] = int(os.environ.get("ATM_REDIS_PORT", "6379"))


# =============================================================================
# Logging Configuration
# =============================================================================

# Loki push endpoint, e.g. "http://localhost:3100/loki/api/v1/push".
# Remote logging is disabled when unset.
LOKI_URL: Final[Optional[str]] = os.environ.get("ATM_LOKI_URL") or None
LOG_FILE: Final[str] = os.environ.get("ATM_LOG_FILE", "logs/atm_terminal.log")


# =============================================================================
# Command Channel Configuration
# =============================================================================

COMMAND_CHANNEL: Final[str] = "atm_terminal_commands"
KEY_PREFIX: Final[str] = "atm"


# =============================================================================
# Demo Ledger
# =============================================================================

DEMO_CARD_ID: Final[str] = "CARD-1234"
DEMO_PIN: Final[str] = "4321"
DEMO_ACCOUNT_ID: Final[str] = "ACC-111"
DEMO_BALANCE: Final[int] = 100
DEMO_CASH_ON_HAND: Final[int] = 200
