"""
Infrastructure layer - External dependencies and implementations.

Contains:
- Repository implementations (Redis)
- Configuration
"""

from .redis_repository import (
    RedisStateRepository,
    BankLedgerRepository,
    CashInventoryRepository,
)
from .settings import (
    Settings,
    get_settings,
)


__all__ = [
    # Repositories
    "RedisStateRepository",
    "BankLedgerRepository",
    "CashInventoryRepository",
    # Settings
    "Settings",
    "get_settings",
]
