"""
Redis Repository implementations.

Redis-backed bank ledger and cash inventory. Each repository
encapsulates its Redis keys and implements a collaborator contract so
the controller can run against a shared store.
"""

from __future__ import annotations

from typing import Any, Optional

from redis import Redis
from redis.exceptions import ConnectionError as RedisConnError
from redis.exceptions import RedisError
from redis.exceptions import TimeoutError as RedisTimeoutError

from core.exceptions import (
    DispenseError,
    RedisConnectionError,
    RepositoryError,
    UnknownAccountError,
)
from core.interfaces import BankGateway, CashDispenser
from loggers import logger


# =============================================================================
# Base Repository
# =============================================================================


class RedisStateRepository:
    """
    Base repository for Redis state operations.

    Translates redis-py errors into RepositoryError subclasses.
    """

    def __init__(self, redis: Redis, key_prefix: str = "atm") -> None:
        """
        Initialize the repository.

        Args:
            redis: Redis client instance.
            key_prefix: Namespace prepended to every key.
        """
        self._redis = redis
        self._prefix = key_prefix

    def key(self, *parts: str) -> str:
        """Build a namespaced key."""
        return ":".join((self._prefix, *parts))

    def get(self, key: str) -> Optional[str]:
        """Get a string value by key."""
        try:
            value = self._redis.get(key)
        except (RedisConnError, RedisTimeoutError) as e:
            raise RedisConnectionError(f"Redis connection error: {e}") from e
        except RedisError as e:
            raise RepositoryError(f"Redis error: {e}") from e
        if isinstance(value, bytes):
            return value.decode("utf-8")
        return value

    def set(self, key: str, value: Any) -> None:
        """Set a key-value pair."""
        try:
            self._redis.set(key, value)
        except (RedisConnError, RedisTimeoutError) as e:
            raise RedisConnectionError(f"Redis connection error: {e}") from e
        except RedisError as e:
            raise RepositoryError(f"Redis error: {e}") from e

    def get_int(self, key: str, default: int = 0) -> int:
        """Get an integer value by key."""
        value = self.get(key)
        return self.to_int(key, value) if value else default

    @staticmethod
    def to_int(key: str, value: Any) -> int:
        """Parse a stored integer, rejecting corrupt values."""
        try:
            return int(value)
        except (TypeError, ValueError) as e:
            raise RepositoryError(f"Corrupt value at {key}: {value!r}") from e

    def increment(self, key: str, amount: int = 1) -> int:
        """Increment a value by the specified amount."""
        try:
            return self._redis.incrby(key, amount)
        except (RedisConnError, RedisTimeoutError) as e:
            raise RedisConnectionError(f"Redis connection error: {e}") from e
        except RedisError as e:
            raise RepositoryError(f"Redis error: {e}") from e


# =============================================================================
# Bank Ledger Repository
# =============================================================================


class BankLedgerRepository(RedisStateRepository, BankGateway):
    """
    Bank gateway backed by Redis.

    Keys:
    - <prefix>:pin:<card_id>: Registered PIN
    - <prefix>:balance:<account_id>: Account balance
    """

    def pin_key(self, card_id: str) -> str:
        return self.key("pin", card_id)

    def balance_key(self, account_id: str) -> str:
        return self.key("balance", account_id)

    def validate_pin(self, card_id: str, pin: str) -> bool:
        registered = self.get(self.pin_key(card_id))
        return registered is not None and registered == pin

    def get_balance(self, account_id: str) -> int:
        value = self.get(self.balance_key(account_id))
        if value is None:
            raise UnknownAccountError(account_id)
        return self.to_int(self.balance_key(account_id), value)

    def debit(self, account_id: str, amount: int) -> None:
        self.get_balance(account_id)
        balance = self.increment(self.balance_key(account_id), -amount)
        logger.debug(f"Ledger debit {account_id}: -{amount}, balance {balance}")

    def credit(self, account_id: str, amount: int) -> None:
        self.get_balance(account_id)
        balance = self.increment(self.balance_key(account_id), amount)
        logger.debug(f"Ledger credit {account_id}: +{amount}, balance {balance}")

    def register_card(self, card_id: str, pin: str) -> None:
        """Store the PIN for a card."""
        self.set(self.pin_key(card_id), pin)

    def open_account(self, account_id: str, balance: int = 0) -> None:
        """Create an account or overwrite its balance."""
        self.set(self.balance_key(account_id), balance)


# =============================================================================
# Cash Inventory Repository
# =============================================================================


class CashInventoryRepository(RedisStateRepository, CashDispenser):
    """
    Cash dispenser stock backed by Redis.

    Keys:
    - <prefix>:cash_on_hand: Amount available for dispensing
    """

    @property
    def stock_key(self) -> str:
        return self.key("cash_on_hand")

    def get_cash_on_hand(self) -> int:
        """Get the current stock."""
        return self.get_int(self.stock_key)

    def set_cash_on_hand(self, amount: int) -> None:
        """Set the stock (cash collection or refill)."""
        self.set(self.stock_key, amount)

    def has_cash(self, amount: int) -> bool:
        return amount <= self.get_cash_on_hand()

    def dispense_cash(self, amount: int) -> None:
        # Decrement first so concurrent terminals cannot both take the last notes
        remaining = self.increment(self.stock_key, -amount)
        if remaining < 0:
            self.increment(self.stock_key, amount)
            raise DispenseError(
                "Not enough ATM cash",
                requested=amount,
                available=remaining + amount,
            )
        logger.debug(f"Dispensed {amount}, {remaining} left")
