"""
Application settings.

Typed configuration sections aggregated into a Settings singleton.
Defaults come from configs, which honours ATM_* environment variables.
"""

from dataclasses import dataclass, field

from configs import (
    COMMAND_CHANNEL,
    DEMO_ACCOUNT_ID,
    DEMO_BALANCE,
    DEMO_CARD_ID,
    DEMO_CASH_ON_HAND,
    DEMO_PIN,
    KEY_PREFIX,
    REDIS_HOST,
    REDIS_PORT,
)


# =============================================================================
# Configuration Classes
# =============================================================================


@dataclass(frozen=True)
class RedisSettings:
    """Redis connection settings."""

    host: str = REDIS_HOST
    port: int = REDIS_PORT
    decode_responses: bool = True


@dataclass(frozen=True)
class TerminalSettings:
    """Command channel and storage key settings."""

    command_channel: str = COMMAND_CHANNEL
    key_prefix: str = KEY_PREFIX

    @property
    def response_channel(self) -> str:
        """Get response channel name."""
        return f"{self.command_channel}_response"


@dataclass(frozen=True)
class DemoSettings:
    """Ledger and cash stock seeded for demos."""

    card_id: str = DEMO_CARD_ID
    pin: str = DEMO_PIN
    account_id: str = DEMO_ACCOUNT_ID
    balance: int = DEMO_BALANCE
    cash_on_hand: int = DEMO_CASH_ON_HAND


# =============================================================================
# Main Settings
# =============================================================================


@dataclass
class Settings:
    """
    Main application settings.

    Aggregates all configuration sections.
    """

    redis: RedisSettings = field(default_factory=RedisSettings)
    terminal: TerminalSettings = field(default_factory=TerminalSettings)
    demo: DemoSettings = field(default_factory=DemoSettings)


# =============================================================================
# Settings Singleton
# =============================================================================


_settings: Settings | None = None


def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns:
        Settings instance.
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
