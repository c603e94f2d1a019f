"""
ATM Terminal - Main entry point.

Runs one terminal session controller against the Redis-backed ledger
and cash inventory, driven by JSON commands received over Redis pub/sub.
"""

import json
from typing import Final

from redis import Redis

from application.command_handler import CommandHandler
from domain.atm_controller import ATMController
from domain.device_adapters import InMemoryCardReader
from infrastructure.redis_repository import BankLedgerRepository, CashInventoryRepository
from infrastructure.settings import get_settings
from loggers import logger


# =============================================================================
# Constants
# =============================================================================

settings = get_settings()
COMMAND_CHANNEL: Final[str] = settings.terminal.command_channel
RESPONSE_CHANNEL: Final[str] = settings.terminal.response_channel


# =============================================================================
# Redis Command Listener
# =============================================================================


def listen_to_redis(redis: Redis, handler: CommandHandler) -> None:
    """
    Listen for commands on Redis pub/sub and process them.

    Commands are handled one at a time, so the controller is never
    entered concurrently.

    Args:
        redis: Redis client instance.
        handler: CommandHandler bound to the terminal's controller.
    """
    pubsub = redis.pubsub()
    pubsub.subscribe(COMMAND_CHANNEL)
    logger.info(f"Listening for commands on channel: {COMMAND_CHANNEL}")

    for message in pubsub.listen():
        if message.get("type") != "message":
            continue

        raw_data = message.get("data")

        if raw_data == "ping":
            continue

        try:
            command = json.loads(raw_data)
            if not isinstance(command, dict):
                logger.error(f"Command is not a JSON object: {raw_data!r}")
                continue

            # Never log the PIN
            logger.info(f"Received command: {command.get('command')} (id={command.get('command_id')})")
            response = handler.execute(command)

            redis.publish(RESPONSE_CHANNEL, json.dumps(response))
            logger.info(f"Response sent to {RESPONSE_CHANNEL}: {response}")

        except json.JSONDecodeError as e:
            logger.error(f"Command parsing error: {e}")
        except Exception as e:
            logger.error(f"Unexpected error processing command: {e}")


# =============================================================================
# Main Entry Point
# =============================================================================


def build_terminal(redis: Redis) -> CommandHandler:
    """
    Wire a controller to Redis-backed collaborators.

    Returns:
        CommandHandler driving the new controller.
    """
    prefix = settings.terminal.key_prefix
    bank = BankLedgerRepository(redis, prefix)
    dispenser = CashInventoryRepository(redis, prefix)
    reader = InMemoryCardReader()
    controller = ATMController(bank, dispenser, reader)
    return CommandHandler(controller, card_reader=reader)


def main() -> None:
    """
    Main entry point for the terminal service.

    Connects to Redis and starts the command listener.
    """
    redis = Redis(
        host=settings.redis.host,
        port=settings.redis.port,
        decode_responses=settings.redis.decode_responses,
    )
    listen_to_redis(redis, build_terminal(redis))


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        logger.info("Application stopped by user")
