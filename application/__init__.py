"""
Application layer - Drivers for the ATM controller.

Contains:
- Command handler
"""

from .command_handler import CommandHandler, CommandResponse


__all__ = [
    "CommandHandler",
    "CommandResponse",
]
