"""Logging adapters implementing LoggerProtocol."""

from statement_intake.infrastructure.logging.console_adapter import ConsoleAdapter

__all__ = ["ConsoleAdapter"]
