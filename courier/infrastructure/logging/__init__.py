"""Logging adapters implementing LoggerProtocol."""

from courier.infrastructure.logging.console_adapter import ConsoleAdapter

__all__ = ["ConsoleAdapter"]
