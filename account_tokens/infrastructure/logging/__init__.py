"""Logging adapters implementing LoggerProtocol."""

from account_tokens.infrastructure.logging.console_adapter import ConsoleAdapter

__all__ = ["ConsoleAdapter"]
