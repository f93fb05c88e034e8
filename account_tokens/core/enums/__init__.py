"""Core enums package.

Exports all core-level enums for convenient importing.

Usage:
    from account_tokens.core.enums import ErrorCode, Environment
"""

from account_tokens.core.enums.environment import Environment
from account_tokens.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode", "Environment"]
