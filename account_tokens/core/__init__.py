"""Core shared kernel.

This module provides foundational pieces used across all architectural layers:
- Settings loaded from the environment
- Constants for token sizes, windows and table names
- Enums for error codes and runtime environments

The core module has NO dependencies on other application layers
(the composition root in `container` is the single exception).
"""

from account_tokens.core.enums import Environment, ErrorCode

__all__ = [
    "Environment",
    "ErrorCode",
]
