"""Domain errors package.

Exports all domain-level error classes for convenient importing.

Usage:
    from account_tokens.domain.errors import InvalidEmailTokenError, InvalidTokenError
"""

from account_tokens.domain.errors.token_error import (
    InvalidEmailTokenError,
    InvalidOwnerReferenceError,
    InvalidPasswordTokenError,
    InvalidTokenError,
    TokenError,
    UnverifiedEmailMissingError,
)

__all__ = [
    "InvalidEmailTokenError",
    "InvalidOwnerReferenceError",
    "InvalidPasswordTokenError",
    "InvalidTokenError",
    "TokenError",
    "UnverifiedEmailMissingError",
]
