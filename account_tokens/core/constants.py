"""Centralized constants for internal implementation details.

This module contains constants that are internal implementation details,
NOT environment-specific configuration. For environment-specific settings,
use `account_tokens/core/config.py` instead.

Categories:
- Token sizes: Default secret length and storage widths
- Windows: Default throttle and expiry durations
- Wire format: Public token separator
- Tables: Default table names for the token stores

Example:
    >>> from account_tokens.core.constants import DEFAULT_SECRET_LENGTH
    >>> secret = SecretGenerator().generate(DEFAULT_SECRET_LENGTH)
"""

from datetime import timedelta

# =============================================================================
# Token Sizes
# =============================================================================

DEFAULT_SECRET_LENGTH: int = 40
"""Default number of characters in a generated token secret."""

MIN_SECRET_LENGTH: int = 16
MAX_SECRET_LENGTH: int = 256

TOKEN_HASH_LENGTH: int = 80
"""Width of the hash column. SHA-256 hex digests use 64 of these."""

# =============================================================================
# Windows
# =============================================================================

DEFAULT_TOKEN_EXPIRES_IN: timedelta = timedelta(days=1)
DEFAULT_THROTTLE_WINDOW: timedelta = timedelta(seconds=60)

# =============================================================================
# Wire Format
# =============================================================================

TOKEN_SEPARATOR: str = "."
"""Separates the encoded identifier from the encoded secret."""

# =============================================================================
# Tables
# =============================================================================

OWNERS_TABLE: str = "users"
EMAIL_VERIFICATION_TOKENS_TABLE: str = "email_verification_tokens"
PASSWORD_RESET_TOKENS_TABLE: str = "password_reset_tokens"
