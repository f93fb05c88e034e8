"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.
Attached to every TokenError so the presentation layer can render
a stable code without inspecting exception types.

Categories:
- Owner errors (INVALID_OWNER_REFERENCE)
- Token errors (*_TOKEN_INVALID)
- Email state errors (UNVERIFIED_EMAIL_MISSING)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable).

    Error codes follow ENTITY_ACTION_REASON naming convention.
    """

    # Owner errors
    INVALID_OWNER_REFERENCE = "invalid_owner_reference"

    # Token errors
    TOKEN_INVALID = "token_invalid"
    EMAIL_TOKEN_INVALID = "email_token_invalid"
    PASSWORD_TOKEN_INVALID = "password_token_invalid"

    # Email state errors
    UNVERIFIED_EMAIL_MISSING = "unverified_email_missing"
