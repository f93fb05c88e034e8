"""Token domain errors.

Only boundary-contract violations and the final user-facing outcome of a
verify-and-act flow are raised. Decode failures, unknown identifiers, hash
mismatches and expiry never raise on their own: the engine collapses them
into ``None`` and the flows translate that into one generic error.

Hierarchy:
    TokenError
    ├── InvalidOwnerReferenceError   (programmer error, never retried)
    ├── UnverifiedEmailMissingError  (no pending email to confirm)
    └── InvalidTokenError            (generic invalid-or-expired token)
        ├── InvalidEmailTokenError
        └── InvalidPasswordTokenError

Storage errors (SQLAlchemy exceptions) are NOT wrapped; they propagate
unchanged to the caller.

Usage:
    from account_tokens.domain.errors import InvalidEmailTokenError

    try:
        owner = await reconciler.verify_email(token_value)
    except InvalidEmailTokenError as error:
        return {"errors": [{"code": error.code.value, "message": error.message}]}
"""

from account_tokens.core.enums import ErrorCode


class TokenError(Exception):
    """Base class for all token errors.

    Attributes:
        code: Machine-readable error code.
        message: Human-readable message, safe to show to end users.
        status_code: HTTP status hint for the presentation layer.
    """

    default_code: ErrorCode = ErrorCode.TOKEN_INVALID
    default_message: str = "Token error"
    status_code: int = 400

    def __init__(self, message: str | None = None) -> None:
        self.code = self.default_code
        self.message = message or self.default_message
        super().__init__(self.message)

    def __str__(self) -> str:
        """String representation of error."""
        return f"{self.code.value}: {self.message}"


class InvalidOwnerReferenceError(TokenError):
    """Owner has no persisted identity, or no longer exists."""

    default_code = ErrorCode.INVALID_OWNER_REFERENCE
    default_message = "Owner reference must point to a persisted owner"
    status_code = 500


class UnverifiedEmailMissingError(TokenError):
    """Email verification token requested for an owner with no pending email."""

    default_code = ErrorCode.UNVERIFIED_EMAIL_MISSING
    default_message = (
        "Cannot generate email verification token. The owner has no unverified email"
    )
    status_code = 500


class InvalidTokenError(TokenError):
    """Token is malformed, unknown, tampered with, expired or no longer applicable.

    The message never reveals which of those checks failed.
    """

    default_code = ErrorCode.TOKEN_INVALID
    default_message = "Invalid or expired token"


class InvalidEmailTokenError(InvalidTokenError):
    """Raised by email confirmation for every kind of verification failure."""

    default_code = ErrorCode.EMAIL_TOKEN_INVALID
    default_message = "Invalid or expired email verification token"


class InvalidPasswordTokenError(InvalidTokenError):
    """Raised by password reset for every kind of verification failure."""

    default_code = ErrorCode.PASSWORD_TOKEN_INVALID
    default_message = "Invalid or expired password reset token"
