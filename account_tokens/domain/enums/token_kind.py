"""Kinds of opaque tokens managed by the engine."""

from enum import Enum


class TokenKind(str, Enum):
    """Token variants.

    EMAIL_VERIFICATION tokens carry the email they confirm;
    PASSWORD_RESET tokens carry no payload.
    """

    EMAIL_VERIFICATION = "email_verification"
    PASSWORD_RESET = "password_reset"

    @property
    def carries_email(self) -> bool:
        """Whether records of this kind store an email payload."""
        return self is TokenKind.EMAIL_VERIFICATION
