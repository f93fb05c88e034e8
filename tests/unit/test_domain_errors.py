"""Unit tests for token errors.

Tests cover:
- Codes, messages and status hints
- Hierarchy used by callers to catch invalid tokens generically
- Custom messages
"""

import pytest

from account_tokens.core.enums import ErrorCode
from account_tokens.domain.errors import (
    InvalidEmailTokenError,
    InvalidOwnerReferenceError,
    InvalidPasswordTokenError,
    InvalidTokenError,
    TokenError,
    UnverifiedEmailMissingError,
)


@pytest.mark.unit
class TestTokenErrors:
    """Test error attributes and hierarchy."""

    def test_email_token_error(self):
        """Test the email confirmation error message and code."""
        error = InvalidEmailTokenError()

        assert error.message == "Invalid or expired email verification token"
        assert error.code == ErrorCode.EMAIL_TOKEN_INVALID
        assert error.status_code == 400

    def test_password_token_error(self):
        """Test the password reset error message and code."""
        error = InvalidPasswordTokenError()

        assert error.message == "Invalid or expired password reset token"
        assert error.code == ErrorCode.PASSWORD_TOKEN_INVALID
        assert error.status_code == 400

    @pytest.mark.parametrize(
        "error_class", [InvalidEmailTokenError, InvalidPasswordTokenError]
    )
    def test_specialised_errors_are_invalid_token_errors(self, error_class):
        """Test flows' errors can be caught as InvalidTokenError."""
        with pytest.raises(InvalidTokenError):
            raise error_class()

    @pytest.mark.parametrize(
        "error_class", [InvalidOwnerReferenceError, UnverifiedEmailMissingError]
    )
    def test_programmer_errors(self, error_class):
        """Test boundary violations are TokenErrors with a 500 hint."""
        error = error_class()

        assert isinstance(error, TokenError)
        assert not isinstance(error, InvalidTokenError)
        assert error.status_code == 500

    def test_custom_message_and_str(self):
        """Test a custom message replaces the default one."""
        error = InvalidTokenError("Link no longer valid")

        assert error.message == "Link no longer valid"
        assert str(error) == "token_invalid: Link no longer valid"
