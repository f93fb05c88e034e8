"""Domain enums package."""

from account_tokens.domain.enums.email_change_outcome import EmailChangeOutcome
from account_tokens.domain.enums.token_kind import TokenKind

__all__ = ["EmailChangeOutcome", "TokenKind"]
