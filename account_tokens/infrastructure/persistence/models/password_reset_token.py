"""Password reset token database model."""

from account_tokens.core.constants import PASSWORD_RESET_TOKENS_TABLE
from account_tokens.infrastructure.persistence.models.token import TokenModel


class PasswordResetTokenModel(TokenModel):
    """Password reset token model.

    Fields:
        id, created_at, tokenable_id, hash, expires_at (from TokenModel)
    """

    __tablename__ = PASSWORD_RESET_TOKENS_TABLE
