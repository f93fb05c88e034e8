"""Email verification token database model.

One row per issued email verification token. ``email`` records which
pending address the token confirms, so a token for an abandoned address can
never promote it.
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from account_tokens.core.constants import EMAIL_VERIFICATION_TOKENS_TABLE
from account_tokens.infrastructure.persistence.models.token import TokenModel


class EmailVerificationTokenModel(TokenModel):
    """Email verification token model.

    Fields:
        id, created_at, tokenable_id, hash, expires_at (from TokenModel)
        email: Address being confirmed
    """

    __tablename__ = EMAIL_VERIFICATION_TOKENS_TABLE

    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Email address the token confirms",
    )
