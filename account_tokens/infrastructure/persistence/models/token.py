"""Shared columns for token tables.

Both token tables carry the same columns apart from ``email``. Rows are
immutable once written: rotation is delete and recreate, never update.
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import DateTime, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from account_tokens.core.constants import OWNERS_TABLE, TOKEN_HASH_LENGTH
from account_tokens.infrastructure.persistence.base import BaseModel


class TokenModel(BaseModel):
    """Abstract token model.

    Fields:
        id: UUID primary key (from BaseModel)
        created_at: Issuance timestamp (set explicitly at issuance)
        tokenable_id: Owner foreign key (cascade delete)
        hash: Hex digest of the token secret (never the secret)
        expires_at: created_at + ttl
    """

    __abstract__ = True

    tokenable_id: Mapped[UUID] = mapped_column(
        ForeignKey(f"{OWNERS_TABLE}.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="Owner the token belongs to",
    )

    hash: Mapped[str] = mapped_column(
        String(TOKEN_HASH_LENGTH),
        nullable=False,
        comment="SHA-256 hex digest of the token secret",
    )

    expires_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        index=True,
        comment="Timestamp when token expires",
    )
