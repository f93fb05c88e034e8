"""Owner (account) database model.

Only the columns the token flows read or write. The hosting application is
free to extend the table.

Columns:
    email: Confirmed primary address (unique).
    unverified_email: Pending address, NOT unique. Two owners may hold the
        same pending address; the unique index on email arbitrates at
        confirmation time.
    password: Credential hash from the password service (never plaintext).
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from account_tokens.core.constants import OWNERS_TABLE
from account_tokens.infrastructure.persistence.base import BaseMutableModel


class OwnerModel(BaseMutableModel):
    """Owner model for account email and credential state.

    Fields:
        id: UUID primary key (from BaseModel)
        created_at: Timestamp when created (from BaseModel)
        updated_at: Timestamp when last updated (from TimestampMixin)
        email: Confirmed email (unique, indexed)
        unverified_email: Pending email (nullable, indexed, not unique)
        password_hash: Mapped to the ``password`` column
    """

    __tablename__ = OWNERS_TABLE

    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        index=True,
        comment="Confirmed primary email address",
    )

    unverified_email: Mapped[str | None] = mapped_column(
        String(255),
        nullable=True,
        index=True,
        comment="Pending email awaiting confirmation (not unique)",
    )

    password_hash: Mapped[str | None] = mapped_column(
        "password",
        String(255),
        nullable=True,
        comment="Credential hash",
    )

    def __repr__(self) -> str:
        """String representation for debugging.

        Returns:
            str: Class name, id and confirmed email.
        """
        return f"<OwnerModel(id={self.id}, email={self.email})>"
