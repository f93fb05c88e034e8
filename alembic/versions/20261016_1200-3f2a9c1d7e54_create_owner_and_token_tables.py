"""create_owner_and_token_tables

Revision ID: 3f2a9c1d7e54
Revises:
Create Date: 2026-10-16 12:00:00.000000+00:00

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3f2a9c1d7e54"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _token_columns() -> list[sa.Column]:
    """Columns shared by both token tables."""
    return [
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "tokenable_id",
            sa.Uuid(),
            nullable=False,
            comment="Owner the token belongs to",
        ),
        sa.Column(
            "hash",
            sa.String(length=80),
            nullable=False,
            comment="SHA-256 hex digest of the token secret",
        ),
        sa.Column(
            "expires_at",
            sa.DateTime(timezone=True),
            nullable=False,
            comment="Timestamp when token expires",
        ),
    ]


def upgrade() -> None:
    """Create users, email_verification_tokens and password_reset_tokens."""
    op.create_table(
        "users",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "email",
            sa.String(length=255),
            nullable=False,
            comment="Confirmed primary email address",
        ),
        # Deliberately not unique: pending addresses may collide across owners
        sa.Column(
            "unverified_email",
            sa.String(length=255),
            nullable=True,
            comment="Pending email awaiting confirmation (not unique)",
        ),
        sa.Column(
            "password",
            sa.String(length=255),
            nullable=True,
            comment="Credential hash",
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_users_email"), "users", ["email"], unique=True)
    op.create_index(
        op.f("ix_users_unverified_email"), "users", ["unverified_email"], unique=False
    )

    op.create_table(
        "email_verification_tokens",
        *_token_columns(),
        sa.Column(
            "email",
            sa.String(length=255),
            nullable=False,
            comment="Email address the token confirms",
        ),
        sa.ForeignKeyConstraint(["tokenable_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_email_verification_tokens_tokenable_id"),
        "email_verification_tokens",
        ["tokenable_id"],
        unique=False,
    )
    op.create_index(
        op.f("ix_email_verification_tokens_expires_at"),
        "email_verification_tokens",
        ["expires_at"],
        unique=False,
    )

    op.create_table(
        "password_reset_tokens",
        *_token_columns(),
        sa.ForeignKeyConstraint(["tokenable_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_password_reset_tokens_tokenable_id"),
        "password_reset_tokens",
        ["tokenable_id"],
        unique=False,
    )
    op.create_index(
        op.f("ix_password_reset_tokens_expires_at"),
        "password_reset_tokens",
        ["expires_at"],
        unique=False,
    )


def downgrade() -> None:
    """Drop token tables, then users."""
    op.drop_index(
        op.f("ix_password_reset_tokens_expires_at"), table_name="password_reset_tokens"
    )
    op.drop_index(
        op.f("ix_password_reset_tokens_tokenable_id"),
        table_name="password_reset_tokens",
    )
    op.drop_table("password_reset_tokens")

    op.drop_index(
        op.f("ix_email_verification_tokens_expires_at"),
        table_name="email_verification_tokens",
    )
    op.drop_index(
        op.f("ix_email_verification_tokens_tokenable_id"),
        table_name="email_verification_tokens",
    )
    op.drop_table("email_verification_tokens")

    op.drop_index(op.f("ix_users_unverified_email"), table_name="users")
    op.drop_index(op.f("ix_users_email"), table_name="users")
    op.drop_table("users")
