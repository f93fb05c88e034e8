"""Database models package.

Importing this package registers every table on BaseModel.metadata
(used by Database.create_all and Alembic autogenerate).
"""

from account_tokens.infrastructure.persistence.base import BaseModel
from account_tokens.infrastructure.persistence.models.email_verification_token import (
    EmailVerificationTokenModel,
)
from account_tokens.infrastructure.persistence.models.owner import OwnerModel
from account_tokens.infrastructure.persistence.models.password_reset_token import (
    PasswordResetTokenModel,
)
from account_tokens.infrastructure.persistence.models.token import TokenModel

__all__ = [
    "BaseModel",
    "EmailVerificationTokenModel",
    "OwnerModel",
    "PasswordResetTokenModel",
    "TokenModel",
]
