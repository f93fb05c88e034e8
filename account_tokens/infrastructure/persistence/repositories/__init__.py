"""Repository implementations (adapters for the domain protocols)."""

from account_tokens.infrastructure.persistence.repositories.owner_repository import (
    OwnerRepository,
)
from account_tokens.infrastructure.persistence.repositories.token_store import (
    SQLAlchemyTokenStore,
)

__all__ = ["OwnerRepository", "SQLAlchemyTokenStore"]
