"""TokenStore protocol (port) for token persistence.

Durable CRUD over token rows, scoped by owner. One implementation serves both
token tables; the email column is simply left empty for password reset tokens.

Transactions:
    Every method accepts an optional ambient ``session`` (the handle yielded by
    ``TransactionManager.transaction()``). With one, the call joins the caller's
    transaction and is rolled back with it. Without one, the call commits on
    its own.

Scoping:
    Every method taking ``owner_id`` must never read or modify another owner's
    rows, even when handed a colliding identifier.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Protocol
from uuid import UUID


@dataclass
class TokenData:
    """Data transfer object for a stored token row.

    Used by protocol methods to return token data without
    exposing infrastructure model classes to domain/application layers.
    """

    id: UUID
    owner_id: UUID
    hash: str = field(repr=False)
    created_at: datetime
    expires_at: datetime
    email: str | None = None


class TokenStore(Protocol):
    """Protocol for token persistence operations.

    Implementations:
        - SQLAlchemyTokenStore: account_tokens/infrastructure/persistence/repositories/
    """

    async def insert(
        self,
        owner_id: UUID,
        *,
        hash: str,
        created_at: datetime,
        expires_at: datetime,
        email: str | None = None,
        session: Any | None = None,
    ) -> UUID:
        """Persist a new token row.

        Args:
            owner_id: Owner the token belongs to.
            hash: Hex digest of the secret.
            created_at: Issuance timestamp.
            expires_at: Expiry timestamp.
            email: Email being confirmed (email verification tokens only).
            session: Optional ambient transaction.

        Returns:
            Store-assigned identifier.
        """
        ...

    async def find_by_id(
        self, identifier: str | UUID, *, session: Any | None = None
    ) -> TokenData | None:
        """Find a token by identifier, regardless of owner.

        Used by verification, where the owner is not yet known. Identifiers
        that are not valid UUIDs resolve to None.

        Args:
            identifier: Token identifier.
            session: Optional ambient transaction.

        Returns:
            TokenData if found, None otherwise.
        """
        ...

    async def find_by_owner(
        self, owner_id: UUID, identifier: str | UUID, *, session: Any | None = None
    ) -> TokenData | None:
        """Find a token by identifier within one owner's tokens.

        Args:
            owner_id: Owner the token must belong to.
            identifier: Token identifier.
            session: Optional ambient transaction.

        Returns:
            TokenData if found for that owner, None otherwise.
        """
        ...

    async def list_by_owner(
        self, owner_id: UUID, *, session: Any | None = None
    ) -> list[TokenData]:
        """List an owner's tokens, newest first.

        Args:
            owner_id: Owner whose tokens to list.
            session: Optional ambient transaction.

        Returns:
            List of TokenData ordered by created_at descending (may be empty).
        """
        ...

    async def delete_by_id(
        self, owner_id: UUID, identifier: str | UUID, *, session: Any | None = None
    ) -> int:
        """Delete one of an owner's tokens.

        Args:
            owner_id: Owner the token must belong to.
            identifier: Token identifier.
            session: Optional ambient transaction.

        Returns:
            Number of rows deleted (0 or 1).
        """
        ...

    async def delete_all_by_owner(
        self, owner_id: UUID, *, session: Any | None = None
    ) -> int:
        """Delete every token an owner holds.

        Args:
            owner_id: Owner whose tokens to delete.
            session: Optional ambient transaction.

        Returns:
            Number of rows deleted.
        """
        ...

    async def last_created_at_by_owner(
        self, owner_id: UUID, *, session: Any | None = None
    ) -> datetime | None:
        """Get the creation time of an owner's newest token.

        Args:
            owner_id: Owner to inspect.
            session: Optional ambient transaction.

        Returns:
            Newest created_at, or None when the owner holds no tokens.
        """
        ...

    async def delete_expired(
        self, now: datetime, *, session: Any | None = None
    ) -> int:
        """Delete all tokens that expired before ``now``.

        Cleanup task (typically run periodically). Expired rows are never
        removed implicitly by verification.

        Args:
            now: Reference time.
            session: Optional ambient transaction.

        Returns:
            Number of rows deleted.
        """
        ...
