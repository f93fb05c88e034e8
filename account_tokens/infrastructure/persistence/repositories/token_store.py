"""SQLAlchemyTokenStore - SQLAlchemy implementation of the TokenStore protocol.

One class serves both token tables: it is constructed with the model to
operate on, and only writes ``email`` when the model has that column.
"""

from datetime import datetime
from typing import Any
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from account_tokens.domain.protocols.token_store import TokenData
from account_tokens.infrastructure.persistence.base import as_utc
from account_tokens.infrastructure.persistence.database import Database
from account_tokens.infrastructure.persistence.models.token import TokenModel


def _parse_identifier(identifier: str | UUID) -> UUID | None:
    """Parse a token identifier, returning None for anything malformed."""
    if isinstance(identifier, UUID):
        return identifier
    try:
        return UUID(str(identifier))
    except (TypeError, ValueError):
        return None


def _to_data(model: TokenModel) -> TokenData:
    """Convert database model to domain DTO."""
    return TokenData(
        id=model.id,
        owner_id=model.tokenable_id,
        hash=model.hash,
        created_at=as_utc(model.created_at),
        expires_at=as_utc(model.expires_at),
        email=getattr(model, "email", None),
    )


class SQLAlchemyTokenStore:
    """SQLAlchemy implementation for token persistence.

    Every method accepts an optional ambient ``session``. With one, the
    statement runs inside the caller's transaction (and is flushed so
    constraint violations surface immediately). Without one, the call opens
    and commits its own transaction.

    Example:
        >>> store = SQLAlchemyTokenStore(database, PasswordResetTokenModel)
        >>> token_id = await store.insert(
        ...     owner_id, hash=digest, created_at=now, expires_at=now + ttl
        ... )
        >>> await store.find_by_owner(owner_id, token_id)
    """

    def __init__(self, database: Database, model: type[TokenModel]) -> None:
        """Initialize store.

        Args:
            database: Database providing sessions.
            model: Token table to operate on.
        """
        self._database = database
        self._model = model
        self._carries_email = "email" in model.__table__.columns

    @property
    def model(self) -> type[TokenModel]:
        """Token model this store operates on."""
        return self._model

    async def insert(
        self,
        owner_id: UUID,
        *,
        hash: str,
        created_at: datetime,
        expires_at: datetime,
        email: str | None = None,
        session: AsyncSession | None = None,
    ) -> UUID:
        """Persist a new token row.

        Args:
            owner_id: Owner the token belongs to.
            hash: Hex digest of the secret.
            created_at: Issuance timestamp.
            expires_at: Expiry timestamp.
            email: Email being confirmed (ignored for tables without email).
            session: Optional ambient transaction.

        Returns:
            Identifier assigned to the new row.
        """
        values: dict[str, Any] = {
            "tokenable_id": owner_id,
            "hash": hash,
            "created_at": as_utc(created_at),
            "expires_at": as_utc(expires_at),
        }
        if self._carries_email:
            values["email"] = email

        async with self._database.session_scope(session) as active:
            token_model = self._model(**values)
            active.add(token_model)
            await active.flush()
            return token_model.id

    async def find_by_id(
        self, identifier: str | UUID, *, session: AsyncSession | None = None
    ) -> TokenData | None:
        """Find a token by identifier, regardless of owner.

        Args:
            identifier: Token identifier (malformed values resolve to None).
            session: Optional ambient transaction.

        Returns:
            TokenData if found, None otherwise.
        """
        token_id = _parse_identifier(identifier)
        if token_id is None:
            return None

        stmt = select(self._model).where(self._model.id == token_id)
        async with self._database.session_scope(session) as active:
            result = await active.execute(stmt)
            model = result.scalar_one_or_none()
            return _to_data(model) if model else None

    async def find_by_owner(
        self,
        owner_id: UUID,
        identifier: str | UUID,
        *,
        session: AsyncSession | None = None,
    ) -> TokenData | None:
        """Find one of an owner's tokens.

        Args:
            owner_id: Owner the token must belong to.
            identifier: Token identifier.
            session: Optional ambient transaction.

        Returns:
            TokenData if the owner holds it, None otherwise.
        """
        token_id = _parse_identifier(identifier)
        if token_id is None:
            return None

        stmt = (
            select(self._model)
            .where(self._model.id == token_id)
            .where(self._model.tokenable_id == owner_id)
        )
        async with self._database.session_scope(session) as active:
            result = await active.execute(stmt)
            model = result.scalar_one_or_none()
            return _to_data(model) if model else None

    async def list_by_owner(
        self, owner_id: UUID, *, session: AsyncSession | None = None
    ) -> list[TokenData]:
        """List an owner's tokens, newest first.

        Args:
            owner_id: Owner whose tokens to list.
            session: Optional ambient transaction.

        Returns:
            List of TokenData ordered by created_at descending.
        """
        stmt = (
            select(self._model)
            .where(self._model.tokenable_id == owner_id)
            .order_by(self._model.created_at.desc(), self._model.id.desc())
        )
        async with self._database.session_scope(session) as active:
            result = await active.execute(stmt)
            return [_to_data(model) for model in result.scalars().all()]

    async def delete_by_id(
        self,
        owner_id: UUID,
        identifier: str | UUID,
        *,
        session: AsyncSession | None = None,
    ) -> int:
        """Delete one of an owner's tokens.

        Args:
            owner_id: Owner the token must belong to.
            identifier: Token identifier.
            session: Optional ambient transaction.

        Returns:
            Number of rows deleted (0 or 1).
        """
        token_id = _parse_identifier(identifier)
        if token_id is None:
            return 0

        stmt = (
            delete(self._model)
            .where(self._model.id == token_id)
            .where(self._model.tokenable_id == owner_id)
            .execution_options(synchronize_session=False)
        )
        async with self._database.session_scope(session) as active:
            result = await active.execute(stmt)
            return result.rowcount

    async def delete_all_by_owner(
        self, owner_id: UUID, *, session: AsyncSession | None = None
    ) -> int:
        """Delete every token an owner holds.

        Args:
            owner_id: Owner whose tokens to delete.
            session: Optional ambient transaction.

        Returns:
            Number of rows deleted.
        """
        stmt = (
            delete(self._model)
            .where(self._model.tokenable_id == owner_id)
            .execution_options(synchronize_session=False)
        )
        async with self._database.session_scope(session) as active:
            result = await active.execute(stmt)
            return result.rowcount

    async def last_created_at_by_owner(
        self, owner_id: UUID, *, session: AsyncSession | None = None
    ) -> datetime | None:
        """Get the creation time of an owner's newest token.

        Args:
            owner_id: Owner to inspect.
            session: Optional ambient transaction.

        Returns:
            Newest created_at (UTC), or None when the owner holds no tokens.
        """
        stmt = (
            select(self._model.created_at)
            .where(self._model.tokenable_id == owner_id)
            .order_by(self._model.created_at.desc())
            .limit(1)
        )
        async with self._database.session_scope(session) as active:
            result = await active.execute(stmt)
            created_at = result.scalar_one_or_none()
            return as_utc(created_at) if created_at else None

    async def delete_expired(
        self, now: datetime, *, session: AsyncSession | None = None
    ) -> int:
        """Delete all tokens that expired before ``now``.

        Args:
            now: Reference time.
            session: Optional ambient transaction.

        Returns:
            Number of rows deleted.
        """
        stmt = (
            delete(self._model)
            .where(self._model.expires_at < as_utc(now))
            .execution_options(synchronize_session=False)
        )
        async with self._database.session_scope(session) as active:
            result = await active.execute(stmt)
            return result.rowcount
