"""OwnerRepository - SQLAlchemy implementation of OwnerRepository protocol.

Adapter for hexagonal architecture.
Maps between domain Owner entities and database OwnerModel.
"""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from account_tokens.domain.entities.owner import Owner
from account_tokens.domain.errors import InvalidOwnerReferenceError
from account_tokens.infrastructure.persistence.database import Database
from account_tokens.infrastructure.persistence.models.owner import OwnerModel


class OwnerRepository:
    """SQLAlchemy implementation of OwnerRepository protocol.

    Calls given an ambient ``session`` run inside it; others run in their
    own transaction.

    Example:
        >>> owners = OwnerRepository(database)
        >>> async with database.transaction() as session:
        ...     owner = await owners.lock_for_update(owner_id, session)
        ...     owner.switch_email("new@example.com")
        ...     await owners.update(owner, session=session)
    """

    def __init__(self, database: Database) -> None:
        """Initialize repository.

        Args:
            database: Database providing sessions.
        """
        self._database = database

    async def find_by_id(
        self, owner_id: UUID, *, session: AsyncSession | None = None
    ) -> Owner | None:
        """Find owner by ID.

        Args:
            owner_id: Owner's unique identifier.
            session: Optional ambient transaction.

        Returns:
            Domain Owner entity if found, None otherwise.
        """
        stmt = select(OwnerModel).where(OwnerModel.id == owner_id)
        async with self._database.session_scope(session) as active:
            result = await active.execute(stmt)
            owner_model = result.scalar_one_or_none()

        if owner_model is None:
            return None

        return self._to_domain(owner_model)

    async def save(self, owner: Owner, *, session: AsyncSession | None = None) -> Owner:
        """Create new owner in database.

        Args:
            owner: Owner entity to persist (id assigned when None).
            session: Optional ambient transaction.

        Returns:
            The owner entity with its id set.

        Raises:
            IntegrityError: If the email already exists.
        """
        owner_model = self._to_model(owner)
        async with self._database.session_scope(session) as active:
            active.add(owner_model)
            await active.flush()

        owner.id = owner_model.id
        return owner

    async def update(self, owner: Owner, *, session: AsyncSession | None = None) -> None:
        """Persist email, unverified_email and password of an existing owner.

        Args:
            owner: Owner entity with updated fields.
            session: Optional ambient transaction.

        Raises:
            InvalidOwnerReferenceError: If the owner has no id or doesn't exist.
            IntegrityError: If the email collides with another owner.
        """
        if owner.id is None:
            raise InvalidOwnerReferenceError()

        async with self._database.session_scope(session) as active:
            owner_model = await active.get(OwnerModel, owner.id)
            if owner_model is None:
                raise InvalidOwnerReferenceError()

            owner_model.email = owner.email
            owner_model.unverified_email = owner.unverified_email
            owner_model.password_hash = owner.password_hash
            await active.flush()

    async def lock_for_update(
        self,
        owner_id: UUID,
        session: AsyncSession,
        *,
        unverified_email: str | None = None,
    ) -> Owner | None:
        """Read an owner row under an exclusive lock (SELECT ... FOR UPDATE).

        populate_existing refreshes any copy already in the identity map,
        so decisions are made on the locked row's current values.

        Args:
            owner_id: Owner's unique identifier.
            session: Active transaction holding the lock until it ends.
            unverified_email: When given, the row must also still have this
                pending email.

        Returns:
            Domain Owner entity if a matching row exists, None otherwise.
        """
        stmt = (
            select(OwnerModel)
            .where(OwnerModel.id == owner_id)
            .with_for_update()
            .execution_options(populate_existing=True)
        )
        if unverified_email is not None:
            stmt = stmt.where(OwnerModel.unverified_email == unverified_email)

        result = await session.execute(stmt)
        owner_model = result.scalar_one_or_none()

        if owner_model is None:
            return None

        return self._to_domain(owner_model)

    async def exists_with_email(
        self,
        email: str,
        *,
        exclude_owner_id: UUID | None = None,
        session: AsyncSession | None = None,
    ) -> bool:
        """Check whether an owner holds ``email`` as confirmed email.

        Args:
            email: Email address to check.
            exclude_owner_id: Owner to ignore.
            session: Optional ambient transaction.

        Returns:
            True if a (different) owner has this confirmed email.
        """
        stmt = select(OwnerModel.id).where(OwnerModel.email == email)
        if exclude_owner_id is not None:
            stmt = stmt.where(OwnerModel.id != exclude_owner_id)

        async with self._database.session_scope(session) as active:
            result = await active.execute(stmt.limit(1))
            return result.scalar_one_or_none() is not None

    def _to_domain(self, owner_model: OwnerModel) -> Owner:
        """Convert database model to domain entity.

        Args:
            owner_model: SQLAlchemy OwnerModel instance.

        Returns:
            Domain Owner entity.
        """
        return Owner(
            id=owner_model.id,
            email=owner_model.email,
            unverified_email=owner_model.unverified_email,
            password_hash=owner_model.password_hash,
        )

    def _to_model(self, owner: Owner) -> OwnerModel:
        """Convert domain entity to database model.

        Args:
            owner: Domain Owner entity.

        Returns:
            SQLAlchemy OwnerModel instance.
        """
        owner_model = OwnerModel(
            email=owner.email,
            unverified_email=owner.unverified_email,
            password_hash=owner.password_hash,
        )
        if owner.id is not None:
            owner_model.id = owner.id
        return owner_model
