"""OwnerRepository protocol for owner persistence.

Port (interface) for hexagonal architecture.
Infrastructure layer implements this protocol.
"""

from typing import Any, Protocol
from uuid import UUID

from account_tokens.domain.entities.owner import Owner


class OwnerRepository(Protocol):
    """Owner repository protocol (port).

    Only the operations the token flows need: read, create, persist the
    email and credential fields, and take an exclusive row lock.

    Methods:
        find_by_id: Retrieve owner by ID
        save: Create new owner
        update: Persist email/unverified_email/password changes
        lock_for_update: Read owner under an exclusive row lock
        exists_with_email: Check whether another owner holds a confirmed email
    """

    async def find_by_id(
        self, owner_id: UUID, *, session: Any | None = None
    ) -> Owner | None:
        """Find owner by ID.

        Args:
            owner_id: Owner's unique identifier.
            session: Optional ambient transaction.

        Returns:
            Owner if found, None otherwise.
        """
        ...

    async def save(self, owner: Owner, *, session: Any | None = None) -> Owner:
        """Create new owner in database.

        Args:
            owner: Owner entity to persist (id may be None).
            session: Optional ambient transaction.

        Returns:
            The persisted owner, with its id assigned.

        Raises:
            IntegrityError: If the email already exists.
        """
        ...

    async def update(self, owner: Owner, *, session: Any | None = None) -> None:
        """Persist email, unverified_email and password of an existing owner.

        Args:
            owner: Owner entity with updated fields.
            session: Optional ambient transaction.

        Raises:
            InvalidOwnerReferenceError: If the owner has no id or doesn't exist.
            IntegrityError: If the email collides with another owner.
        """
        ...

    async def lock_for_update(
        self,
        owner_id: UUID,
        session: Any,
        *,
        unverified_email: str | None = None,
    ) -> Owner | None:
        """Read an owner row under an exclusive lock (SELECT ... FOR UPDATE).

        The lock is held until the enclosing transaction ends.

        Args:
            owner_id: Owner's unique identifier.
            session: Active transaction the lock belongs to.
            unverified_email: When given, the row must also still have this
                pending email.

        Returns:
            Owner if a matching row exists, None otherwise.
        """
        ...

    async def exists_with_email(
        self,
        email: str,
        *,
        exclude_owner_id: UUID | None = None,
        session: Any | None = None,
    ) -> bool:
        """Check whether an owner holds ``email`` as confirmed email.

        Args:
            email: Email address to check.
            exclude_owner_id: Owner to ignore (the one confirming).
            session: Optional ambient transaction.

        Returns:
            True if another owner already has this confirmed email.
        """
        ...
