"""Integration tests for OwnerRepository.

Tests cover:
- Save and find by id
- Update of email fields and password
- Confirmed email lookup excluding an owner
- Unique confirmed email constraint

Architecture:
- Integration tests with a real (SQLite) database
"""

import pytest
from sqlalchemy.exc import IntegrityError
from uuid_extensions import uuid7

from account_tokens.domain.entities.owner import Owner
from account_tokens.domain.errors import InvalidOwnerReferenceError


@pytest.mark.integration
class TestOwnerRepository:
    """Test OwnerRepository against a real database."""

    @pytest.mark.asyncio
    async def test_save_assigns_id_and_find_returns_owner(self, owner_repo, create_owner):
        """Test a saved owner can be read back."""
        # Arrange / Act
        owner = await create_owner(
            "a@x.com", unverified_email="a@x.com", password_hash="hash"
        )
        found = await owner_repo.find_by_id(owner.id)

        # Assert
        assert owner.id is not None
        assert found == owner

    @pytest.mark.asyncio
    async def test_find_unknown_returns_none(self, owner_repo):
        """Test an unknown id yields None."""
        assert await owner_repo.find_by_id(uuid7()) is None

    @pytest.mark.asyncio
    async def test_update_persists_fields(self, owner_repo, create_owner):
        """Test email, pending email and password are written."""
        owner = await create_owner("a@x.com")
        owner.unverified_email = "b@y.com"
        owner.password_hash = "new-hash"

        await owner_repo.update(owner)

        found = await owner_repo.find_by_id(owner.id)
        assert found.unverified_email == "b@y.com"
        assert found.password_hash == "new-hash"

    @pytest.mark.asyncio
    async def test_update_unknown_owner_raises(self, owner_repo):
        """Test updating a missing owner is an invalid reference."""
        with pytest.raises(InvalidOwnerReferenceError):
            await owner_repo.update(Owner(id=uuid7(), email="a@x.com"))

        with pytest.raises(InvalidOwnerReferenceError):
            await owner_repo.update(Owner(id=None, email="a@x.com"))

    @pytest.mark.asyncio
    async def test_exists_with_email_excludes_owner(self, owner_repo, create_owner):
        """Test confirmed email lookup can ignore the asking owner."""
        owner = await create_owner("a@x.com")
        await create_owner("c@x.com", unverified_email="b@y.com")

        assert await owner_repo.exists_with_email("a@x.com") is True
        assert (
            await owner_repo.exists_with_email("a@x.com", exclude_owner_id=owner.id)
            is False
        )
        # Pending emails do not count as taken
        assert await owner_repo.exists_with_email("b@y.com") is False

    @pytest.mark.asyncio
    async def test_duplicate_confirmed_email_rejected(self, create_owner):
        """Test two owners cannot share a confirmed email."""
        await create_owner("a@x.com")

        with pytest.raises(IntegrityError):
            await create_owner("a@x.com")

    @pytest.mark.asyncio
    async def test_shared_pending_email_allowed(self, create_owner):
        """Test several owners may have the same pending email."""
        await create_owner("a@x.com", unverified_email="z@x.com")
        await create_owner("b@x.com", unverified_email="z@x.com")

    @pytest.mark.asyncio
    async def test_lock_inside_transaction(self, database, owner_repo, create_owner):
        """Test lock_for_update reads the row within a transaction."""
        owner = await create_owner("a@x.com", unverified_email="b@y.com")

        async with database.transaction() as session:
            locked = await owner_repo.lock_for_update(owner.id, session)
            mismatch = await owner_repo.lock_for_update(
                owner.id, session, unverified_email="other@y.com"
            )

        assert locked == owner
        assert mismatch is None
