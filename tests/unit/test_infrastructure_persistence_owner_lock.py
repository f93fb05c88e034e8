"""Unit tests for OwnerRepository row locking.

SQLite ignores FOR UPDATE, so the locking statement is compiled against the
PostgreSQL dialect instead of being executed.

Tests cover:
- lock_for_update issues SELECT ... FOR UPDATE with populate_existing
- The optional unverified_email condition
- Ambient session is used directly
"""

from unittest.mock import AsyncMock, Mock

import pytest
from sqlalchemy.dialects import postgresql
from uuid_extensions import uuid7

from account_tokens.infrastructure.persistence.models import OwnerModel
from account_tokens.infrastructure.persistence.repositories import OwnerRepository


def create_session(owner_model=None):
    """Create a session double whose execute() returns owner_model."""
    result = Mock()
    result.scalar_one_or_none.return_value = owner_model
    session = Mock()
    session.execute = AsyncMock(return_value=result)
    return session


def compiled(session) -> str:
    stmt = session.execute.call_args[0][0]
    return str(stmt.compile(dialect=postgresql.dialect()))


@pytest.mark.unit
class TestOwnerLockForUpdate:
    """Test OwnerRepository.lock_for_update statement shape."""

    @pytest.mark.asyncio
    async def test_lock_selects_for_update(self):
        """Test the owner row is selected FOR UPDATE and refreshed."""
        # Arrange
        repo = OwnerRepository(database=Mock())
        session = create_session()

        # Act
        result = await repo.lock_for_update(uuid7(), session)

        # Assert
        assert result is None
        sql = compiled(session)
        assert "FOR UPDATE" in sql
        assert "unverified_email =" not in sql
        stmt = session.execute.call_args[0][0]
        assert stmt.get_execution_options()["populate_existing"] is True

    @pytest.mark.asyncio
    async def test_lock_with_unverified_email_condition(self):
        """Test the pending email condition is part of the locked select."""
        repo = OwnerRepository(database=Mock())
        session = create_session()

        await repo.lock_for_update(uuid7(), session, unverified_email="b@y.com")

        sql = compiled(session)
        assert "users.unverified_email =" in sql
        assert "FOR UPDATE" in sql

    @pytest.mark.asyncio
    async def test_lock_maps_row_to_domain(self):
        """Test a locked row is returned as a domain Owner."""
        owner_id = uuid7()
        model = OwnerModel(
            email="a@x.com", unverified_email="b@y.com", password_hash="hash"
        )
        model.id = owner_id
        repo = OwnerRepository(database=Mock())

        owner = await repo.lock_for_update(owner_id, create_session(model))

        assert owner.id == owner_id
        assert owner.email == "a@x.com"
        assert owner.unverified_email == "b@y.com"
        assert owner.password_hash == "hash"
