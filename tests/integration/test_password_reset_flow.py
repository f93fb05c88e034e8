"""Integration tests for the password reset flow.

Tests cover:
- Reset sets a verifiable credential and consumes all reset tokens
- Invalid, reused and expired tokens are rejected without changes
- Concurrent resets for one owner apply at most one password

Architecture:
- Integration tests with a real (SQLite) database and real bcrypt
"""

import asyncio
from datetime import UTC, datetime, timedelta

import pytest
from freezegun import freeze_time

from account_tokens.domain.entities import Owner
from account_tokens.domain.errors import InvalidPasswordTokenError

NOW = datetime(2026, 1, 1, 12, 0, tzinfo=UTC)


@pytest.mark.integration
class TestPasswordResetFlow:
    """Test reset_password against the database."""

    @pytest.mark.asyncio
    async def test_reset_sets_new_password(
        self, reset_service, password_engine, password_service, owner_repo, create_owner
    ):
        """Test the new password verifies and all reset tokens are gone."""
        # Arrange
        owner = await create_owner("a@x.com", password_hash="old-hash")
        record = await reset_service.create_reset_token(owner.id)
        await reset_service.create_reset_token(owner.id)

        # Act
        await reset_service.reset_password(record.release_value(), "N3wPassword!")

        # Assert
        stored = await owner_repo.find_by_id(owner.id)
        assert password_service.verify_password("N3wPassword!", stored.password_hash)
        assert await password_engine.list(owner.id) == []

    @pytest.mark.asyncio
    async def test_token_is_single_use(self, reset_service, create_owner):
        """Test a used token cannot reset again."""
        owner = await create_owner("a@x.com", password_hash="old-hash")
        value = (await reset_service.create_reset_token(owner.id)).release_value()
        await reset_service.reset_password(value, "N3wPassword!")

        with pytest.raises(InvalidPasswordTokenError) as exc_info:
            await reset_service.reset_password(value, "Another1!")

        assert exc_info.value.message == "Invalid or expired password reset token"

    @pytest.mark.asyncio
    async def test_expired_token_changes_nothing(
        self, reset_service, owner_repo, create_owner
    ):
        """Test an expired token leaves the credential untouched."""
        owner = await create_owner("a@x.com", password_hash="old-hash")

        with freeze_time(NOW, real_asyncio=True) as frozen:
            record = await reset_service.create_reset_token(
                owner.id, expires_in=timedelta(minutes=15)
            )
            frozen.tick(timedelta(minutes=16))

            with pytest.raises(InvalidPasswordTokenError):
                await reset_service.reset_password(
                    record.release_value(), "N3wPassword!"
                )

        stored = await owner_repo.find_by_id(owner.id)
        assert stored.password_hash == "old-hash"

    @pytest.mark.asyncio
    async def test_email_token_cannot_reset_password(
        self, reset_service, email_engine, create_owner
    ):
        """Test tokens of another kind are rejected."""
        owner = await create_owner("a@x.com")
        record = await email_engine.issue(owner.id, email="b@y.com")

        with pytest.raises(InvalidPasswordTokenError):
            await reset_service.reset_password(record.release_value(), "N3wPassword!")

    @pytest.mark.asyncio
    async def test_clear_reset_tokens(self, reset_service, password_engine, create_owner):
        """Test clearing revokes outstanding reset tokens."""
        owner = await create_owner()
        record = await reset_service.create_reset_token(owner.id)

        assert await reset_service.clear_reset_tokens(owner.id) == 1
        assert await password_engine.verify(record.release_value()) is None


@pytest.mark.integration
class TestConcurrentPasswordReset:
    """Test racing resets for the same owner."""

    @pytest.mark.asyncio
    async def test_same_token_used_concurrently_succeeds_once(
        self, reset_service, password_service, owner_repo, create_owner
    ):
        """Test two simultaneous resets with one token apply exactly one password."""
        # Arrange
        owner = await create_owner("a@x.com", password_hash="old-hash")
        value = (await reset_service.create_reset_token(owner.id)).release_value()

        # Act
        results = await asyncio.gather(
            reset_service.reset_password(value, "first-password"),
            reset_service.reset_password(value, "second-password"),
            return_exceptions=True,
        )

        # Assert
        successes = [r for r in results if isinstance(r, Owner)]
        failures = [r for r in results if isinstance(r, BaseException)]
        assert len(successes) == 1
        assert len(failures) == 1
        assert isinstance(failures[0], InvalidPasswordTokenError)

        stored = await owner_repo.find_by_id(owner.id)
        assert stored.password_hash == successes[0].password_hash

    @pytest.mark.asyncio
    async def test_different_tokens_used_concurrently_succeed_once(
        self, reset_service, password_engine, create_owner
    ):
        """Test the first reset revokes the owner's other outstanding token."""
        owner = await create_owner("a@x.com", password_hash="old-hash")
        first = (await reset_service.create_reset_token(owner.id)).release_value()
        second = (await reset_service.create_reset_token(owner.id)).release_value()

        results = await asyncio.gather(
            reset_service.reset_password(first, "first-password"),
            reset_service.reset_password(second, "second-password"),
            return_exceptions=True,
        )

        assert len([r for r in results if isinstance(r, Owner)]) == 1
        assert await password_engine.list(owner.id) == []
