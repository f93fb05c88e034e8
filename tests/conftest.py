"""Pytest configuration for async testing.

This configuration provides:
1. Marker registration (unit, integration)
2. Automatic asyncio marking of coroutine tests
3. An isolated on-disk SQLite database per test (aiosqlite)
4. Wired repositories, engines and services over that database
"""

import inspect
from unittest.mock import Mock

import pytest
import pytest_asyncio
from sqlalchemy import event

from account_tokens.application.services import (
    EmailChangeReconciler,
    PasswordResetService,
    ThrottleGuard,
    VerificationEngine,
)
from account_tokens.domain.entities.owner import Owner
from account_tokens.domain.enums import TokenKind
from account_tokens.infrastructure.persistence.database import Database
from account_tokens.infrastructure.persistence.models import (
    EmailVerificationTokenModel,
    PasswordResetTokenModel,
)
from account_tokens.infrastructure.persistence.repositories import (
    OwnerRepository,
    SQLAlchemyTokenStore,
)
from account_tokens.infrastructure.security import (
    BcryptPasswordService,
    SecretGenerator,
    TokenCodec,
    TokenHasher,
)


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: Integration tests with real database"
    )


def pytest_collection_modifyitems(config, items):
    """Automatically add asyncio marker to async test functions."""
    for item in items:
        if inspect.iscoroutinefunction(getattr(item, "function", None)):
            item.add_marker(pytest.mark.asyncio)


# =============================================================================
# Shared fixtures
# =============================================================================


@pytest.fixture
def mock_logger():
    """Logger double; bind() returns the same mock so calls can be asserted."""
    logger = Mock()
    logger.bind.return_value = logger
    logger.with_context.return_value = logger
    return logger


def build_engine(store, kind: TokenKind, logger) -> VerificationEngine:
    """Build a VerificationEngine with real security primitives."""
    return VerificationEngine(
        store,
        kind=kind,
        logger=logger,
        codec=TokenCodec(),
        hasher=TokenHasher(),
        secret_generator=SecretGenerator(),
        throttle_guard=ThrottleGuard(),
    )


# =============================================================================
# Database fixtures (integration)
# =============================================================================


def use_immediate_transactions(engine) -> None:
    """Make every SQLite transaction take the write lock when it begins.

    SQLite ignores SELECT ... FOR UPDATE. With BEGIN IMMEDIATE concurrent
    transactions run one at a time, the ordering the row lock gives on
    PostgreSQL. Waiting happens in the driver thread (busy timeout).
    """

    @event.listens_for(engine.sync_engine, "connect")
    def _disable_driver_begin(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(engine.sync_engine, "begin")
    def _begin_immediate(conn):
        conn.exec_driver_sql("BEGIN IMMEDIATE")


@pytest_asyncio.fixture
async def database(tmp_path):
    """Provide a fresh SQLite database with all tables created.

    Each test gets its own database file, so no data persists between tests.
    """
    db = Database(database_url=f"sqlite+aiosqlite:///{tmp_path / 'tokens.db'}")
    use_immediate_transactions(db.engine)
    await db.create_all()
    yield db
    await db.close()


@pytest.fixture
def owner_repo(database):
    """Owner repository over the test database."""
    return OwnerRepository(database)


@pytest.fixture
def email_store(database):
    """Email verification token store over the test database."""
    return SQLAlchemyTokenStore(database, EmailVerificationTokenModel)


@pytest.fixture
def password_store(database):
    """Password reset token store over the test database."""
    return SQLAlchemyTokenStore(database, PasswordResetTokenModel)


@pytest.fixture
def email_engine(email_store, mock_logger):
    """Email verification engine over the test database."""
    return build_engine(email_store, TokenKind.EMAIL_VERIFICATION, mock_logger)


@pytest.fixture
def password_engine(password_store, mock_logger):
    """Password reset engine over the test database."""
    return build_engine(password_store, TokenKind.PASSWORD_RESET, mock_logger)


@pytest.fixture
def reconciler(email_engine, owner_repo, database, mock_logger):
    """Email change reconciler over the test database."""
    return EmailChangeReconciler(
        engine=email_engine,
        owner_repo=owner_repo,
        transactions=database,
        logger=mock_logger,
    )


@pytest.fixture
def password_service():
    """Real bcrypt service at the minimum cost factor (fast enough for tests)."""
    return BcryptPasswordService(cost_factor=10)


@pytest.fixture
def reset_service(password_engine, owner_repo, database, password_service, mock_logger):
    """Password reset service over the test database."""
    return PasswordResetService(
        engine=password_engine,
        owner_repo=owner_repo,
        transactions=database,
        password_service=password_service,
        logger=mock_logger,
    )


@pytest.fixture
def create_owner(owner_repo):
    """Factory persisting owners.

    Usage:
        owner = await create_owner("a@x.com", unverified_email="a@x.com")
    """

    async def _create(
        email: str = "a@x.com",
        *,
        unverified_email: str | None = None,
        password_hash: str | None = None,
    ) -> Owner:
        return await owner_repo.save(
            Owner(
                id=None,
                email=email,
                unverified_email=unverified_email,
                password_hash=password_hash,
            )
        )

    return _create
