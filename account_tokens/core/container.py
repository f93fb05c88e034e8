"""Composition root.

Cached factories wiring concrete infrastructure into the application
services from Settings. Token providers are explicit constructor
dependencies: each engine is built here and passed down, never registered
on a class.

Usage:
    from account_tokens.core.container import get_email_change_reconciler

    reconciler = get_email_change_reconciler()
    result = await reconciler.update_email(owner_id, "new@example.com")

Tests:
    Call ``<factory>.cache_clear()`` (and ``get_settings.cache_clear()``)
    after changing environment variables.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from account_tokens.core.config import get_settings
from account_tokens.core.enums import Environment
from account_tokens.domain.enums import TokenKind

if TYPE_CHECKING:
    from account_tokens.application.services import (
        EmailChangeReconciler,
        PasswordResetService,
        VerificationEngine,
    )
    from account_tokens.domain.protocols import (
        LoggerProtocol,
        PasswordHashingProtocol,
    )
    from account_tokens.infrastructure.persistence.database import Database
    from account_tokens.infrastructure.persistence.repositories import (
        OwnerRepository,
    )


# ============================================================================
# Infrastructure (app-scoped singletons)
# ============================================================================


@lru_cache()
def get_database() -> "Database":
    """Get database manager singleton (app-scoped).

    Returns:
        Database instance with connection pool.
    """
    from account_tokens.infrastructure.persistence.database import Database

    settings = get_settings()
    return Database(
        database_url=settings.database_url,
        echo=settings.db_echo,
    )


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection:
    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from account_tokens.infrastructure.logging import ConsoleAdapter

    settings = get_settings()
    return ConsoleAdapter(
        use_json=settings.environment != Environment.DEVELOPMENT,
        level=settings.log_level,
    )


@lru_cache()
def get_password_service() -> "PasswordHashingProtocol":
    """Get password hashing service singleton (app-scoped).

    Returns:
        BcryptPasswordService with the configured cost factor.
    """
    from account_tokens.infrastructure.security import BcryptPasswordService

    return BcryptPasswordService(cost_factor=get_settings().bcrypt_rounds)


@lru_cache()
def get_owner_repository() -> "OwnerRepository":
    """Get owner repository singleton (app-scoped).

    Returns:
        OwnerRepository bound to the application database.
    """
    from account_tokens.infrastructure.persistence.repositories import (
        OwnerRepository,
    )

    return OwnerRepository(get_database())


# ============================================================================
# Token engines
# ============================================================================


def _build_engine(kind: TokenKind) -> "VerificationEngine":
    from account_tokens.application.services import ThrottleGuard, VerificationEngine
    from account_tokens.infrastructure.persistence.models import (
        EmailVerificationTokenModel,
        PasswordResetTokenModel,
    )
    from account_tokens.infrastructure.persistence.repositories import (
        SQLAlchemyTokenStore,
    )
    from account_tokens.infrastructure.security import (
        SecretGenerator,
        TokenCodec,
        TokenHasher,
    )

    settings = get_settings()
    if kind is TokenKind.EMAIL_VERIFICATION:
        model = EmailVerificationTokenModel
        expires_in = settings.email_token_expires_in
    else:
        model = PasswordResetTokenModel
        expires_in = settings.password_token_expires_in

    return VerificationEngine(
        SQLAlchemyTokenStore(get_database(), model),
        kind=kind,
        logger=get_logger(),
        codec=TokenCodec(),
        hasher=TokenHasher(),
        secret_generator=SecretGenerator(settings.token_secret_length),
        throttle_guard=ThrottleGuard(settings.token_throttle_window),
        default_expires_in=expires_in,
    )


@lru_cache()
def get_email_verification_engine() -> "VerificationEngine":
    """Get the email verification token engine (app-scoped).

    Returns:
        VerificationEngine over the email_verification_tokens table.
    """
    return _build_engine(TokenKind.EMAIL_VERIFICATION)


@lru_cache()
def get_password_reset_engine() -> "VerificationEngine":
    """Get the password reset token engine (app-scoped).

    Returns:
        VerificationEngine over the password_reset_tokens table.
    """
    return _build_engine(TokenKind.PASSWORD_RESET)


# ============================================================================
# Application services
# ============================================================================


@lru_cache()
def get_email_change_reconciler() -> "EmailChangeReconciler":
    """Get the email change reconciler (app-scoped).

    Returns:
        EmailChangeReconciler wired to the email verification engine.
    """
    from account_tokens.application.services import EmailChangeReconciler

    return EmailChangeReconciler(
        engine=get_email_verification_engine(),
        owner_repo=get_owner_repository(),
        transactions=get_database(),
        logger=get_logger(),
    )


@lru_cache()
def get_password_reset_service() -> "PasswordResetService":
    """Get the password reset service (app-scoped).

    Returns:
        PasswordResetService wired to the password reset engine.
    """
    from account_tokens.application.services import PasswordResetService

    return PasswordResetService(
        engine=get_password_reset_engine(),
        owner_repo=get_owner_repository(),
        transactions=get_database(),
        password_service=get_password_service(),
        logger=get_logger(),
    )
