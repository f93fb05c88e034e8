"""Token issuance and verification engine.

Orchestrates the opaque-token protocol for one token kind:

Issue:
    generate secret -> hash -> persist {owner, email?, hash, created_at,
    expires_at} -> encode (identifier, secret) into the public value

Verify:
    decode -> lookup by identifier -> constant-time hash compare
    -> expiry check -> record or None

Verification failures are never raised and never distinguished to the
caller: a malformed value, an unknown identifier, a wrong secret and an
expired token all yield None. The reason is only logged (debug level).

Architecture:
    - Application layer; every collaborator is injected (see core.container)
    - One engine instance per token kind (no class-level registry)
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING, Any
from uuid import UUID

from pydantic import SecretStr

from account_tokens.core.constants import DEFAULT_TOKEN_EXPIRES_IN
from account_tokens.domain.entities.token_record import TokenRecord
from account_tokens.domain.enums import TokenKind
from account_tokens.domain.errors import (
    InvalidOwnerReferenceError,
    UnverifiedEmailMissingError,
)
from account_tokens.domain.protocols import LoggerProtocol, TokenData, TokenStore

if TYPE_CHECKING:
    from account_tokens.application.services.throttle_guard import ThrottleGuard
    from account_tokens.infrastructure.security import (
        SecretGenerator,
        TokenCodec,
        TokenHasher,
    )


def _to_record(data: TokenData) -> TokenRecord:
    """Convert stored token data to a record without a public value."""
    return TokenRecord(
        identifier=data.id,
        owner_id=data.owner_id,
        hash=data.hash,
        created_at=data.created_at,
        expires_at=data.expires_at,
        email=data.email,
    )


class VerificationEngine:
    """Issues, verifies and manages tokens of one kind.

    Usage:
        engine = VerificationEngine(
            store=SQLAlchemyTokenStore(database, PasswordResetTokenModel),
            kind=TokenKind.PASSWORD_RESET,
            logger=get_logger(),
            codec=TokenCodec(),
            hasher=TokenHasher(),
            secret_generator=SecretGenerator(),
            throttle_guard=ThrottleGuard(),
        )

        record = await engine.issue(owner.id)
        send_link(record.release_value())

        verified = await engine.verify(value_from_link)
        if verified is None:
            raise InvalidPasswordTokenError()
    """

    def __init__(
        self,
        store: TokenStore,
        *,
        kind: TokenKind,
        logger: LoggerProtocol,
        codec: TokenCodec,
        hasher: TokenHasher,
        secret_generator: SecretGenerator,
        throttle_guard: ThrottleGuard,
        default_expires_in: timedelta = DEFAULT_TOKEN_EXPIRES_IN,
    ) -> None:
        """Initialize engine with dependencies.

        Args:
            store: Token persistence for this kind.
            kind: Token kind handled by this engine.
            logger: Structured logger.
            codec: Public value codec.
            hasher: Secret hasher.
            secret_generator: Secret source.
            throttle_guard: Issuance throttle.
            default_expires_in: Token lifetime when issue() gets none.
        """
        self._store = store
        self._kind = kind
        self._codec = codec
        self._hasher = hasher
        self._secret_generator = secret_generator
        self._throttle_guard = throttle_guard
        self._default_expires_in = default_expires_in
        self._logger = logger.bind(token_kind=kind.value)

    @property
    def kind(self) -> TokenKind:
        """Token kind handled by this engine."""
        return self._kind

    @property
    def store(self) -> TokenStore:
        """Token persistence this engine writes to."""
        return self._store

    @property
    def throttle_guard(self) -> ThrottleGuard:
        return self._throttle_guard

    @property
    def default_expires_in(self) -> timedelta:
        return self._default_expires_in

    @staticmethod
    def _require_owner(owner_id: UUID | None) -> UUID:
        if owner_id is None:
            raise InvalidOwnerReferenceError()
        return owner_id

    async def issue(
        self,
        owner_id: UUID | None,
        *,
        email: str | None = None,
        expires_in: timedelta | None = None,
        throttle: bool = False,
        cooldown: timedelta | int | float | None = None,
        session: Any | None = None,
    ) -> TokenRecord | None:
        """Issue a new token for an owner.

        Existing tokens are left alone; callers that want a single live
        token delete the others first.

        Args:
            owner_id: Persisted owner id.
            email: Email the token confirms (required for email verification
                tokens, ignored otherwise).
            expires_in: Token lifetime (default: engine default).
            throttle: Skip issuance if the owner got a token within cooldown.
            cooldown: Throttle window override (timedelta or seconds).
            session: Optional ambient transaction.

        Returns:
            TokenRecord carrying the one-time public value, or None when
            throttled (nothing is written in that case).

        Raises:
            InvalidOwnerReferenceError: If owner_id is None.
            UnverifiedEmailMissingError: If an email token is requested
                without an email.
        """
        owner_id = self._require_owner(owner_id)
        if self._kind.carries_email and not email:
            raise UnverifiedEmailMissingError()

        if throttle:
            last_issued_at = await self._store.last_created_at_by_owner(
                owner_id, session=session
            )
            if not self._throttle_guard.should_issue(last_issued_at, cooldown):
                self._logger.debug("Token issuance throttled", owner_id=str(owner_id))
                return None

        secret = self._secret_generator.generate()
        created_at = datetime.now(UTC)
        expires_at = created_at + (
            self._default_expires_in if expires_in is None else expires_in
        )
        digest = self._hasher.hash(secret)

        identifier = await self._store.insert(
            owner_id,
            hash=digest,
            created_at=created_at,
            expires_at=expires_at,
            email=email if self._kind.carries_email else None,
            session=session,
        )

        self._logger.info(
            "Token issued",
            owner_id=str(owner_id),
            token_id=str(identifier),
            expires_at=expires_at.isoformat(),
        )

        return TokenRecord(
            identifier=identifier,
            owner_id=owner_id,
            hash=digest,
            created_at=created_at,
            expires_at=expires_at,
            email=email if self._kind.carries_email else None,
            value=SecretStr(self._codec.encode(identifier, secret)),
        )

    async def verify(
        self, value: object, *, session: Any | None = None
    ) -> TokenRecord | None:
        """Verify a public token value.

        Secret and expiry are both checked, independently: a correct secret
        does not rescue an expired token and vice versa.

        Args:
            value: Untrusted public token value.
            session: Optional ambient transaction.

        Returns:
            The matching record (without public value), or None.
        """
        decoded = self._codec.decode(value)
        if decoded is None:
            self._logger.debug("Token verification failed", reason="malformed")
            return None

        data = await self._store.find_by_id(decoded.identifier, session=session)
        if data is None:
            self._logger.debug(
                "Token verification failed",
                reason="not_found",
                token_id=decoded.identifier,
            )
            return None

        record = _to_record(data)
        secret_matches = self._hasher.verify(record.hash, decoded.secret)
        expired = record.is_expired()

        if not secret_matches or expired:
            self._logger.debug(
                "Token verification failed",
                reason="secret_mismatch" if not secret_matches else "expired",
                token_id=str(record.identifier),
            )
            return None

        return record

    async def find(
        self, owner_id: UUID | None, identifier: str | UUID
    ) -> TokenRecord | None:
        """Find one of an owner's tokens.

        Args:
            owner_id: Owner the token must belong to.
            identifier: Token identifier.

        Returns:
            TokenRecord, or None if the owner holds no such token.
        """
        data = await self._store.find_by_owner(self._require_owner(owner_id), identifier)
        return _to_record(data) if data else None

    async def list(self, owner_id: UUID | None) -> list[TokenRecord]:
        """List an owner's tokens, newest first.

        Args:
            owner_id: Owner whose tokens to list.

        Returns:
            TokenRecords ordered by created_at descending.
        """
        rows = await self._store.list_by_owner(self._require_owner(owner_id))
        return [_to_record(data) for data in rows]

    async def delete(
        self,
        owner_id: UUID | None,
        identifier: str | UUID,
        *,
        session: Any | None = None,
    ) -> int:
        """Revoke one of an owner's tokens.

        Args:
            owner_id: Owner the token must belong to.
            identifier: Token identifier.
            session: Optional ambient transaction.

        Returns:
            Number of tokens deleted (0 or 1).
        """
        owner_id = self._require_owner(owner_id)
        count = await self._store.delete_by_id(owner_id, identifier, session=session)
        self._logger.info(
            "Token deleted",
            owner_id=str(owner_id),
            token_id=str(identifier),
            deleted=count,
        )
        return count

    async def delete_all(
        self, owner_id: UUID | None, *, session: Any | None = None
    ) -> int:
        """Revoke every token an owner holds.

        Args:
            owner_id: Owner whose tokens to delete.
            session: Optional ambient transaction.

        Returns:
            Number of tokens deleted.
        """
        owner_id = self._require_owner(owner_id)
        count = await self._store.delete_all_by_owner(owner_id, session=session)
        self._logger.info("Tokens cleared", owner_id=str(owner_id), deleted=count)
        return count

    async def last_issued_at(self, owner_id: UUID | None) -> datetime | None:
        """Get when an owner's newest token was issued.

        Args:
            owner_id: Owner to inspect.

        Returns:
            Newest created_at, or None if the owner holds no tokens.
        """
        return await self._store.last_created_at_by_owner(self._require_owner(owner_id))

    async def delete_expired(self) -> int:
        """Delete every expired token of this kind (cleanup task).

        Returns:
            Number of tokens deleted.
        """
        count = await self._store.delete_expired(datetime.now(UTC))
        self._logger.info("Expired tokens deleted", deleted=count)
        return count
