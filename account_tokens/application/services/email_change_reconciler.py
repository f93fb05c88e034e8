"""Email change reconciliation and confirmation.

Update flow (one transaction, owner row locked FOR UPDATE before reading):
1. SKIPPED: requested email equals the effective pending email
   (unverified_email, else email). Persist a no-op save, issue nothing.
2. REVERTED: a change is pending and the request is the confirmed email.
   Clear unverified_email, delete every outstanding token.
3. ISSUED_TOKEN: otherwise. Record the new pending email (and the primary
   email too while the owner has never confirmed one), delete every
   outstanding token, issue one fresh non-throttled token.

Deleting before reissuing keeps at most one live token per pending email,
so a token for an abandoned address can never succeed later.

Confirm flow:
1. Verify the token (outside the transaction)
2. Lock-free check that no other owner holds the email as confirmed email
3. Lock the owner row, requiring unverified_email to still equal the
   token's email
4. Promote unverified_email to email, delete remaining tokens, commit

Every confirm failure raises the same InvalidEmailTokenError, so callers
cannot learn whether an email is taken or which check failed.

Architecture:
- Application layer ONLY imports from domain layer
- Engine, repositories and transaction manager are injected
"""

from dataclasses import dataclass
from datetime import timedelta
from uuid import UUID

from account_tokens.application.services.verification_engine import (
    VerificationEngine,
)
from account_tokens.domain.entities.owner import Owner
from account_tokens.domain.entities.token_record import TokenRecord
from account_tokens.domain.enums import EmailChangeOutcome
from account_tokens.domain.errors import (
    InvalidEmailTokenError,
    InvalidOwnerReferenceError,
    UnverifiedEmailMissingError,
)
from account_tokens.domain.protocols import (
    LoggerProtocol,
    OwnerRepository,
    TransactionManager,
)


@dataclass
class EmailChangeResult:
    """Result of EmailChangeReconciler.update_email.

    Attributes:
        outcome: Decision taken.
        owner: Owner state after the change was persisted.
        token: Fresh token (ISSUED_TOKEN only), carrying the public value.
    """

    outcome: EmailChangeOutcome
    owner: Owner
    token: TokenRecord | None = None


class EmailChangeReconciler:
    """Governs email mutation and confirmation for owners.

    Usage:
        result = await reconciler.update_email(owner_id, "new@example.com")
        if result.outcome is EmailChangeOutcome.ISSUED_TOKEN:
            send_verification(result.owner.unverified_email, result.token.release_value())

        owner = await reconciler.verify_email(token_value_from_link)
    """

    def __init__(
        self,
        engine: VerificationEngine,
        owner_repo: OwnerRepository,
        transactions: TransactionManager,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize reconciler with dependencies.

        Args:
            engine: Email verification token engine.
            owner_repo: Owner repository (locking and persistence).
            transactions: Provides the transaction the owner lock lives in.
            logger: Structured logger.
        """
        self._engine = engine
        self._owner_repo = owner_repo
        self._transactions = transactions
        self._logger = logger

    async def update_email(
        self, owner_id: UUID | None, new_email: str
    ) -> EmailChangeResult:
        """Apply an email change request to an owner.

        Args:
            owner_id: Persisted owner id.
            new_email: Requested email address.

        Returns:
            EmailChangeResult with the outcome, updated owner and new token.

        Raises:
            InvalidOwnerReferenceError: If owner_id is None or the owner
                doesn't exist.
            IntegrityError: If a first-ever email change collides with
                another owner's confirmed email.
        """
        if owner_id is None:
            raise InvalidOwnerReferenceError()

        token: TokenRecord | None = None

        async with self._transactions.transaction() as session:
            owner = await self._owner_repo.lock_for_update(owner_id, session)
            if owner is None:
                raise InvalidOwnerReferenceError()

            if not owner.has_email_changed(new_email):
                await self._owner_repo.update(owner, session=session)
                outcome = EmailChangeOutcome.SKIPPED

            elif owner.has_email_reverted(new_email):
                owner.unverified_email = None
                await self._owner_repo.update(owner, session=session)
                await self._engine.delete_all(owner_id, session=session)
                outcome = EmailChangeOutcome.REVERTED

            else:
                owner.with_email(new_email)
                await self._owner_repo.update(owner, session=session)
                await self._engine.delete_all(owner_id, session=session)
                token = await self._engine.issue(
                    owner_id, email=new_email, session=session
                )
                outcome = EmailChangeOutcome.ISSUED_TOKEN

        self._logger.info(
            "Email change reconciled",
            owner_id=str(owner_id),
            outcome=outcome.value,
        )
        return EmailChangeResult(outcome=outcome, owner=owner, token=token)

    async def verify_email(self, token_value: object) -> Owner:
        """Confirm an owner's pending email with a verification token.

        Args:
            token_value: Public token value from the verification link.

        Returns:
            The owner with the email promoted.

        Raises:
            InvalidEmailTokenError: If the token is invalid or expired, the
                email is confirmed by another owner, or the owner's pending
                email changed since the token was issued.
        """
        record = await self._engine.verify(token_value)
        if record is None or record.email is None:
            raise InvalidEmailTokenError()

        async with self._transactions.transaction() as session:
            taken = await self._owner_repo.exists_with_email(
                record.email,
                exclude_owner_id=record.owner_id,
                session=session,
            )
            if taken:
                self._logger.info(
                    "Email verification rejected",
                    owner_id=str(record.owner_id),
                    reason="email_taken",
                )
                raise InvalidEmailTokenError()

            owner = await self._owner_repo.lock_for_update(
                record.owner_id, session, unverified_email=record.email
            )
            if owner is None:
                self._logger.info(
                    "Email verification rejected",
                    owner_id=str(record.owner_id),
                    reason="pending_email_changed",
                )
                raise InvalidEmailTokenError()

            owner.switch_email(record.email)
            await self._owner_repo.update(owner, session=session)
            await self._engine.delete_all(record.owner_id, session=session)

        self._logger.info("Email verified", owner_id=str(record.owner_id))
        return owner

    async def create_verification_token(
        self,
        owner_id: UUID | None,
        *,
        throttle: bool = False,
        cooldown: timedelta | int | float | None = None,
        expires_in: timedelta | None = None,
    ) -> TokenRecord | None:
        """Issue a token for the owner's current pending email.

        Used after signup and for "resend verification email" requests,
        typically with throttle=True.

        Args:
            owner_id: Persisted owner id.
            throttle: Skip issuance within the cooldown window.
            cooldown: Throttle window override (timedelta or seconds).
            expires_in: Token lifetime override.

        Returns:
            New TokenRecord, or None when throttled.

        Raises:
            InvalidOwnerReferenceError: If the owner doesn't exist.
            UnverifiedEmailMissingError: If the owner has no pending email.
        """
        if owner_id is None:
            raise InvalidOwnerReferenceError()

        owner = await self._owner_repo.find_by_id(owner_id)
        if owner is None:
            raise InvalidOwnerReferenceError()
        if not owner.unverified_email:
            raise UnverifiedEmailMissingError()

        return await self._engine.issue(
            owner_id,
            email=owner.unverified_email,
            expires_in=expires_in,
            throttle=throttle,
            cooldown=cooldown,
        )

    async def clear_verification_tokens(self, owner_id: UUID | None) -> int:
        """Delete every email verification token the owner holds.

        Args:
            owner_id: Persisted owner id.

        Returns:
            Number of tokens deleted.

        Raises:
            InvalidOwnerReferenceError: If owner_id is None.
        """
        return await self._engine.delete_all(owner_id)
