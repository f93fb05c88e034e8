"""Password reset via single-use tokens.

Flow:
1. create_reset_token: issue a token (usually throttled) and hand its
   public value to the delivery channel
2. reset_password:
   a. Verify the token (generic InvalidPasswordTokenError on any failure)
   b. Hash the new password BEFORE taking any lock (bcrypt is slow)
   c. Lock the owner row and consume the presented token (a token another
      request consumed first is rejected), set the new credential, delete
      the owner's remaining reset tokens, commit

No partial state change: either the password and token cleanup commit
together or nothing does.

Architecture:
- Application layer ONLY imports from domain layer
- Password hashing delegated to PasswordHashingProtocol
"""

from datetime import timedelta
from uuid import UUID

from account_tokens.application.services.verification_engine import (
    VerificationEngine,
)
from account_tokens.domain.entities.owner import Owner
from account_tokens.domain.entities.token_record import TokenRecord
from account_tokens.domain.errors import InvalidPasswordTokenError
from account_tokens.domain.protocols import (
    LoggerProtocol,
    OwnerRepository,
    PasswordHashingProtocol,
    TransactionManager,
)


class PasswordResetService:
    """Issues reset tokens and applies password resets."""

    def __init__(
        self,
        engine: VerificationEngine,
        owner_repo: OwnerRepository,
        transactions: TransactionManager,
        password_service: PasswordHashingProtocol,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize service with dependencies.

        Args:
            engine: Password reset token engine.
            owner_repo: Owner repository (locking and persistence).
            transactions: Provides the transaction the owner lock lives in.
            password_service: Credential hashing facility.
            logger: Structured logger.
        """
        self._engine = engine
        self._owner_repo = owner_repo
        self._transactions = transactions
        self._password_service = password_service
        self._logger = logger

    async def create_reset_token(
        self,
        owner_id: UUID | None,
        *,
        throttle: bool = False,
        cooldown: timedelta | int | float | None = None,
        expires_in: timedelta | None = None,
    ) -> TokenRecord | None:
        """Issue a password reset token.

        Args:
            owner_id: Persisted owner id.
            throttle: Skip issuance within the cooldown window.
            cooldown: Throttle window override (timedelta or seconds).
            expires_in: Token lifetime override.

        Returns:
            New TokenRecord, or None when throttled.

        Raises:
            InvalidOwnerReferenceError: If owner_id is None.
        """
        return await self._engine.issue(
            owner_id,
            expires_in=expires_in,
            throttle=throttle,
            cooldown=cooldown,
        )

    async def reset_password(self, token_value: object, new_password: str) -> Owner:
        """Set a new password using a reset token.

        Args:
            token_value: Public token value from the reset link.
            new_password: New plaintext password.

        Returns:
            The owner with the new credential hash.

        Raises:
            InvalidPasswordTokenError: If the token is invalid or expired, the
                owner no longer exists, or another reset consumed the token.
        """
        record = await self._engine.verify(token_value)
        if record is None:
            raise InvalidPasswordTokenError()

        password_hash = self._password_service.hash_password(new_password)

        async with self._transactions.transaction() as session:
            owner = await self._owner_repo.lock_for_update(record.owner_id, session)
            if owner is None:
                raise InvalidPasswordTokenError()

            # Consume under the lock; a concurrent reset may have won already
            consumed = await self._engine.delete(
                record.owner_id, record.identifier, session=session
            )
            if consumed != 1:
                self._logger.warning(
                    "Password reset token already consumed",
                    owner_id=str(record.owner_id),
                    token_id=str(record.identifier),
                )
                raise InvalidPasswordTokenError()

            owner.password_hash = password_hash
            await self._owner_repo.update(owner, session=session)
            await self._engine.delete_all(record.owner_id, session=session)

        self._logger.info("Password reset", owner_id=str(record.owner_id))
        return owner

    async def clear_reset_tokens(self, owner_id: UUID | None) -> int:
        """Delete every password reset token the owner holds.

        Args:
            owner_id: Persisted owner id.

        Returns:
            Number of tokens deleted.

        Raises:
            InvalidOwnerReferenceError: If owner_id is None.
        """
        return await self._engine.delete_all(owner_id)
