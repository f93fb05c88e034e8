"""TokenRecord domain entity.

One persisted opaque token, shared by email verification tokens (which carry
the email they confirm) and password reset tokens (which carry nothing).

Lifecycle:
    issued -> valid -> consumed | expired | revoked

    - consumed: deleted by the flow that used it
    - expired: ``expires_at`` has passed; the row stays until cleanup
    - revoked: deleted explicitly (single token or all of an owner's tokens)

A record is immutable once persisted. Rotation means delete and recreate.

Security:
    - ``hash`` is the SHA-256 digest of the secret, never the secret itself.
    - ``value`` (the public token) only exists on the record returned by
      issuance. It is wrapped in SecretStr so it does not leak through repr
      or logs, and it is never populated on records read back from storage.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID

from pydantic import SecretStr


@dataclass
class TokenRecord:
    """Persisted token plus the one-time public value after issuance.

    Attributes:
        identifier: Store-assigned primary key (safe to log).
        owner_id: Owner the token belongs to.
        hash: Hex digest of the secret.
        created_at: Issuance timestamp (UTC).
        expires_at: created_at + ttl, never mutated.
        email: Email being confirmed (email verification tokens only).
        value: Public token value, only set right after issuance.

    Example:
        >>> record = await engine.issue(owner.id, email=owner.unverified_email)
        >>> send_link(record.value.get_secret_value())
        >>> record.is_expired()
        False
    """

    identifier: UUID
    owner_id: UUID
    hash: str = field(repr=False)
    created_at: datetime
    expires_at: datetime
    email: str | None = None
    value: SecretStr | None = field(default=None, repr=False)

    def is_expired(self) -> bool:
        """Check whether expires_at has passed.

        Returns:
            True once the current time is strictly after expires_at.
        """
        return self.expires_at < datetime.now(UTC)

    def release_value(self) -> str:
        """Return the raw public token value.

        Returns:
            The public value to hand to the delivery channel.

        Raises:
            ValueError: If the record was not produced by issuance.
        """
        if self.value is None:
            raise ValueError("Token value is only available right after issuance")
        return self.value.get_secret_value()
