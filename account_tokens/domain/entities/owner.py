"""Owner domain entity.

The account that tokens belong to. Only the fields this library reads or
mutates are modelled; the hosting application owns the rest of the row.

Email state:
    - email: confirmed primary address (unique across owners).
    - unverified_email: pending address, None when there is no pending change.
      Right after signup both hold the same (not yet confirmed) address.
      Deliberately NOT unique: two owners may claim the same pending address,
      the unique constraint on ``email`` decides who wins at confirmation time.
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass
class Owner:
    """Account aggregate with email and credential state.

    Attributes:
        id: Primary key; None until the owner has been persisted.
        email: Confirmed primary email address.
        unverified_email: Pending email address awaiting confirmation.
        password_hash: Credential hash produced by the password service.

    Example:
        >>> owner = Owner(id=None, email="a@x.com", unverified_email="a@x.com")
        >>> owner.has_email_changed("b@y.com")
        True
        >>> owner.with_email("b@y.com").email
        'b@y.com'
    """

    id: UUID | None
    email: str
    unverified_email: str | None = None
    password_hash: str | None = None

    @property
    def pending_email(self) -> str:
        """Email an incoming change is compared against.

        Returns:
            The unverified email when a change is pending, else the confirmed email.
        """
        return self.unverified_email or self.email

    def has_email_changed(self, new_email: str) -> bool:
        """Check whether new_email differs from the effective pending email.

        Args:
            new_email: Requested email address.

        Returns:
            True when the request would change the owner's email state.
        """
        return self.pending_email != new_email

    def has_email_reverted(self, new_email: str) -> bool:
        """Check whether new_email abandons a pending change.

        A revert needs a pending email and a request for the current
        confirmed email.

        Args:
            new_email: Requested email address.

        Returns:
            True when the pending change should be dropped.
        """
        return bool(self.unverified_email) and self.email == new_email

    def with_email(self, new_email: str) -> "Owner":
        """Record new_email as the pending email.

        When the owner has never confirmed an address (email equals
        unverified_email) the primary email follows along, so a fresh
        signup can correct a typo before confirming.

        Args:
            new_email: Requested email address.

        Returns:
            Self, for chaining.
        """
        if self.email == self.unverified_email:
            self.email = new_email
        self.unverified_email = new_email
        return self

    def switch_email(self, new_email: str) -> "Owner":
        """Promote new_email to the confirmed email and clear the pending one.

        Args:
            new_email: Email being confirmed.

        Returns:
            Self, for chaining.
        """
        self.email = new_email
        self.unverified_email = None
        return self
