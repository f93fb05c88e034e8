"""Issuance throttling.

Decides whether a new token may be issued for an owner given when the last
one was issued. A throttled request is a no-op for the caller, not an error.
"""

from datetime import UTC, datetime, timedelta

from account_tokens.core.constants import DEFAULT_THROTTLE_WINDOW


class ThrottleGuard:
    """Cooldown check between successive token issuances.

    Example:
        >>> guard = ThrottleGuard()
        >>> guard.should_issue(None)
        True
        >>> guard.should_issue(datetime.now(UTC))
        False
        >>> guard.should_issue(datetime.now(UTC), cooldown=0)
        True
    """

    def __init__(self, default_cooldown: timedelta = DEFAULT_THROTTLE_WINDOW) -> None:
        """Initialize guard.

        Args:
            default_cooldown: Window used when should_issue() gets no cooldown.
        """
        self._default_cooldown = default_cooldown

    @property
    def default_cooldown(self) -> timedelta:
        """Cooldown applied when the caller does not pass one."""
        return self._default_cooldown

    def should_issue(
        self,
        last_issued_at: datetime | None,
        cooldown: timedelta | int | float | None = None,
    ) -> bool:
        """Check whether the cooldown since the last issuance has elapsed.

        Args:
            last_issued_at: When the owner's newest token was issued, if any.
            cooldown: Window override, as timedelta or seconds.

        Returns:
            False while last_issued_at + cooldown is still in the future,
            True otherwise (including when nothing was issued yet).
        """
        if last_issued_at is None:
            return True

        if cooldown is None:
            window = self._default_cooldown
        elif isinstance(cooldown, timedelta):
            window = cooldown
        else:
            window = timedelta(seconds=cooldown)

        return not last_issued_at + window > datetime.now(UTC)
