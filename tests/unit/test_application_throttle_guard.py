"""Unit tests for ThrottleGuard.

Tests cover:
- No previous token always allows issuance
- Default 60 second cooldown
- Per-call cooldown override (timedelta and seconds)
- Boundary: issuance allowed once last + cooldown is no longer in the future
"""

from datetime import UTC, datetime, timedelta

import pytest
from freezegun import freeze_time

from account_tokens.application.services import ThrottleGuard

NOW = datetime(2026, 1, 1, 12, 0, 0, tzinfo=UTC)


@pytest.mark.unit
@freeze_time(NOW)
class TestThrottleGuard:
    """Test cooldown decisions."""

    def test_no_previous_token_allows_issue(self):
        """Test issuance is allowed when nothing was issued yet."""
        assert ThrottleGuard().should_issue(None) is True

    def test_default_cooldown_is_sixty_seconds(self):
        """Test the default window is 60 seconds."""
        assert ThrottleGuard().default_cooldown == timedelta(seconds=60)

    def test_within_default_cooldown_blocks_issue(self):
        """Test a token issued 59 seconds ago blocks issuance."""
        guard = ThrottleGuard()

        assert guard.should_issue(NOW - timedelta(seconds=59)) is False

    def test_cooldown_boundary_allows_issue(self):
        """Test issuance is allowed exactly when the window has elapsed."""
        guard = ThrottleGuard()

        assert guard.should_issue(NOW - timedelta(seconds=60)) is True
        assert guard.should_issue(NOW - timedelta(minutes=5)) is True

    def test_cooldown_override_timedelta(self):
        """Test a per-call timedelta window replaces the default."""
        guard = ThrottleGuard()
        last = NOW - timedelta(seconds=90)

        assert guard.should_issue(last) is True
        assert guard.should_issue(last, cooldown=timedelta(minutes=2)) is False

    def test_cooldown_override_seconds(self):
        """Test a per-call window can be given in seconds."""
        guard = ThrottleGuard()
        last = NOW - timedelta(seconds=10)

        assert guard.should_issue(last, cooldown=5) is True
        assert guard.should_issue(last, cooldown=30) is False

    def test_configured_default_cooldown(self):
        """Test the constructor default is used when no override is given."""
        guard = ThrottleGuard(default_cooldown=timedelta(seconds=5))

        assert guard.should_issue(NOW - timedelta(seconds=10)) is True
