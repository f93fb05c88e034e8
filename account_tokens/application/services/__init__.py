"""Application services."""

from account_tokens.application.services.email_change_reconciler import (
    EmailChangeReconciler,
    EmailChangeResult,
)
from account_tokens.application.services.password_reset_service import (
    PasswordResetService,
)
from account_tokens.application.services.throttle_guard import ThrottleGuard
from account_tokens.application.services.verification_engine import (
    VerificationEngine,
)

__all__ = [
    "EmailChangeReconciler",
    "EmailChangeResult",
    "PasswordResetService",
    "ThrottleGuard",
    "VerificationEngine",
]
