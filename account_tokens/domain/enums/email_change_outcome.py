"""Outcome of an email change request."""

from enum import Enum


class EmailChangeOutcome(str, Enum):
    """What EmailChangeReconciler.update_email decided.

    Values:
        SKIPPED: The requested email equals the effective pending email.
        REVERTED: The pending change was abandoned in favour of the confirmed email.
        ISSUED_TOKEN: A new pending email was recorded and a fresh token issued.
    """

    SKIPPED = "SKIPPED"
    REVERTED = "REVERTED"
    ISSUED_TOKEN = "ISSUED_TOKEN"
