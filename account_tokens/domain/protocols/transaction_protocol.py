"""TransactionManager protocol.

Scoped acquisition of a storage transaction: locks taken inside are released
on every exit path, commit on success, rollback on error.
"""

from contextlib import AbstractAsyncContextManager
from typing import Any, Protocol


class TransactionManager(Protocol):
    """Provides explicit transaction scopes.

    Usage:
        async with transactions.transaction() as session:
            owner = await owners.lock_for_update(owner_id, session)
            ...
            # Commits on exit, rolls back if the block raises
    """

    def transaction(self) -> AbstractAsyncContextManager[Any]:
        """Open a transaction scope yielding the ambient session handle."""
        ...
