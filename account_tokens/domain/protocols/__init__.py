"""Domain protocols (ports) package.

Infrastructure adapters satisfy these structurally; nothing inherits from them.
"""

from account_tokens.domain.protocols.logger_protocol import LoggerProtocol
from account_tokens.domain.protocols.owner_repository import OwnerRepository
from account_tokens.domain.protocols.password_hashing_protocol import (
    PasswordHashingProtocol,
)
from account_tokens.domain.protocols.token_store import TokenData, TokenStore
from account_tokens.domain.protocols.transaction_protocol import TransactionManager

__all__ = [
    "LoggerProtocol",
    "OwnerRepository",
    "PasswordHashingProtocol",
    "TokenData",
    "TokenStore",
    "TransactionManager",
]
