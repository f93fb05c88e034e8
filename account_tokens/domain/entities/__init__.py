"""Domain entities package."""

from account_tokens.domain.entities.owner import Owner
from account_tokens.domain.entities.token_record import TokenRecord

__all__ = ["Owner", "TokenRecord"]
