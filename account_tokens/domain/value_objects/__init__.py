"""Domain value objects package."""

from account_tokens.domain.value_objects.decoded_token import DecodedToken

__all__ = ["DecodedToken"]
