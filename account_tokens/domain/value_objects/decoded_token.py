"""Decoded public token value (transient, never persisted)."""

from dataclasses import dataclass, field

from pydantic import SecretStr


@dataclass(frozen=True, slots=True, kw_only=True)
class DecodedToken:
    """Identifier and secret recovered from a public token value.

    Attributes:
        identifier: Lookup key, as the string that was encoded.
        secret: Random secret; wrapped so repr and logs never show it.
    """

    identifier: str
    secret: SecretStr = field(repr=False)
