"""Cryptographically secure secret generation.

Secrets come from the ``secrets`` module (OS CSPRNG) and use the URL-safe
base64 alphabet, so every character carries 6 bits of entropy
(40 characters = 240 bits).
"""

import secrets

from pydantic import SecretStr

from account_tokens.core.constants import (
    DEFAULT_SECRET_LENGTH,
    MAX_SECRET_LENGTH,
    MIN_SECRET_LENGTH,
)


class SecretGenerator:
    """Random token secret generator.

    Usage:
        generator = SecretGenerator(default_length=40)
        secret = generator.generate()
        len(secret.get_secret_value())  # 40
    """

    def __init__(self, default_length: int = DEFAULT_SECRET_LENGTH) -> None:
        """Initialize secret generator.

        Args:
            default_length: Length used when generate() is called without one.

        Raises:
            ValueError: If default_length is outside the supported range.
        """
        self._default_length = self._validate_length(default_length)

    @staticmethod
    def _validate_length(length: int) -> int:
        if not MIN_SECRET_LENGTH <= length <= MAX_SECRET_LENGTH:
            msg = (
                f"Secret length must be between {MIN_SECRET_LENGTH} "
                f"and {MAX_SECRET_LENGTH}"
            )
            raise ValueError(msg)
        return length

    def generate(self, length: int | None = None) -> SecretStr:
        """Generate a random secret.

        Args:
            length: Number of characters (default: configured default_length).

        Returns:
            URL-safe random secret of exactly ``length`` characters.

        Raises:
            ValueError: If length is outside the supported range.
        """
        size = self._default_length if length is None else self._validate_length(length)
        # token_urlsafe(n) yields ~1.3 * n characters
        return SecretStr(secrets.token_urlsafe(size)[:size])
