"""Token secret hashing.

Only the SHA-256 digest of a secret is ever persisted. Token secrets are long
and uniformly random, so a fast unsalted hash is enough here (unlike user
passwords, which go through bcrypt).
"""

import hashlib
import hmac

from pydantic import SecretStr


def _raw(secret: str | SecretStr) -> str:
    return secret.get_secret_value() if isinstance(secret, SecretStr) else secret


class TokenHasher:
    """SHA-256 hasher with constant-time verification.

    Example:
        >>> hasher = TokenHasher()
        >>> digest = hasher.hash("s3cret")
        >>> len(digest)
        64
        >>> hasher.verify(digest, "s3cret")
        True
        >>> hasher.verify(digest, "s3creT")
        False
    """

    def hash(self, secret: str | SecretStr) -> str:
        """Hash a secret for storage.

        Args:
            secret: Raw token secret.

        Returns:
            Lowercase hex SHA-256 digest (64 characters).
        """
        return hashlib.sha256(_raw(secret).encode("utf-8")).hexdigest()

    def verify(self, digest: str, candidate: str | SecretStr) -> bool:
        """Check a candidate secret against a stored digest.

        Args:
            digest: Stored hex digest.
            candidate: Secret recovered from the presented token.

        Returns:
            True if the candidate hashes to digest. Never raises.
        """
        if not isinstance(digest, str):
            return False
        return hmac.compare_digest(
            self.hash(candidate).encode("ascii"), digest.encode("utf-8")
        )
