"""Opaque token codec.

Public token wire format:
    "<base64url(identifier)>.<base64url(secret)>"

Both halves are encoded independently with the URL-safe alphabet and without
"=" padding, so the value can be dropped into a URL query string as is.
Nothing else is embedded: expiry and ownership are resolved server-side.

Decoding splits on the first "." and never raises. Any malformed input
(non-string, empty, missing separator, empty half, bad base64url, non UTF-8
payload) yields None so callers cannot tell malformed tokens apart from
unknown or expired ones.
"""

import base64
import binascii
import re
from uuid import UUID

from pydantic import SecretStr

from account_tokens.core.constants import TOKEN_SEPARATOR
from account_tokens.domain.value_objects.decoded_token import DecodedToken

_BASE64URL_SEGMENT = re.compile(r"^[A-Za-z0-9_-]+$")


def _b64url_encode(value: str) -> str:
    return base64.urlsafe_b64encode(value.encode("utf-8")).decode("ascii").rstrip("=")


def _b64url_decode(segment: str) -> str | None:
    if not _BASE64URL_SEGMENT.match(segment):
        return None
    padded = segment + "=" * (-len(segment) % 4)
    try:
        return base64.urlsafe_b64decode(padded).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError):
        return None


class TokenCodec:
    """Encodes (identifier, secret) pairs into public token values and back.

    Stateless and safe to share between concurrent callers.

    Example:
        >>> codec = TokenCodec()
        >>> value = codec.encode("42", "s3cret")
        >>> value
        'NDI.czNjcmV0'
        >>> decoded = codec.decode(value)
        >>> decoded.identifier, decoded.secret.get_secret_value()
        ('42', 's3cret')
        >>> codec.decode("no-separator") is None
        True
    """

    def encode(self, identifier: str | int | UUID, secret: str | SecretStr) -> str:
        """Render the public token value.

        Args:
            identifier: Store-assigned token identifier.
            secret: Random secret generated for the token.

        Returns:
            Public token value.

        Raises:
            ValueError: If identifier or secret is empty.
        """
        raw_identifier = str(identifier)
        raw_secret = (
            secret.get_secret_value() if isinstance(secret, SecretStr) else secret
        )
        if not raw_identifier or not raw_secret:
            raise ValueError("Token identifier and secret must not be empty")

        return f"{_b64url_encode(raw_identifier)}{TOKEN_SEPARATOR}{_b64url_encode(raw_secret)}"

    def decode(self, value: object) -> DecodedToken | None:
        """Recover identifier and secret from a public token value.

        Args:
            value: Untrusted input, typically straight from a request.

        Returns:
            DecodedToken, or None if the value is malformed.
        """
        if not isinstance(value, str) or not value:
            return None

        encoded_identifier, separator, encoded_secret = value.partition(TOKEN_SEPARATOR)
        if not separator or not encoded_identifier or not encoded_secret:
            return None

        identifier = _b64url_decode(encoded_identifier)
        secret = _b64url_decode(encoded_secret)
        if not identifier or not secret:
            return None

        return DecodedToken(identifier=identifier, secret=SecretStr(secret))
