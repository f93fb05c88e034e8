"""Security infrastructure: token codec, secrets, hashing and credentials."""

from account_tokens.infrastructure.security.bcrypt_password_service import (
    BcryptPasswordService,
)
from account_tokens.infrastructure.security.secret_generator import SecretGenerator
from account_tokens.infrastructure.security.token_codec import TokenCodec
from account_tokens.infrastructure.security.token_hasher import TokenHasher

__all__ = [
    "BcryptPasswordService",
    "SecretGenerator",
    "TokenCodec",
    "TokenHasher",
]
