"""Security utilities - crypto and HTTP security headers."""

from src.checkinn.core.security.crypto import (
    DUMMY_PASSWORD_HASH,
    TokenType,
    create_access_token,
    create_refresh_token,
    decode_token,
    hash_password,
    hash_token,
    verify_password,
)
from src.checkinn.core.security.headers import SecurityHeadersMiddleware

__all__ = [
    # Crypto
    "DUMMY_PASSWORD_HASH",
    "TokenType",
    "create_access_token",
    "create_refresh_token",
    "decode_token",
    "hash_password",
    "hash_token",
    "verify_password",
    # Headers
    "SecurityHeadersMiddleware",
]
