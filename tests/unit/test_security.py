"""Tests for password hashing, JWTs and password strength rules."""

from datetime import timedelta
from uuid import uuid4

import pytest
from jose import jwt
from pydantic import ValidationError

from src.checkinn.core.security import (
    TokenType,
    create_access_token,
    create_refresh_token,
    decode_token,
    hash_password,
    hash_token,
    verify_password,
)
from src.checkinn.schemas.auth import RegisterRequest

pytestmark = pytest.mark.unit


class TestPasswordHashing:
    def test_hash_and_verify(self):
        hashed = hash_password("Velvet-Compass-Orchard-91!")

        assert hashed.startswith("$argon2id$")
        assert verify_password("Velvet-Compass-Orchard-91!", hashed) is True

    def test_wrong_password(self):
        hashed = hash_password("Velvet-Compass-Orchard-91!")

        assert verify_password("velvet-compass-orchard-91!", hashed) is False

    def test_invalid_hash_returns_false(self):
        assert verify_password("anything", "not-an-argon2-hash") is False


class TestTokens:
    def test_access_token_claims(self):
        user_id = uuid4()

        payload = decode_token(create_access_token(user_id, "HotelPartner"))

        assert payload is not None
        assert payload["sub"] == str(user_id)
        assert payload["role"] == "HotelPartner"
        assert payload["type"] == TokenType.ACCESS

    def test_expired_token_rejected(self):
        token = create_access_token(uuid4(), "Customer", expires_delta=timedelta(seconds=-1))

        assert decode_token(token) is None

    def test_token_signed_with_other_key_rejected(self):
        token = jwt.encode(
            {"sub": str(uuid4()), "role": "Admin", "type": TokenType.ACCESS},
            "some-other-signing-key-that-is-long-enough",
            algorithm="HS256",
        )

        assert decode_token(token) is None

    def test_garbage_rejected(self):
        assert decode_token("not.a.jwt") is None

    def test_refresh_tokens_are_unique(self):
        """Two refresh tokens minted in the same second still differ (jti)."""
        user_id = uuid4()

        first, expires_at = create_refresh_token(user_id)
        second, _ = create_refresh_token(user_id)

        assert first != second
        assert hash_token(first) != hash_token(second)
        assert expires_at.tzinfo is None
        assert decode_token(first)["type"] == TokenType.REFRESH


class TestPasswordStrength:
    def test_weak_password_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            RegisterRequest(name="Guest", email="guest@example.com", password="password123")

        assert "password" in str(exc_info.value).lower()

    def test_strong_password_accepted(self):
        request = RegisterRequest(
            name="Guest", email="guest@example.com", password="Velvet-Compass-Orchard-91!"
        )

        assert request.password == "Velvet-Compass-Orchard-91!"
