"""
Tests for session token signing and verification.
"""

from datetime import datetime, timedelta, timezone

import pytest
from jose import jwt

from backend.app.auth.jwt import InvalidTokenError, TokenClaims, TokenService


class TestTokenService:
    def test_round_trip_claims(self, token_service):
        token = token_service.create_token("64f1c2aa0b1c2d3e4f5a6b7c", "client")

        assert token_service.verify(token) == TokenClaims(
            user_id="64f1c2aa0b1c2d3e4f5a6b7c", user_type="client"
        )

    def test_payload_uses_camel_case_claims(self, token_service):
        token = token_service.create_token("abc", "freelancer")

        payload = token_service.decode_token(token)

        assert payload["userId"] == "abc"
        assert payload["userType"] == "freelancer"
        assert payload["exp"] - payload["iat"] == 3 * 24 * 3600

    def test_valid_just_inside_window(self, token_service):
        issued = datetime.now(timezone.utc) - timedelta(days=3) + timedelta(seconds=60)
        token = token_service.create_token("abc", "client", now=issued)

        assert token_service.verify(token).user_id == "abc"

    def test_expired_just_outside_window(self, token_service):
        issued = datetime.now(timezone.utc) - timedelta(days=3) - timedelta(seconds=60)
        token = token_service.create_token("abc", "client", now=issued)

        with pytest.raises(InvalidTokenError, match="expired"):
            token_service.verify(token)

    def test_wrong_secret_rejected(self, token_service):
        other = TokenService(secret_key="a-completely-different-signing-key-xyz")
        token = other.create_token("abc", "client")

        with pytest.raises(InvalidTokenError):
            token_service.verify(token)

    def test_garbage_rejected(self, token_service):
        with pytest.raises(InvalidTokenError):
            token_service.verify("definitely-not-a-token")

    def test_token_without_subject_rejected(self, token_service):
        now = datetime.now(timezone.utc)
        token = jwt.encode(
            {"userType": "client", "iat": now, "exp": now + timedelta(hours=1)},
            "unit-test-signing-key-0b7e4c19d2a65f83",
            algorithm="HS256",
        )

        with pytest.raises(InvalidTokenError, match="subject"):
            token_service.verify(token)

    def test_requires_secret(self):
        with pytest.raises(ValueError):
            TokenService(secret_key="")
