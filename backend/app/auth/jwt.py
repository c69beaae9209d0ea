"""
Session token signing and verification.

The signing secret is handed to ``TokenService`` by whoever builds it;
``get_token_service`` builds one from application settings for FastAPI routes.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from functools import lru_cache
from typing import Any, Dict

from jose import ExpiredSignatureError, JWTError, jwt

from ..config import get_settings


class InvalidTokenError(ValueError):
    """Token failed signature, structure or expiry checks."""


@dataclass(frozen=True)
class TokenClaims:
    """Decoded subject of a session token."""

    user_id: str
    user_type: str


class TokenService:
    """
    Issue and verify session tokens.

    Tokens carry ``userId`` and ``userType`` claims plus ``iat``/``exp``.
    Verification checks the signature and expiry only; the user store is not
    consulted.
    """

    def __init__(self, secret_key: str, algorithm: str = "HS256", expires_delta: timedelta = timedelta(days=3)):
        if not secret_key:
            raise ValueError("TokenService requires a signing secret")
        self._secret_key = secret_key
        self.algorithm = algorithm
        self.expires_delta = expires_delta

    def create_token(self, user_id: str, user_type: str, now: datetime | None = None) -> str:
        """
        Create a signed session token.

        Args:
            user_id: Account identifier.
            user_type: Account role at the time of issue.
            now: Issue time; defaults to the current UTC time.

        Returns:
            Encoded JWT string.
        """
        issued_at = now or datetime.now(timezone.utc)
        payload: Dict[str, Any] = {
            "userId": str(user_id),
            "userType": user_type,
            "iat": issued_at,
            "exp": issued_at + self.expires_delta,
        }
        return jwt.encode(payload, self._secret_key, algorithm=self.algorithm)

    def decode_token(self, token: str) -> Dict[str, Any]:
        """
        Decode and validate a session token.

        Raises:
            InvalidTokenError: If the signature, structure or expiry check fails.
        """
        try:
            return jwt.decode(token, self._secret_key, algorithms=[self.algorithm])
        except ExpiredSignatureError as exc:
            raise InvalidTokenError("Token expired") from exc
        except JWTError as exc:
            raise InvalidTokenError("Invalid token") from exc

    def verify(self, token: str) -> TokenClaims:
        """Decode a token and return its subject."""
        payload = self.decode_token(token)
        user_id = payload.get("userId")
        if not user_id:
            raise InvalidTokenError("Token has no subject")
        return TokenClaims(user_id=str(user_id), user_type=payload.get("userType") or "")


@lru_cache
def get_token_service() -> TokenService:
    """FastAPI dependency: token service configured from settings."""
    settings = get_settings()
    return TokenService(
        secret_key=settings.jwt_secret_key,
        algorithm=settings.jwt_algorithm,
        expires_delta=timedelta(days=settings.session_token_expire_days),
    )
