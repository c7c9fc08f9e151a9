"""
Adapter: JWT access tokens.

Implements the Token port with PyJWT (HMAC signing). Every token
carries ``iat`` and ``exp`` claims on top of the caller's payload.
"""

from datetime import datetime, timedelta, timezone
from typing import Any

import jwt

from app.domain.auth.errors import TokenError
from app.domain.auth.ports import Token


class JwtToken(Token):
    """Signs payloads into compact JWS strings."""

    def __init__(self, secret: str, algorithm: str = "HS256", expiration_minutes: int = 1440) -> None:
        self._secret = secret
        self._algorithm = algorithm
        self._expiration = timedelta(minutes=expiration_minutes)

    async def sign(self, payload: dict[str, Any]) -> str:
        now = datetime.now(timezone.utc)
        claims = {**payload, "iat": now, "exp": now + self._expiration}
        try:
            return jwt.encode(claims, self._secret, algorithm=self._algorithm)
        except (jwt.PyJWTError, TypeError, NotImplementedError) as exc:
            raise TokenError("Could not sign access token") from exc

    def verify(self, token: str) -> dict[str, Any]:
        """Decode a token issued by this adapter.

        Raises:
            TokenError: If the token is malformed, tampered with or expired.
        """
        try:
            return jwt.decode(token, self._secret, algorithms=[self._algorithm])
        except jwt.PyJWTError as exc:
            raise TokenError("Invalid access token") from exc
