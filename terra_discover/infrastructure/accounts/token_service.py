"""
Adapter: JWT access tokens.

Issues HS256-signed tokens carrying ``userId``, ``email`` and ``exp``
claims, and verifies them on every authenticated request.
"""

import logging
from datetime import datetime, timedelta, timezone

import jwt

from terra_discover.domain.accounts.entities import TokenClaims
from terra_discover.domain.accounts.errors import InvalidTokenError
from terra_discover.domain.accounts.ports import TokenService

logger = logging.getLogger(__name__)


class JwtTokenServiceAdapter(TokenService):
    """Implements TokenService with PyJWT.

    Args:
        secret: HMAC signing secret.
        algorithm: JWT algorithm name.
        ttl_seconds: Lifetime of issued tokens.
    """

    def __init__(self, secret: str, algorithm: str, ttl_seconds: int) -> None:
        self._secret = secret
        self._algorithm = algorithm
        self._ttl = timedelta(seconds=ttl_seconds)

    def issue(self, user_id: str, email: str) -> str:
        payload = {
            "userId": user_id,
            "email": email,
            "exp": datetime.now(timezone.utc) + self._ttl,
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> TokenClaims:
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["exp"]},
            )
        except jwt.ExpiredSignatureError as exc:
            raise InvalidTokenError("Token expired.", expired=True) from exc
        except jwt.InvalidTokenError as exc:
            logger.debug("Rejected token: %s", exc)
            raise InvalidTokenError("Invalid token.") from exc

        user_id = payload.get("userId")
        email = payload.get("email")
        if not isinstance(user_id, str) or not isinstance(email, str):
            raise InvalidTokenError("Invalid token payload structure.")

        return TokenClaims(user_id=user_id, email=email)
