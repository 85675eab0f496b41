"""Auth Tokens: HS256 JWT verification against the login service's shared secret.

Invariants:
    - verify() returns TokenClaims or raises InvalidTokenError, nothing else
    - Expired, tampered, or claim-less tokens are all InvalidTokenError
    - Tokens carry user_id, username, is_admin plus exp/iat

Design Decisions:
    - PyJWT handles signature and expiry checks
    - issue_token mirrors the login service's format (used by tooling and tests)
"""

from datetime import datetime, timedelta, timezone

import jwt

from pressroom.config import Settings, get_settings
from pressroom.core.auth_protocols import TokenClaims
from pressroom.core.domain_types import UserId
from pressroom.core.errors import InvalidTokenError


class JWTTokenVerifier:
    """TokenVerifier backed by PyJWT."""

    def __init__(self, secret: str, algorithm: str = "HS256"):
        self._secret = secret
        self._algorithm = algorithm

    @classmethod
    def from_settings(cls, settings: Settings) -> "JWTTokenVerifier":
        return cls(settings.jwt_secret, settings.jwt_algorithm)

    def verify(self, token: str) -> TokenClaims:
        try:
            payload = jwt.decode(
                token, self._secret, algorithms=[self._algorithm],
                options={"require": ["exp"]},
            )
        except jwt.ExpiredSignatureError:
            raise InvalidTokenError("token expired")
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(str(e) or "malformed token")

        user_id = payload.get("user_id")
        if not user_id:
            raise InvalidTokenError("missing user_id claim")
        return TokenClaims(
            user_id=UserId(str(user_id)),
            username=payload.get("username", ""),
            is_admin=bool(payload.get("is_admin", False)),
        )


def issue_token(
    user_id: str,
    username: str = "",
    is_admin: bool = False,
    settings: Settings | None = None,
    now: datetime | None = None,
) -> str:
    """Sign a token in the login service's format."""
    settings = settings or get_settings()
    issued = now or datetime.now(timezone.utc)
    payload = {
        "user_id": user_id,
        "username": username,
        "is_admin": is_admin,
        "iat": issued,
        "exp": issued + timedelta(hours=settings.jwt_ttl_hours),
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)
