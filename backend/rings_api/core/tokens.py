"""Token Service — issues and verifies signed, self-contained bearer tokens.

Invariants:
    - A token embeds exactly one user id (sub) and an expiry (exp)
    - verify() never consults the user store: signature and expiry alone decide validity
    - No server-side revocation; a token is good until exp passes
    - The signing secret is injected at construction, never read from a global

Design Decisions:
    - PyJWT with HS256: same scheme the rest of the stack already relies on for access tokens
    - jti per token: two tokens minted in the same second for the same user still differ
"""

import uuid
from datetime import datetime, timedelta, timezone

import jwt

from rings_api.core.domain_types import AuthFailure, UserId
from rings_api.core.errors import AuthError

ISSUER = "rings-api"


class TokenService:
    """Mints and checks bearer tokens with a shared secret."""

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        ttl_seconds: int = 3600,
    ):
        if not secret:
            raise ValueError("TokenService requires a non-empty secret")
        self._secret = secret
        self._algorithm = algorithm
        self.ttl = timedelta(seconds=ttl_seconds)

    def issue(self, user_id: str, now: datetime | None = None) -> str:
        """Produce a signed token for user_id, valid for the configured window."""
        issued_at = now or datetime.now(timezone.utc)
        payload = {
            "iss": ISSUER,
            "sub": str(user_id),
            "iat": issued_at,
            "exp": issued_at + self.ttl,
            "jti": uuid.uuid4().hex,
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> UserId:
        """Return the embedded user id or raise AuthError(INVALID|EXPIRED)."""
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                issuer=ISSUER,
                options={"require": ["sub", "exp"]},
            )
        except jwt.ExpiredSignatureError:
            raise AuthError(AuthFailure.EXPIRED)
        except jwt.PyJWTError:
            raise AuthError(AuthFailure.INVALID)

        subject = payload.get("sub")
        if not isinstance(subject, str) or not subject:
            raise AuthError(AuthFailure.INVALID)
        return UserId(subject)
