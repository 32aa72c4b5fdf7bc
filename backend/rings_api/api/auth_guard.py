"""Identity Resolver — turns the Authorization header into a user id or a 401.

Invariants:
    - Runs as a route dependency, so it resolves before the body is read or validated
    - Missing header, wrong scheme, bad signature and expiry all raise AuthError;
      the client sees the same "Invalid token" body for each
    - Does not look the user up: a correctly signed, unexpired token is trusted
    - On success the id is also attached to request.state.user_id
"""

import logging

from fastapi import Depends, Header, Request

from rings_api.api.dependencies import get_token_service
from rings_api.core.domain_types import AuthFailure, UserId
from rings_api.core.errors import AuthError
from rings_api.core.tokens import TokenService

logger = logging.getLogger(__name__)

BEARER_SCHEME = "bearer"


def extract_bearer_token(authorization: str | None) -> str:
    """Pull the token out of 'Bearer <token>'. Raises AuthError(MISSING) otherwise."""
    if not authorization:
        raise AuthError(AuthFailure.MISSING)
    parts = authorization.strip().split()
    if len(parts) != 2 or parts[0].lower() != BEARER_SCHEME:
        raise AuthError(AuthFailure.MISSING)
    return parts[1]


async def require_identity(
    request: Request,
    authorization: str | None = Header(default=None),
    tokens: TokenService = Depends(get_token_service),
) -> UserId:
    """FastAPI dependency: resolved caller identity or AuthError."""
    try:
        user_id = tokens.verify(extract_bearer_token(authorization))
    except AuthError as exc:
        logger.info(
            f"Rejected request: {exc.reason.value} token",
            extra={
                "auth_failure": exc.reason.value,
                "path": request.url.path,
                "method": request.method,
            },
        )
        raise
    request.state.user_id = user_id
    return user_id
