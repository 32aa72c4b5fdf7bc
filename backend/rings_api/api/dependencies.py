"""Dependencies — overridable providers for the token service and repositories.

Invariants:
    - One TokenService per process in production (cached); tests override the provider
    - Repositories wrap the request-scoped AsyncSession from get_db
"""

from functools import lru_cache

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from rings_api.config import get_settings
from rings_api.core.tokens import TokenService
from rings_api.infrastructure.database import get_db
from rings_api.infrastructure.repositories import SqlRingRepository, SqlUserRepository


@lru_cache
def get_token_service() -> TokenService:
    settings = get_settings()
    return TokenService(
        secret=settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
        ttl_seconds=settings.token_ttl_seconds,
    )


def get_ring_repository(db: AsyncSession = Depends(get_db)) -> SqlRingRepository:
    return SqlRingRepository(db, get_settings().database_timeout_seconds)


def get_user_repository(db: AsyncSession = Depends(get_db)) -> SqlUserRepository:
    return SqlUserRepository(db, get_settings().database_timeout_seconds)
