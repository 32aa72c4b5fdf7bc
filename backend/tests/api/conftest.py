"""API test fixtures — async DB, per-test signing secret, FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test DB session
    - get_token_service overridden with a TokenService built from a per-test secret
    - App exceptions are turned into responses, not re-raised into the test

Design Decisions:
    - SQLite in-memory with StaticPool: every session sees the same connection
"""

import uuid

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool

from rings_api.api.dependencies import get_token_service
from rings_api.core.passwords import hash_password
from rings_api.core.tokens import TokenService
from rings_api.db.base import Base
from rings_api.infrastructure.database import get_db
from rings_api.main import app
from rings_api.models.ring import Ring
from rings_api.models.user import User

from tests.api.ring_data import RING_IMAGE


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def token_service():
    return TokenService(secret=f"test-{uuid.uuid4().hex}", ttl_seconds=3600)


@pytest.fixture
async def client(test_session_factory, token_service):
    """FastAPI test client with DB and token service overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_token_service] = lambda: token_service

    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
async def user(test_db):
    user = User(
        id="d590641f-9976-4928-ba25-e1e0e2f66da8",
        username="testRingRoutes",
        email="testringroutes@example.com",
        password_hash=hash_password("password123", rounds=4),
        user_class="Elfo",
    )
    test_db.add(user)
    await test_db.commit()
    await test_db.refresh(user)
    return user


@pytest.fixture
async def other_user(test_db):
    user = User(
        username="otherBearer",
        email="other@example.com",
        password_hash=hash_password("password123", rounds=4),
        user_class="Anão",
    )
    test_db.add(user)
    await test_db.commit()
    await test_db.refresh(user)
    return user


@pytest.fixture
def auth_headers(user, token_service):
    return {"Authorization": f"Bearer {token_service.issue(user.id)}"}


@pytest.fixture
async def seed_ring(test_db, user):
    ring = Ring(
        name="Initial Ring",
        power="Invisibility",
        bearer=user.id,
        forged_by=user.id,
        image=RING_IMAGE,
    )
    test_db.add(ring)
    await test_db.commit()
    await test_db.refresh(ring)
    return ring
