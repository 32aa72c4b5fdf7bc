"""Service test fixtures — in-memory repositories implementing the store protocols.

Invariants:
    - Ids and timestamps are assigned by the fake store, like the real one
    - No database, no FastAPI: handlers are exercised directly
"""

import itertools
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone

import pytest

from rings_api.core.tokens import TokenService


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class FakeRing:
    id: int
    name: str
    power: str
    bearer: str
    forged_by: str
    image: str
    created_at: datetime = field(default_factory=_now)
    updated_at: datetime = field(default_factory=_now)


@dataclass
class FakeUser:
    username: str
    email: str
    password_hash: str
    user_class: str
    id: str = field(default_factory=lambda: str(uuid.uuid4()))


class InMemoryRingRepository:
    def __init__(self):
        self.rings: dict[int, FakeRing] = {}
        self._ids = itertools.count(1)
        self.calls: list[str] = []

    async def get(self, ring_id):
        self.calls.append("get")
        return self.rings.get(ring_id)

    async def list_all(self):
        self.calls.append("list")
        return list(self.rings.values())

    async def create(self, fields):
        self.calls.append("create")
        ring = FakeRing(id=next(self._ids), **fields)
        self.rings[ring.id] = ring
        return ring

    async def update(self, ring_id, fields):
        self.calls.append("update")
        ring = self.rings.get(ring_id)
        if ring is None:
            return None
        for key, value in fields.items():
            setattr(ring, key, value)
        ring.updated_at = _now()
        return ring

    async def delete(self, ring_id):
        self.calls.append("delete")
        return self.rings.pop(ring_id, None) is not None


class InMemoryUserRepository:
    def __init__(self):
        self.users: dict[str, FakeUser] = {}

    async def get(self, user_id):
        return self.users.get(user_id)

    async def get_by_email(self, email):
        return next((u for u in self.users.values() if u.email == email), None)

    async def get_by_username(self, username):
        return next((u for u in self.users.values() if u.username == username), None)

    async def create(self, fields):
        user = FakeUser(**fields)
        self.users[user.id] = user
        return user


@pytest.fixture
def ring_repo():
    return InMemoryRingRepository()


@pytest.fixture
def user_repo():
    return InMemoryUserRepository()


@pytest.fixture
def tokens():
    return TokenService(secret="service-tests")
