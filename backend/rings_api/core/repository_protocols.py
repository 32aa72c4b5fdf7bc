"""Boundary Protocols — persistence contracts the handlers depend on.

Invariants:
    - Core NEVER imports from infrastructure — dependency arrows point inward only
    - The store generates ids and timestamps; callers pass plain field dicts
    - Lookups return None for absent records; only update/delete report absence via return value

Design Decisions:
    - Protocol over ABC: structural subtyping, tests can pass plain fakes
    - Async methods: every call is a suspension point and may time out
"""

from datetime import datetime
from typing import Protocol


class RingRecord(Protocol):
    id: int
    name: str
    power: str
    bearer: str
    forged_by: str
    image: str
    created_at: datetime
    updated_at: datetime


class UserRecord(Protocol):
    id: str
    username: str
    email: str
    password_hash: str
    user_class: str


class RingRepository(Protocol):
    """Keyed CRUD by integer id."""
    async def get(self, ring_id: int) -> RingRecord | None: ...
    async def list_all(self) -> list[RingRecord]: ...
    async def create(self, fields: dict) -> RingRecord: ...
    async def update(self, ring_id: int, fields: dict) -> RingRecord | None: ...
    async def delete(self, ring_id: int) -> bool: ...


class UserRepository(Protocol):
    """Keyed CRUD by UUID string."""
    async def get(self, user_id: str) -> UserRecord | None: ...
    async def get_by_email(self, email: str) -> UserRecord | None: ...
    async def get_by_username(self, username: str) -> UserRecord | None: ...
    async def create(self, fields: dict) -> UserRecord: ...
