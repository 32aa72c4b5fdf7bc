"""SQL Repositories — SQLAlchemy implementations of the ring and user stores.

Invariants:
    - Each write commits its own unit of work; reads never commit
    - Every call goes through with_timeout (deadline from settings)
    - Absent rows come back as None / False, never as exceptions
    - A unique-constraint hit on user insert is a UserAlreadyExistsError
"""

import logging
from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from rings_api.core.errors import UserAlreadyExistsError
from rings_api.infrastructure.database import with_timeout
from rings_api.models.ring import Ring
from rings_api.models.user import User

logger = logging.getLogger(__name__)


class SqlRingRepository:
    """Ring persistence over an AsyncSession."""

    def __init__(self, db: AsyncSession, timeout_seconds: float | None = None):
        self._db = db
        self._timeout = timeout_seconds

    async def get(self, ring_id: int) -> Ring | None:
        return await with_timeout(
            self._db.get(Ring, ring_id), self._timeout, "ring.get",
        )

    async def list_all(self) -> list[Ring]:
        result = await with_timeout(
            self._db.execute(select(Ring).order_by(Ring.id)),
            self._timeout, "ring.list",
        )
        return list(result.scalars().all())

    async def create(self, fields: dict) -> Ring:
        return await with_timeout(self._create(fields), self._timeout, "ring.create")

    async def update(self, ring_id: int, fields: dict) -> Ring | None:
        return await with_timeout(
            self._update(ring_id, fields), self._timeout, "ring.update",
        )

    async def delete(self, ring_id: int) -> bool:
        return await with_timeout(self._delete(ring_id), self._timeout, "ring.delete")

    async def _create(self, fields: dict) -> Ring:
        ring = Ring(**fields)
        self._db.add(ring)
        await self._db.commit()
        await self._db.refresh(ring)
        return ring

    async def _update(self, ring_id: int, fields: dict) -> Ring | None:
        ring = await self._db.get(Ring, ring_id)
        if ring is None:
            return None
        for key, value in fields.items():
            setattr(ring, key, value)
        ring.updated_at = datetime.now(timezone.utc)
        await self._db.commit()
        await self._db.refresh(ring)
        return ring

    async def _delete(self, ring_id: int) -> bool:
        ring = await self._db.get(Ring, ring_id)
        if ring is None:
            return False
        await self._db.delete(ring)
        await self._db.commit()
        return True


class SqlUserRepository:
    """User persistence over an AsyncSession."""

    def __init__(self, db: AsyncSession, timeout_seconds: float | None = None):
        self._db = db
        self._timeout = timeout_seconds

    async def get(self, user_id: str) -> User | None:
        return await with_timeout(
            self._db.get(User, user_id), self._timeout, "user.get",
        )

    async def get_by_email(self, email: str) -> User | None:
        return await self._first(User.email == email, "user.get_by_email")

    async def get_by_username(self, username: str) -> User | None:
        return await self._first(User.username == username, "user.get_by_username")

    async def create(self, fields: dict) -> User:
        return await with_timeout(self._create(fields), self._timeout, "user.create")

    async def _first(self, condition, operation: str) -> User | None:
        result = await with_timeout(
            self._db.execute(select(User).where(condition)),
            self._timeout, operation,
        )
        return result.scalar_one_or_none()

    async def _create(self, fields: dict) -> User:
        user = User(**fields)
        self._db.add(user)
        try:
            await self._db.commit()
        except IntegrityError:
            # concurrent registration won the race past the service pre-checks
            await self._db.rollback()
            raise UserAlreadyExistsError("email_or_username")
        await self._db.refresh(user)
        logger.info("User created", extra={"user_id": user.id})
        return user
