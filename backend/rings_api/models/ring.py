"""Ring ORM — a ring held by a bearer and attributed to its forger.

Invariants:
    - id is an autoincrement integer assigned by the store
    - bearer and forged_by reference users.id (FK, not re-checked by handlers)
    - forged_by is written once on insert; updates never touch it
    - updated_at advances on every update; created_at never changes
"""

from datetime import datetime, timezone

from sqlalchemy import Integer, String, Text, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from rings_api.db.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Ring(Base):
    __tablename__ = "rings"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    power: Mapped[str] = mapped_column(Text, nullable=False)
    bearer: Mapped[str] = mapped_column(
        String(36), ForeignKey("users.id"), nullable=False, index=True,
    )
    forged_by: Mapped[str] = mapped_column(
        "forgedBy", String(36), ForeignKey("users.id"), nullable=False,
    )
    image: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow,
    )
