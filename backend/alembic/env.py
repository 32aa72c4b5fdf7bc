"""Alembic environment — async migration runner for the Rings API.

The database URL and logging setup come from rings_api.config, so migrations
target the same database as the running app (DATABASE_URL).
"""

import asyncio

from sqlalchemy import pool
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import create_async_engine

from alembic import context

from rings_api.config import get_settings
from rings_api.db.base import Base
from rings_api.infrastructure.observability import setup_logging
# Import all models so Base.metadata has them
from rings_api.models.user import User  # noqa: F401
from rings_api.models.ring import Ring  # noqa: F401

settings = get_settings()
setup_logging(settings.log_level, settings.log_format)

target_metadata = Base.metadata


def run_migrations_offline() -> None:
    """Emit SQL for the migrations without a live connection."""
    context.configure(
        url=settings.database_url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


def do_run_migrations(connection: Connection) -> None:
    context.configure(connection=connection, target_metadata=target_metadata)
    with context.begin_transaction():
        context.run_migrations()


async def run_async_migrations() -> None:
    engine = create_async_engine(settings.database_url, poolclass=pool.NullPool)
    async with engine.connect() as connection:
        await connection.run_sync(do_run_migrations)
    await engine.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    asyncio.run(run_async_migrations())
