"""Rings API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map every failure to the uniform {"message": ...} body
    - Database initialized on startup via lifespan context manager
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from rings_api.api.error_handlers import register_error_handlers
from rings_api.api.routes import health, rings, users
from rings_api.config import get_settings
from rings_api.infrastructure.database import close_db, init_db
from rings_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("Rings API started")
    yield
    await close_db()
    logger.info("Rings API shutting down")


def create_app() -> FastAPI:
    app = FastAPI(title="Rings API", version="1.0.0", lifespan=lifespan)
    app.include_router(health.router)
    app.include_router(users.router)
    app.include_router(rings.router)
    register_error_handlers(app)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app=app, host="0.0.0.0", port=8000)
