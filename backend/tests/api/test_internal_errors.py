"""Internal failures through the app — generic 500 body, no detail leaked."""

import asyncio

from rings_api.api.dependencies import get_ring_repository
from rings_api.infrastructure.database import with_timeout
from rings_api.main import app


class _ExplodingRepository:
    async def list_all(self):
        raise RuntimeError("password=hunter2 host=db.internal")


class _SlowRepository:
    async def get(self, ring_id):
        return await with_timeout(asyncio.sleep(10), 0.01, "ring.get")


async def test_unexpected_error_is_generic_500(client, auth_headers):
    app.dependency_overrides[get_ring_repository] = lambda: _ExplodingRepository()

    res = await client.get("/rings", headers=auth_headers)

    assert res.status_code == 500
    assert res.json() == {"message": "Internal server error"}
    assert "hunter2" not in res.text


async def test_persistence_timeout_is_generic_500(client, auth_headers):
    app.dependency_overrides[get_ring_repository] = lambda: _SlowRepository()

    res = await client.get("/rings/1", headers=auth_headers)

    assert res.status_code == 500
    assert res.json() == {"message": "Internal server error"}


async def test_auth_still_checked_before_store(client):
    app.dependency_overrides[get_ring_repository] = lambda: _ExplodingRepository()

    res = await client.get("/rings")

    assert res.status_code == 401
