"""Ring Routes — authenticated CRUD over /rings.

Invariants:
    - Every route depends on require_identity: a bad token is a 401 before anything else runs
    - Bodies are read raw and validated by the service, after authentication
    - DELETE answers 204 with no body
"""

import logging

from fastapi import APIRouter, Depends, Request, Response, status

from rings_api.api.auth_guard import require_identity
from rings_api.api.dependencies import get_ring_repository
from rings_api.api.request_body import read_json_body
from rings_api.core.domain_types import UserId
from rings_api.core.repository_protocols import RingRepository
from rings_api.schemas.ring import RingResponse
from rings_api.services import ring_service

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/rings", tags=["rings"])


@router.post(
    "", response_model=RingResponse, status_code=status.HTTP_201_CREATED,
)
async def create_ring(
    request: Request,
    identity: UserId = Depends(require_identity),
    rings: RingRepository = Depends(get_ring_repository),
):
    body = await read_json_body(request)
    ring = await ring_service.create_ring(rings, identity, body)
    return RingResponse.from_record(ring)


@router.get("", response_model=list[RingResponse])
async def list_rings(
    identity: UserId = Depends(require_identity),
    rings: RingRepository = Depends(get_ring_repository),
):
    return [RingResponse.from_record(r) for r in await ring_service.list_rings(rings)]


@router.get("/{ring_id}", response_model=RingResponse)
async def get_ring(
    ring_id: str,
    identity: UserId = Depends(require_identity),
    rings: RingRepository = Depends(get_ring_repository),
):
    ring = await ring_service.get_ring(rings, ring_id)
    return RingResponse.from_record(ring)


@router.put("/{ring_id}", response_model=RingResponse)
async def update_ring(
    ring_id: str,
    request: Request,
    identity: UserId = Depends(require_identity),
    rings: RingRepository = Depends(get_ring_repository),
):
    body = await read_json_body(request)
    ring = await ring_service.update_ring(rings, identity, ring_id, body)
    return RingResponse.from_record(ring)


@router.delete(
    "/{ring_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def delete_ring(
    ring_id: str,
    identity: UserId = Depends(require_identity),
    rings: RingRepository = Depends(get_ring_repository),
):
    await ring_service.delete_ring(rings, identity, ring_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
