"""Ring Resource Handler — create/read/update/delete with existence and authorship rules.

Invariants:
    - Create: validate, then persist with forged_by forced to the caller's identity
    - Update: existence is checked before validation, so an absent ring is 404 whatever the body
    - Update never writes forged_by
    - Delete: 404 when absent
    - A path id that is not an integer is an absent ring

Design Decisions:
    - Each operation is a flat sequence of fallible steps; the first failure raises
      and ends the request (ADR: precedence auditable by reading top to bottom)
"""

import logging
import re
from typing import Any

from rings_api.core.domain_types import RingId, UserId
from rings_api.core.errors import RingNotFoundError
from rings_api.core.repository_protocols import RingRecord, RingRepository
from rings_api.core.validate_input import require_valid, validate_payload
from rings_api.schemas.ring import RingCreate, RingUpdate

logger = logging.getLogger(__name__)

# rings.id is a 32-bit INTEGER (SERIAL on postgres)
MAX_RING_ID = 2**31 - 1
_INTEGER = re.compile(r"-?[0-9]+")


def parse_ring_id(raw: Any) -> RingId:
    """Path id → RingId. Anything that is not a plain integer is a missing ring."""
    if isinstance(raw, int) and not isinstance(raw, bool):
        value = raw
    else:
        text = str(raw).strip()
        if not _INTEGER.fullmatch(text):
            raise RingNotFoundError(raw)
        value = int(text)
    if abs(value) > MAX_RING_ID:
        raise RingNotFoundError(raw)
    return RingId(value)


async def get_ring_or_404(rings: RingRepository, ring_id: Any) -> RingRecord:
    parsed = parse_ring_id(ring_id)
    ring = await rings.get(parsed)
    if ring is None:
        raise RingNotFoundError(parsed)
    return ring


async def create_ring(
    rings: RingRepository, identity: UserId, body: Any,
) -> RingRecord:
    payload: RingCreate = require_valid(validate_payload(RingCreate, body))
    fields = payload.to_fields()
    if fields["forged_by"] != identity:
        logger.info(
            "Client-supplied forgedBy replaced with caller identity",
            extra={"user_id": identity},
        )
    fields["forged_by"] = identity
    ring = await rings.create(fields)
    logger.info("Ring created", extra={"ring_id": ring.id, "user_id": identity})
    return ring


async def list_rings(rings: RingRepository) -> list[RingRecord]:
    return await rings.list_all()


async def get_ring(rings: RingRepository, ring_id: Any) -> RingRecord:
    return await get_ring_or_404(rings, ring_id)


async def update_ring(
    rings: RingRepository, identity: UserId, ring_id: Any, body: Any,
) -> RingRecord:
    existing = await get_ring_or_404(rings, ring_id)
    payload: RingUpdate = require_valid(validate_payload(RingUpdate, body))
    ring = await rings.update(existing.id, payload.to_fields())
    if ring is None:
        # deleted between the existence check and the write
        raise RingNotFoundError(existing.id)
    logger.info("Ring updated", extra={"ring_id": ring.id, "user_id": identity})
    return ring


async def delete_ring(
    rings: RingRepository, identity: UserId, ring_id: Any,
) -> None:
    parsed = parse_ring_id(ring_id)
    if not await rings.delete(parsed):
        raise RingNotFoundError(parsed)
    logger.info("Ring deleted", extra={"ring_id": parsed, "user_id": identity})
