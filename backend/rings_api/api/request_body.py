"""Raw JSON body reading for handlers that validate the payload themselves."""

import json
from typing import Any

from fastapi import Request

from rings_api.core.errors import InputValidationError


async def read_json_body(request: Request) -> Any:
    """Decoded JSON body, None when empty. Undecodable bodies are a 400."""
    raw = await request.body()
    if not raw.strip():
        return None
    try:
        return await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        raise InputValidationError({"body": ["Invalid JSON"]})
