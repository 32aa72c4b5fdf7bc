"""Error Normalizer — the single translation point from exceptions to wire responses.

Invariants:
    - RingsError subclasses map to their own status and body
    - Anything else maps to 500 with the generic internal message
    - Framework validation errors are reshaped into the field-keyed report
"""

from typing import Any, Iterable

from rings_api.core.domain_types import ErrorReport
from rings_api.core.errors import InternalError, RingsError

# Location prefixes FastAPI puts in front of the field name
_LOCATION_PREFIXES = ("body", "query", "path", "header", "cookie")

# Pydantic error types that get a fixed, client-stable message
_MESSAGES_BY_TYPE = {
    "missing": "Required",
    "string_type": "Expected string",
    "int_type": "Expected number",
    "int_parsing": "Expected number",
    "dict_type": "Expected object",
    "model_type": "Expected object",
}


def normalize_error(exc: BaseException) -> tuple[int, dict]:
    """Map any exception to (http_status, body)."""
    if isinstance(exc, RingsError):
        return exc.http_status, exc.to_response()
    internal = InternalError(str(exc))
    return internal.http_status, internal.to_response()


def build_error_report(errors: Iterable[dict[str, Any]]) -> ErrorReport:
    """Group pydantic error dicts by field, keeping the order they were raised in."""
    report: ErrorReport = {}
    for error in errors:
        field = _field_name(error.get("loc", ()))
        message = _MESSAGES_BY_TYPE.get(error.get("type", ""), error.get("msg", "Invalid"))
        messages = report.setdefault(field, [])
        if message not in messages:
            messages.append(message)
    return report


def _field_name(loc: tuple) -> str:
    parts = list(loc)
    if len(parts) > 1 and parts[0] in _LOCATION_PREFIXES:
        parts = parts[1:]
    if not parts:
        return "body"
    return ".".join(str(p) for p in parts)
