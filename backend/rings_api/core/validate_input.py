"""Input Validator — runs a request body against a declarative schema.

Invariants:
    - Never raises for bad input: returns Invalid(report) instead
    - Every violated field is reported in one pass, not just the first
    - A missing or null body is validated as {} so each required field reports "Required"
    - A body that is not a JSON object reports under the "body" key

Design Decisions:
    - Pydantic models are the rule sets; this module only turns their error list
      into the field-keyed report (ADR: one validation engine across the API)
"""

from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from rings_api.core.domain_types import Invalid, Valid, ValidationOutcome
from rings_api.core.errors import InputValidationError
from rings_api.core.normalize_errors import build_error_report

M = TypeVar("M", bound=BaseModel)


def validate_payload(schema: type[M], payload: Any) -> ValidationOutcome[M]:
    """Validate payload against schema. Returns Valid(model) or Invalid(report)."""
    if payload is None:
        payload = {}
    if not isinstance(payload, dict):
        return Invalid({"body": ["Expected object"]})
    try:
        return Valid(schema.model_validate(payload))
    except ValidationError as exc:
        return Invalid(build_error_report(exc.errors()))


def require_valid(outcome: ValidationOutcome[M]) -> M:
    """Valid → payload; Invalid → InputValidationError."""
    if isinstance(outcome, Invalid):
        raise InputValidationError(outcome.errors)
    return outcome.value
