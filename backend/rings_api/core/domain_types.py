"""Domain Types — identity types and the tagged validation outcome.

Invariants:
    - UserId wraps the store-generated UUID string; RingId wraps the integer key
    - ValidationOutcome is either Valid(value) or Invalid(report), never both
    - ErrorReport keys are field names, values are ordered violation messages
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, NewType, TypeVar, Union


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", str)
RingId = NewType("RingId", int)


# ─── Enums ───────────────────────────────────────────────────────

class AuthFailure(str, Enum):
    """Why a request could not be authenticated. Logged, never returned."""
    MISSING = "missing"
    INVALID = "invalid"
    EXPIRED = "expired"


# ─── Validation Outcome ──────────────────────────────────────────

ErrorReport = dict[str, list[str]]

T = TypeVar("T")


@dataclass(frozen=True)
class Valid(Generic[T]):
    value: T


@dataclass(frozen=True)
class Invalid:
    errors: ErrorReport


ValidationOutcome = Union[Valid[T], Invalid]
