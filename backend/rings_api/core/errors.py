"""Error Hierarchy — typed, categorized exceptions for every failure the API can produce.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client-correctable errors (401/400/404/409) carry a stable message
    - Internal errors (500) always expose the same generic message; detail stays server-side
    - to_response() produces the wire body: {"message": ...} plus "errors" for validation

Design Decisions:
    - Single hierarchy with RingsError base: FastAPI global handler catches all (ADR: uniform error shape)
    - AuthError keeps the failure reason for logs but its message never varies
"""

from enum import Enum

from rings_api.core.domain_types import AuthFailure, ErrorReport


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    AUTHENTICATION = "authentication"
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    DATABASE = "database"
    TIMEOUT = "timeout"
    INTERNAL = "internal"


INVALID_TOKEN_MESSAGE = "Invalid token"
INVALID_INPUT_MESSAGE = "Invalid input"
INTERNAL_ERROR_MESSAGE = "Internal server error"


class RingsError(Exception):
    """Base exception for all Rings API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.WARNING,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the client-facing error body."""
        return {"message": self.message}


# ─── Client Errors (400-level) ──────────────────────────────────

class AuthError(RingsError):
    """Bearer token missing, malformed, forged or expired."""
    def __init__(self, reason: AuthFailure):
        super().__init__(
            INVALID_TOKEN_MESSAGE, "INVALID_TOKEN", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.INFO, 401,
        )
        self.reason = reason


class InputValidationError(RingsError):
    """Request body failed schema validation."""
    def __init__(self, errors: ErrorReport):
        super().__init__(
            INVALID_INPUT_MESSAGE, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400,
        )
        self.errors = errors

    def to_response(self) -> dict:
        return {"message": self.message, "errors": self.errors}


class ResourceNotFoundError(RingsError):
    """Requested resource does not exist."""
    def __init__(self, resource_type: str, resource_id: object = None):
        super().__init__(
            f"{resource_type} not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class RingNotFoundError(ResourceNotFoundError):
    def __init__(self, ring_id: object = None):
        super().__init__("Ring", ring_id)


class UserNotFoundError(ResourceNotFoundError):
    def __init__(self, user_id: object = None):
        super().__init__("User", user_id)


class InvalidCredentialsError(RingsError):
    """Login failed. Same message whether the email or the password was wrong."""
    def __init__(self):
        super().__init__(
            "Invalid credentials", "INVALID_CREDENTIALS",
            ErrorCategory.AUTHENTICATION, ErrorSeverity.INFO, 401,
        )


class UserAlreadyExistsError(RingsError):
    """Registration collided with an existing email or username."""
    def __init__(self, field: str):
        super().__init__(
            "User already exists", "USER_ALREADY_EXISTS",
            ErrorCategory.CONFLICT, ErrorSeverity.WARNING, 409,
        )
        self.field = field


# ─── Internal Errors (500-level) ────────────────────────────────

class InternalError(RingsError):
    """Unclassified failure. Detail is logged, never returned."""
    def __init__(
        self,
        detail: str = "",
        code: str = "INTERNAL_ERROR",
        category: ErrorCategory = ErrorCategory.INTERNAL,
    ):
        super().__init__(
            INTERNAL_ERROR_MESSAGE, code, category, ErrorSeverity.CRITICAL, 500,
        )
        self.detail = detail

    def __str__(self) -> str:
        return self.detail or self.message


class DatabaseError(InternalError):
    """Database operation failed."""
    def __init__(self, detail: str, operation: str):
        super().__init__(
            f"Database {operation} failed: {detail}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
        )
        self.operation = operation


class PersistenceTimeoutError(InternalError):
    """A persistence call did not complete within the configured window."""
    def __init__(self, operation: str, timeout_seconds: float):
        super().__init__(
            f"Persistence call '{operation}' timed out after {timeout_seconds}s",
            "PERSISTENCE_TIMEOUT", ErrorCategory.TIMEOUT,
        )
        self.operation = operation
        self.timeout_seconds = timeout_seconds
