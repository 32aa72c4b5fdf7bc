"""Error Handlers — global exception handlers for the Rings API.

Invariants:
    - RingsError → its own status and body via normalize_error
    - RequestValidationError → the same 400 "Invalid input" shape with a field report
    - Exception (catch-all) → 500 generic body; full detail only in the log

Design Decisions:
    - Three-layer handler: domain (RingsError), validation (Pydantic), catch-all (Exception)
    - Log level follows error severity: critical errors carry the traceback
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from rings_api.core.errors import ErrorSeverity, InputValidationError, RingsError
from rings_api.core.normalize_errors import build_error_report, normalize_error

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_rings_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_rings_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RingsError)
    async def rings_error_handler(request: Request, exc: RingsError):
        """Handle all domain/infrastructure errors."""
        extra = {
            "error_code": exc.code,
            "path": request.url.path,
            "method": request.method,
        }
        if exc.severity == ErrorSeverity.CRITICAL:
            logger.error(f"{exc.code}: {exc}", extra=extra, exc_info=exc)
        elif exc.severity != ErrorSeverity.INFO:
            logger.warning(f"{exc.code}: {exc.message}", extra=extra)
        status_code, body = normalize_error(exc)
        return JSONResponse(status_code=status_code, content=body)


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Framework-level validation errors reshaped into the field report."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"path": request.url.path, "method": request.method},
        )
        status_code, body = normalize_error(
            InputValidationError(build_error_report(exc.errors())),
        )
        return JSONResponse(status_code=status_code, content=body)


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            extra={"path": request.url.path, "method": request.method},
            exc_info=True,
        )
        status_code, body = normalize_error(exc)
        return JSONResponse(status_code=status_code, content=body)
