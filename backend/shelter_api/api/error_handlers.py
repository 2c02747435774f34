"""Error Handlers - global exception handlers for the shelter API.

Invariants:
    - ShelterError -> {"message": public_message} with the error's HTTP status
    - Each ShelterError is logged exactly once; ERROR/CRITICAL with traceback
    - RequestValidationError (unparseable body) -> 400 with field-level details
    - Exception (catch-all) -> never leaks internal details

Design Decisions:
    - Three-layer handler: domain (ShelterError), validation (Pydantic), catch-all (Exception)
    - Extracted from main.py; create_app() calls register_error_handlers()
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from shelter_api.core.errors import ShelterError, ErrorSeverity

logger = logging.getLogger(__name__)

_LOUD_SEVERITIES = (ErrorSeverity.ERROR, ErrorSeverity.CRITICAL)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_shelter_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_shelter_error_handler(app: FastAPI) -> None:
    """Register domain/infrastructure error handler."""

    @app.exception_handler(ShelterError)
    async def shelter_error_handler(request: Request, exc: ShelterError):
        """Handle all shelter domain/infrastructure errors."""
        loud = exc.severity in _LOUD_SEVERITIES
        logger.log(
            logging.ERROR if loud else logging.INFO,
            f"{exc.code}: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "method": request.method,
                **exc.context.log_fields(),
            },
            exc_info=exc if loud else None,
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle request parsing errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all - never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": "An unexpected error occurred"},
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build structured validation error response."""
    return {
        "message": "Invalid request data",
        "details": [
            {
                "field": ".".join(str(loc) for loc in e["loc"]),
                "message": e["msg"],
                "type": e["type"],
            }
            for e in exc.errors()
        ],
    }
