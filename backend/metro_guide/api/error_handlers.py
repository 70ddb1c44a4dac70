"""Error Handlers — global exception handlers for the Metro Guide API.

Invariants:
    - MetroGuideError → its http_status with {"message": ...}
    - RequestValidationError → 400 with {"message", "errors"} field-level details
    - HTTPException → its status with {"message": detail}
    - Exception (catch-all) → 500, never leaks internal details
    - A session token issued earlier in the request is echoed on error responses too

Design Decisions:
    - Validation failures are 400, not FastAPI's default 422: clients treat any
      malformed input the same way
    - Extracted from main.py to keep the app module about wiring only
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from metro_guide.config import get_settings
from metro_guide.core.errors import MetroGuideError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:

    @app.exception_handler(MetroGuideError)
    async def domain_error_handler(request: Request, exc: MetroGuideError):
        """Handle all Metro Guide domain/infrastructure errors."""
        log = logger.error if exc.http_status >= 500 else logger.info
        log(
            f"MetroGuideError: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
            headers=_session_headers(request),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
            headers=_session_headers(request),
        )


def _register_http_error_handler(app: FastAPI) -> None:

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": str(exc.detail)},
            headers={
                **(getattr(exc, "headers", None) or {}),
                **(_session_headers(request) or {}),
            },
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": "An unexpected error occurred"},
            headers=_session_headers(request),
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build structured validation error response."""
    return {
        "message": "Invalid request data",
        "errors": [
            {
                "field": ".".join(str(loc) for loc in e["loc"]),
                "message": e["msg"],
                "type": e["type"],
            }
            for e in exc.errors()
        ],
    }


def _session_headers(request: Request) -> dict | None:
    """Header echoing a token issued during this request, if any."""
    token = getattr(request.state, "issued_session_token", None)
    if token is None:
        return None
    return {get_settings().session_header: token}
