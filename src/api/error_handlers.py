"""
Error handlers - Global exception handlers for the API.

Validation failures never reach these handlers; routes turn them into
400 responses themselves. What arrives here is a defect: a schema fault,
an unknown record kind wired into a route, or any other crash. Each is
logged with its traceback and answered with a generic 500.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import PlainTextResponse

from src.domain.exceptions import StructGuardError

logger = logging.getLogger(__name__)

INTERNAL_ERROR_BODY = "Internal Server Error"


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:
    @app.exception_handler(StructGuardError)
    async def domain_error_handler(request: Request, exc: StructGuardError) -> PlainTextResponse:
        logger.error(
            "Schema misconfiguration on %s: %s",
            request.url.path,
            exc,
            exc_info=exc,
        )
        return PlainTextResponse(
            INTERNAL_ERROR_BODY, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception) -> PlainTextResponse:
        """Catch-all - never leaks internal details."""
        logger.error("Panic on %s: %s", request.url.path, exc, exc_info=exc)
        return PlainTextResponse(
            INTERNAL_ERROR_BODY, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
        )
