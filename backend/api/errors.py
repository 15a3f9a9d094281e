"""
Exception handlers.

Maps the application exception hierarchy onto HTTP status codes and the
standard error body. Server-side failures hide their message unless the
app runs in debug mode.
"""

import logging

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from shared.config import get_settings
from shared.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConfigurationError,
    DatabaseError,
    ExternalServiceError,
    GuidepostError,
    NotFoundError,
    ValidationError,
)

from .models.errors import ErrorResponse

logger = logging.getLogger(__name__)

# Checked in order; the first matching base class wins
ERROR_STATUS = (
    (AuthenticationError, 401),
    (AuthorizationError, 403),
    (NotFoundError, 404),
    (ValidationError, 400),
    (ExternalServiceError, 400),
    (ConfigurationError, 500),
    (DatabaseError, 500),
)

GENERIC_SERVER_ERROR = "An internal error occurred"


def status_for(exc: GuidepostError) -> int:
    """HTTP status for an application exception."""
    for error_type, status_code in ERROR_STATUS:
        if isinstance(exc, error_type):
            return status_code
    return 500


def error_response(request: Request, exc: GuidepostError) -> JSONResponse:
    """Build the JSON error response for an application exception."""
    status_code = status_for(exc)
    body = ErrorResponse(error=exc.code, message=exc.message, details=exc.details)

    if status_code >= 500:
        logger.error("%s %s failed: %s (%s)", request.method, request.url.path, exc.message, exc.code)
        if not get_settings().debug:
            body = ErrorResponse(error=exc.code, message=GENERIC_SERVER_ERROR)
    else:
        logger.info("%s %s rejected: %s", request.method, request.url.path, exc.code)

    return JSONResponse(status_code=status_code, content=body.model_dump())


async def guidepost_error_handler(request: Request, exc: GuidepostError) -> JSONResponse:
    return error_response(request, exc)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    body = ErrorResponse(
        error="INVALID_INPUT",
        message="Invalid request",
        details={"errors": [{"loc": list(e.get("loc", ())), "msg": e.get("msg")} for e in exc.errors()]},
    )
    return JSONResponse(status_code=400, content=body.model_dump())


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    body = ErrorResponse(error="INTERNAL_ERROR", message=GENERIC_SERVER_ERROR)
    return JSONResponse(status_code=500, content=body.model_dump())
