"""Centralized exception handlers for the FastAPI app.

Register with register_exception_handlers(app). Maps domain and framework
exceptions to HTTP responses.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from time_tracker.core.config import get_settings
from time_tracker.domain.exceptions import TimeTrackerException

logger = logging.getLogger(__name__)

# Map domain error_code to HTTP status
_ERROR_CODE_STATUS: dict[str, int] = {
    "RESOURCE_NOT_FOUND": 404,
    "USER_ALREADY_EXISTS": 409,
    "INVALID_TRANSITION": 409,
    "VALIDATION_ERROR": 400,
    "INVALID_UUID": 400,
    "INVALID_DATE": 400,
    "INVALID_DATE_RANGE": 400,
    "EMPTY_PATCH": 400,
    "EXTERNAL_SERVICE_BAD_REQUEST": 400,
    "EXTERNAL_SERVICE_ERROR": 502,
    "STORAGE_ERROR": 500,
    "SERVICE_UNAVAILABLE": 503,
}


def status_for(exc: TimeTrackerException) -> int:
    """Return the HTTP status for a domain exception (400 when unmapped)."""
    return _ERROR_CODE_STATUS.get(exc.error_code, 400)


def _time_tracker_exception_handler(
    request: Request, exc: TimeTrackerException
) -> JSONResponse:
    """Return JSON from TimeTrackerException.to_dict() with appropriate status code."""
    status = status_for(exc)
    if status >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    else:
        logger.info(
            "%s %s rejected: %s", request.method, request.url.path, exc.error_code
        )
    return JSONResponse(
        status_code=status,
        content=exc.to_dict(),
    )


def _validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Return 422 with validation error details."""
    return JSONResponse(
        status_code=422,
        content={
            "error": "VALIDATION_ERROR",
            "message": "Request validation failed",
            "details": jsonable_encoder(exc.errors()),
        },
    )


def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Return JSON for Starlette HTTP exceptions (status + detail)."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": "HTTP_ERROR", "message": exc.detail},
    )


def _generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Return 500; include detail only when debug is True."""
    logger.exception("Unhandled exception: %s", exc)
    settings = get_settings()
    detail: Any = str(exc) if settings.debug else "Internal server error"
    return JSONResponse(
        status_code=500,
        content={"error": "INTERNAL_ERROR", "message": detail},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI app.

    Call once after creating the app. Handlers: TimeTrackerException (and
    subclasses), RequestValidationError, StarletteHTTPException, generic Exception.
    """
    app.add_exception_handler(TimeTrackerException, _time_tracker_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, _generic_exception_handler)
