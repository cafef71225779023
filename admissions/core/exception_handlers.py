"""Centralized exception handlers for the FastAPI app.

Register with register_exception_handlers(app). Maps domain and framework
exceptions to HTTP responses. Routes raise domain errors by unwrapping an
Outcome; this module decides the status code.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from admissions.core.config import get_settings
from admissions.domain.exceptions import AdmissionsException

logger = logging.getLogger(__name__)

# Map domain error_code to HTTP status when applicable
_ERROR_CODE_STATUS: dict[str, int] = {
    "USER_NOT_FOUND": 404,
    "DUPLICATE_USER": 409,
    "TASK_NOT_FOUND": 400,
    "MISSING_REQUIRED_FIELDS": 400,
    "TASK_ORDER_VIOLATION": 400,
    "TASK_ALREADY_COMPLETED": 400,
    "CONFIGURATION_ERROR": 500,
}


def _admissions_exception_handler(
    request: Request, exc: AdmissionsException
) -> JSONResponse:
    """Return JSON from AdmissionsException.to_dict() with the mapped status code."""
    status = _ERROR_CODE_STATUS.get(exc.error_code, 400)
    if status >= 500:
        logger.error("Server-side domain error: %s", exc.message)
    return JSONResponse(
        status_code=status,
        content=exc.to_dict(),
    )


def _field_errors(exc: RequestValidationError) -> list[dict[str, Any]]:
    """Flatten pydantic errors to {field, message} pairs (body prefix dropped)."""
    fields = []
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ()) if part != "body"]
        fields.append({"field": ".".join(loc) or "body", "message": err.get("msg", "")})
    return fields


def _validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Return 400 with per-field validation details."""
    return JSONResponse(
        status_code=400,
        content={
            "error": "VALIDATION_ERROR",
            "message": "Request validation failed",
            "details": _field_errors(exc),
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

    Call once after creating the app. Handlers: AdmissionsException (and
    subclasses), RequestValidationError, StarletteHTTPException, generic Exception.
    """
    app.add_exception_handler(AdmissionsException, _admissions_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, _generic_exception_handler)
