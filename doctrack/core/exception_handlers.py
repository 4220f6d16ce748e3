"""Centralized exception handlers for the FastAPI app.

Register with register_exception_handlers(app). Maps domain and framework
exceptions to the failure envelope {success: false, message, error}.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError
from starlette.exceptions import HTTPException as StarletteHTTPException

from doctrack.core.config import get_settings
from doctrack.domain.exceptions import DocTrackException
from doctrack.shared.utils.datetime import utc_now

logger = logging.getLogger(__name__)

# Map domain error_code to HTTP status when applicable
_ERROR_CODE_STATUS: dict[str, int] = {
    "RESOURCE_NOT_FOUND": 404,
    "EMPLOYEE_NOT_FOUND": 404,
    "DOCUMENT_TYPE_NOT_FOUND": 404,
    "DUPLICATE_EMPLOYEE": 409,
    "DUPLICATE_DOCUMENT_TYPE": 409,
    "VALIDATION_ERROR": 400,
    "INVALID_ID_FORMAT": 400,
    "PAGINATION_OUT_OF_RANGE": 400,
    "SERVICE_UNAVAILABLE": 503,
}


def _error_response(
    request: Request,
    status: int,
    *,
    message: str,
    code: str,
    error_type: str,
    details: Any = None,
) -> JSONResponse:
    """Build the failure envelope with request path/method for correlation."""
    error: dict[str, Any] = {
        "type": error_type,
        "code": code,
        "timestamp": utc_now().isoformat(),
        "path": request.url.path,
        "method": request.method,
    }
    if details:
        error["details"] = details
    request_id = getattr(request.state, "request_id", None)
    if request_id:
        error["request_id"] = request_id
    return JSONResponse(
        status_code=status,
        content=jsonable_encoder(
            {"success": False, "message": message, "error": error}
        ),
    )


def _doctrack_exception_handler(
    request: Request, exc: DocTrackException
) -> JSONResponse:
    """Return the envelope from DocTrackException.to_dict() with the mapped status code."""
    status = _ERROR_CODE_STATUS.get(exc.error_code, 400)
    payload = exc.to_dict()
    log = logger.error if status >= 500 else logger.warning
    log(
        "%s %s -> %d %s: %s",
        request.method,
        request.url.path,
        status,
        exc.error_code,
        exc.message,
    )
    return _error_response(
        request,
        status,
        message=payload["message"],
        code=payload["code"],
        error_type=payload["type"],
        details=payload["details"],
    )


def _validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Return 422 with validation error details."""
    return _error_response(
        request,
        422,
        message="Request validation failed",
        code="VALIDATION_ERROR",
        error_type="RequestValidationError",
        details=exc.errors(),
    )


def _integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
    """Unique index violations from concurrent writes surface as 409."""
    logger.warning("Integrity error on %s %s: %s", request.method, request.url.path, exc.orig)
    return _error_response(
        request,
        409,
        message="Resource conflicts with an existing record",
        code="DUPLICATE_RESOURCE",
        error_type="IntegrityError",
    )


def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Return the envelope for Starlette HTTP exceptions (status + detail)."""
    return _error_response(
        request,
        exc.status_code,
        message=str(exc.detail),
        code="HTTP_ERROR",
        error_type="HTTPException",
    )


def _generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Return 500; include detail only when debug is True."""
    logger.exception("Unhandled exception: %s", exc)
    settings = get_settings()
    message = str(exc) if settings.debug else "Internal server error"
    details = {"exception": exc.__class__.__name__} if settings.debug else None
    return _error_response(
        request,
        500,
        message=message,
        code="INTERNAL_ERROR",
        error_type="InternalServerError",
        details=details,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI app.

    Call once after creating the app. Handlers: DocTrackException (and
    subclasses), RequestValidationError, IntegrityError, StarletteHTTPException,
    generic Exception.
    """
    app.add_exception_handler(DocTrackException, _doctrack_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(IntegrityError, _integrity_error_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, _generic_exception_handler)
