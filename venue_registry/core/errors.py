"""
Central error responder
Maps every failure kind onto the error envelope and an HTTP status
"""

import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from venue_registry.core.exceptions import VenueRegistryException

logger = logging.getLogger(__name__)


def error_response(
    status_code: int,
    code: str,
    message: str,
    details: Optional[Dict[str, Any]] = None
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "error": {
                "code": code,
                "message": message,
                "details": details or {}
            }
        }
    )


def _request_id(request: Request) -> Optional[str]:
    return getattr(request.state, "request_id", None)


async def handle_app_exception(request: Request, exc: VenueRegistryException):
    if exc.status_code >= 500:
        logger.error(f"{exc.code}: {exc.message}", extra={"request_id": _request_id(request)})
    return error_response(exc.status_code, exc.code, exc.message, exc.details)


async def handle_request_validation(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    first = errors[0] if errors else {}
    # loc is ("body" | "query" | "path", field, ...)
    location = [str(part) for part in first.get("loc", ())[1:]]
    field = ".".join(location) or None
    message = first.get("msg", "Invalid request")
    if field:
        message = f"{field}: {message}"
    return error_response(
        400,
        "VALIDATION_ERROR",
        message,
        {"field": field} if field else {}
    )


async def handle_http_exception(request: Request, exc: StarletteHTTPException):
    codes = {401: "AUTH_ERROR", 404: "NOT_FOUND", 405: "METHOD_NOT_ALLOWED"}
    return error_response(exc.status_code, codes.get(exc.status_code, "HTTP_ERROR"), str(exc.detail))


async def handle_storage_error(request: Request, exc: SQLAlchemyError):
    logger.error(
        f"Storage error: {type(exc).__name__}: {exc}",
        exc_info=exc,
        extra={"request_id": _request_id(request)}
    )
    return error_response(500, "STORAGE_ERROR", "A storage error occurred")


async def handle_unexpected(request: Request, exc: Exception):
    logger.error(
        f"Internal server error: {exc}",
        exc_info=exc,
        extra={"request_id": _request_id(request)}
    )
    return error_response(500, "INTERNAL_ERROR", "An internal server error occurred")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(VenueRegistryException, handle_app_exception)
    app.add_exception_handler(RequestValidationError, handle_request_validation)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(SQLAlchemyError, handle_storage_error)
    app.add_exception_handler(Exception, handle_unexpected)
