"""
Application-level error layer.

Everything that escapes a route handler ends up here and leaves as the
failure envelope ``{"success": false, "error": ..., "details"?: ...}``.
Raw details are only attached outside production.
"""
import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError
from starlette.exceptions import HTTPException as StarletteHTTPException

from medibloc.core.config import settings

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """An error that already knows its status code and client message."""

    def __init__(self, status_code: int, message: str, details: Any | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.details = details


def error_body(message: str, details: Any | None = None) -> dict[str, Any]:
    body: dict[str, Any] = {"success": False, "error": message}
    if details is not None:
        body["details"] = jsonable_encoder(details)
    return body


def error_response(status_code: int, message: str, details: Any | None = None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=error_body(message, details))


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    return error_response(exc.status_code, exc.message, exc.details)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == 404 and exc.detail == "Not Found":
        message = f"route {request.method} {request.url.path} not found"
    else:
        message = exc.detail if isinstance(exc.detail, str) else "request failed"
    details = None if isinstance(exc.detail, str) else exc.detail
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(message, details),
        headers=getattr(exc, "headers", None),
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return error_response(400, "invalid request data", exc.errors())


async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
    logger.warning("integrity error on %s %s: %s", request.method, request.url.path, exc.orig)
    details = None if settings.is_production else str(exc.orig)
    return error_response(409, "resource conflicts with existing data", details)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("unhandled error on %s %s", request.method, request.url.path)
    details = None if settings.is_production else str(exc)
    return error_response(500, "internal server error", details)


def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(IntegrityError, integrity_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
