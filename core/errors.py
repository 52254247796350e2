# Error kinds for the Inverso API and the handlers that render them
# Every error is an HTTPException so routers and services can raise them directly.

import logging
from typing import Any, List, Optional

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from config.app_config import is_production

logger = logging.getLogger(__name__)


class APIError(HTTPException):
    """Base class: carries an error kind alongside the HTTP status."""

    error = "Error"
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, detail: str, status_code: Optional[int] = None, details: Optional[List[Any]] = None):
        super().__init__(status_code=status_code or self.status_code, detail=detail)
        self.details = details


class ValidationError(APIError):
    error = "ValidationError"
    status_code = status.HTTP_400_BAD_REQUEST


class AuthenticationError(APIError):
    error = "AuthenticationError"
    status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self, detail: str = "Authentication required"):
        super().__init__(detail)
        self.headers = {"WWW-Authenticate": "Bearer"}


class ForbiddenError(APIError):
    error = "ForbiddenError"
    status_code = status.HTTP_403_FORBIDDEN


class NotFoundError(APIError):
    error = "NotFoundError"
    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(APIError):
    error = "ConflictError"
    status_code = status.HTTP_400_BAD_REQUEST


class InvalidStateError(APIError):
    error = "InvalidStateError"
    status_code = status.HTTP_400_BAD_REQUEST


class InternalError(APIError):
    error = "InternalError"
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


def _error_payload(error: str, message: str, details: Optional[List[Any]] = None) -> dict:
    payload = {"error": error, "message": message}
    if details:
        payload["details"] = details
    return payload


def _field_messages(exc: RequestValidationError) -> List[str]:
    messages = []
    for err in exc.errors():
        loc = ".".join(str(part) for part in err.get("loc", ()) if part != "body")
        messages.append(f"{loc}: {err.get('msg')}" if loc else err.get("msg"))
    return messages


def register_exception_handlers(app: FastAPI) -> None:
    """Render every failure as {"error", "message"[, "details"]}."""

    @app.exception_handler(APIError)
    async def api_error_handler(request: Request, exc: APIError):
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_payload(exc.error, exc.detail, exc.details),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        error = {
            status.HTTP_401_UNAUTHORIZED: AuthenticationError.error,
            status.HTTP_403_FORBIDDEN: ForbiddenError.error,
            status.HTTP_404_NOT_FOUND: NotFoundError.error,
        }.get(exc.status_code, "Error")
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_payload(error, str(exc.detail)),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_error_payload(ValidationError.error, "Validation error", _field_messages(exc)),
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        message = "Internal server error" if is_production() else str(exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=_error_payload(InternalError.error, message),
        )
