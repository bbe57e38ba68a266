"""
User Tasks API - Errors

Exception taxonomy for the API and the handlers that render every failure as
a JSON object with an ``error`` field.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Base class for errors that map onto an HTTP response."""

    status_code: int = status.HTTP_400_BAD_REQUEST
    message: str = "Bad Request"

    def __init__(self, message: str | None = None, headers: dict | None = None):
        if message is not None:
            self.message = message
        self.headers = headers
        super().__init__(self.message)


class ValidationError(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Bad Request"


class DuplicateUserError(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Username or email already exists"


class InvalidPasswordError(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid Password.Please Enter Correct Password"


class InvalidStatusError(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid status value"


class UserNotFoundError(ApiError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "User not found"


class TaskNotFoundError(ApiError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Task not found"


class UnauthenticatedError(ApiError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Unauthorized - No token provided"

    def __init__(self, message: str | None = None):
        super().__init__(message, headers={"WWW-Authenticate": "Bearer"})


class ForbiddenError(ApiError):
    status_code = status.HTTP_403_FORBIDDEN
    message = "Forbidden - Invalid token"


async def handle_api_error(request: Request, exc: ApiError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.message},
        headers=exc.headers,
    )


async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Missing or malformed request fields are reported as 400, not 422."""
    details = []
    for err in exc.errors():
        location = ".".join(str(part) for part in err.get("loc", ()) if part != "body")
        details.append({"field": location, "message": err.get("msg", "")})

    if details:
        first = details[0]
        message = f"{first['field']}: {first['message']}" if first["field"] else first["message"]
    else:
        message = "Invalid request"

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": message, "details": details},
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal Server Error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the JSON error handlers on the application."""
    app.add_exception_handler(ApiError, handle_api_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
