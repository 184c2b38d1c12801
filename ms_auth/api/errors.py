"""Map auth core errors to HTTP responses."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ms_auth.core.exceptions import (
    AuthError,
    ConflictError,
    InvalidCredentialsError,
    InvalidInputError,
    NotFoundError,
    StoreUnavailableError,
    TokenExpiredError,
    TokenInvalidError,
)

logger = logging.getLogger(__name__)

STATUS_BY_ERROR: dict[type[AuthError], int] = {
    InvalidInputError: status.HTTP_400_BAD_REQUEST,
    ConflictError: status.HTTP_400_BAD_REQUEST,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    InvalidCredentialsError: status.HTTP_401_UNAUTHORIZED,
    TokenInvalidError: status.HTTP_403_FORBIDDEN,
    TokenExpiredError: status.HTTP_403_FORBIDDEN,
    StoreUnavailableError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def status_for(error: AuthError) -> int:
    for error_type in type(error).__mro__:
        if error_type in STATUS_BY_ERROR:
            return STATUS_BY_ERROR[error_type]
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def register_error_handlers(app: FastAPI, expose_details: bool) -> None:
    """Install JSON error handlers; details are only sent when expose_details is set."""

    @app.exception_handler(AuthError)
    async def handle_auth_error(request: Request, exc: AuthError) -> JSONResponse:
        code = status_for(exc)
        if code >= 500:
            message = "Server error"
        else:
            message = exc.message
        body: dict = {"error": message}
        if expose_details and exc.details:
            body["details"] = exc.details
        headers = None
        if isinstance(exc, (TokenInvalidError, TokenExpiredError)):
            headers = {"WWW-Authenticate": "Bearer"}
        return JSONResponse(status_code=code, content=body, headers=headers)

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        # Submitted values are never echoed; they may contain a password.
        body: dict = {"error": "Invalid request body"}
        if expose_details:
            body["details"] = {
                "fields": [
                    {"loc": [str(part) for part in err.get("loc", ())], "type": err.get("type")}
                    for err in exc.errors()
                ]
            }
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=body)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        body: dict = {"error": exc.detail}
        if exc.status_code == status.HTTP_404_NOT_FOUND:
            body = {"error": "Route not found", "path": request.url.path, "method": request.method}
        return JSONResponse(status_code=exc.status_code, content=body, headers=exc.headers)

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        body: dict = {"error": "Server error"}
        if expose_details:
            body["details"] = {"reason": str(exc)}
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=body)
