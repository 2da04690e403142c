"""Centralized exception handlers for the FastAPI application.

Domain and auth exceptions are mapped to HTTP responses here and nowhere
else. Every error uses the response envelope:

    {
        "success": false,
        "message": "Human-readable error message",
        "error": "<code>" | {"field": "message", ...}
    }

Usage:
    from userhub.presentation.api.exception_handlers import setup_exception_handlers

    app = FastAPI()
    setup_exception_handlers(app)
"""

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from userhub.domain.shared.exceptions import (
    BadRequestError,
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    ForbiddenError,
    UnauthorizedError,
    ValidationError,
)
from userhub.presentation.api.schemas.common import error_body
from userhub_auth import AuthError, InvalidTokenError, WeakPasswordError

logger = logging.getLogger(__name__)

VALIDATION_FAILED = "Validation failed"
INTERNAL_ERROR_MESSAGE = "Internal server error"

# Path parameters whose parse failure reads better with a dedicated message
PATH_PARAM_MESSAGES = {"user_id": "Invalid user ID"}


# =============================================================================
# Error Code to HTTP Status Mapping
# =============================================================================

ERROR_CODE_TO_STATUS: dict[ErrorCode, int] = {
    # 400 Bad Request
    ErrorCode.BAD_REQUEST: status.HTTP_400_BAD_REQUEST,
    # 401 Unauthorized
    ErrorCode.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.INVALID_CREDENTIALS: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.INVALID_TOKEN: status.HTTP_401_UNAUTHORIZED,
    # 403 Forbidden
    ErrorCode.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    ErrorCode.ACCOUNT_INACTIVE: status.HTTP_403_FORBIDDEN,
    # 404 Not Found
    ErrorCode.ENTITY_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.USER_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    # 409 Conflict
    ErrorCode.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorCode.EMAIL_ALREADY_EXISTS: status.HTTP_409_CONFLICT,
    # 422 Unprocessable Entity
    ErrorCode.VALIDATION_ERROR: status.HTTP_422_UNPROCESSABLE_ENTITY,
    ErrorCode.WEAK_PASSWORD: status.HTTP_422_UNPROCESSABLE_ENTITY,
    # 500 Internal Server Error
    ErrorCode.INTERNAL_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def _get_status_for_exception(exc: DomainException) -> int:  # NOQA: PLR0911
    """Determine HTTP status code for a domain exception.

    Uses the error code mapping, with fallback based on exception type.
    """
    # First try error code mapping
    if exc.code in ERROR_CODE_TO_STATUS:
        return ERROR_CODE_TO_STATUS[exc.code]

    # Fallback based on exception type hierarchy
    if isinstance(exc, ValidationError):
        return status.HTTP_422_UNPROCESSABLE_ENTITY
    if isinstance(exc, BadRequestError):
        return status.HTTP_400_BAD_REQUEST
    if isinstance(exc, UnauthorizedError):
        return status.HTTP_401_UNAUTHORIZED
    if isinstance(exc, ForbiddenError):
        return status.HTTP_403_FORBIDDEN
    if isinstance(exc, EntityNotFoundError):
        return status.HTTP_404_NOT_FOUND
    if isinstance(exc, ConflictError):
        return status.HTTP_409_CONFLICT

    return status.HTTP_500_INTERNAL_SERVER_ERROR


def _create_error_response(
    status_code: int,
    message: str,
    error: Any = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Create a standardized error response."""
    return JSONResponse(
        status_code=status_code,
        content=error_body(message, error),
        headers=headers,
    )


def _field_message(error: dict[str, Any], field: str) -> str:  # NOQA: PLR0911
    """Translate a pydantic error into a short client-facing message."""
    error_type = error.get("type", "")
    if error_type == "missing":
        return "This field is required"
    if error_type in ("string_too_short", "too_short"):
        return "Value is too short"
    if error_type in ("string_too_long", "too_long"):
        return "Value is too long"
    if field == "email" or "email address" in str(error.get("msg", "")):
        return "Invalid email format"
    if error_type in ("int_parsing", "int_type", "bool_parsing", "bool_type"):
        return f"Invalid value for {field}"
    if error_type == "enum":
        return f"Invalid value for {field}"
    return str(error.get("msg", f"Invalid value for {field}"))


def _field_name(loc: tuple[Any, ...]) -> str:
    # loc is ("body" | "query" | "path", field, ...); keep the innermost name
    names = [part for part in loc[1:] if isinstance(part, str)]
    if names:
        return names[-1]
    return str(loc[0]) if loc else "request"


def _validation_response(exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()

    if any(e.get("type") == "json_invalid" for e in errors):
        return _create_error_response(
            status.HTTP_400_BAD_REQUEST,
            "Invalid request body",
        )

    path_errors = [e for e in errors if e.get("loc", ("",))[0] == "path"]
    if path_errors:
        name = _field_name(tuple(path_errors[0]["loc"]))
        return _create_error_response(
            status.HTTP_400_BAD_REQUEST,
            PATH_PARAM_MESSAGES.get(name, f"Invalid {name}"),
        )

    fields: dict[str, str] = {}
    for error in errors:
        field = _field_name(tuple(error.get("loc", ())))
        # First error per field wins
        fields.setdefault(field, _field_message(error, field))

    return _create_error_response(
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        VALIDATION_FAILED,
        fields,
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI application.

    This should be called during app initialization to enable centralized
    exception handling for all domain exceptions.

    Parameters
    ----------
    app
        The FastAPI application instance
    """

    @app.exception_handler(DomainException)
    async def domain_exception_handler(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        """Handle all domain exceptions with structured response.

        Logs the full exception details for debugging while returning
        a safe, user-friendly message to the client.
        """
        status_code = _get_status_for_exception(exc)

        logger.warning(
            "Domain exception on %s %s: %s (code=%s, details=%s)",
            request.method,
            request.url.path,
            exc.message,
            exc.code.value,
            exc.details,
        )

        error: Any = exc.code.value
        if isinstance(exc, ValidationError) and exc.details:
            error = exc.details

        return _create_error_response(
            status_code=status_code,
            message=exc.message,
            error=error,
        )

    @app.exception_handler(AuthError)
    async def auth_exception_handler(
        request: Request,
        exc: AuthError,
    ) -> JSONResponse:
        """Handle exceptions raised by the userhub_auth package."""
        if isinstance(exc, WeakPasswordError):
            return _create_error_response(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                message=VALIDATION_FAILED,
                error={"password": exc.message},
            )

        if isinstance(exc, InvalidTokenError):
            return _create_error_response(
                status_code=status.HTTP_401_UNAUTHORIZED,
                message=exc.message,
                error=ErrorCode.INVALID_TOKEN.value,
                headers={"WWW-Authenticate": "Bearer"},
            )

        logger.warning(
            "Auth error on %s %s: %s",
            request.method,
            request.url.path,
            exc.message,
        )
        return _create_error_response(
            status_code=status.HTTP_401_UNAUTHORIZED,
            message=exc.message,
            error=ErrorCode.UNAUTHORIZED.value,
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        logger.debug(
            "Request validation failed on %s %s: %s",
            request.method,
            request.url.path,
            exc.errors(),
        )
        return _validation_response(exc)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request,
        exc: StarletteHTTPException,
    ) -> JSONResponse:
        """Wrap HTTPException (auth gate, unknown routes) in the envelope."""
        return _create_error_response(
            status_code=exc.status_code,
            message=str(exc.detail),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Handle unhandled exceptions with consistent error format.

        This is the catch-all handler for any exceptions not handled by
        the handlers above. No exception detail reaches the client.
        """
        logger.exception(
            "Unhandled exception on %s %s: %s",
            request.method,
            request.url.path,
            exc,
        )
        return _create_error_response(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            message=INTERNAL_ERROR_MESSAGE,
        )
