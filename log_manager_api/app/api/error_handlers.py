"""
Global exception handlers.

Three layers:

* ``LogManagerError`` → status picked by its ``ErrorKind``, message
  returned verbatim;
* ``RequestValidationError`` (malformed path, query or body values)
  → 400 with the parameter-format message, or the dedicated message
  when the ``actor`` query parameter is missing;
* any other exception → 500 without internal details.

Body shape is always ``{"detail": <message>, "error": <kind>}``.
"""

import logging
from typing import Any, Dict

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from log_manager_api.app.core.errors import ErrorKind, LogManagerError, ParameterFormat
from log_manager_api.app.core.messages import ErrorMessages

logger = logging.getLogger(__name__)

STATUS_BY_KIND: Dict[ErrorKind, int] = {
    ErrorKind.USER_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.LOG_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.USER_ALREADY_EXISTS: status.HTTP_409_CONFLICT,
    ErrorKind.NO_USERS_YET: status.HTTP_409_CONFLICT,
    ErrorKind.USER_REFERENCED: status.HTTP_409_CONFLICT,
    ErrorKind.USERS_REFERENCED: status.HTTP_409_CONFLICT,
    ErrorKind.PARAMETER_MISSING: status.HTTP_400_BAD_REQUEST,
    ErrorKind.PARAMETER_FORMAT: status.HTTP_400_BAD_REQUEST,
    ErrorKind.ILLEGAL_COLOR: status.HTTP_400_BAD_REQUEST,
    ErrorKind.ILLEGAL_SEVERITY: status.HTTP_400_BAD_REQUEST,
    ErrorKind.USER_CANNOT_DELETE_SELF: status.HTTP_400_BAD_REQUEST,
}


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""

    @app.exception_handler(LogManagerError)
    async def log_manager_error_handler(request: Request, exc: LogManagerError) -> JSONResponse:
        logger.warning("%s on %s: %s", exc.kind.value, request.url.path, exc.message)
        return _error_response(exc)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.warning("Validation error on %s: %s", request.url.path, exc.errors())
        return _error_response(_to_parameter_format(exc))

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error("Unhandled exception on %s: %s", request.url.path, exc, exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": ErrorMessages.INTERNAL_ERROR, "error": "internal"},
        )


def _error_response(exc: LogManagerError) -> JSONResponse:
    return JSONResponse(
        status_code=STATUS_BY_KIND.get(exc.kind, status.HTTP_400_BAD_REQUEST),
        content={"detail": exc.message, "error": exc.kind.value},
    )


def _to_parameter_format(exc: RequestValidationError) -> ParameterFormat:
    errors = exc.errors()
    for error in errors:
        if tuple(error.get("loc", ())) == ("query", "actor") and error.get("type") == "missing":
            return ParameterFormat(message=ErrorMessages.ACTOR_NOT_PRESENT)
    first: Dict[str, Any] = errors[0] if errors else {}
    loc = first.get("loc") or ("request",)
    return ParameterFormat(
        ErrorMessages.PARAMETER_CONVERSION.format(
            value=first.get("input"),
            name=loc[-1],
            reason=first.get("msg", "invalid value"),
        )
    )
