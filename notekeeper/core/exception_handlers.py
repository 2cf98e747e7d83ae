"""
Exception Handlers.

FastAPI exception handlers that convert exceptions into the
{"status": "fail" | "error", "message": ...} envelope. Client-side
conditions use "fail"; server-side failures use "error".

Usage:
    from notekeeper.core.exception_handlers import register_exception_handlers

    app = FastAPI()
    register_exception_handlers(app)
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from notekeeper.core.exceptions import (
    ApplicationError,
    ConflictError,
    DatabaseError,
    NotFoundError,
    ValidationError,
)
from notekeeper.core.logging import get_logger
from notekeeper.schemas.base import ErrorEnvelope, ErrorStatus, FieldError

logger = get_logger(__name__)

# Map exception types to HTTP status codes
EXCEPTION_STATUS_MAP: dict[type[ApplicationError], int] = {
    NotFoundError: 404,
    ValidationError: 400,
    ConflictError: 409,
    DatabaseError: 500,
}


def _get_request_id(request: Request) -> str | None:
    """Extract request ID from request state or headers."""
    if hasattr(request.state, "request_id"):
        return request.state.request_id
    return request.headers.get("x-request-id")


def _envelope_status(status_code: int) -> ErrorStatus:
    return "error" if status_code >= 500 else "fail"


def _error_response(
    status_code: int,
    message: str,
    errors: list[FieldError] | None = None,
) -> JSONResponse:
    envelope = ErrorEnvelope(
        status=_envelope_status(status_code),
        message=message,
        errors=errors,
    )
    return JSONResponse(
        status_code=status_code,
        content=envelope.model_dump(mode="json", exclude_none=True),
    )


async def application_error_handler(
    request: Request,
    exc: ApplicationError,
) -> JSONResponse:
    """
    Handle all ApplicationError subclasses.

    Converts application exceptions to error envelopes
    with appropriate HTTP status codes.
    """
    status_code = EXCEPTION_STATUS_MAP.get(type(exc), 500)
    request_id = _get_request_id(request)

    log_extra = {
        "code": exc.code,
        "error_message": exc.message,
        "status": status_code,
        "path": request.url.path,
        "method": request.method,
    }
    if request_id:
        log_extra["request_id"] = request_id

    if status_code >= 500:
        logger.error("Server error", extra=log_extra)
    else:
        logger.warning("Client error", extra=log_extra)

    errors = None
    if isinstance(exc, ValidationError) and exc.details:
        errors = [
            FieldError(field=field, message=exc.message, type=kind)
            for kind, fields in exc.details.items()
            for field in fields
        ]

    return _error_response(status_code, exc.message, errors)


async def validation_error_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    """
    Handle FastAPI/Pydantic request validation errors.

    Malformed path parameters and bodies are rejected here,
    before any service or repository code runs.
    """
    request_id = _get_request_id(request)

    errors = [
        FieldError(
            field=".".join(str(loc) for loc in err.get("loc", [])),
            message=err.get("msg", "Validation error"),
            type=err.get("type", "unknown"),
        )
        for err in exc.errors()
    ]

    logger.warning(
        "Request validation failed",
        extra={
            "path": request.url.path,
            "method": request.method,
            "error_count": len(errors),
            "request_id": request_id,
        },
    )

    if errors:
        first = errors[0]
        message = f"Invalid {first.field}: {first.message}"
    else:
        message = "Request validation failed"

    return _error_response(422, message, errors)


async def http_exception_handler(
    request: Request,
    exc: StarletteHTTPException,
) -> JSONResponse:
    """Handle routing-level HTTP errors (unknown path, wrong method)."""
    logger.debug(
        "HTTP exception",
        extra={"path": request.url.path, "status": exc.status_code},
    )
    response = _error_response(exc.status_code, str(exc.detail))
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def unhandled_exception_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    """
    Handle unexpected exceptions.

    Logs the full exception and returns a generic error
    without internal details.
    """
    request_id = _get_request_id(request)

    logger.exception(
        "Unhandled exception",
        extra={
            "path": request.url.path,
            "method": request.method,
            "exception_type": type(exc).__name__,
            "request_id": request_id,
        },
    )

    return _error_response(500, "An unexpected error occurred")


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register all exception handlers with the FastAPI app.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(ApplicationError, application_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    logger.debug("Exception handlers registered")
