"""
Centralized error handlers for FastAPI.

Maps domain errors to HTTP responses through the error mapper.
No stack traces or internal details are exposed to clients.
All error responses use the ``{"message": ..., "code": ...}`` body.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from terra_discover.application.error_mapping import ErrorBody, describe_error
from terra_discover.domain.errors import DomainError, ErrorKind, PersistenceError

logger = logging.getLogger(__name__)

INVALID_INPUT_PREFIX = "Invalid input data provided"


def _error_response(body: ErrorBody) -> JSONResponse:
    """Build a consistent JSON error response."""
    return JSONResponse(status_code=body.code, content=body.as_dict())


def _first_validation_problem(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return f"{INVALID_INPUT_PREFIX}."
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    detail = first.get("msg", "")
    if location:
        return f"{INVALID_INPUT_PREFIX}: {location}: {detail}"
    return f"{INVALID_INPUT_PREFIX}: {detail}"


def register_error_handlers(app: FastAPI) -> None:
    """Register all error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(DomainError)
    async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
        """Render any domain error from its kind."""
        body = describe_error(exc)
        if body.kind is ErrorKind.UNEXPECTED:
            logger.error(
                "Unexpected failure on %s %s: %s",
                request.method,
                request.url.path,
                exc.message,
                exc_info=exc,
            )
        else:
            logger.warning(
                "%s on %s %s: %s", body.kind.name, request.method, request.url.path, body.message
            )
        return _error_response(body)

    @app.exception_handler(PersistenceError)
    async def handle_persistence_error(
        request: Request, exc: PersistenceError
    ) -> JSONResponse:
        """Persistence errors that escaped a use case untranslated."""
        logger.error(
            "Persistence failure on %s: %s", request.url.path, exc.message, exc_info=exc
        )
        return _error_response(describe_error(exc))

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        _request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Malformed bodies and parameters are ValidationFailed, not 422."""
        message = _first_validation_problem(exc)
        logger.warning("Request validation failed: %s", message)
        return _error_response(ErrorBody(kind=ErrorKind.VALIDATION_FAILED, message=message))

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(
        _request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        """Routing errors (unknown path, wrong method) keep the error body shape."""
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": str(exc.detail), "code": exc.status_code},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected(_request: Request, exc: Exception) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return _error_response(describe_error(exc))
