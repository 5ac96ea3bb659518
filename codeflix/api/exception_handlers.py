"""
Exception handlers for FastAPI application.

This module follows SRP by centralizing all exception handling logic.
Domain errors are reported as `{"message": ..., "errors": [{"message": ...}]}`.
"""

import logging

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from codeflix.core.domain import DomainException, NotFoundException
from codeflix.core.pagination import PaginationException

logger = logging.getLogger(__name__)


def _error_body(message: str, errors: list[dict] | None = None) -> dict:
    return {"message": message, "errors": errors or []}


async def not_found_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle missing aggregates."""
    message = exc.message if isinstance(exc, NotFoundException) else str(exc)
    logger.info(f"Not found on {request.method} {request.url.path}: {message}")
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content=_error_body(message))


async def domain_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle domain validation failures with every collected error."""
    if not isinstance(exc, DomainException):
        return JSONResponse(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, content=_error_body(str(exc)))

    errors = [{"message": error.message} for error in exc.errors]
    logger.warning(f"Domain validation error on {request.url.path}: {exc.message} {errors}")
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=_error_body(exc.message, errors),
    )


async def pagination_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle page requests outside the result set."""
    logger.warning(f"Invalid pagination on {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_error_body(str(exc), [{"message": str(exc)}]),
    )


async def http_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle HTTPException with consistent response format."""
    http_exc = exc if isinstance(exc, HTTPException) else HTTPException(status_code=500, detail=str(exc))
    return JSONResponse(
        status_code=http_exc.status_code,
        content=_error_body(str(http_exc.detail)),
        headers=http_exc.headers,
    )


async def validation_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle request validation errors with detailed error messages."""
    if not isinstance(exc, RequestValidationError):
        return JSONResponse(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, content=_error_body(str(exc)))

    errors = [
        {
            "field": ".".join(str(loc) for loc in error["loc"]),
            "message": error["msg"],
        }
        for error in exc.errors()
    ]

    logger.warning(f"Validation error on {request.url.path}: {errors}")

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=_error_body("Validation error", errors),
    )


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Handle all unhandled exceptions.

    Logs the full exception with traceback and returns a safe error response.
    """
    logger.error(
        f"Unhandled exception on {request.method} {request.url.path}: {exc!s}",
        exc_info=True,
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body("Internal server error"),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register all exception handlers with the FastAPI application.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(NotFoundException, not_found_exception_handler)
    app.add_exception_handler(DomainException, domain_exception_handler)
    app.add_exception_handler(PaginationException, pagination_exception_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)

    logger.info("Exception handlers registered")
