"""Exception handlers for the API Key Directory service."""

import logging
from typing import Union
from fastapi import Request, HTTPException
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from .http_errors import HTTPError, create_error_response

logger = logging.getLogger(__name__)


async def http_error_handler(
    request: Request,
    exc: HTTPError
) -> JSONResponse:
    """Handle HTTPError instances raised by routes."""
    logger.info(
        f"HTTP error: {exc.status_code} - {exc.message}",
        extra={
            "status_code": exc.status_code,
            "path": str(request.url.path),
            "method": request.method
        }
    )
    return exc.to_response(request)


async def http_exception_handler(
    request: Request,
    exc: Union[HTTPException, StarletteHTTPException]
) -> JSONResponse:
    """Handle FastAPI and Starlette HTTPException (unknown routes, bad methods)."""
    logger.info(
        f"HTTP exception: {exc.status_code} - {exc.detail}",
        extra={
            "status_code": exc.status_code,
            "path": str(request.url.path),
            "method": request.method
        }
    )

    message = str(exc.detail) if exc.detail else None
    headers = dict(exc.headers) if getattr(exc, "headers", None) else None

    return create_error_response(exc.status_code, message, headers=headers)


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """Handle request validation errors as 400 responses."""
    logger.info(
        f"Validation error: {len(exc.errors())} errors",
        extra={
            "path": str(request.url.path),
            "method": request.method,
            "errors": exc.errors()
        }
    )

    error_messages = []
    for error in exc.errors():
        loc = " -> ".join(str(x) for x in error["loc"])
        error_messages.append(f"{loc}: {error['msg']}")

    return create_error_response(400, "Validation failed: " + "; ".join(error_messages))


async def general_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """Handle unexpected exceptions."""
    logger.error(
        f"Unhandled exception: {type(exc).__name__} - {str(exc)}",
        extra={
            "path": str(request.url.path),
            "method": request.method,
            "exception_type": type(exc).__name__
        },
        exc_info=True
    )

    # Internal error details never reach the caller
    return create_error_response(500, "An unexpected error occurred.")


def register_exception_handlers(app):
    """Register all exception handlers with the FastAPI app."""

    app.add_exception_handler(HTTPError, http_error_handler)

    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)

    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    # Catch-all for unexpected exceptions
    app.add_exception_handler(Exception, general_exception_handler)
