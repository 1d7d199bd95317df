"""Error handling module for the API Key Directory service."""

from .http_errors import (
    ErrorBody,
    HTTPError,
    BadRequestError,
    NotFoundError,
    InternalServerError,
    ServiceUnavailableError,
    create_error_response,
    reason_phrase
)
from .handlers import register_exception_handlers

__all__ = [
    "ErrorBody",
    "HTTPError",
    "BadRequestError",
    "NotFoundError",
    "InternalServerError",
    "ServiceUnavailableError",
    "create_error_response",
    "reason_phrase",
    "register_exception_handlers"
]
