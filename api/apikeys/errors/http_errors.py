"""HTTP error types and the JSON error body used by every failure response."""

from typing import Optional, Dict, Any
from http import HTTPStatus

from pydantic import BaseModel, Field
from fastapi import Request
from fastapi.responses import JSONResponse


def reason_phrase(status_code: int) -> str:
    """Return the standard reason phrase for a status code."""
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return "HTTP Error"


class ErrorBody(BaseModel):
    """Error response body: ``{"statusCode", "error", "message"}``."""

    status_code: int = Field(alias="statusCode", description="The HTTP status code")
    error: str = Field(description="Reason phrase for the status code")
    message: str = Field(description="A human-readable explanation of the failure")

    model_config = {"populate_by_name": True}


class HTTPError(Exception):
    """Base exception for error responses."""

    def __init__(
        self,
        status_code: int,
        message: Optional[str] = None,
        headers: Optional[Dict[str, str]] = None
    ):
        self.status_code = status_code
        self.error = reason_phrase(status_code)
        self.message = message or self.error
        self.headers = headers or {}
        super().__init__(self.message)

    def to_body(self) -> Dict[str, Any]:
        """Serialize to the wire error body."""
        return ErrorBody(
            status_code=self.status_code,
            error=self.error,
            message=self.message
        ).model_dump(by_alias=True)

    def to_response(self, request: Optional[Request] = None) -> JSONResponse:
        """Convert to a JSONResponse."""
        return JSONResponse(
            status_code=self.status_code,
            content=self.to_body(),
            headers=self.headers or None
        )


class BadRequestError(HTTPError):
    """400 Bad Request error."""

    def __init__(self, message: str = "Bad Request", **kwargs: Any):
        super().__init__(400, message, **kwargs)


class NotFoundError(HTTPError):
    """404 Not Found error."""

    def __init__(self, message: str = "Not Found", **kwargs: Any):
        super().__init__(404, message, **kwargs)


class InternalServerError(HTTPError):
    """500 Internal Server Error."""

    def __init__(self, message: str = "Internal Server Error", **kwargs: Any):
        super().__init__(500, message, **kwargs)


class ServiceUnavailableError(HTTPError):
    """503 Service Unavailable error."""

    def __init__(self, message: str = "Service temporarily unavailable", **kwargs: Any):
        super().__init__(503, message, **kwargs)


def create_error_response(
    status_code: int,
    message: Optional[str] = None,
    headers: Optional[Dict[str, str]] = None
) -> JSONResponse:
    """Create an error response without raising."""
    return HTTPError(status_code, message, headers=headers).to_response()
