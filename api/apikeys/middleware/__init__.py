"""HTTP middleware for the API Key Directory service."""

from .request_timing import RequestTimingMiddleware

__all__ = ["RequestTimingMiddleware"]
