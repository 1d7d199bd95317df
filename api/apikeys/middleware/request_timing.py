"""Request timing middleware."""

import logging
import time
from starlette.middleware.base import BaseHTTPMiddleware
from fastapi import Request

logger = logging.getLogger(__name__)


class RequestTimingMiddleware(BaseHTTPMiddleware):
    """Log how long each request took and expose it as ``X-Response-Time``."""

    async def dispatch(self, request: Request, call_next):
        """Time the downstream call and annotate the response."""
        start = time.perf_counter()

        response = await call_next(request)

        elapsed_ms = (time.perf_counter() - start) * 1000
        response.headers["X-Response-Time"] = f"{elapsed_ms:.1f}ms"
        logger.info(
            f"Request {request.method}:{request.url.path} completed in {elapsed_ms:.0f}ms",
            extra={
                "method": request.method,
                "path": str(request.url.path),
                "status_code": response.status_code,
                "response_time_ms": elapsed_ms
            }
        )
        return response
