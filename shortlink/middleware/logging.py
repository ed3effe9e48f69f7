"""
Request logging middleware for FastAPI using Loguru.

Each request gets an ``X-Request-ID`` and one log line at the custom
REQUEST level with method, path, status and processing time.
"""

import time
import uuid
from contextvars import ContextVar

from fastapi import Request, Response
from loguru import logger
from starlette.middleware.base import BaseHTTPMiddleware

from shortlink.core.logging import REQUEST_LEVEL

# Context variable to store request ID across async context
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


class LoggingMiddleware(BaseHTTPMiddleware):
    """Log every request with its ID, status and latency."""

    async def dispatch(self, request: Request, call_next) -> Response:
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        request_id_var.set(request_id)

        start_time = time.time()
        response = await call_next(request)
        process_time = time.time() - start_time

        # Add request ID to response headers for traceability
        response.headers["X-Request-ID"] = request_id

        logger.bind(
            request_id=request_id,
            client_host=request.client.host if request.client else None,
        ).log(
            REQUEST_LEVEL,
            "{method} {path} {status_code} {process_time_ms}ms",
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            process_time_ms=round(process_time * 1000, 2),
        )

        return response
