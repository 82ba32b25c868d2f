"""
Custom middleware for the Community Hub backend.

This module provides middleware for request tracking, timing and API path
normalisation.
"""

import time
import uuid
from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from .logging import get_logger

logger = get_logger(__name__)


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Middleware to add unique request IDs to all requests."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get("X-Request-ID", str(uuid.uuid4()))
        request.state.request_id = request_id

        response = await call_next(request)

        response.headers["X-Request-ID"] = request_id
        return response


class TimingMiddleware(BaseHTTPMiddleware):
    """Log every request with its duration and expose it as a response header."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.perf_counter()

        response = await call_next(request)

        duration = time.perf_counter() - start_time
        response.headers["X-Response-Time"] = f"{duration:.3f}s"

        logger.info(
            "Request processed",
            extra={
                "method": request.method,
                "path": request.url.path,
                "status_code": response.status_code,
                "duration_ms": round(duration * 1000, 2),
                "request_id": getattr(request.state, "request_id", "unknown"),
            },
        )
        return response


class StripAPITrailingSlashMiddleware(BaseHTTPMiddleware):
    """Normalize API paths to avoid 307 redirects.

    Rule: for all API paths, remove a trailing slash (except the exact API prefix),
    so both '/api/plugins' and '/api/plugins/' resolve to the same handler.
    """

    def __init__(self, app, api_prefix: str):
        super().__init__(app)
        self.api_prefix = api_prefix.rstrip("/")

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        path = request.scope.get("path", "")
        if not path.startswith(self.api_prefix + "/"):
            return await call_next(request)

        if path.endswith("/"):
            normalized = path.rstrip("/")
            if normalized != self.api_prefix:
                request.scope["path"] = normalized
        return await call_next(request)
