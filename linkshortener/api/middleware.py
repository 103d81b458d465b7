"""Request logging middleware."""

import time
import logging
from collections.abc import Awaitable, Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log one line per request: method, path, status and duration."""

    def __init__(self, app, logger: logging.Logger | None = None):
        super().__init__(app)
        self.logger = logger or logging.getLogger('linkshortener.api.access')

    async def dispatch(self, request: Request, call_next: Callable[[Request], Awaitable[Response]]) -> Response:
        start = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start) * 1000

        self.logger.info(
            '%s %s %s',
            request.method,
            request.url.path,
            response.status_code,
            extra={
                'method': request.method,
                'path': request.url.path,
                'status': response.status_code,
                'durationMs': round(duration_ms, 2),
                'client': request.client.host if request.client else None,
            },
        )
        return response
