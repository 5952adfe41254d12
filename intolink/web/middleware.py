"""Request logging middleware."""

import time
import logging
from collections.abc import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request


class LoggingMiddleware(BaseHTTPMiddleware):
    """Log one line per request with method, path, status and duration."""

    def __init__(self, app, logger: logging.Logger | None = None):
        super().__init__(app)
        self.logger = logger or logging.getLogger('intolink.web')

    async def dispatch(self, request: Request, call_next: Callable):
        start_time = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start_time) * 1000

        self.logger.info(
            'Handled request.',
            extra={
                'method': request.method,
                'path': request.url.path,
                'status': response.status_code,
                'durationMs': round(duration_ms, 2),
                'client': request.client.host if request.client else None,
            },
        )
        return response
