"""
Middleware for injecting contextual fields into structured logs.

Adds the request path and method to the log context for the duration of
the request and logs one access line with status and duration when the
response is ready.
"""

import time

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from catalog.logging import clear_log_context, logger, set_log_context


class LoggingContextMiddleware(BaseHTTPMiddleware):  # type: ignore[misc]
    """
    Middleware to inject contextual fields into structured logs.

    This middleware:
    - Adds endpoint and method to log context
    - Adds status_code and duration_ms once the handler returns
    - Clears log context after request completes
    """

    async def dispatch(self, request: Request, call_next: ASGIApp) -> Response:
        set_log_context(
            endpoint=request.url.path,
            method=request.method,
        )
        started = time.perf_counter()

        try:
            response = await call_next(request)

            set_log_context(
                status_code=response.status_code,
                duration_ms=round((time.perf_counter() - started) * 1000, 2),
            )
            logger.info(f"{request.method} {request.url.path}")
            return response
        finally:
            clear_log_context()
