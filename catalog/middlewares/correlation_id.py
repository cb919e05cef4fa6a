"""
Middleware for request correlation ID tracking.

Every request handled by the catalog gets a short correlation ID that is
echoed back to the client and stamped on each log line of the request.
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

CORRELATION_ID_HEADER = "X-Correlation-ID"
CORRELATION_ID_LENGTH = 8

correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


class CorrelationIDMiddleware(BaseHTTPMiddleware):
    """
    Middleware to add correlation IDs to requests.

    This middleware:
    - Reuses the X-Correlation-ID request header or generates a new ID
    - Truncates the ID to 8 characters
    - Stores it in request.state.request_id and in a context variable
    - Adds it to the response headers
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        cid = request.headers.get(
            CORRELATION_ID_HEADER, uuid.uuid4().hex
        )[:CORRELATION_ID_LENGTH]

        request.state.request_id = cid
        token = correlation_id.set(cid)
        try:
            response = await call_next(request)
        finally:
            correlation_id.reset(token)

        response.headers[CORRELATION_ID_HEADER] = cid
        return response


def get_correlation_id() -> str:
    """
    Get the correlation ID for the current request context.

    Returns:
        The correlation ID string, or empty string if not set.
    """
    return correlation_id.get()
