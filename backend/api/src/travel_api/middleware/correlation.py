"""Correlation ID middleware for request tracing.

Takes the ``X-Correlation-ID`` request header (or generates an ID), keeps it
current for the rest of the request so every log line carries it, echoes it
on the response and writes one access log line.
"""

import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from travel_shared.utils.logging import correlation_scope, get_logger, log_request

CORRELATION_ID_HEADER = "X-Correlation-ID"

logger = get_logger(__name__)


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Attach a correlation ID to each request and its response."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        with correlation_scope(request.headers.get(CORRELATION_ID_HEADER)) as correlation_id:
            started = time.perf_counter()
            response = await call_next(request)
            response.headers[CORRELATION_ID_HEADER] = correlation_id

            log_request(
                logger,
                request.method,
                request.url.path,
                response.status_code,
                (time.perf_counter() - started) * 1000,
            )
            return response
