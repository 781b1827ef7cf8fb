"""Correlation id propagation."""

from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from catalog_api.core.context import new_correlation_id

CORRELATION_HEADER = "X-Correlation-ID"


def get_correlation_id(request: Request) -> str:
    """Correlation id set by CorrelationMiddleware, or the inbound header."""
    correlation_id = getattr(request.state, "correlation_id", None)
    return correlation_id or request.headers.get(CORRELATION_HEADER) or new_correlation_id()


class CorrelationMiddleware(BaseHTTPMiddleware):
    """Read X-Correlation-ID (or generate one) and echo it on the response."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        correlation_id = request.headers.get(CORRELATION_HEADER) or new_correlation_id()
        request.state.correlation_id = correlation_id

        response = await call_next(request)
        response.headers[CORRELATION_HEADER] = correlation_id
        return response
