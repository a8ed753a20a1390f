"""Correlation context middleware for request tracing.

Propagates correlation IDs and request context to the logging system.
"""

from __future__ import annotations

import uuid

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from cxplan.observability.logging import LogContext


class CorrelationMiddleware(BaseHTTPMiddleware):
    """Middleware for propagating correlation context.

    Extracts or generates correlation IDs and propagates them to:
    - Request state (for use in handlers)
    - Context variables (for logging)
    - Response headers (for client correlation)

    Headers:
    - x-request-id: Unique ID for this request
    - x-correlation-id: ID for tracking across services (passed through)
    """

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        """Extract and propagate correlation context."""
        request_id = request.headers.get("x-request-id") or str(uuid.uuid4())
        correlation_id = (
            request.headers.get("x-correlation-id")
            or request.headers.get("x-correlationid")  # Alternate format
            or request_id
        )

        with LogContext(request_id=request_id, correlation_id=correlation_id):
            request.state.request_id = request_id
            request.state.correlation_id = correlation_id

            response = await call_next(request)

            response.headers["x-request-id"] = request_id
            response.headers["x-correlation-id"] = correlation_id
            return response
