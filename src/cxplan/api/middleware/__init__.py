"""Middleware for the cxplan API.

- Security headers (HSTS, CSP, X-Frame-Options, etc.)
- Correlation context for request tracing
"""

from cxplan.api.middleware.correlation import CorrelationMiddleware
from cxplan.api.middleware.security_headers import SecurityHeadersMiddleware

__all__ = [
    "CorrelationMiddleware",
    "SecurityHeadersMiddleware",
]
