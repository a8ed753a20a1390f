"""Security headers middleware for cxplan.

Adds security headers to all responses per OWASP recommendations:
- X-Content-Type-Options: nosniff
- X-Frame-Options: DENY
- Referrer-Policy: no-referrer
- Cache-Control: no-store (partner-specific payloads must not be cached)
- Strict-Transport-Security (HSTS) - optional
- Content-Security-Policy (CSP) - optional
"""

from __future__ import annotations

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

# Default CSP for API-only applications
DEFAULT_API_CSP = "default-src 'none'; frame-ancestors 'none'"


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Middleware to add security headers to all responses.

    Args:
        app: The ASGI application
        enable_hsts: Whether to add HSTS header (should only be enabled with HTTPS)
        hsts_max_age: Max-age for HSTS in seconds (default: 1 year)
        hsts_include_subdomains: Include subdomains in HSTS
        hsts_preload: Add preload directive to HSTS
        csp_policy: Content-Security-Policy value (None to disable)
    """

    def __init__(
        self,
        app: ASGIApp,
        enable_hsts: bool = False,
        hsts_max_age: int = 31536000,
        hsts_include_subdomains: bool = True,
        hsts_preload: bool = False,
        csp_policy: str | None = DEFAULT_API_CSP,
    ) -> None:
        super().__init__(app)
        self.csp_policy = csp_policy

        if enable_hsts:
            hsts_parts = [f"max-age={hsts_max_age}"]
            if hsts_include_subdomains:
                hsts_parts.append("includeSubDomains")
            if hsts_preload:
                hsts_parts.append("preload")
            self._hsts_value: str | None = "; ".join(hsts_parts)
        else:
            self._hsts_value = None

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        """Add security headers to the response."""
        response = await call_next(request)

        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "no-referrer"
        response.headers.setdefault("Cache-Control", "no-store")

        if self._hsts_value:
            response.headers["Strict-Transport-Security"] = self._hsts_value

        if self.csp_policy:
            response.headers["Content-Security-Policy"] = self.csp_policy

        return response
