"""Security headers middleware (Helmet-style)."""

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

# Project data changes on every edit; never let intermediaries cache it
_NO_CACHE_PREFIXES = ("/projects", "/files")


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Add security headers to every response.

    Any header can be switched off by passing an empty string for it.
    """

    # CSP for development with Swagger UI: requires inline scripts and CDN assets
    DEFAULT_CSP = (
        "default-src 'self'; "
        "script-src 'self' 'unsafe-inline' cdn.jsdelivr.net; "
        "style-src 'self' 'unsafe-inline' cdn.jsdelivr.net; "
        "img-src 'self' data: cdn.jsdelivr.net; "
        "frame-ancestors 'none'"
    )

    def __init__(
        self,
        app: ASGIApp,
        content_security_policy: str | None = None,
        strict_transport_security: str = "max-age=31536000; includeSubDomains",
        referrer_policy: str = "no-referrer",
    ):
        super().__init__(app)
        candidates = {
            "Content-Security-Policy": (
                content_security_policy
                if content_security_policy is not None
                else self.DEFAULT_CSP
            ),
            "X-Content-Type-Options": "nosniff",
            "X-Frame-Options": "DENY",
            "Strict-Transport-Security": strict_transport_security,
            "Referrer-Policy": referrer_policy,
        }
        self.headers = {name: value for name, value in candidates.items() if value}

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        response = await call_next(request)
        response.headers.update(self.headers)
        if request.url.path.startswith(_NO_CACHE_PREFIXES):
            response.headers["Cache-Control"] = "no-store"
        return response
