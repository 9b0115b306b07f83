# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
HTTP Middleware — static files, access logging, security headers,
SSL enforcement and admin sign-in.
"""

import os
import time
from typing import Optional
from urllib.parse import quote

from fastapi import Request
from fastapi.responses import FileResponse, JSONResponse, PlainTextResponse, RedirectResponse
from starlette.middleware.base import BaseHTTPMiddleware

from membership.core.config import settings
from membership.core.logging import get_logger
from membership.metrics import HTTP_ERRORS, REQUEST_COUNT, REQUEST_LATENCY

logger = get_logger(__name__)

SKIP_PATHS: tuple[str, ...] = ("/health", "/health/ready", "/metrics")


class StaticFilesMiddleware:
    """Serve files that exist under the static directory before anything else runs."""

    def __init__(self, app, directory: str = settings.STATIC_DIR, max_age: Optional[int] = None):
        self.app = app
        self.root = os.path.realpath(directory)
        self.max_age = settings.STATIC_MAX_AGE if max_age is None else max_age

    def lookup(self, url_path: str) -> Optional[str]:
        candidate = os.path.realpath(os.path.join(self.root, url_path.lstrip("/")))
        if not candidate.startswith(self.root + os.sep):
            return None
        return candidate if os.path.isfile(candidate) else None

    async def __call__(self, scope, receive, send):
        if scope["type"] == "http" and scope["method"] in ("GET", "HEAD"):
            path = self.lookup(scope["path"])
            if path:
                response = FileResponse(path, headers={"Cache-Control": f"public, max-age={self.max_age}"})
                await response(scope, receive, send)
                return
        await self.app(scope, receive, send)


class AccessLogMiddleware(BaseHTTPMiddleware):
    """Log and count every request, including those that fail."""

    def __init__(self, app, app_name: str):
        super().__init__(app)
        self.app_name = app_name

    async def dispatch(self, request: Request, call_next):
        start = time.perf_counter()
        status = 500
        try:
            response = await call_next(request)
            status = response.status_code
            return response
        finally:
            duration = time.perf_counter() - start
            logger.info("%s %-4s %s %d %.0fms", self.app_name, request.method,
                        request.url.path, status, duration * 1000)
            if request.url.path not in SKIP_PATHS:
                REQUEST_COUNT.labels(app=self.app_name, method=request.method, status=str(status)).inc()
                REQUEST_LATENCY.labels(app=self.app_name, method=request.method).observe(duration)
                if status >= 400:
                    HTTP_ERRORS.labels(app=self.app_name, method=request.method, status=str(status)).inc()


def security_headers(trusted_cdns: str = settings.CSP_TRUSTED_CDNS) -> dict[str, str]:
    policy = f"default-src 'self' 'unsafe-inline' {trusted_cdns}".strip()
    return {
        "content-security-policy": policy,
        "x-content-type-options": "nosniff",
        "strict-transport-security": "max-age=31536000; includeSubDomains",
        "x-frame-options": "SAMEORIGIN",
        "x-xss-protection": "1; mode=block",
        "referrer-policy": "strict-origin-when-cross-origin",
    }


class SecurityHeadersMiddleware:
    def __init__(self, app, trusted_cdns: str = settings.CSP_TRUSTED_CDNS):
        self.app = app
        self.headers = [(k.encode(), v.encode()) for k, v in security_headers(trusted_cdns).items()]

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        async def send_with_headers(message):
            if message["type"] == "http.response.start":
                message.setdefault("headers", [])
                message["headers"] = list(message["headers"]) + self.headers
            await send(message)

        await self.app(scope, receive, send_with_headers)


class SslMiddleware(BaseHTTPMiddleware):
    """
    Force https: plaintext GET/HEAD are redirected (301) to the https URL,
    anything else is refused (403). With trust_proxy, X-Forwarded-Proto
    from a terminating proxy counts as secure.
    """

    def __init__(self, app, disabled: bool = settings.SSL_DISABLED,
                 trust_proxy: bool = settings.TRUST_PROXY):
        super().__init__(app)
        self.disabled = disabled
        self.trust_proxy = trust_proxy

    def is_secure(self, request: Request) -> bool:
        if request.url.scheme == "https":
            return True
        return self.trust_proxy and request.headers.get("x-forwarded-proto") == "https"

    async def dispatch(self, request: Request, call_next):
        if self.disabled or self.is_secure(request):
            return await call_next(request)
        if request.method in ("GET", "HEAD"):
            return RedirectResponse(str(request.url.replace(scheme="https")), status_code=301)
        return PlainTextResponse("Forbidden", status_code=403)


class AdminAuthMiddleware(BaseHTTPMiddleware):
    """Everything on the admin site except /login needs a signed-in session."""

    PUBLIC_PATHS: tuple[str, ...] = ("/login", "/logout")

    async def dispatch(self, request: Request, call_next):
        from membership.core.dependencies import get_auth_service

        path = request.url.path
        if path in self.PUBLIC_PATHS:
            return await call_next(request)

        auth = request.session.get("auth")
        if auth and get_auth_service().verify_token(auth.get("jwt")) is not None:
            return await call_next(request)
        if auth:
            logger.info("Admin session for %s expired", auth.get("email"))
            request.session.pop("auth", None)

        if path.startswith("/ajax/"):
            return JSONResponse({"message": "Not signed in"}, status_code=401)
        target = path + (f"?{request.url.query}" if request.url.query else "")
        return RedirectResponse(f"/login?next={quote(target, safe='')}", status_code=302)
