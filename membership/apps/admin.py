# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
'admin' app — password-protected back office.

Middleware runs outermost first: static files, access log, session (flash
and sign-in), security headers, SSL, sign-in check; then routing.
"""
from fastapi import FastAPI
from starlette.middleware import Middleware
from starlette.middleware.sessions import SessionMiddleware

from membership.controllers import (
    admin_auth_controller, admin_members_controller, admin_teams_controller, ajax_controller,
)
from membership.core.config import settings
from membership.core.templating import admin_pages
from membership.errors import install_page_errors
from membership.middleware import (
    AccessLogMiddleware, AdminAuthMiddleware, SecurityHeadersMiddleware,
    SslMiddleware, StaticFilesMiddleware,
)


def create_app() -> FastAPI:
    app = FastAPI(
        title="Membership — Admin",
        version=settings.SERVICE_VERSION,
        docs_url=None, redoc_url=None, openapi_url=None,
        middleware=[
            Middleware(StaticFilesMiddleware),
            Middleware(AccessLogMiddleware, app_name="admin"),
            Middleware(SessionMiddleware, secret_key=settings.SESSION_SECRET,
                       session_cookie="membership-admin", max_age=settings.SESSION_MAX_AGE,
                       https_only=not settings.SSL_DISABLED),
            Middleware(SecurityHeadersMiddleware),
            Middleware(SslMiddleware),
            Middleware(AdminAuthMiddleware),
        ],
    )
    install_page_errors(app, admin_pages)

    app.include_router(admin_auth_controller.router)
    app.include_router(ajax_controller.router)
    app.include_router(admin_members_controller.router)
    app.include_router(admin_teams_controller.router)
    return app


app = create_app()
