# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""'www' app — publicly available parts of the site."""
from fastapi import FastAPI
from starlette.middleware import Middleware
from starlette.middleware.sessions import SessionMiddleware

from membership.controllers import www_controller
from membership.core.config import settings
from membership.core.templating import www_pages
from membership.errors import install_page_errors
from membership.middleware import (
    AccessLogMiddleware, SecurityHeadersMiddleware, SslMiddleware, StaticFilesMiddleware,
)


def create_app() -> FastAPI:
    app = FastAPI(
        title="Membership — www",
        version=settings.SERVICE_VERSION,
        docs_url=None, redoc_url=None, openapi_url=None,
        middleware=[
            Middleware(StaticFilesMiddleware),
            Middleware(AccessLogMiddleware, app_name="www"),
            Middleware(SessionMiddleware, secret_key=settings.SESSION_SECRET,
                       session_cookie="membership-www", max_age=settings.SESSION_MAX_AGE,
                       https_only=not settings.SSL_DISABLED),
            Middleware(SecurityHeadersMiddleware),
            Middleware(SslMiddleware),
        ],
    )
    install_page_errors(app, www_pages)
    app.include_router(www_controller.router)
    return app


app = create_app()
