# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
'api' app — RESTful JSON / XML / YAML / text access to members, teams and memberships.

Requests carry a Bearer JWT obtained from GET /auth.
"""
from fastapi import FastAPI
from starlette.middleware import Middleware

from membership.controllers import (
    auth_controller, members_controller, system_controller,
    team_members_controller, teams_controller,
)
from membership.core.config import settings
from membership.errors import install_api_errors
from membership.middleware import AccessLogMiddleware, SslMiddleware


def create_app() -> FastAPI:
    app = FastAPI(
        title="Membership — API",
        description="Members, teams and team memberships.",
        version=settings.SERVICE_VERSION,
        middleware=[
            Middleware(AccessLogMiddleware, app_name="api"),
            Middleware(SslMiddleware),
        ],
    )
    install_api_errors(app)

    app.include_router(system_controller.router)
    app.include_router(auth_controller.router)
    app.include_router(members_controller.router)
    app.include_router(teams_controller.router)
    app.include_router(team_members_controller.router)
    return app


app = create_app()
