# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Membership Platform
===================
One process, three sites, dispatched on the request's host:

    api.<domain>    REST API (members, teams, team memberships)
    admin.<domain>  back office (pages + ajax passthrough to the API)
    anything else   public www site

Port: 3000
"""
from contextlib import asynccontextmanager

from starlette.applications import Starlette
from starlette.routing import Host, Mount

from membership.apps import admin, api, www
from membership.core.config import settings
from membership.core.dependencies import (
    close_database, close_http_client, init_database, init_http_client,
)
from membership.core.logging import get_logger

logger = get_logger(__name__)


# ── Lifespan ──────────────────────────────────────────────────────────────
@asynccontextmanager
async def lifespan(application: Starlette):
    """Build the connection pool and HTTP client at startup; release both on shutdown."""
    database = init_database()
    if settings.DB_CREATE_SCHEMA:
        database.create_schema()
        logger.info("Database schema created")
    try:
        database.verify_connection()
        logger.info("Database connection verified")
    except Exception as exc:
        logger.error("Database connection FAILED — service will start but DB calls will fail: %s", exc)
    init_http_client()
    yield
    await close_http_client()
    close_database()
    logger.info("Shutting down — connection pool disposed")


# ── Host dispatch ─────────────────────────────────────────────────────────
app = Starlette(
    routes=[
        Host("api.{domain}", app=api.app, name="api"),
        Host("admin.{domain}", app=admin.app, name="admin"),
        Mount("/", app=www.app, name="www"),
    ],
    lifespan=lifespan,
)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host="0.0.0.0", port=settings.SERVICE_PORT, proxy_headers=settings.TRUST_PROXY)
