# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""System endpoints — API info, health, readiness, metrics."""
from fastapi import APIRouter, HTTPException, Request
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from membership.core.config import settings
from membership.core.dependencies import get_database
from membership.core.formatting import negotiate

router = APIRouter(tags=["System"])


@router.get("/")
def api_info(request: Request):
    info = {
        "name": settings.SERVICE_NAME,
        "version": settings.SERVICE_VERSION,
        "resources": ["/auth", "/members", "/teams", "/team-members"],
    }
    return negotiate(request, info, "Api")


@router.get("/health")
def health_check():
    return {"status": "ok", "service": settings.SERVICE_NAME}


@router.get("/health/ready")
def readiness_check():
    try:
        get_database().verify_connection()
        return {"status": "ok", "database": "connected"}
    except Exception as exc:
        raise HTTPException(status_code=503, detail=f"Database unavailable: {exc}")


@router.get("/metrics")
def prometheus_metrics():
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
