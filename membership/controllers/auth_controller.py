# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Controller: API authentication — exchange Basic credentials for a JWT."""
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.security import HTTPBasic, HTTPBasicCredentials

from membership.core.dependencies import get_auth_service
from membership.core.formatting import negotiate
from membership.services.auth_service import AuthService

router = APIRouter(tags=["Auth"])
_basic = HTTPBasic(auto_error=False)


@router.get("/auth")
def get_auth(request: Request,
             credentials: Optional[HTTPBasicCredentials] = Depends(_basic),
             auth: AuthService = Depends(get_auth_service)):
    if credentials is None:
        raise HTTPException(status_code=401, detail="Basic auth credentials required",
                            headers={"WWW-Authenticate": "Basic"})
    result = auth.login(credentials.username, credentials.password)
    if not result.ok:
        raise HTTPException(status_code=401, detail=result.message,
                            headers={"WWW-Authenticate": "Basic"})
    return negotiate(request, {"jwt": result.value["jwt"]}, "Auth")
