# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Controller: admin home, sign-in and sign-out."""
from typing import Any, Dict, Optional
from urllib.parse import quote

from fastapi import APIRouter, Depends, Request
from fastapi.responses import RedirectResponse

from membership.core.body import cleaned_body
from membership.core.dependencies import get_auth_service
from membership.core.flash import flash
from membership.core.templating import admin_pages
from membership.services.auth_service import AuthService

router = APIRouter(tags=["Admin: Auth"])


def _safe_next(target: Optional[str]) -> str:
    """Local paths only; anything else lands on the home page."""
    if target and target.startswith("/") and not target.startswith("//"):
        return target
    return "/"


@router.get("/")
def index(request: Request):
    return admin_pages.render(request, "index")


@router.get("/login")
def login(request: Request, next: Optional[str] = None):
    return admin_pages.render(request, "login", next=_safe_next(next))


@router.post("/login")
def process_login(request: Request,
                  body: Dict[str, Any] = Depends(cleaned_body),
                  auth: AuthService = Depends(get_auth_service)):
    target = _safe_next(body.get("next") or request.query_params.get("next"))
    result = auth.login(body.get("email"), body.get("password"))
    if not result.ok:
        flash(request, result.message)
        return RedirectResponse(f"/login?next={quote(target, safe='')}", status_code=303)
    request.session["auth"] = result.value
    return RedirectResponse(target, status_code=303)


@router.get("/logout")
def logout(request: Request):
    request.session.pop("auth", None)
    return RedirectResponse("/", status_code=303)
