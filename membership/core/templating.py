# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Page rendering — Jinja2 templates per site (admin, www).

Every template sees request, flash (messages popped from the session),
auth (the signed-in user, if any) and domain (host without www./admin.).
"""
import os
from typing import Any, Dict, Optional

from fastapi import Request
from fastapi.templating import Jinja2Templates

from membership.core.flash import pop_flash

TEMPLATES_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "templates")


def site_domain(host: str) -> str:
    for prefix in ("www.", "admin."):
        if host.startswith(prefix):
            return host[len(prefix):]
    return host


def session_auth(request: Request) -> Optional[Dict[str, Any]]:
    if "session" not in request.scope:
        return None
    return request.session.get("auth")


def session_role(request: Request) -> Optional[str]:
    auth = session_auth(request)
    return auth.get("role") if auth else None


class PageRenderer:
    def __init__(self, site: str):
        self.site = site
        self._templates = Jinja2Templates(directory=os.path.join(TEMPLATES_DIR, site))

    def render(self, request: Request, name: str, status_code: int = 200, **context: Any):
        base = {
            "flash": pop_flash(request),
            "auth": session_auth(request),
            "domain": site_domain(request.headers.get("host", "")),
        }
        return self._templates.TemplateResponse(
            request, f"{name}.html", {**base, **context}, status_code=status_code
        )


admin_pages = PageRenderer("admin")
www_pages = PageRenderer("www")
