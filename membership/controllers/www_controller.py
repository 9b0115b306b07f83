# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Controller: public www pages."""
from fastapi import APIRouter, Request

from membership.core.templating import www_pages

router = APIRouter(tags=["www"])


@router.get("/")
def index(request: Request):
    return www_pages.render(request, "index")
