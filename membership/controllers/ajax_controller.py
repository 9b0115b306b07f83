# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Controller: admin ajax — RESTful calls relayed to the API with the session's JWT."""
from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import PlainTextResponse

from membership.core.body import cleaned_body
from membership.core.dependencies import get_passthrough_service
from membership.core.templating import session_auth

router = APIRouter(tags=["Admin: Ajax"])


@router.api_route("/ajax/{path:path}", methods=["GET", "POST", "PUT", "PATCH", "DELETE"])
async def ajax_api_passthrough(path: str, request: Request):
    try:
        body = await cleaned_body(request)
    except HTTPException as exc:
        return PlainTextResponse(str(exc.detail), status_code=500)
    token = (session_auth(request) or {}).get("jwt")
    return await get_passthrough_service().relay(request, path, body, token)
