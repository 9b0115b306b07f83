# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Controller: Teams API — list, get, create, update, delete."""
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Request, Response

from membership.core.body import cleaned_body
from membership.core.dependencies import current_role, get_team_service, require_auth
from membership.core.formatting import negotiate
from membership.errors import unwrap
from membership.models.entities import TEAM
from membership.services.team_service import TeamService

router = APIRouter(tags=["Teams"], dependencies=[Depends(require_auth)])


@router.get("/teams")
def list_teams(request: Request, service: TeamService = Depends(get_team_service)):
    teams = unwrap(service.list(dict(request.query_params)))
    if not teams:
        return Response(status_code=204)
    return negotiate(request, teams, TEAM.collection)


@router.get("/teams/{team_id}")
def get_team(team_id: str, request: Request, service: TeamService = Depends(get_team_service)):
    return negotiate(request, unwrap(service.get(team_id)), TEAM.name)


@router.post("/teams")
def create_team(request: Request,
                body: Dict[str, Any] = Depends(cleaned_body),
                role: Optional[str] = Depends(current_role),
                service: TeamService = Depends(get_team_service)):
    key, team = unwrap(service.create(role, body))
    return negotiate(request, team, TEAM.name, status_code=201, headers={"Location": TEAM.uri(*key)})


@router.patch("/teams/{team_id}")
def update_team(team_id: str, request: Request,
                body: Dict[str, Any] = Depends(cleaned_body),
                role: Optional[str] = Depends(current_role),
                service: TeamService = Depends(get_team_service)):
    return negotiate(request, unwrap(service.update(role, team_id, body=body)), TEAM.name)


@router.delete("/teams/{team_id}")
def delete_team(team_id: str, request: Request,
                role: Optional[str] = Depends(current_role),
                service: TeamService = Depends(get_team_service)):
    return negotiate(request, unwrap(service.delete(role, team_id)), TEAM.name)
