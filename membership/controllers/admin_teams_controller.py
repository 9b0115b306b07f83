# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Controller: admin pages for teams."""
from typing import Any, Dict

from fastapi import APIRouter, Depends, Request
from fastapi.responses import RedirectResponse

from membership.core.body import cleaned_body
from membership.core.dependencies import get_team_service
from membership.core.flash import flash
from membership.core.templating import admin_pages, session_role
from membership.errors import unwrap
from membership.services.team_service import TeamService

router = APIRouter(prefix="/teams", tags=["Admin: Teams"])


@router.get("")
def list_teams(request: Request, service: TeamService = Depends(get_team_service)):
    teams = unwrap(service.browse(dict(request.query_params)))
    return admin_pages.render(request, "teams-list", teams=teams)


@router.get("/add")
def add_team(request: Request):
    return admin_pages.render(request, "teams-add", team={})


@router.post("/add")
def process_add_team(request: Request,
                     body: Dict[str, Any] = Depends(cleaned_body),
                     service: TeamService = Depends(get_team_service)):
    result = service.create(session_role(request), body)
    if not result.ok:
        flash(request, result.message)
        return RedirectResponse("/teams/add", status_code=303)
    _, team = result.value
    flash(request, f"Team ‘{team['Name']}’ added")
    return RedirectResponse("/teams", status_code=303)


@router.get("/{team_id}")
def view_team(team_id: str, request: Request, service: TeamService = Depends(get_team_service)):
    team = unwrap(service.get(team_id))
    members = service.memberships(team["_id"])
    return admin_pages.render(request, "teams-view", team=team, members=members)


@router.get("/{team_id}/edit")
def edit_team(team_id: str, request: Request, service: TeamService = Depends(get_team_service)):
    return admin_pages.render(request, "teams-edit", team=unwrap(service.get(team_id)))


@router.post("/{team_id}/edit")
def process_edit_team(team_id: str, request: Request,
                      body: Dict[str, Any] = Depends(cleaned_body),
                      service: TeamService = Depends(get_team_service)):
    result = service.update(session_role(request), team_id, body=body)
    if not result.ok:
        flash(request, result.message)
        return RedirectResponse(f"/teams/{team_id}/edit", status_code=303)
    flash(request, f"Team ‘{result.value['Name']}’ updated")
    return RedirectResponse("/teams", status_code=303)


@router.get("/{team_id}/delete")
def delete_team(team_id: str, request: Request, service: TeamService = Depends(get_team_service)):
    return admin_pages.render(request, "teams-delete", team=unwrap(service.get(team_id)))


@router.post("/{team_id}/delete")
def process_delete_team(team_id: str, request: Request,
                        service: TeamService = Depends(get_team_service)):
    result = service.delete(session_role(request), team_id)
    if not result.ok:
        flash(request, result.message)
        return RedirectResponse(f"/teams/{team_id}/delete", status_code=303)
    flash(request, f"Team ‘{result.value['Name']}’ deleted")
    return RedirectResponse("/teams", status_code=303)
