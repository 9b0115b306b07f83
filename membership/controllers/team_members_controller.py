# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Controller: TeamMembers API — memberships keyed by /team-members/{member_id}/{team_id}."""
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Request, Response

from membership.core.body import cleaned_body
from membership.core.dependencies import current_role, get_team_member_service, require_auth
from membership.core.formatting import negotiate
from membership.errors import unwrap
from membership.models.entities import TEAM_MEMBER
from membership.services.team_member_service import TeamMemberService

router = APIRouter(prefix="/team-members", tags=["TeamMembers"], dependencies=[Depends(require_auth)])


@router.get("")
def list_team_members(request: Request,
                      service: TeamMemberService = Depends(get_team_member_service)):
    memberships = unwrap(service.list(dict(request.query_params)))
    if not memberships:
        return Response(status_code=204)
    return negotiate(request, memberships, TEAM_MEMBER.collection)


@router.get("/{member_id}/{team_id}")
def get_team_member(member_id: str, team_id: str, request: Request,
                    service: TeamMemberService = Depends(get_team_member_service)):
    return negotiate(request, unwrap(service.get(member_id, team_id)), TEAM_MEMBER.name)


@router.post("")
def create_team_member(request: Request,
                       body: Dict[str, Any] = Depends(cleaned_body),
                       role: Optional[str] = Depends(current_role),
                       service: TeamMemberService = Depends(get_team_member_service)):
    key, membership = unwrap(service.create(role, body))
    return negotiate(request, service.detail(key, membership), TEAM_MEMBER.name, status_code=201,
                     headers={"Location": TEAM_MEMBER.uri(*key)})


@router.patch("/{member_id}/{team_id}")
def update_team_member(member_id: str, team_id: str, request: Request,
                       body: Dict[str, Any] = Depends(cleaned_body),
                       role: Optional[str] = Depends(current_role),
                       service: TeamMemberService = Depends(get_team_member_service)):
    membership = unwrap(service.update(role, member_id, team_id, body=body))
    return negotiate(request, membership, TEAM_MEMBER.name)


@router.delete("/{member_id}/{team_id}")
def delete_team_member(member_id: str, team_id: str, request: Request,
                       role: Optional[str] = Depends(current_role),
                       service: TeamMemberService = Depends(get_team_member_service)):
    return negotiate(request, unwrap(service.delete(role, member_id, team_id)), TEAM_MEMBER.name)
