# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Controller: Members API — list, get, create, update, delete."""
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Request, Response

from membership.core.body import cleaned_body
from membership.core.dependencies import current_role, get_member_service, require_auth
from membership.core.formatting import negotiate
from membership.errors import unwrap
from membership.models.entities import MEMBER
from membership.services.member_service import MemberService

router = APIRouter(tags=["Members"], dependencies=[Depends(require_auth)])


@router.get("/members")
def list_members(request: Request, service: MemberService = Depends(get_member_service)):
    members = unwrap(service.list(dict(request.query_params)))
    if not members:
        return Response(status_code=204)
    return negotiate(request, members, MEMBER.collection)


@router.get("/members/{member_id}")
def get_member(member_id: str, request: Request,
               service: MemberService = Depends(get_member_service)):
    return negotiate(request, unwrap(service.get(member_id)), MEMBER.name)


@router.post("/members")
def create_member(request: Request,
                  body: Dict[str, Any] = Depends(cleaned_body),
                  role: Optional[str] = Depends(current_role),
                  service: MemberService = Depends(get_member_service)):
    key, member = unwrap(service.create(role, body))
    return negotiate(request, member, MEMBER.name, status_code=201,
                     headers={"Location": MEMBER.uri(*key)})


@router.patch("/members/{member_id}")
def update_member(member_id: str, request: Request,
                  body: Dict[str, Any] = Depends(cleaned_body),
                  role: Optional[str] = Depends(current_role),
                  service: MemberService = Depends(get_member_service)):
    return negotiate(request, unwrap(service.update(role, member_id, body=body)), MEMBER.name)


@router.delete("/members/{member_id}")
def delete_member(member_id: str, request: Request,
                  role: Optional[str] = Depends(current_role),
                  service: MemberService = Depends(get_member_service)):
    return negotiate(request, unwrap(service.delete(role, member_id)), MEMBER.name)
