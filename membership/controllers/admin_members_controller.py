# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Controller: admin pages for members — list, view, add, edit, delete."""
from typing import Any, Dict

from fastapi import APIRouter, Depends, Request
from fastapi.responses import RedirectResponse

from membership.core.body import cleaned_body
from membership.core.dependencies import get_member_service
from membership.core.flash import flash
from membership.core.templating import admin_pages, session_role
from membership.errors import unwrap
from membership.services.member_service import MemberService

router = APIRouter(prefix="/members", tags=["Admin: Members"])


def _name(member: Dict[str, Any]) -> str:
    return f"{member.get('Firstname') or ''} {member.get('Lastname') or ''}".strip()


@router.get("")
def list_members(request: Request, service: MemberService = Depends(get_member_service)):
    members = unwrap(service.browse(dict(request.query_params)))
    return admin_pages.render(request, "members-list", members=members)


@router.get("/add")
def add_member(request: Request):
    return admin_pages.render(request, "members-add", member={})


@router.post("/add")
def process_add_member(request: Request,
                       body: Dict[str, Any] = Depends(cleaned_body),
                       service: MemberService = Depends(get_member_service)):
    result = service.create(session_role(request), body)
    if not result.ok:
        flash(request, result.message)
        return RedirectResponse("/members/add", status_code=303)
    _, member = result.value
    flash(request, f"Member ‘{_name(member)}’ added")
    return RedirectResponse("/members", status_code=303)


@router.get("/{member_id}")
def view_member(member_id: str, request: Request,
                service: MemberService = Depends(get_member_service)):
    member = unwrap(service.get(member_id))
    teams = service.memberships(member["_id"])
    return admin_pages.render(request, "members-view", member=member, teams=teams)


@router.get("/{member_id}/edit")
def edit_member(member_id: str, request: Request,
                service: MemberService = Depends(get_member_service)):
    member = unwrap(service.get(member_id))
    return admin_pages.render(request, "members-edit", member=member)


@router.post("/{member_id}/edit")
def process_edit_member(member_id: str, request: Request,
                        body: Dict[str, Any] = Depends(cleaned_body),
                        service: MemberService = Depends(get_member_service)):
    result = service.update(session_role(request), member_id, body=body)
    if not result.ok:
        flash(request, result.message)
        return RedirectResponse(f"/members/{member_id}/edit", status_code=303)
    flash(request, f"Member ‘{_name(result.value)}’ updated")
    return RedirectResponse("/members", status_code=303)


@router.get("/{member_id}/delete")
def delete_member(member_id: str, request: Request,
                  service: MemberService = Depends(get_member_service)):
    member = unwrap(service.get(member_id))
    return admin_pages.render(request, "members-delete", member=member)


@router.post("/{member_id}/delete")
def process_delete_member(member_id: str, request: Request,
                          service: MemberService = Depends(get_member_service)):
    result = service.delete(session_role(request), member_id)
    if not result.ok:
        flash(request, result.message)
        return RedirectResponse(f"/members/{member_id}/delete", status_code=303)
    flash(request, f"Member ‘{_name(result.value)}’ deleted")
    return RedirectResponse("/members", status_code=303)
