# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Business logic for members — detail includes team memberships."""
from typing import Any, Dict, List, Tuple

from membership.models.entities import MEMBER, TEAM
from membership.repositories.member_repository import MemberRepository
from membership.repositories.team_member_repository import TeamMemberRepository
from membership.schemas import MemberCreate, MemberUpdate
from membership.services.entity_service import EntityService


class MemberService(EntityService):
    entity = MEMBER
    create_schema = MemberCreate
    update_schema = MemberUpdate

    def __init__(self, repo: MemberRepository, team_member_repo: TeamMemberRepository):
        super().__init__(repo)
        self._team_members = team_member_repo

    def detail(self, key: Tuple, row: Dict[str, Any]) -> Dict[str, Any]:
        member = super().detail(key, row)
        member["Teams"] = [{"_id": t, "_uri": TEAM.uri(t)} for t in self._repo.team_ids(key[0])]
        return member

    def memberships(self, member_id: int) -> List[Dict[str, Any]]:
        return self._team_members.memberships_of(member_id)
