# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Business logic for teams — detail includes the member roster."""
from typing import Any, Dict, List, Tuple

from membership.models.entities import MEMBER, TEAM
from membership.repositories.team_member_repository import TeamMemberRepository
from membership.repositories.team_repository import TeamRepository
from membership.schemas import TeamCreate, TeamUpdate
from membership.services.entity_service import EntityService


class TeamService(EntityService):
    entity = TEAM
    create_schema = TeamCreate
    update_schema = TeamUpdate

    def __init__(self, repo: TeamRepository, team_member_repo: TeamMemberRepository):
        super().__init__(repo)
        self._team_members = team_member_repo

    def detail(self, key: Tuple, row: Dict[str, Any]) -> Dict[str, Any]:
        team = super().detail(key, row)
        team["Members"] = [{"_id": m, "_uri": MEMBER.uri(m)} for m in self._repo.member_ids(key[0])]
        return team

    def memberships(self, team_id: int) -> List[Dict[str, Any]]:
        return self._team_members.roster_of(team_id)
