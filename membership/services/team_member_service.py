# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Business logic for team memberships, keyed by the (member, team) pair."""
from typing import Any, Dict, Tuple

from membership.models.entities import TEAM_MEMBER
from membership.schemas import TeamMemberCreate, TeamMemberUpdate
from membership.services.entity_service import EntityService


class TeamMemberService(EntityService):
    entity = TEAM_MEMBER
    create_schema = TeamMemberCreate
    update_schema = TeamMemberUpdate

    def summary(self, row: Dict[str, Any]) -> Dict[str, Any]:
        key = self.key_of(row)
        return {"MemberId": key[0], "TeamId": key[1], "_uri": self.entity.uri(*key)}

    def detail(self, key: Tuple, row: Dict[str, Any]) -> Dict[str, Any]:
        return {**row, "_uri": self.entity.uri(*key)}

    def describe(self, raw_key: Tuple) -> str:
        member_id, team_id = (list(raw_key) + [None, None])[:2]
        return f"membership of member {member_id} in team {team_id}"
