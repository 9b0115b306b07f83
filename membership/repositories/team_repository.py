# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Repository: Team data access."""
from typing import List

from membership.models.entities import TEAM
from membership.repositories.base import EntityRepository


class TeamRepository(EntityRepository):
    entity = TEAM

    def member_ids(self, team_id) -> List[int]:
        rows, _ = self._db.query(
            "Select MemberId From TeamMember Where TeamId = :id Order By MemberId", {"id": team_id}
        )
        return [r["MemberId"] for r in rows]

    def delete(self, team_id) -> int:
        return self._delete_with_memberships("TeamId", team_id)
