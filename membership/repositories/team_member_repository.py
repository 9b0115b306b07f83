# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Repository: TeamMember (member ⇄ team join) data access."""
from typing import Any, Dict, List, Tuple

from membership.models.entities import TEAM_MEMBER
from membership.repositories.base import EntityRepository


class TeamMemberRepository(EntityRepository):
    entity = TEAM_MEMBER

    def insert(self, fields: Dict[str, Any]) -> Tuple[int, int]:
        """Insert a membership; the 'id' is the (MemberId, TeamId) pair."""
        super().insert(fields)
        return fields["MemberId"], fields["TeamId"]

    def memberships_of(self, member_id) -> List[Dict[str, Any]]:
        """Memberships with team names, for display."""
        rows, _ = self._db.query(
            """
            Select tm.MemberId, tm.TeamId, tm.JoinedOn, t.Name
            From TeamMember tm Inner Join Team t On t.TeamId = tm.TeamId
            Where tm.MemberId = :id
            Order By t.Name
            """,
            {"id": member_id},
        )
        return rows

    def roster_of(self, team_id) -> List[Dict[str, Any]]:
        """Memberships with member names, for display."""
        rows, _ = self._db.query(
            """
            Select tm.MemberId, tm.TeamId, tm.JoinedOn, m.Firstname, m.Lastname
            From TeamMember tm Inner Join Member m On m.MemberId = tm.MemberId
            Where tm.TeamId = :id
            Order By m.Firstname, m.Lastname
            """,
            {"id": team_id},
        )
        return rows
