# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Repository: Member data access."""
from typing import List

from membership.models.entities import MEMBER
from membership.repositories.base import EntityRepository


class MemberRepository(EntityRepository):
    entity = MEMBER

    def team_ids(self, member_id) -> List[int]:
        rows, _ = self._db.query(
            "Select TeamId From TeamMember Where MemberId = :id Order By TeamId", {"id": member_id}
        )
        return [r["TeamId"] for r in rows]

    def delete(self, member_id) -> int:
        return self._delete_with_memberships("MemberId", member_id)
