# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Repository package — re-exports the entity repositories."""
from membership.repositories.base import EntityRepository, UnknownFieldError
from membership.repositories.member_repository import MemberRepository
from membership.repositories.team_member_repository import TeamMemberRepository
from membership.repositories.team_repository import TeamRepository

__all__ = [
    "EntityRepository", "UnknownFieldError",
    "MemberRepository", "TeamRepository", "TeamMemberRepository",
]
