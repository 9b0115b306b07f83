# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Model package — re-exports schema metadata and entity descriptors."""
from membership.models.entities import MEMBER, TEAM, TEAM_MEMBER, Entity
from membership.models.tables import metadata

__all__ = ["MEMBER", "TEAM", "TEAM_MEMBER", "Entity", "metadata"]
