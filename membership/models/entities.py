# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Entity descriptors — per-entity schema metadata, NO database access.

Repositories, services and controllers take their table name, key, allow-list
of fields, boolean flags, ordering and URI shape from here.
"""

from dataclasses import dataclass
from sqlalchemy import Table

from membership.models.tables import member_table, team_member_table, team_table


@dataclass(frozen=True)
class Entity:
    name: str
    collection: str
    table: Table
    boolean_fields: frozenset
    order_by: tuple[str, ...]
    uri_prefix: str

    @property
    def table_name(self) -> str:
        return self.table.name

    @property
    def fields(self) -> tuple[str, ...]:
        return tuple(column.name for column in self.table.columns)

    @property
    def key(self) -> tuple[str, ...]:
        return tuple(column.name for column in self.table.primary_key.columns)

    def uri(self, *key) -> str:
        return self.uri_prefix + "/" + "/".join(str(k) for k in key)

    def label(self) -> str:
        """Lower-case, spaced name for messages ('team member')."""
        out = ""
        for ch in self.name:
            out += (" " + ch.lower()) if ch.isupper() and out else ch.lower()
        return out


MEMBER = Entity(
    name="Member",
    collection="Members",
    table=member_table,
    boolean_fields=frozenset({"Active", "Newsletter"}),
    order_by=("Firstname", "Lastname"),
    uri_prefix="/members",
)

TEAM = Entity(
    name="Team",
    collection="Teams",
    table=team_table,
    boolean_fields=frozenset({"Active"}),
    order_by=("Name",),
    uri_prefix="/teams",
)

TEAM_MEMBER = Entity(
    name="TeamMember",
    collection="TeamMembers",
    table=team_member_table,
    boolean_fields=frozenset(),
    order_by=("MemberId", "TeamId"),
    uri_prefix="/team-members",
)
