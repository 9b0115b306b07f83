# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Relational schema — SQLAlchemy Core tables.

Boolean flags are stored as the strings 'true' / 'false'; see
membership.services.cast_boolean for the conversions either side.
"""

from sqlalchemy import Column, Date, ForeignKey, Integer, MetaData, String, Table

metadata = MetaData()

member_table = Table(
    "Member",
    metadata,
    Column("MemberId", Integer, primary_key=True, autoincrement=True),
    Column("Firstname", String(40), nullable=False),
    Column("Lastname", String(40), nullable=False),
    Column("Email", String(60), nullable=False, unique=True),
    Column("Phone", String(20)),
    Column("Active", String(5), nullable=False, server_default="true"),
    Column("Newsletter", String(5), nullable=False, server_default="false"),
)

team_table = Table(
    "Team",
    metadata,
    Column("TeamId", Integer, primary_key=True, autoincrement=True),
    Column("Name", String(60), nullable=False, unique=True),
    Column("Description", String(255)),
    Column("Active", String(5), nullable=False, server_default="true"),
)

team_member_table = Table(
    "TeamMember",
    metadata,
    Column("MemberId", Integer, ForeignKey("Member.MemberId"), primary_key=True),
    Column("TeamId", Integer, ForeignKey("Team.TeamId"), primary_key=True),
    Column("JoinedOn", Date),
)
