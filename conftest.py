"""
Shared fixtures: an in-memory SQLite database built from the same metadata,
JWTs for an admin and a guest, and row seeding helpers.
"""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from membership.core.database import Database
from membership.core.dependencies import close_database, get_auth_service, init_database
from membership.repositories import MemberRepository, TeamMemberRepository, TeamRepository


@pytest.fixture
def db():
    engine = create_engine(
        "sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool,
    )
    database = Database(engine=engine)
    database.create_schema()
    init_database(database)
    yield database
    close_database()


@pytest.fixture
def admin_headers():
    token = get_auth_service().issue_token("admin@localhost", "admin")
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def guest_headers():
    token = get_auth_service().issue_token("guest@localhost", "guest")
    return {"Authorization": f"Bearer {token}"}


def seed_member(db, **fields):
    row = {"Firstname": "Ada", "Lastname": "Lovelace", "Email": "ada@example.com",
           "Active": True, "Newsletter": False}
    row.update(fields)
    return MemberRepository(db).insert(row)


def seed_team(db, **fields):
    row = {"Name": "Analysts", "Description": "Engine programmers", "Active": True}
    row.update(fields)
    return TeamRepository(db).insert(row)


def seed_membership(db, member_id, team_id, joined_on=None):
    fields = {"MemberId": member_id, "TeamId": team_id}
    if joined_on:
        fields["JoinedOn"] = joined_on
    return TeamMemberRepository(db).insert(fields)
