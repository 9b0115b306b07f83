"""
Tests for the REST API app.
Run: pytest test_api.py -v
"""

import base64

import pytest
import yaml
from fastapi.testclient import TestClient

from conftest import seed_member, seed_membership, seed_team
from membership.apps.api import app
from membership.core.dependencies import get_member_service
from membership.repositories import MemberRepository


@pytest.fixture
def client(db):
    return TestClient(app)


def _basic(email, password):
    token = base64.b64encode(f"{email}:{password}".encode()).decode()
    return {"Authorization": f"Basic {token}"}


NEW_MEMBER = {"Firstname": "Grace", "Lastname": "Hopper", "Email": "grace@example.com", "Active": "true"}


# ═══════════════════════════════════════════════════════════════════════════
#  System
# ═══════════════════════════════════════════════════════════════════════════
class TestSystem:
    def test_health(self, client):
        r = client.get("/health")
        assert r.status_code == 200
        assert r.json()["status"] == "ok"

    def test_readiness(self, client):
        r = client.get("/health/ready")
        assert r.status_code == 200
        assert r.json()["database"] == "connected"

    def test_metrics(self, client):
        r = client.get("/metrics")
        assert r.status_code == 200
        assert "membership_requests_total" in r.text

    def test_api_info(self, client):
        r = client.get("/")
        assert r.status_code == 200
        assert "/members" in r.json()["resources"]


# ═══════════════════════════════════════════════════════════════════════════
#  Auth
# ═══════════════════════════════════════════════════════════════════════════
class TestAuth:
    def test_basic_credentials_give_jwt(self, client):
        r = client.get("/auth", headers=_basic("admin@localhost", "admin"))
        assert r.status_code == 200
        token = r.json()["jwt"]
        members = client.get("/members", headers={"Authorization": f"Bearer {token}"})
        assert members.status_code == 204

    def test_wrong_password(self, client):
        r = client.get("/auth", headers=_basic("admin@localhost", "nope"))
        assert r.status_code == 401
        assert r.json()["message"] == "Invalid credentials"

    def test_missing_credentials(self, client):
        r = client.get("/auth")
        assert r.status_code == 401
        assert r.headers["www-authenticate"] == "Basic"

    def test_resources_need_a_token(self, client):
        assert client.get("/members").status_code == 401
        assert client.get("/teams/1").status_code == 401

    def test_tampered_token_is_rejected(self, client, admin_headers):
        headers = {"Authorization": admin_headers["Authorization"] + "x"}
        assert client.get("/members", headers=headers).status_code == 401


# ═══════════════════════════════════════════════════════════════════════════
#  List
# ═══════════════════════════════════════════════════════════════════════════
class TestListMembers:
    def test_empty_list_is_204_without_body(self, client, guest_headers):
        r = client.get("/members", headers=guest_headers)
        assert r.status_code == 204
        assert r.content == b""

    def test_list_gives_ids_and_uris(self, client, db, guest_headers):
        seed_member(db, Firstname="Zed", Email="z@example.com")
        seed_member(db, Firstname="Amy", Email="a@example.com")
        r = client.get("/members", headers=guest_headers)
        assert r.status_code == 200
        assert r.json() == [{"_id": 2, "_uri": "/members/2"}, {"_id": 1, "_uri": "/members/1"}]

    def test_filter(self, client, db, guest_headers):
        seed_member(db, Firstname="Amy", Email="a@example.com")
        seed_member(db, Firstname="Bob", Email="b@example.com")
        r = client.get("/members?Firstname=Bob", headers=guest_headers)
        assert r.json() == [{"_id": 2, "_uri": "/members/2"}]

    def test_filter_with_no_match_is_204(self, client, db, guest_headers):
        seed_member(db)
        r = client.get("/members?Firstname=Nobody", headers=guest_headers)
        assert r.status_code == 204

    def test_unknown_filter_field_is_403(self, client, db, guest_headers):
        seed_member(db)
        r = client.get("/members?Password=secret", headers=guest_headers)
        assert r.status_code == 403
        assert r.json() == {"message": "Unrecognised Member field"}

    def test_teams_are_ordered_by_name(self, client, db, guest_headers):
        seed_team(db, Name="Zeta")
        seed_team(db, Name="Alpha")
        r = client.get("/teams", headers=guest_headers)
        assert [t["_id"] for t in r.json()] == [2, 1]


# ═══════════════════════════════════════════════════════════════════════════
#  Get
# ═══════════════════════════════════════════════════════════════════════════
class TestGetMember:
    def test_missing_member_names_the_id(self, client, guest_headers):
        r = client.get("/members/999", headers=guest_headers)
        assert r.status_code == 404
        assert r.json()["message"] == "No member 999 found"

    def test_non_numeric_id_is_404(self, client, guest_headers):
        r = client.get("/members/abc", headers=guest_headers)
        assert r.status_code == 404
        assert "abc" in r.json()["message"]

    def test_member_detail_lists_teams(self, client, db, guest_headers):
        member_id = seed_member(db)
        team_id = seed_team(db)
        seed_membership(db, member_id, team_id)

        r = client.get(f"/members/{member_id}", headers=guest_headers)
        assert r.status_code == 200
        member = r.json()
        assert member["_id"] == member_id
        assert member["Firstname"] == "Ada"
        assert member["Active"] is True
        assert member["Newsletter"] is False
        assert member["Teams"] == [{"_id": team_id, "_uri": f"/teams/{team_id}"}]

    def test_team_detail_lists_members(self, client, db, guest_headers):
        member_id = seed_member(db)
        team_id = seed_team(db)
        seed_membership(db, member_id, team_id)

        team = client.get(f"/teams/{team_id}", headers=guest_headers).json()
        assert team["Members"] == [{"_id": member_id, "_uri": f"/members/{member_id}"}]


# ═══════════════════════════════════════════════════════════════════════════
#  Create / Update / Delete
# ═══════════════════════════════════════════════════════════════════════════
class TestMutations:
    def test_create_without_admin_is_403_and_inserts_nothing(self, client, db, guest_headers):
        r = client.post("/members", json=NEW_MEMBER, headers=guest_headers)
        assert r.status_code == 403
        assert r.json()["message"] == "Admin auth required"
        assert MemberRepository(db).list() == []

    def test_create(self, client, db, admin_headers):
        r = client.post("/members", json=NEW_MEMBER, headers=admin_headers)
        assert r.status_code == 201
        assert r.headers["location"] == "/members/1"
        body = r.json()
        assert body["MemberId"] == 1
        assert body["Email"] == "grace@example.com"
        assert body["Active"] is True
        assert MemberRepository(db).get(1)["Firstname"] == "Grace"

    def test_create_from_form_post(self, client, admin_headers):
        r = client.post("/members", data={**NEW_MEMBER, "Phone": "  "}, headers=admin_headers)
        assert r.status_code == 201
        assert r.json()["Phone"] is None

    def test_create_with_unknown_field_is_403(self, client, db, admin_headers):
        r = client.post("/members", json={**NEW_MEMBER, "Shoe": "9"}, headers=admin_headers)
        assert r.status_code == 403
        assert MemberRepository(db).list() == []

    def test_create_with_bad_value_is_422(self, client, admin_headers):
        r = client.post("/members", json={**NEW_MEMBER, "Email": "nope"}, headers=admin_headers)
        assert r.status_code == 422

    def test_create_duplicate_is_409(self, client, db, admin_headers):
        seed_member(db, Email="grace@example.com")
        r = client.post("/members", json=NEW_MEMBER, headers=admin_headers)
        assert r.status_code == 409

    def test_invalid_json_is_400(self, client, admin_headers):
        headers = {**admin_headers, "Content-Type": "application/json"}
        r = client.post("/members", content=b"{not json", headers=headers)
        assert r.status_code == 400

    def test_update(self, client, db, admin_headers):
        member_id = seed_member(db)
        r = client.patch(f"/members/{member_id}", json={"Phone": "555-0100", "Newsletter": True},
                         headers=admin_headers)
        assert r.status_code == 200
        assert r.json()["Phone"] == "555-0100"
        assert r.json()["Newsletter"] is True

    def test_update_missing_is_404_without_body(self, client, admin_headers):
        r = client.patch("/members/999", json={"Phone": "555"}, headers=admin_headers)
        assert r.status_code == 404
        assert r.json() == {"message": "No member 999 found"}

    def test_update_without_admin_is_403(self, client, db, guest_headers):
        member_id = seed_member(db)
        r = client.patch(f"/members/{member_id}", json={"Phone": "555"}, headers=guest_headers)
        assert r.status_code == 403
        assert MemberRepository(db).get(member_id)["Phone"] is None

    def test_delete_returns_prior_row_then_404(self, client, db, admin_headers):
        member_id = seed_member(db, Phone="555")
        before = MemberRepository(db).get(member_id)

        r = client.delete(f"/members/{member_id}", headers=admin_headers)
        assert r.status_code == 200
        assert r.json() == before

        assert client.get(f"/members/{member_id}", headers=admin_headers).status_code == 404

    def test_delete_missing_is_404(self, client, admin_headers):
        assert client.delete("/members/999", headers=admin_headers).status_code == 404

    def test_delete_without_admin_is_403(self, client, db, guest_headers):
        member_id = seed_member(db)
        assert client.delete(f"/members/{member_id}", headers=guest_headers).status_code == 403
        assert MemberRepository(db).get(member_id) is not None

    def test_team_lifecycle(self, client, admin_headers):
        r = client.post("/teams", json={"Name": "Compilers"}, headers=admin_headers)
        assert r.status_code == 201
        team_id = r.json()["TeamId"]
        r = client.patch(f"/teams/{team_id}", json={"Active": False}, headers=admin_headers)
        assert r.json()["Active"] is False
        assert client.delete(f"/teams/{team_id}", headers=admin_headers).json()["Name"] == "Compilers"


# ═══════════════════════════════════════════════════════════════════════════
#  Team memberships
# ═══════════════════════════════════════════════════════════════════════════
class TestTeamMembers:
    def test_create_and_list(self, client, db, admin_headers):
        member_id = seed_member(db)
        team_id = seed_team(db)
        r = client.post("/team-members", json={"MemberId": member_id, "TeamId": team_id,
                                               "JoinedOn": "2024-05-01"}, headers=admin_headers)
        assert r.status_code == 201
        assert r.headers["location"] == f"/team-members/{member_id}/{team_id}"

        r = client.get("/team-members", headers=admin_headers)
        assert r.json() == [{"MemberId": member_id, "TeamId": team_id,
                             "_uri": f"/team-members/{member_id}/{team_id}"}]

    def test_get_missing(self, client, admin_headers):
        r = client.get("/team-members/1/2", headers=admin_headers)
        assert r.status_code == 404
        assert r.json()["message"] == "No membership of member 1 in team 2 found"

    def test_delete(self, client, db, admin_headers):
        member_id = seed_member(db)
        team_id = seed_team(db)
        seed_membership(db, member_id, team_id)
        r = client.delete(f"/team-members/{member_id}/{team_id}", headers=admin_headers)
        assert r.status_code == 200
        assert client.get("/team-members", headers=admin_headers).status_code == 204

    def test_unknown_member_is_409(self, client, db, admin_headers):
        team_id = seed_team(db)
        r = client.post("/team-members", json={"MemberId": 77, "TeamId": team_id}, headers=admin_headers)
        assert r.status_code == 409


# ═══════════════════════════════════════════════════════════════════════════
#  Content negotiation & error boundary
# ═══════════════════════════════════════════════════════════════════════════
class TestNegotiation:
    def test_xml_list(self, client, db, guest_headers):
        seed_member(db)
        r = client.get("/members", headers={**guest_headers, "Accept": "application/xml"})
        assert r.status_code == 200
        assert r.headers["content-type"].startswith("application/xml")
        assert r.text.startswith("<?xml")
        assert "<Members>" in r.text
        assert '<Member _id="1" _uri="/members/1"' in r.text

    def test_xml_error_root(self, client, guest_headers):
        r = client.get("/members/5", headers={**guest_headers, "Accept": "text/xml"})
        assert r.status_code == 404
        assert "<error><message>No member 5 found</message></error>" in r.text

    def test_yaml(self, client, db, guest_headers):
        seed_member(db)
        r = client.get("/members/1", headers={**guest_headers, "Accept": "text/yaml"})
        assert r.headers["content-type"].startswith("text/yaml")
        member = yaml.safe_load(r.text)
        assert member["Email"] == "ada@example.com"
        assert member["Active"] is True

    def test_plain_text_is_yaml(self, client, db, guest_headers):
        seed_member(db)
        r = client.get("/members", headers={**guest_headers, "Accept": "text/plain"})
        assert r.headers["content-type"].startswith("text/plain")
        assert yaml.safe_load(r.text) == [{"_id": 1, "_uri": "/members/1"}]

    def test_quality_values_are_respected(self, client, db, guest_headers):
        seed_member(db)
        accept = "application/xml;q=0.5, application/json"
        r = client.get("/members", headers={**guest_headers, "Accept": accept})
        assert r.json() == [{"_id": 1, "_uri": "/members/1"}]

    def test_unmatched_route_is_404(self, client):
        r = client.get("/nowhere")
        assert r.status_code == 404
        assert r.json() == {"message": "Not Found"}

    def test_unexpected_error_is_500(self, db, guest_headers):
        class Broken:
            def get(self, *key):
                raise RuntimeError("disk on fire")

        app.dependency_overrides[get_member_service] = lambda: Broken()
        try:
            r = TestClient(app, raise_server_exceptions=False).get("/members/1", headers=guest_headers)
        finally:
            app.dependency_overrides.clear()
        assert r.status_code == 500
        assert r.json() == {"message": "disk on fire"}
