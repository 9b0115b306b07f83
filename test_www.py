"""
Tests for the public www site and the host dispatch in main.
Run: pytest test_www.py -v
"""

from fastapi.testclient import TestClient

from main import app as root_app
from membership.apps.www import app
from membership.core.config import settings


# ═══════════════════════════════════════════════════════════════════════════
#  www pages
# ═══════════════════════════════════════════════════════════════════════════
class TestWww:
    def test_index(self):
        r = TestClient(app, base_url="http://www.example.com").get("/")
        assert r.status_code == 200
        assert "Welcome to example.com" in r.text
        assert r.headers["x-content-type-options"] == "nosniff"

    def test_unknown_page_is_personalised_404(self):
        r = TestClient(app).get("/missing")
        assert r.status_code == 404
        assert "Couldn’t find that one!..." in r.text


# ═══════════════════════════════════════════════════════════════════════════
#  Host dispatch
# ═══════════════════════════════════════════════════════════════════════════
class TestHostDispatch:
    def test_api_host(self):
        r = TestClient(root_app, base_url="http://api.example.com").get("/health")
        assert r.status_code == 200
        assert r.json()["service"] == settings.SERVICE_NAME

    def test_admin_host(self):
        r = TestClient(root_app, base_url="http://admin.example.com").get("/login")
        assert r.status_code == 200
        assert "Sign in" in r.text

    def test_anything_else_is_www(self):
        r = TestClient(root_app, base_url="http://example.com:3000").get("/")
        assert r.status_code == 200
        assert "Welcome to example.com:3000" in r.text

    def test_lifespan_builds_and_releases_the_pool(self, monkeypatch):
        monkeypatch.setattr(settings, "DB_CONNECTION", "sqlite://")
        monkeypatch.setattr(settings, "DB_CREATE_SCHEMA", True)
        with TestClient(root_app, base_url="http://api.example.com") as client:
            r = client.get("/health/ready")
            assert r.status_code == 200
            assert r.json()["database"] == "connected"
