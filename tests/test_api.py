"""HTTP-level tests for the site provisioning API."""

from __future__ import annotations

import json

from tests.conftest import SITE_IP
from util.constants import SITE_CONFIG_FILE


class TestValidateName:
    def test_valid(self, client):
        res = client.post("/api/sites/validate-name", json={"siteName": "my-site"})
        assert res.status_code == 200
        assert res.json() == {"valid": True}

    def test_reserved(self, client):
        res = client.post("/api/sites/validate-name", json={"siteName": "API"})
        assert res.status_code == 200
        assert res.json() == {"valid": False, "error": "site name is reserved or forbidden"}

    def test_syntax(self, client):
        res = client.post("/api/sites/validate-name", json={"siteName": "-bad-"})
        body = res.json()
        assert body["valid"] is False
        assert body["error"].startswith("site name must be 1-63 characters")

    def test_missing_name_is_syntax_error(self, client):
        res = client.post("/api/sites/validate-name", json={})
        assert res.json()["valid"] is False

    def test_malformed_json(self, client):
        res = client.post(
            "/api/sites/validate-name",
            content="{not json",
            headers={"Content-Type": "application/json"},
        )
        assert res.status_code == 400
        assert res.json() == {"valid": False, "error": "Invalid JSON request"}

    def test_get_not_allowed(self, client):
        assert client.get("/api/sites/validate-name").status_code == 405


class TestCreateSite:
    def test_create_then_conflict(self, client, dns_recorder, sites_root):
        payload = {
            "siteName": "my-site",
            "description": "Bakery",
            "style": "dark",
            "initialContent": ["header", "hero", "footer"],
        }
        res = client.post("/api/sites", json=payload)
        assert res.status_code == 200
        assert res.json() == {"success": True, "siteUrl": "https://my-site.flox.click"}

        data = json.loads((sites_root / "my-site" / SITE_CONFIG_FILE).read_text())
        assert data["style"] == "dark"
        assert dns_recorder.payloads == [
            {"subname": "my-site", "type": "A", "ttl": 3600, "records": [SITE_IP]}
        ]

        again = client.post("/api/sites", json=payload)
        assert again.status_code == 200
        assert again.json() == {"success": False, "error": "site name already exists"}

        check = client.post("/api/sites/validate-name", json={"siteName": "my-site"})
        assert check.json() == {"valid": False, "error": "site name already exists"}

    def test_malformed_json(self, client, sites_root):
        res = client.post(
            "/api/sites",
            content="{not json",
            headers={"Content-Type": "application/json"},
        )
        assert res.status_code == 400
        assert res.json() == {"success": False, "error": "Invalid JSON request"}
        assert list(sites_root.iterdir()) == []

    def test_empty_optionals_not_persisted(self, client, sites_root):
        res = client.post(
            "/api/sites",
            json={
                "siteName": "plain",
                "description": "",
                "style": "",
                "initialContent": [],
            },
        )
        assert res.json()["success"] is True
        data = json.loads((sites_root / "plain" / SITE_CONFIG_FILE).read_text())
        assert set(data) == {"siteName", "createdAt"}

    def test_reserved(self, client, dns_recorder):
        res = client.post("/api/sites", json={"siteName": "www"})
        assert res.json() == {
            "success": False,
            "error": "site name is reserved or forbidden",
        }
        assert dns_recorder.requests == []

    def test_dns_failure_still_succeeds(self, client, dns_recorder):
        dns_recorder.status_code = 502
        res = client.post("/api/sites", json={"siteName": "flaky"})
        assert res.json() == {"success": True, "siteUrl": "https://flaky.flox.click"}

        again = client.post("/api/sites", json={"siteName": "flaky"})
        assert again.json()["success"] is False

    def test_storage_failure_is_500(self, client, sites_root):
        sites_root.rmdir()
        res = client.post("/api/sites", json={"siteName": "my-site"})
        assert res.status_code == 500
        assert res.json() == {"detail": "Internal Error"}

    def test_get_not_allowed(self, client):
        assert client.get("/api/sites").status_code == 405


class TestCatalog:
    def test_sections(self, client):
        res = client.get("/api/sections")
        assert res.status_code == 200
        sections = res.json()
        assert [s["id"] for s in sections] == [
            "header",
            "footer",
            "hero",
            "features",
            "testimonials",
            "contact",
        ]
        mandatory = {s["id"] for s in sections if s["mandatory"]}
        assert mandatory == {"header", "footer"}

    def test_themes(self, client):
        res = client.get("/api/themes")
        assert res.json() == [
            {"id": "light", "name": "Light Theme"},
            {"id": "dark", "name": "Dark Theme"},
            {"id": "material", "name": "Material Design"},
            {"id": "minimal", "name": "Minimalist"},
        ]


class TestPlumbing:
    def test_health(self, client):
        res = client.get("/api/health")
        assert res.json() == {"status": "OK", "version": "1.2.3"}

    def test_cors_preflight(self, client):
        res = client.options(
            "/api/sites",
            headers={
                "Origin": "http://localhost:3000",
                "Access-Control-Request-Method": "POST",
                "Access-Control-Request-Headers": "Content-Type",
            },
        )
        assert res.status_code == 200
        assert res.headers["access-control-allow-origin"] == "http://localhost:3000"

    def test_startup_creates_storage_root(self, app_settings, tmp_path):
        from fastapi.testclient import TestClient
        from main import create_app

        root = tmp_path / "fresh" / "sites"
        cfg = app_settings.model_copy(update={"SITES_BASE_DIR": str(root)})
        with TestClient(create_app(cfg)):
            assert root.is_dir()
