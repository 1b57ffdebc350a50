# =============================================================================
# tests/test_api.py - HTTP API Tests
# =============================================================================
# Exercises the routers through FastAPI's TestClient with the repository and
# storage swapped for in-memory fakes via app.dependency_overrides.
#
# Run with: pytest tests/test_api.py -v
# =============================================================================

import json
import time
from unittest.mock import MagicMock
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient
from jose import jwt

from app.auth import AuthUser, require_admin
from app.config import settings
from app.dependencies import get_repository, get_storage, get_supabase_client
from app.main import app

ADMIN_ID = str(uuid4())
USER_ID = str(uuid4())


def _token(user_id: str, email: str = "someone@example.com") -> str:
    return jwt.encode(
        {"sub": user_id, "email": email, "aud": "authenticated", "exp": int(time.time()) + 600},
        settings.SUPABASE_JWT_SECRET,
        algorithm="HS256",
    )


@pytest.fixture
def supabase_client():
    return MagicMock()


@pytest.fixture
def client(repository, storage, supabase_client):
    """TestClient with fakes wired in; admin check bypassed."""
    app.dependency_overrides[get_repository] = lambda: repository
    app.dependency_overrides[get_storage] = lambda: storage
    app.dependency_overrides[get_supabase_client] = lambda: supabase_client
    app.dependency_overrides[require_admin] = lambda: AuthUser(id=ADMIN_ID, email="admin@example.com")
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def auth_client(repository, supabase_client):
    """TestClient that runs the real token and admin checks."""
    repository.users.rows[ADMIN_ID] = {"id": ADMIN_ID, "email": "admin@example.com", "role": "admin"}
    repository.users.rows[USER_ID] = {"id": USER_ID, "email": "user@example.com", "role": "user"}
    app.dependency_overrides[get_repository] = lambda: repository
    app.dependency_overrides[get_supabase_client] = lambda: supabase_client
    yield TestClient(app)
    app.dependency_overrides.clear()


# =============================================================================
# Auth gate
# =============================================================================

class TestAdminGate:

    def test_missing_token(self, auth_client):
        response = auth_client.get("/api/v1/categories")
        assert response.status_code in (401, 403)

    def test_invalid_token(self, auth_client):
        response = auth_client.get("/api/v1/categories", headers={"Authorization": "Bearer not-a-jwt"})
        assert response.status_code == 401

    def test_admin_token(self, auth_client):
        response = auth_client.get(
            "/api/v1/categories",
            headers={"Authorization": f"Bearer {_token(ADMIN_ID)}"},
        )
        assert response.status_code == 200
        assert response.json() == {"error": None, "data": []}

    def test_non_admin_is_revoked(self, auth_client, supabase_client):
        token = _token(USER_ID)

        response = auth_client.get("/api/v1/categories", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 403
        assert response.json()["code"] == "UNAUTHORIZED"
        supabase_client.auth.admin.sign_out.assert_called_once_with(token)

    def test_me(self, auth_client):
        response = auth_client.get(
            "/api/v1/auth/me",
            headers={"Authorization": f"Bearer {_token(ADMIN_ID, 'admin@example.com')}"},
        )
        assert response.status_code == 200
        assert response.json() == {"id": ADMIN_ID, "email": "admin@example.com", "role": "admin"}

    def test_contact_form_is_public(self, auth_client):
        response = auth_client.post("/api/v1/contacts", json={
            "name": "Jane",
            "email": "jane@example.com",
            "subject": "Hello",
            "message": "Is ibuprofen in stock?",
        })
        assert response.status_code == 201
        assert response.json()["data"]["status"] == "pending"


# =============================================================================
# Catalog endpoints
# =============================================================================

class TestBrandEndpoints:

    def test_create_with_logo(self, client, storage):
        response = client.post(
            "/api/v1/brands",
            data={"name": "Bayer", "country": "Germany"},
            files={"logo_file": ("logo.png", b"\x89PNGfake", "image/png")},
        )

        assert response.status_code == 201
        body = response.json()
        assert body["error"] is None
        assert body["data"]["logo"] == storage.uploads[0]
        assert body["data"]["medicine_count"] == 0

    def test_get_missing(self, client):
        response = client.get("/api/v1/brands/nope")

        assert response.status_code == 404
        assert response.json() == {
            "error": {
                "message": "Brand with ID nope not found",
                "code": "NOT_FOUND",
                "status": 404,
                "details": None,
            },
            "data": None,
        }

    def test_delete(self, client, storage):
        created = client.post(
            "/api/v1/brands",
            data={"name": "Bayer"},
            files={"logo_file": ("logo.png", b"\x89PNGfake", "image/png")},
        ).json()["data"]

        response = client.delete(f"/api/v1/brands/{created['id']}")

        assert response.status_code == 200
        assert response.json()["data"] is True
        assert storage.deletes == [created["logo"]]


class TestCategoryEndpoints:

    def test_blank_name(self, client):
        response = client.post("/api/v1/categories", json={"name": "  "})

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"

    def test_create_and_list(self, client):
        client.post("/api/v1/categories", json={"name": "Vitamins"})
        client.post("/api/v1/categories", json={"name": "Antibiotics"})

        data = client.get("/api/v1/categories").json()["data"]

        assert [c["name"] for c in data] == ["Antibiotics", "Vitamins"]


class TestMedicineEndpoints:

    def _create(self, client, payload, files=None):
        return client.post(
            "/api/v1/medicines",
            data={"payload": json.dumps(payload)},
            files=files,
        )

    def test_create_with_images(self, client, sample_medicine_payload, storage):
        response = self._create(client, sample_medicine_payload, files=[
            ("image_files", ("front.png", b"\x89PNGfake", "image/png")),
            ("image_files", ("back.jpg", b"\xff\xd8fake", "image/jpeg")),
        ])

        assert response.status_code == 201
        data = response.json()["data"]
        assert data["slug"] == "vitamin-c-1000mg"
        assert data["images"] == storage.uploads

    def test_invalid_payload(self, client):
        response = self._create(client, {"name": "Aspirin", "price": -5})
        assert response.status_code == 422

    def test_remove_absent_image(self, client, storage):
        created = self._create(client, {"name": "Aspirin"}).json()["data"]

        response = client.delete(
            f"/api/v1/medicines/{created['id']}/images",
            params={"url": "https://elsewhere/none.png"},
        )

        assert response.status_code == 200
        assert response.json()["data"]["images"] == []
        assert storage.deletes == []


class TestContactEndpoints:

    def test_resolve(self, client):
        created = client.post("/api/v1/contacts", json={
            "name": "Jane",
            "email": "jane@example.com",
            "subject": "Hello",
            "message": "Question",
        }).json()["data"]

        response = client.patch(f"/api/v1/contacts/{created['id']}/status", json={"status": "resolved"})

        assert response.json()["data"]["status"] == "resolved"

    def test_bad_status(self, client):
        response = client.patch("/api/v1/contacts/x/status", json={"status": "archived"})
        assert response.status_code == 422


class TestDashboardEndpoints:

    def test_stats(self, client):
        client.post("/api/v1/categories", json={"name": "Vitamins"})

        response = client.get("/api/v1/dashboard/stats")

        assert response.status_code == 200
        assert response.json()["data"]["total_categories"] == 1

    def test_limit_bounds(self, client):
        assert client.get("/api/v1/dashboard/recent-users", params={"limit": 0}).status_code == 422


def test_health(client):
    response = client.get("/api/v1/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_readiness_degraded(client, supabase_client):
    supabase_client.storage.get_bucket.side_effect = RuntimeError("bucket missing")

    body = client.get("/api/v1/health/ready").json()

    assert body["status"] == "degraded"
    assert body["storage"].startswith("unhealthy")
    assert set(body["tables"]) == {"medicines", "brands", "categories", "contact_us", "users"}


def test_readiness_ready(client):
    assert client.get("/api/v1/health/ready").json()["status"] == "ready"
