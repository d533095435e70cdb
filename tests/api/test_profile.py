import pytest
from unittest.mock import MagicMock
from app.api.dependencies import get_profile_repository
from app.main import app


@pytest.fixture
def profile_payload():
    return {
        "email": "alice@example.com",
        "username": "alice_cooks",
        "full_name": "  Alice Kim  ",
        "bio": "Home cook",
    }


def test_profile_requires_login(client):
    assert client.get("/api/profile").status_code == 401
    assert client.patch("/api/profile", json={}).status_code == 401


def test_get_my_profile(client, alice, alice_headers):
    response = client.get("/api/profile", headers=alice_headers)

    assert response.status_code == 200
    result = response.json()["result"]
    assert result["id"] == alice.id
    assert result["username"] == "alice"


def test_get_profile_missing_row(client, bob_headers):
    response = client.get("/api/profile", headers=bob_headers)

    assert response.status_code == 404
    assert response.json()["code"] == "PROFILE-001"


def test_update_my_profile(client, profile_repo, alice, alice_headers, profile_payload):
    response = client.patch("/api/profile", json=profile_payload, headers=alice_headers)

    assert response.status_code == 200
    result = response.json()["result"]
    assert result["full_name"] == "Alice Kim"
    assert result["username"] == "alice_cooks"
    assert result["bio"] == "Home cook"
    assert result["updated_at"] is not None
    assert profile_repo.get(alice.id).username == "alice_cooks"


def test_update_profile_blank_bio_saved_as_null(client, alice_headers, profile_payload):
    response = client.patch("/api/profile", json={**profile_payload, "bio": "   "}, headers=alice_headers)

    assert response.status_code == 200
    assert response.json()["result"]["bio"] is None


@pytest.mark.parametrize("override", [
    {"email": "  "},
    {"username": ""},
    {"full_name": "   "},
    {"email": "not-an-email"},
    {"username": None},
])
def test_update_profile_validation(client, profile_repo, alice, alice_headers, profile_payload, override):
    response = client.patch("/api/profile", json={**profile_payload, **override}, headers=alice_headers)

    assert response.status_code == 422
    assert response.json()["code"] == "VALIDATION-001"
    assert profile_repo.get(alice.id).username == "alice"


def test_update_profile_missing_row(client, bob_headers, profile_payload):
    response = client.patch("/api/profile", json=profile_payload, headers=bob_headers)

    assert response.status_code == 404


def test_update_profile_store_failure(client, alice_headers, profile_payload):
    broken = MagicMock()
    broken.update.side_effect = ConnectionError("down")
    app.dependency_overrides[get_profile_repository] = lambda: broken

    response = client.patch("/api/profile", json=profile_payload, headers=alice_headers)

    assert response.status_code == 503
    assert response.json()["code"] == "STORE-001"
