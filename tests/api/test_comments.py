from unittest.mock import MagicMock
import pytest
from app.api.dependencies import get_comment_repository
from app.main import app


@pytest.fixture
def recipe_id():
    return "recipe-7"


@pytest.fixture
def comments_endpoint(recipe_id):
    return f"/api/recipes/{recipe_id}/comments"


def test_list_comments_empty(client, comments_endpoint):
    response = client.get(comments_endpoint)

    assert response.status_code == 200
    assert response.json()["result"] == []


def test_create_comment_returns_refreshed_list(client, comment_repo, alice, alice_headers, comments_endpoint, recipe_id):
    """작성 후 최신순으로 다시 조회된 목록을 반환해야 한다."""
    comment_repo.add("someone", recipe_id, "first!")

    response = client.post(comments_endpoint, json={"content": "  Looks tasty  "}, headers=alice_headers)

    assert response.status_code == 201
    result = response.json()["result"]
    assert [c["content"] for c in result] == ["Looks tasty", "first!"]
    assert result[0]["user_id"] == alice.id


def test_create_comment_requires_login(client, comments_endpoint):
    response = client.post(comments_endpoint, json={"content": "hello"})

    assert response.status_code == 401
    data = response.json()
    assert data["isSuccess"] is False
    assert data["code"] == "AUTH-001"


@pytest.mark.parametrize("content", ["", "   ", "\n\t"])
def test_create_comment_rejects_blank(client, alice_headers, comments_endpoint, content):
    response = client.post(comments_endpoint, json={"content": content}, headers=alice_headers)

    assert response.status_code == 422
    assert response.json()["code"] == "VALIDATION-001"


def test_create_comment_store_failure(client, alice_headers, comments_endpoint):
    failing = MagicMock()
    failing.add.side_effect = ConnectionError("network down")
    app.dependency_overrides[get_comment_repository] = lambda: failing

    response = client.post(comments_endpoint, json={"content": "hello"}, headers=alice_headers)

    assert response.status_code == 503
    assert response.json()["code"] == "STORE-001"


def test_list_comments_read_failure_returns_empty(client, comments_endpoint):
    failing = MagicMock()
    failing.list_for_recipe.side_effect = ConnectionError("network down")
    app.dependency_overrides[get_comment_repository] = lambda: failing

    response = client.get(comments_endpoint)

    assert response.status_code == 200
    assert response.json()["result"] == []


def test_delete_own_comment(client, comment_repo, alice, alice_headers, recipe_id, comments_endpoint):
    comment_repo.add(alice.id, recipe_id, "mine")
    comment_id = comment_repo.list_for_recipe(recipe_id)[0].id

    response = client.delete(f"/api/comments/{comment_id}", headers=alice_headers)

    assert response.status_code == 200
    assert response.json()["result"] == {"deleted": True}
    assert client.get(comments_endpoint).json()["result"] == []


def test_delete_other_users_comment_forbidden(client, comment_repo, alice, bob_headers, recipe_id):
    comment_repo.add(alice.id, recipe_id, "alice's")
    comment_id = comment_repo.list_for_recipe(recipe_id)[0].id

    response = client.delete(f"/api/comments/{comment_id}", headers=bob_headers)

    assert response.status_code == 403
    assert response.json()["code"] == "AUTH-002"
    assert comment_repo.get(comment_id) is not None


def test_delete_missing_comment(client, alice_headers):
    response = client.delete("/api/comments/does-not-exist", headers=alice_headers)

    assert response.status_code == 404
    assert response.json()["code"] == "COMMENT-001"
