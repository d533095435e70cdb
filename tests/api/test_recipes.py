import pytest
from app.models.dto import RecipeCreate


@pytest.fixture
def recipe_payload():
    return {
        "title": "  Pancakes ",
        "description": "Fluffy breakfast pancakes",
        "ingredients": ["flour", "milk", " ", "egg"],
        "instructions": ["Mix", "Cook"],
        "cooking_time": 20,
        "difficulty": "medium",
        "category": "Breakfast",
    }


def test_list_categories(client):
    response = client.get("/api/recipes/categories")

    assert response.status_code == 200
    result = response.json()["result"]
    assert result[0] == "All"
    assert "Dessert" in result


def test_create_recipe(client, alice, alice_headers, recipe_payload):
    response = client.post("/api/recipes", json=recipe_payload, headers=alice_headers)

    assert response.status_code == 201
    result = response.json()["result"]
    assert result["title"] == "Pancakes"
    assert result["ingredients"] == ["flour", "milk", "egg"]
    assert result["user_id"] == alice.id
    assert result["difficulty"] == "medium"


def test_create_recipe_requires_login(client, recipe_payload):
    response = client.post("/api/recipes", json=recipe_payload)

    assert response.status_code == 401


@pytest.mark.parametrize("override", [
    {"title": "   "},                 # 제목 공백
    {"ingredients": []},              # 재료 없음
    {"instructions": ["  "]},         # 조리 순서 공백
    {"category": "Brunch"},           # 없는 카테고리
    {"difficulty": "extreme"},        # 없는 난이도
])
def test_create_recipe_validation(client, alice_headers, recipe_payload, override):
    response = client.post("/api/recipes", json={**recipe_payload, **override}, headers=alice_headers)

    assert response.status_code == 422
    assert response.json()["isSuccess"] is False


def test_get_recipe_and_not_found(client, sample_recipe):
    response = client.get(f"/api/recipes/{sample_recipe.id}")
    assert response.status_code == 200
    assert response.json()["result"]["title"] == "Kimchi Fried Rice"
    assert response.json()["result"]["uploader_name"] == "Alice Kim"

    response = client.get("/api/recipes/missing")
    assert response.status_code == 404
    assert response.json()["code"] == "RECIPE-001"


def test_list_recipes_filters(client, recipe_repo, alice, sample_recipe):
    recipe_repo.create(alice.id, RecipeCreate(
        title="Brownies", ingredients=["chocolate"], instructions=["Bake"], category="Dessert",
    ))

    all_titles = [r["title"] for r in client.get("/api/recipes").json()["result"]]
    assert all_titles == ["Brownies", "Kimchi Fried Rice"]

    dessert = client.get("/api/recipes", params={"category": "Dessert"}).json()["result"]
    assert [r["title"] for r in dessert] == ["Brownies"]

    searched = client.get("/api/recipes", params={"search": "WEEKNIGHT", "category": "All"}).json()["result"]
    assert [r["title"] for r in searched] == ["Kimchi Fried Rice"]


def test_update_recipe_by_owner(client, alice_headers, sample_recipe):
    response = client.patch(
        f"/api/recipes/{sample_recipe.id}",
        json={"title": "Kimchi Bokkeumbap", "difficulty": "hard"},
        headers=alice_headers,
    )

    assert response.status_code == 200
    result = response.json()["result"]
    assert result["title"] == "Kimchi Bokkeumbap"
    assert result["difficulty"] == "hard"
    # 전달하지 않은 필드는 유지
    assert result["ingredients"] == ["rice", "kimchi", "egg"]


@pytest.mark.parametrize("override", [
    {"title": None},                  # 필수 필드를 null로 지우기
    {"category": None},
    {"ingredients": None},
    {"instructions": None},
    {"ingredients": [" "]},           # 공백만 남은 재료
    {"category": "Brunch"},
])
def test_update_recipe_validation(client, recipe_repo, alice_headers, sample_recipe, override):
    response = client.patch(f"/api/recipes/{sample_recipe.id}", json=override, headers=alice_headers)

    assert response.status_code == 422
    assert response.json()["code"] == "VALIDATION-001"
    # 저장된 레시피는 그대로 유지
    assert recipe_repo.get(sample_recipe.id) == sample_recipe


def test_update_recipe_allows_clearing_optional_fields(client, alice_headers, sample_recipe):
    response = client.patch(f"/api/recipes/{sample_recipe.id}", json={"description": None}, headers=alice_headers)

    assert response.status_code == 200
    assert response.json()["result"]["description"] is None


def test_update_recipe_by_other_user_forbidden(client, bob_headers, sample_recipe):
    response = client.patch(f"/api/recipes/{sample_recipe.id}", json={"title": "Mine now"}, headers=bob_headers)

    assert response.status_code == 403


def test_delete_recipe(client, recipe_repo, alice_headers, bob_headers, sample_recipe):
    response = client.delete(f"/api/recipes/{sample_recipe.id}", headers=bob_headers)
    assert response.status_code == 403

    response = client.delete(f"/api/recipes/{sample_recipe.id}", headers=alice_headers)
    assert response.status_code == 200
    assert response.json()["result"] == {"deleted": True}
    assert recipe_repo.get(sample_recipe.id) is None


def test_recipe_detail_without_uploader_profile(client, recipe_repo):
    recipe = recipe_repo.create("no-profile-user", RecipeCreate(
        title="Iced Tea", ingredients=["tea"], instructions=["Brew"], category="Drink",
    ))

    result = client.get(f"/api/recipes/{recipe.id}").json()["result"]

    assert result["uploader"] is None
    assert result["uploader_name"] == "Anonymous"
