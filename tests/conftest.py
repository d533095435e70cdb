import os
import tempfile

# NOTE: app 모듈 import 전에 설정되어야 함 (config.py가 import 시점에 환경변수를 읽음)
os.environ.setdefault("LOG_DIR", os.path.join(tempfile.gettempdir(), "recipe-share-test-logs"))
os.environ.setdefault("APP_ENV", "test")

import pytest
from typing import Dict, Optional
from fastapi.testclient import TestClient

from app.main import app
from app.api.dependencies import (
    get_favorite_repository,
    get_comment_repository,
    get_recipe_repository,
    get_profile_repository,
    get_identity_provider,
)
from app.core.limiter import limiter
from app.models.dto import CurrentUser, Profile, RecipeCreate
from app.repositories.memory import (
    MockFavoriteRepository, MockCommentRepository, MockRecipeRepository, MockProfileRepository
)


class FakeIdentityProvider:
    """토큰 문자열 → 사용자 매핑으로 동작하는 테스트용 Identity Provider"""

    def __init__(self, users: Dict[str, CurrentUser]):
        self.users = users

    def get_current_user(self, access_token: Optional[str]) -> Optional[CurrentUser]:
        if not access_token:
            return None
        return self.users.get(access_token)


@pytest.fixture
def alice():
    return CurrentUser(id="11111111-1111-1111-1111-111111111111", email="alice@example.com")


@pytest.fixture
def bob():
    return CurrentUser(id="22222222-2222-2222-2222-222222222222", email="bob@example.com")


@pytest.fixture
def identity(alice, bob):
    return FakeIdentityProvider({"alice-token": alice, "bob-token": bob})


@pytest.fixture
def alice_headers():
    return {"Authorization": "Bearer alice-token"}


@pytest.fixture
def bob_headers():
    return {"Authorization": "Bearer bob-token"}


@pytest.fixture
def favorite_repo():
    """각 테스트마다 독립적인 Mock Repository 인스턴스 생성"""
    return MockFavoriteRepository()


@pytest.fixture
def comment_repo():
    return MockCommentRepository()


@pytest.fixture
def recipe_repo():
    return MockRecipeRepository()


@pytest.fixture
def profile_repo(alice):
    repo = MockProfileRepository()
    repo.save(Profile(id=alice.id, email=alice.email, username="alice", full_name="Alice Kim", bio=None))
    return repo


@pytest.fixture
def sample_recipe(recipe_repo, alice):
    return recipe_repo.create(
        alice.id,
        RecipeCreate(
            title="Kimchi Fried Rice",
            description="Quick weeknight dinner",
            ingredients=["rice", "kimchi", "egg"],
            instructions=["Fry kimchi", "Add rice", "Top with egg"],
            cooking_time=15,
            difficulty="easy",
            category="Dinner",
        ),
    )


@pytest.fixture
def client(favorite_repo, comment_repo, recipe_repo, profile_repo, identity):
    """Dependency override가 적용된 TestClient 제공 및 자동 정리"""
    app.dependency_overrides[get_favorite_repository] = lambda: favorite_repo
    app.dependency_overrides[get_comment_repository] = lambda: comment_repo
    app.dependency_overrides[get_recipe_repository] = lambda: recipe_repo
    app.dependency_overrides[get_profile_repository] = lambda: profile_repo
    app.dependency_overrides[get_identity_provider] = lambda: identity
    limiter.enabled = False
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
    limiter.enabled = True
