import threading
import uuid
from datetime import datetime, timezone
from itertools import count
from typing import Dict, List, Optional, Tuple
from app.exception.domain.store_exception import DuplicateFavoriteError
from app.models.dto import FavoriteRow, Comment, Recipe, RecipeCreate, Profile
from app.utils.recipe_filter import filter_recipes


def _now() -> datetime:
    return datetime.now(timezone.utc)


class MockFavoriteRepository:
    """
    In-Memory Mock 저장소 구현체

    Note:
        서버 재시작 시 데이터가 초기화됩니다.
        (user_id, recipe_id)를 dict 키로 관리하여 Postgres의 유니크 제약과 같은 동작을 흉내냅니다.
    """

    def __init__(self):
        # Data Structure: {(user_id, recipe_id): (seq, FavoriteRow)}
        self._data: Dict[Tuple[str, str], Tuple[int, FavoriteRow]] = {}
        self._seq = count()
        self._lock = threading.Lock()

    def list_for_recipe(self, recipe_id: str) -> List[FavoriteRow]:
        with self._lock:
            return [row for _, row in self._data.values() if row.recipe_id == recipe_id]

    def exists(self, user_id: str, recipe_id: str) -> bool:
        with self._lock:
            return (user_id, recipe_id) in self._data

    def add(self, user_id: str, recipe_id: str) -> None:
        with self._lock:
            if (user_id, recipe_id) in self._data:
                raise DuplicateFavoriteError()
            row = FavoriteRow(user_id=user_id, recipe_id=recipe_id, created_at=_now())
            self._data[(user_id, recipe_id)] = (next(self._seq), row)

    def delete(self, user_id: str, recipe_id: str) -> None:
        with self._lock:
            self._data.pop((user_id, recipe_id), None)

    def list_for_user(self, user_id: str) -> List[FavoriteRow]:
        with self._lock:
            entries = [entry for key, entry in self._data.items() if key[0] == user_id]
        return [row for _, row in sorted(entries, key=lambda e: e[0], reverse=True)]


class MockCommentRepository:
    """In-Memory 댓글 저장소 (삽입 순서를 작성 시각 순서로 간주)"""

    def __init__(self):
        self._comments: List[Comment] = []
        self._lock = threading.Lock()

    def list_for_recipe(self, recipe_id: str) -> List[Comment]:
        with self._lock:
            return [c for c in reversed(self._comments) if c.recipe_id == recipe_id]

    def add(self, user_id: str, recipe_id: str, content: str) -> None:
        comment = Comment(
            id=str(uuid.uuid4()),
            recipe_id=recipe_id,
            user_id=user_id,
            content=content,
            created_at=_now(),
        )
        with self._lock:
            self._comments.append(comment)

    def get(self, comment_id: str) -> Optional[Comment]:
        with self._lock:
            return next((c for c in self._comments if c.id == comment_id), None)

    def delete(self, comment_id: str, user_id: str) -> None:
        with self._lock:
            self._comments = [
                c for c in self._comments
                if not (c.id == comment_id and c.user_id == user_id)
            ]


class MockRecipeRepository:
    """In-Memory 레시피 저장소"""

    def __init__(self):
        self._recipes: Dict[str, Recipe] = {}
        self._order: List[str] = []
        self._lock = threading.Lock()

    def list(self, search: Optional[str] = None, category: Optional[str] = None) -> List[Recipe]:
        with self._lock:
            recipes = [self._recipes[rid] for rid in reversed(self._order)]
        return filter_recipes(recipes, search=search, category=category)

    def get(self, recipe_id: str) -> Optional[Recipe]:
        with self._lock:
            return self._recipes.get(recipe_id)

    def get_many(self, recipe_ids: List[str]) -> List[Recipe]:
        with self._lock:
            return [self._recipes[rid] for rid in recipe_ids if rid in self._recipes]

    def create(self, user_id: str, data: RecipeCreate) -> Recipe:
        recipe = Recipe(
            id=str(uuid.uuid4()),
            created_at=_now(),
            user_id=user_id,
            **data.model_dump(),
        )
        with self._lock:
            self._recipes[recipe.id] = recipe
            self._order.append(recipe.id)
        return recipe

    def update(self, recipe_id: str, changes: dict) -> Recipe:
        with self._lock:
            current = self._recipes[recipe_id]
            updated = Recipe.model_validate({**current.model_dump(), **changes})
            self._recipes[recipe_id] = updated
            return updated

    def delete(self, recipe_id: str) -> None:
        with self._lock:
            if self._recipes.pop(recipe_id, None) is not None:
                self._order.remove(recipe_id)


class MockProfileRepository:
    """In-Memory 프로필 저장소 (save로 미리 넣어 둔 프로필만 조회/수정 가능)"""

    def __init__(self):
        self._profiles: Dict[str, Profile] = {}
        self._lock = threading.Lock()

    def save(self, profile: Profile) -> None:
        with self._lock:
            self._profiles[profile.id] = profile

    def get(self, user_id: str) -> Optional[Profile]:
        with self._lock:
            return self._profiles.get(user_id)

    def update(self, user_id: str, changes: dict) -> Optional[Profile]:
        with self._lock:
            current = self._profiles.get(user_id)
            if current is None:
                return None
            updated = Profile.model_validate({**current.model_dump(), **changes})
            self._profiles[user_id] = updated
            return updated
