"""
레시피 CRUD 및 '내가 좋아요한 레시피' 조회 서비스

레시피 자체는 저장소로의 단순 위임이며, 이 계층은 존재 여부/작성자 확인과
저장소 오류를 StoreUnavailableError(503)로 변환하는 역할만 합니다.
"""

from __future__ import annotations
import logging
from typing import List, Optional
from app.exception.domain.auth_exception import ForbiddenError
from app.exception.domain.resource_exception import RecipeNotFoundError
from app.exception.domain.store_exception import StoreUnavailableError
from app.models.dto import CurrentUser, Recipe, RecipeCreate, RecipeDetail, RecipeUpdate, ProfileSummary
from app.repositories.base import IRecipeRepository, IFavoriteRepository, IProfileRepository
from app.utils.recipe_filter import filter_recipes

logger = logging.getLogger(__name__)


class RecipeService:

    def __init__(
        self,
        recipe_repo: IRecipeRepository,
        favorite_repo: IFavoriteRepository,
        profile_repo: Optional[IProfileRepository] = None,
    ):
        self.recipe_repo = recipe_repo
        self.favorite_repo = favorite_repo
        self.profile_repo = profile_repo

    def list_recipes(self, search: Optional[str] = None, category: Optional[str] = None) -> List[Recipe]:
        try:
            return self.recipe_repo.list(search=search, category=category)
        except Exception as e:
            raise StoreUnavailableError("레시피 목록을 불러오지 못했습니다.") from e

    def get_recipe(self, recipe_id: str) -> Recipe:
        try:
            recipe = self.recipe_repo.get(recipe_id)
        except Exception as e:
            raise StoreUnavailableError() from e
        if recipe is None:
            raise RecipeNotFoundError()
        return recipe

    def get_recipe_detail(self, recipe_id: str) -> RecipeDetail:
        """
        레시피 상세 (작성자 이름 포함)

        Note:
            작성자 프로필 조회 실패는 상세 화면을 막지 않으며 uploader는 null로 반환됩니다.
        """
        recipe = self.get_recipe(recipe_id)
        return RecipeDetail(**recipe.model_dump(), uploader=self._uploader_of(recipe))

    def _uploader_of(self, recipe: Recipe) -> Optional[ProfileSummary]:
        if self.profile_repo is None:
            return None
        try:
            profile = self.profile_repo.get(recipe.user_id)
        except Exception as e:
            logger.warning({"message": "Failed to load uploader profile", "recipe_id": recipe.id, "detail": str(e)})
            return None
        if profile is None:
            return None
        return ProfileSummary(full_name=profile.full_name, username=profile.username)

    def create_recipe(self, user: CurrentUser, data: RecipeCreate) -> Recipe:
        try:
            recipe = self.recipe_repo.create(user.id, data)
        except Exception as e:
            raise StoreUnavailableError("레시피 등록에 실패했습니다.") from e
        logger.info({"message": "Recipe created", "recipe_id": recipe.id, "user_id": user.id})
        return recipe

    def update_recipe(self, user: CurrentUser, recipe_id: str, data: RecipeUpdate) -> Recipe:
        recipe = self._get_owned(user, recipe_id)

        changes = data.model_dump(mode="json", exclude_unset=True)
        if not changes:
            return recipe

        try:
            return self.recipe_repo.update(recipe_id, changes)
        except Exception as e:
            raise StoreUnavailableError("레시피 수정에 실패했습니다.") from e

    def delete_recipe(self, user: CurrentUser, recipe_id: str) -> None:
        self._get_owned(user, recipe_id)
        try:
            self.recipe_repo.delete(recipe_id)
        except Exception as e:
            raise StoreUnavailableError("레시피 삭제에 실패했습니다.") from e
        logger.info({"message": "Recipe deleted", "recipe_id": recipe_id, "user_id": user.id})

    def list_favorite_recipes(
        self,
        user: CurrentUser,
        search: Optional[str] = None,
        category: Optional[str] = None,
    ) -> List[Recipe]:
        """
        사용자가 좋아요한 레시피 목록 (좋아요한 시각 최신순)

        Note:
            삭제된 레시피를 가리키는 좋아요는 결과에서 제외됩니다.
        """
        try:
            favorites = self.favorite_repo.list_for_user(user.id)
            recipe_ids = [f.recipe_id for f in favorites]
            recipes = self.recipe_repo.get_many(recipe_ids)
        except Exception as e:
            raise StoreUnavailableError("좋아요한 레시피를 불러오지 못했습니다.") from e

        by_id = {r.id: r for r in recipes}
        ordered = [by_id[rid] for rid in recipe_ids if rid in by_id]
        return filter_recipes(ordered, search=search, category=category)

    def _get_owned(self, user: CurrentUser, recipe_id: str) -> Recipe:
        recipe = self.get_recipe(recipe_id)
        if recipe.user_id != user.id:
            raise ForbiddenError()
        return recipe
