from typing import List, Optional
from fastapi import APIRouter, Depends, Query, status
from app.api.dependencies import get_recipe_service, get_required_user
from app.core.response import ApiResponse, success_response
from app.models.dto import CurrentUser, Recipe
from app.services.recipe_service import RecipeService

router = APIRouter(
    prefix="/api/favorites",
    tags=["Favorites"],
)


@router.get("", status_code=status.HTTP_200_OK, response_model=ApiResponse[List[Recipe]])
def get_favorite_recipes(
    search: Optional[str] = Query(None, description="제목/설명 검색어"),
    category: Optional[str] = Query(None, description="카테고리 (All이면 전체)"),
    user: CurrentUser = Depends(get_required_user),
    service: RecipeService = Depends(get_recipe_service),
):
    """
    내가 좋아요한 레시피 목록 (좋아요한 시각 최신순)

    Returns:
        200 OK: Recipe 목록
        401: 로그인 필요
    """
    return success_response(service.list_favorite_recipes(user, search=search, category=category))
