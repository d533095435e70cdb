from typing import List, Optional
from fastapi import APIRouter, Depends, Query, status
from app.api.dependencies import get_recipe_service, get_required_user
from app.core.response import ApiResponse, success_response
from app.models.dto import CurrentUser, Recipe, RecipeCreate, RecipeDetail, RecipeUpdate, CATEGORIES, ALL_CATEGORIES
from app.services.recipe_service import RecipeService

router = APIRouter(
    prefix="/api/recipes",
    tags=["Recipes"],
    responses={404: {"description": "Not found"}},
)


@router.get("/categories", status_code=status.HTTP_200_OK)
def list_categories() -> ApiResponse[List[str]]:
    """필터용 카테고리 목록 ("All" 포함)"""
    return success_response([ALL_CATEGORIES, *CATEGORIES])


@router.get("", status_code=status.HTTP_200_OK, response_model=ApiResponse[List[Recipe]])
def list_recipes(
    search: Optional[str] = Query(None, description="제목/설명 검색어"),
    category: Optional[str] = Query(None, description="카테고리 (All이면 전체)"),
    service: RecipeService = Depends(get_recipe_service),
):
    """레시피 목록 (최신순)"""
    return success_response(service.list_recipes(search=search, category=category))


@router.get("/{recipe_id}", status_code=status.HTTP_200_OK, response_model=ApiResponse[RecipeDetail])
def get_recipe(
    recipe_id: str,
    service: RecipeService = Depends(get_recipe_service),
):
    """레시피 상세 (uploader: 작성자 full_name/username, uploader_name: 표시용 이름)"""
    return success_response(service.get_recipe_detail(recipe_id))


@router.post("", status_code=status.HTTP_201_CREATED, response_model=ApiResponse[Recipe])
def create_recipe(
    body: RecipeCreate,
    user: CurrentUser = Depends(get_required_user),
    service: RecipeService = Depends(get_recipe_service),
):
    """
    레시피 작성

    - 필수값: title, category, ingredients(1개 이상), instructions(1개 이상)
    - image_url은 Supabase Storage 업로드 후 받은 공개 URL
    """
    return success_response(service.create_recipe(user, body))


@router.patch("/{recipe_id}", status_code=status.HTTP_200_OK, response_model=ApiResponse[Recipe])
def update_recipe(
    recipe_id: str,
    body: RecipeUpdate,
    user: CurrentUser = Depends(get_required_user),
    service: RecipeService = Depends(get_recipe_service),
):
    """레시피 수정 (작성자 본인만, 전달된 필드만 반영)"""
    return success_response(service.update_recipe(user, recipe_id, body))


@router.delete("/{recipe_id}", status_code=status.HTTP_200_OK)
def delete_recipe(
    recipe_id: str,
    user: CurrentUser = Depends(get_required_user),
    service: RecipeService = Depends(get_recipe_service),
) -> ApiResponse[dict]:
    """레시피 삭제 (작성자 본인만)"""
    service.delete_recipe(user, recipe_id)
    return success_response({"deleted": True})
