from typing import Optional
from app.models.dto import Recipe, ALL_CATEGORIES


def matches_search(recipe: Recipe, search: Optional[str]) -> bool:
    # 제목 또는 설명 중 한 필드에 대한 대소문자 무시 부분 일치 (Supabase ilike 두 조건의 OR와 동일)
    if not search or not search.strip():
        return True
    needle = search.strip().lower()
    return any(needle in (field or "").lower() for field in (recipe.title, recipe.description))


def matches_category(recipe: Recipe, category: Optional[str]) -> bool:
    if not category or category == ALL_CATEGORIES:
        return True
    return recipe.category == category


def filter_recipes(recipes: list[Recipe], search: Optional[str] = None, category: Optional[str] = None) -> list[Recipe]:
    return [r for r in recipes if matches_search(r, search) and matches_category(r, category)]
