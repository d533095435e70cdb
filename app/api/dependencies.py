from __future__ import annotations
from functools import lru_cache
from typing import Optional
from fastapi import Depends, Header

from app.core.config import STORE_BACKEND
from app.core.identity import SupabaseIdentityProvider, extract_bearer_token
from app.exception.domain.auth_exception import UnauthenticatedError
from app.models.dto import CurrentUser
from app.repositories.base import (
    IFavoriteRepository, ICommentRepository, IRecipeRepository, IProfileRepository, IIdentityProvider
)
from app.services.comment_service import CommentService
from app.services.like_service import LikeService
from app.services.profile_service import ProfileService
from app.services.recipe_service import RecipeService


# --- Repository Dependencies (Singleton via lru_cache) ---

@lru_cache(maxsize=1)
def get_favorite_repository() -> IFavoriteRepository:
    """
    Favorite Repository 의존성 주입

    Returns:
        IFavoriteRepository: STORE_BACKEND 설정에 따라 Supabase 또는 SQLAlchemy 구현체
    """
    if STORE_BACKEND == "sql":
        from app.repositories.sql_repository import SqlFavoriteRepository
        return SqlFavoriteRepository()

    from app.repositories.supabase_repository import SupabaseFavoriteRepository
    return SupabaseFavoriteRepository()


@lru_cache(maxsize=1)
def get_comment_repository() -> ICommentRepository:
    from app.repositories.supabase_repository import SupabaseCommentRepository
    return SupabaseCommentRepository()


@lru_cache(maxsize=1)
def get_recipe_repository() -> IRecipeRepository:
    from app.repositories.supabase_repository import SupabaseRecipeRepository
    return SupabaseRecipeRepository()


@lru_cache(maxsize=1)
def get_profile_repository() -> IProfileRepository:
    from app.repositories.supabase_repository import SupabaseProfileRepository
    return SupabaseProfileRepository()


@lru_cache(maxsize=1)
def get_identity_provider() -> IIdentityProvider:
    return SupabaseIdentityProvider()


# --- Service Dependencies ---

def get_like_service(
    repo: IFavoriteRepository = Depends(get_favorite_repository),
) -> LikeService:
    # NOTE: 진행 중 토글 가드를 요청 간에 공유하기 위해 저장소별로 하나의 인스턴스를 재사용
    return _like_service_for(repo)


@lru_cache(maxsize=8)
def _like_service_for(repo: IFavoriteRepository) -> LikeService:
    return LikeService(repo)


def get_comment_service(
    repo: ICommentRepository = Depends(get_comment_repository),
) -> CommentService:
    return CommentService(repo)


def get_recipe_service(
    recipe_repo: IRecipeRepository = Depends(get_recipe_repository),
    favorite_repo: IFavoriteRepository = Depends(get_favorite_repository),
    profile_repo: IProfileRepository = Depends(get_profile_repository),
) -> RecipeService:
    return RecipeService(recipe_repo, favorite_repo, profile_repo)


def get_profile_service(
    repo: IProfileRepository = Depends(get_profile_repository),
) -> ProfileService:
    return ProfileService(repo)


# --- Auth Dependencies ---

def get_optional_user(
    authorization: str | None = Header(default=None),
    identity: IIdentityProvider = Depends(get_identity_provider),
) -> Optional[CurrentUser]:
    """
    Authorization 헤더로 현재 사용자 조회 (없거나 실패하면 None)
    """
    return identity.get_current_user(extract_bearer_token(authorization))


def get_required_user(
    user: Optional[CurrentUser] = Depends(get_optional_user),
) -> CurrentUser:
    """
    로그인 필수 엔드포인트용 Dependency

    Raises:
        UnauthenticatedError(401): 사용자 확인 불가
    """
    if user is None:
        raise UnauthenticatedError()
    return user
