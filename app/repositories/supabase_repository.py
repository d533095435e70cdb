from typing import List, Optional
import logging
from postgrest.exceptions import APIError
from supabase import Client
from app.core.config import FAVORITES_TABLE, COMMENTS_TABLE, RECIPES_TABLE, PROFILES_TABLE
from app.core.supabase import get_supabase_client
from app.exception.domain.store_exception import DuplicateFavoriteError
from app.models.dto import FavoriteRow, Comment, Recipe, RecipeCreate, Profile, ALL_CATEGORIES

logger = logging.getLogger(__name__)

# Postgres unique_violation
UNIQUE_VIOLATION = "23505"


class SupabaseTableRepository:
    """
    Supabase 테이블 저장소 공통 부모

    Rationale:
        클라이언트는 첫 쿼리 시점에 생성합니다. 자격 증명 누락 등으로 생성이 실패해도
        의존성 주입 단계가 아니라 각 쿼리의 try 블록 안에서 예외가 나므로,
        서비스 계층의 읽기/쓰기 실패 정책이 그대로 적용됩니다.
    """

    table: str

    def __init__(self, client: Optional[Client] = None):
        """
        Args:
            client (Optional[Client]): 테스트 용이성을 위한 의존성 주입 지원
        """
        self._client = client

    @property
    def client(self) -> Client:
        if self._client is None:
            self._client = get_supabase_client()
        return self._client


class SupabaseFavoriteRepository(SupabaseTableRepository):
    """
    Supabase (PostgreSQL) 기반 좋아요 저장소 구현체
    테이블: favorites (user_id, recipe_id, created_at), UNIQUE(user_id, recipe_id)
    """

    table = FAVORITES_TABLE

    def list_for_recipe(self, recipe_id: str) -> List[FavoriteRow]:
        try:
            response = self.client.table(self.table)\
                .select("user_id, recipe_id, created_at")\
                .eq("recipe_id", recipe_id)\
                .execute()
            return [FavoriteRow(**row) for row in response.data]
        except Exception as e:
            logger.error(f"Failed to list favorites for recipe {recipe_id}: {e}", exc_info=True)
            raise

    def exists(self, user_id: str, recipe_id: str) -> bool:
        """
        좋아요 존재 여부 확인

        Rationale:
            - count="exact"는 불필요한 집계를 유발하므로 limit(1)만 사용
        """
        try:
            response = self.client.table(self.table)\
                .select("user_id")\
                .eq("user_id", user_id)\
                .eq("recipe_id", recipe_id)\
                .limit(1)\
                .execute()
            return len(response.data) > 0
        except Exception as e:
            logger.error(f"Failed to check favorite for user {user_id}: {e}", exc_info=True)
            raise

    def add(self, user_id: str, recipe_id: str) -> None:
        """
        좋아요 추가

        Rationale:
            - upsert 대신 insert를 사용하여 유니크 제약 위반이 그대로 드러나도록 함
            - 위반(23505)은 DuplicateFavoriteError로 변환하여 서비스 계층이 상태를 수렴시킴
        """
        try:
            self.client.table(self.table)\
                .insert({"user_id": user_id, "recipe_id": recipe_id})\
                .execute()
        except APIError as e:
            if e.code == UNIQUE_VIOLATION:
                raise DuplicateFavoriteError() from e
            logger.error(f"Failed to add favorite for user {user_id}: {e}", exc_info=True)
            raise
        except Exception as e:
            logger.error(f"Failed to add favorite for user {user_id}: {e}", exc_info=True)
            raise

    def delete(self, user_id: str, recipe_id: str) -> None:
        try:
            self.client.table(self.table)\
                .delete()\
                .eq("user_id", user_id)\
                .eq("recipe_id", recipe_id)\
                .execute()
        except Exception as e:
            logger.error(f"Failed to delete favorite for user {user_id}: {e}", exc_info=True)
            raise

    def list_for_user(self, user_id: str) -> List[FavoriteRow]:
        try:
            response = self.client.table(self.table)\
                .select("user_id, recipe_id, created_at")\
                .eq("user_id", user_id)\
                .order("created_at", desc=True)\
                .execute()
            return [FavoriteRow(**row) for row in response.data]
        except Exception as e:
            logger.error(f"Failed to get favorites for user {user_id}: {e}", exc_info=True)
            raise


class SupabaseCommentRepository(SupabaseTableRepository):
    """
    Supabase 기반 댓글 저장소
    테이블: comments (id, recipe_id, user_id, content, created_at) + profiles join
    """

    COLUMNS = "id, recipe_id, user_id, content, created_at, profiles(full_name, username)"
    table = COMMENTS_TABLE

    def list_for_recipe(self, recipe_id: str) -> List[Comment]:
        try:
            response = self.client.table(self.table)\
                .select(self.COLUMNS)\
                .eq("recipe_id", recipe_id)\
                .order("created_at", desc=True)\
                .execute()
            return [Comment(**row) for row in response.data]
        except Exception as e:
            logger.error(f"Failed to list comments for recipe {recipe_id}: {e}", exc_info=True)
            raise

    def add(self, user_id: str, recipe_id: str, content: str) -> None:
        try:
            self.client.table(self.table)\
                .insert({"user_id": user_id, "recipe_id": recipe_id, "content": content})\
                .execute()
        except Exception as e:
            logger.error(f"Failed to add comment for user {user_id}: {e}", exc_info=True)
            raise

    def get(self, comment_id: str) -> Optional[Comment]:
        try:
            response = self.client.table(self.table)\
                .select(self.COLUMNS)\
                .eq("id", comment_id)\
                .limit(1)\
                .execute()
            return Comment(**response.data[0]) if response.data else None
        except Exception as e:
            logger.error(f"Failed to get comment {comment_id}: {e}", exc_info=True)
            raise

    def delete(self, comment_id: str, user_id: str) -> None:
        try:
            # user_id 조건으로 본인 댓글만 삭제되도록 이중 보호 (RLS와 함께)
            self.client.table(self.table)\
                .delete()\
                .eq("id", comment_id)\
                .eq("user_id", user_id)\
                .execute()
        except Exception as e:
            logger.error(f"Failed to delete comment {comment_id}: {e}", exc_info=True)
            raise


def _sanitize_search(search: str) -> str:
    """
    ilike 검색어 정리

    - PostgREST or() 구문 문자(,()), 와일드카드 별칭(*), 역슬래시 제거
    - LIKE 와일드카드(%, _)는 이스케이프하여 글자 그대로 일치시킴
    """
    term = "".join(ch for ch in search if ch not in ",()*\\").strip()
    return term.replace("%", r"\%").replace("_", r"\_")


class SupabaseRecipeRepository(SupabaseTableRepository):
    """Supabase 기반 레시피 저장소 (테이블: recipes)"""

    table = RECIPES_TABLE

    def list(self, search: Optional[str] = None, category: Optional[str] = None) -> List[Recipe]:
        try:
            query = self.client.table(self.table).select("*")
            if category and category != ALL_CATEGORIES:
                query = query.eq("category", category)
            if search and _sanitize_search(search):
                term = _sanitize_search(search)
                query = query.or_(f"title.ilike.%{term}%,description.ilike.%{term}%")
            response = query.order("created_at", desc=True).execute()
            return [Recipe(**row) for row in response.data]
        except Exception as e:
            logger.error(f"Failed to list recipes: {e}", exc_info=True)
            raise

    def get(self, recipe_id: str) -> Optional[Recipe]:
        try:
            response = self.client.table(self.table)\
                .select("*")\
                .eq("id", recipe_id)\
                .limit(1)\
                .execute()
            return Recipe(**response.data[0]) if response.data else None
        except Exception as e:
            logger.error(f"Failed to get recipe {recipe_id}: {e}", exc_info=True)
            raise

    def get_many(self, recipe_ids: List[str]) -> List[Recipe]:
        if not recipe_ids:
            return []
        try:
            response = self.client.table(self.table)\
                .select("*")\
                .in_("id", recipe_ids)\
                .execute()
            return [Recipe(**row) for row in response.data]
        except Exception as e:
            logger.error(f"Failed to get recipes {recipe_ids}: {e}", exc_info=True)
            raise

    def create(self, user_id: str, data: RecipeCreate) -> Recipe:
        try:
            payload = {"user_id": user_id, **data.model_dump(mode="json")}
            response = self.client.table(self.table).insert(payload).execute()
            return Recipe(**response.data[0])
        except Exception as e:
            logger.error(f"Failed to create recipe for user {user_id}: {e}", exc_info=True)
            raise

    def update(self, recipe_id: str, changes: dict) -> Recipe:
        try:
            response = self.client.table(self.table)\
                .update(changes)\
                .eq("id", recipe_id)\
                .execute()
            return Recipe(**response.data[0])
        except Exception as e:
            logger.error(f"Failed to update recipe {recipe_id}: {e}", exc_info=True)
            raise

    def delete(self, recipe_id: str) -> None:
        try:
            self.client.table(self.table).delete().eq("id", recipe_id).execute()
        except Exception as e:
            logger.error(f"Failed to delete recipe {recipe_id}: {e}", exc_info=True)
            raise


class SupabaseProfileRepository(SupabaseTableRepository):
    """
    Supabase 기반 프로필 저장소
    테이블: profiles (id = auth.users.id, email, username, full_name, bio, created_at, updated_at)
    """

    table = PROFILES_TABLE

    def get(self, user_id: str) -> Optional[Profile]:
        try:
            response = self.client.table(self.table)\
                .select("*")\
                .eq("id", user_id)\
                .limit(1)\
                .execute()
            return Profile(**response.data[0]) if response.data else None
        except Exception as e:
            logger.error(f"Failed to get profile {user_id}: {e}", exc_info=True)
            raise

    def update(self, user_id: str, changes: dict) -> Optional[Profile]:
        try:
            response = self.client.table(self.table)\
                .update(changes)\
                .eq("id", user_id)\
                .execute()
            # RLS 또는 행 부재로 갱신된 행이 없으면 빈 목록이 반환됨
            return Profile(**response.data[0]) if response.data else None
        except Exception as e:
            logger.error(f"Failed to update profile {user_id}: {e}", exc_info=True)
            raise
