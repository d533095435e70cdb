from typing import Protocol, List, Optional
from app.models.dto import FavoriteRow, Comment, Recipe, RecipeCreate, CurrentUser, Profile

class IFavoriteRepository(Protocol):
    """
    좋아요(즐겨찾기) 저장소 인터페이스 (Repository Pattern Protocol)

    Contract:
        구현체는 (user_id, recipe_id) 쌍의 유일성을 저장소 수준에서 보장해야 하며,
        중복 삽입 시 DuplicateFavoriteError를 발생시켜야 합니다.
        유니크 제약이 없는 저장소로 옮길 경우 조건부 insert(또는 트랜잭션 내 check-then-insert)로
        같은 보장을 구현해야 합니다.
    """

    def list_for_recipe(self, recipe_id: str) -> List[FavoriteRow]:
        """
        레시피의 좋아요 레코드 전체 조회

        Args:
            recipe_id (str): 레시피 ID

        Returns:
            List[FavoriteRow]: 해당 레시피의 좋아요 목록
        """
        ...

    def exists(self, user_id: str, recipe_id: str) -> bool:
        """
        좋아요 존재 여부 확인

        Returns:
            bool: 존재하면 True, 없으면 False
        """
        ...

    def add(self, user_id: str, recipe_id: str) -> None:
        """
        좋아요 추가

        Raises:
            DuplicateFavoriteError: 이미 같은 쌍이 존재하는 경우
        """
        ...

    def delete(self, user_id: str, recipe_id: str) -> None:
        """좋아요 삭제 (없으면 아무 일도 하지 않음)"""
        ...

    def list_for_user(self, user_id: str) -> List[FavoriteRow]:
        """
        사용자의 좋아요 목록 조회

        Returns:
            List[FavoriteRow]: created_at 내림차순(최신순)
        """
        ...


class ICommentRepository(Protocol):
    """댓글 저장소 인터페이스"""

    def list_for_recipe(self, recipe_id: str) -> List[Comment]:
        """레시피 댓글 목록 (created_at 내림차순)"""
        ...

    def add(self, user_id: str, recipe_id: str, content: str) -> None:
        ...

    def get(self, comment_id: str) -> Optional[Comment]:
        ...

    def delete(self, comment_id: str, user_id: str) -> None:
        """작성자 본인의 댓글만 삭제 (user_id 조건 포함)"""
        ...


class IRecipeRepository(Protocol):
    """레시피 저장소 인터페이스"""

    def list(self, search: Optional[str] = None, category: Optional[str] = None) -> List[Recipe]:
        """레시피 목록 (created_at 내림차순, 검색/카테고리 필터 적용)"""
        ...

    def get(self, recipe_id: str) -> Optional[Recipe]:
        ...

    def get_many(self, recipe_ids: List[str]) -> List[Recipe]:
        """ID 목록에 해당하는 레시피 조회 (존재하지 않는 ID는 무시)"""
        ...

    def create(self, user_id: str, data: RecipeCreate) -> Recipe:
        ...

    def update(self, recipe_id: str, changes: dict) -> Recipe:
        ...

    def delete(self, recipe_id: str) -> None:
        ...


class IProfileRepository(Protocol):
    """프로필 저장소 인터페이스 (profiles 행은 회원가입 시 생성되어 있다고 가정)"""

    def get(self, user_id: str) -> Optional[Profile]:
        ...

    def update(self, user_id: str, changes: dict) -> Optional[Profile]:
        """
        프로필 수정

        Returns:
            Optional[Profile]: 수정된 프로필. 대상 행이 없으면 None
        """
        ...


class IIdentityProvider(Protocol):
    """현재 사용자 조회 인터페이스 (Supabase Auth 등)"""

    def get_current_user(self, access_token: Optional[str]) -> Optional[CurrentUser]:
        """
        Args:
            access_token (Optional[str]): 클라이언트가 보낸 Bearer 토큰

        Returns:
            Optional[CurrentUser]: 인증 실패/토큰 없음이면 None (예외를 던지지 않음)
        """
        ...
