"""
레시피 좋아요 토글 및 좋아요 수 추적 서비스

이 모듈은 (사용자, 레시피) 좋아요 관계와 레시피별 좋아요 수를 다루는
서비스 계층을 제공합니다.

주요 기능:
- fetch_state: 저장소의 좋아요 레코드로부터 LikeState를 계산
- toggle: 클라이언트가 표시 중인 상태를 받아 다음 상태를 낙관적으로 계산
- refresh: 토글이 끝난 뒤 실제 집계값으로 다시 수렴

설계 결정:
- LikeState는 불변 값 객체이며, 서비스는 레시피별 상태를 보관하지 않음
  (이전 상태를 인자로 받고 다음 상태를 반환하는 순수 함수 형태)
- 다음 상태는 서버 재조회가 아닌 호출자의 이전 상태로부터 계산됨 (Optimistic Update).
  여러 클라이언트가 동시에 토글하면 표시 값이 일시적으로 실제 집계와 달라질 수 있으며,
  refresh로 다시 맞춤
- 실패는 호출자에게 예외로 전달하지 않고 안전한 기본값으로 수렴
  (비로그인: 변화 없음 / 쓰기 실패: 이전 상태 유지 / 읽기 실패: liked=False, count=0)

동시성:
- 같은 (user, recipe) 쌍에 대한 토글이 진행 중이면 이후 요청은 이전 상태를 그대로 반환
  (UI에서 버튼을 비활성화하는 것과 같은 역할)
- 중복 행 방지는 전적으로 저장소의 UNIQUE(user_id, recipe_id) 제약에 의존함.
  제약이 없는 저장소로 옮길 경우 조건부 insert(upsert on conflict do nothing) 또는
  트랜잭션 내 check-then-insert가 필요함
"""

from __future__ import annotations
import logging
import threading
from typing import Iterable, Optional
from app.exception.domain.store_exception import DuplicateFavoriteError
from app.models.dto import FavoriteRow, LikeState
from app.repositories.base import IFavoriteRepository

logger = logging.getLogger(__name__)


def derive_state(rows: Iterable[FavoriteRow], user_id: Optional[str]) -> LikeState:
    """좋아요 레코드 집합으로부터 LikeState 계산 (비로그인이면 liked=False)"""
    rows = list(rows)
    liked = user_id is not None and any(row.user_id == user_id for row in rows)
    return LikeState(liked=liked, count=len(rows))


def apply_like(state: LikeState) -> LikeState:
    return LikeState(liked=True, count=state.count + 1)


def apply_unlike(state: LikeState) -> LikeState:
    return LikeState(liked=False, count=max(0, state.count - 1))


class LikeService:
    """레시피 좋아요 토글 & 카운트 추적 서비스.

    사용 예시:
        >>> service = LikeService(MockFavoriteRepository())
        >>> state = service.fetch_state("user-1", "recipe-1")
        >>> state = service.toggle("user-1", "recipe-1", state)

    Attributes:
        favorite_repo: 좋아요 저장소 (유니크 제약 보장 필수)
    """

    def __init__(self, favorite_repo: IFavoriteRepository):
        self.favorite_repo = favorite_repo
        self._in_flight: set[tuple[str, str]] = set()
        self._lock = threading.Lock()

    def fetch_state(self, user_id: Optional[str], recipe_id: str) -> LikeState:
        """
        레시피의 현재 좋아요 상태 조회

        Args:
            user_id (Optional[str]): 현재 사용자 ID (비로그인이면 None)
            recipe_id (str): 레시피 ID

        Returns:
            LikeState: 읽기 실패 시 LikeState(liked=False, count=0)
        """
        try:
            rows = self.favorite_repo.list_for_recipe(recipe_id)
        except Exception as e:
            logger.error({
                "message": "Failed to fetch like state",
                "recipe_id": recipe_id,
                "detail": str(e),
            })
            return LikeState()

        return derive_state(rows, user_id)

    def toggle(self, user_id: Optional[str], recipe_id: str, current: LikeState) -> LikeState:
        """
        좋아요 토글

        Args:
            user_id (Optional[str]): 현재 사용자 ID (비로그인이면 None → 변화 없음)
            recipe_id (str): 레시피 ID
            current (LikeState): 클라이언트가 표시 중인 상태

        Returns:
            LikeState: 다음 상태. 쓰기 실패 시 current를 그대로 반환
        """
        if not user_id or not recipe_id:
            logger.info({"message": "Toggle ignored for anonymous user", "recipe_id": recipe_id})
            return current

        key = (user_id, recipe_id)
        if not self._begin(key):
            logger.info({"message": "Toggle already in flight", "user_id": user_id, "recipe_id": recipe_id})
            return current

        try:
            if current.liked:
                return self._unlike(user_id, recipe_id, current)
            return self._like(user_id, recipe_id, current)
        finally:
            self._end(key)

    def refresh(self, user_id: Optional[str], recipe_id: str, current: LikeState) -> LikeState:
        """
        저장소를 다시 읽어 실제 집계값으로 수렴

        Returns:
            LikeState: 읽기 실패 시 표시 중인 상태(current)를 유지
        """
        try:
            rows = self.favorite_repo.list_for_recipe(recipe_id)
        except Exception as e:
            logger.error({
                "message": "Failed to refresh like state",
                "recipe_id": recipe_id,
                "detail": str(e),
            })
            return current

        return derive_state(rows, user_id)

    def _like(self, user_id: str, recipe_id: str, current: LikeState) -> LikeState:
        try:
            self.favorite_repo.add(user_id, recipe_id)
        except DuplicateFavoriteError:
            # 이미 좋아요 상태(stale state / 연속 클릭): 행은 늘지 않았으므로 count 유지
            return LikeState(liked=True, count=current.count)
        except Exception as e:
            logger.error({
                "message": "Failed to add favorite, keeping previous state",
                "user_id": user_id,
                "recipe_id": recipe_id,
                "detail": str(e),
            })
            return current

        return apply_like(current)

    def _unlike(self, user_id: str, recipe_id: str, current: LikeState) -> LikeState:
        try:
            if not self.favorite_repo.exists(user_id, recipe_id):
                # 로컬 상태가 오래됨: 삭제할 행이 없으므로 liked만 False로 수렴
                return LikeState(liked=False, count=current.count)
            self.favorite_repo.delete(user_id, recipe_id)
        except Exception as e:
            logger.error({
                "message": "Failed to delete favorite, keeping previous state",
                "user_id": user_id,
                "recipe_id": recipe_id,
                "detail": str(e),
            })
            return current

        return apply_unlike(current)

    def _begin(self, key: tuple[str, str]) -> bool:
        with self._lock:
            if key in self._in_flight:
                return False
            self._in_flight.add(key)
            return True

    def _end(self, key: tuple[str, str]) -> None:
        with self._lock:
            self._in_flight.discard(key)
