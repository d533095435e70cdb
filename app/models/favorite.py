from datetime import datetime, timezone
from sqlalchemy import Column, Integer, String, UniqueConstraint, DateTime
from app.core.database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Favorite(Base):
    """사용자가 레시피에 누른 좋아요(즐겨찾기) 관계 테이블 모델입니다.

    Args:
        id (int): 레코드 고유 ID (PK, Auto Increment).
        user_id (str): Supabase Auth 사용자 ID (UUID 문자열).
        recipe_id (str): 레시피 ID.
        created_at (datetime): 좋아요 생성 일시. 생성/삭제만 있고 수정은 없음.
    """
    __tablename__ = "favorites"
    __table_args__ = (
        # Rationale:
        # 좋아요 토글은 낙관적 업데이트로 동작하므로, 빠른 연속 클릭이나 동시 요청에서
        # 같은 (user, recipe) 쌍이 두 번 삽입되는 것을 막는 유일한 장치가 이 제약입니다.
        # Supabase(Postgres)의 favorites 테이블에도 동일한 유니크 제약이 있어야 합니다.
        UniqueConstraint('user_id', 'recipe_id', name='uq_favorites_user_recipe'),
    )

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)

    # NOTE: recipe_id는 레시피별 좋아요 수 집계에서 WHERE 조건으로 사용됨
    user_id = Column(String(255), nullable=False, index=True)
    recipe_id = Column(String(255), nullable=False, index=True)

    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)
