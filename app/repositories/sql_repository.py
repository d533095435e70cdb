from typing import List, Optional
import logging
from sqlalchemy import select, delete
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, sessionmaker
from app.core.database import SessionLocal
from app.exception.domain.store_exception import DuplicateFavoriteError
from app.models.dto import FavoriteRow
from app.models.favorite import Favorite

logger = logging.getLogger(__name__)


class SqlFavoriteRepository:
    """
    SQLAlchemy 기반 좋아요 저장소 구현체 (로컬 개발 / Supabase 미사용 환경)

    Rationale:
        Favorite 모델의 UniqueConstraint(user_id, recipe_id)가 중복 삽입을 막으며,
        IntegrityError를 DuplicateFavoriteError로 변환하여 Supabase 구현체와 같은 계약을 지킵니다.
    """

    def __init__(self, session_factory: Optional[sessionmaker] = None):
        self.session_factory = session_factory or SessionLocal

    def _session(self) -> Session:
        return self.session_factory()

    @staticmethod
    def _to_row(favorite: Favorite) -> FavoriteRow:
        return FavoriteRow(
            user_id=favorite.user_id,
            recipe_id=favorite.recipe_id,
            created_at=favorite.created_at,
        )

    def list_for_recipe(self, recipe_id: str) -> List[FavoriteRow]:
        with self._session() as db:
            favorites = db.scalars(select(Favorite).where(Favorite.recipe_id == recipe_id)).all()
            return [self._to_row(f) for f in favorites]

    def exists(self, user_id: str, recipe_id: str) -> bool:
        with self._session() as db:
            stmt = select(Favorite.id).where(
                Favorite.user_id == user_id,
                Favorite.recipe_id == recipe_id,
            ).limit(1)
            return db.scalars(stmt).first() is not None

    def add(self, user_id: str, recipe_id: str) -> None:
        with self._session() as db:
            db.add(Favorite(user_id=user_id, recipe_id=recipe_id))
            try:
                db.commit()
            except IntegrityError as e:
                db.rollback()
                raise DuplicateFavoriteError() from e

    def delete(self, user_id: str, recipe_id: str) -> None:
        with self._session() as db:
            db.execute(
                delete(Favorite).where(
                    Favorite.user_id == user_id,
                    Favorite.recipe_id == recipe_id,
                )
            )
            db.commit()

    def list_for_user(self, user_id: str) -> List[FavoriteRow]:
        with self._session() as db:
            stmt = select(Favorite).where(Favorite.user_id == user_id)\
                .order_by(Favorite.created_at.desc(), Favorite.id.desc())
            return [self._to_row(f) for f in db.scalars(stmt).all()]
