"""
레시피 댓글 서비스

- 목록 조회는 최신순이며, 읽기 실패 시 빈 목록으로 대체 (화면은 "댓글 없음" 표시)
- 작성 성공 후에는 전체 목록을 다시 읽어 반환 (작성 직후 목록 갱신 패턴)
- 삭제는 작성자 본인만 가능
"""

from __future__ import annotations
import logging
from typing import List
from app.exception.domain.auth_exception import ForbiddenError
from app.exception.domain.resource_exception import CommentNotFoundError
from app.exception.domain.store_exception import StoreUnavailableError
from app.models.dto import Comment, CurrentUser
from app.repositories.base import ICommentRepository

logger = logging.getLogger(__name__)


class CommentService:

    def __init__(self, comment_repo: ICommentRepository):
        self.comment_repo = comment_repo

    def list_comments(self, recipe_id: str) -> List[Comment]:
        try:
            return self.comment_repo.list_for_recipe(recipe_id)
        except Exception as e:
            logger.error({"message": "Error fetching comments", "recipe_id": recipe_id, "detail": str(e)})
            return []

    def add_comment(self, user: CurrentUser, recipe_id: str, content: str) -> List[Comment]:
        """
        댓글 작성 후 갱신된 목록 반환

        Args:
            user (CurrentUser): 작성자
            recipe_id (str): 레시피 ID
            content (str): 앞뒤 공백이 제거된 비어 있지 않은 내용 (CommentCreate에서 검증)

        Raises:
            StoreUnavailableError: 저장 실패
        """
        try:
            self.comment_repo.add(user.id, recipe_id, content)
        except Exception as e:
            logger.error({"message": "Error posting comment", "recipe_id": recipe_id, "detail": str(e)})
            raise StoreUnavailableError("댓글 등록에 실패했습니다.") from e

        return self.list_comments(recipe_id)

    def delete_comment(self, user: CurrentUser, comment_id: str) -> None:
        try:
            comment = self.comment_repo.get(comment_id)
        except Exception as e:
            raise StoreUnavailableError() from e

        if comment is None:
            raise CommentNotFoundError()
        if comment.user_id != user.id:
            raise ForbiddenError()

        try:
            self.comment_repo.delete(comment_id, user.id)
        except Exception as e:
            logger.error({"message": "Error deleting comment", "comment_id": comment_id, "detail": str(e)})
            raise StoreUnavailableError("댓글 삭제에 실패했습니다.") from e
