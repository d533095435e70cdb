from typing import List
from fastapi import APIRouter, Depends, Request, status
from app.api.dependencies import get_comment_service, get_required_user
from app.core.limiter import limiter, COMMENT_RATE_LIMIT
from app.core.response import ApiResponse, success_response
from app.models.dto import Comment, CommentCreate, CurrentUser
from app.services.comment_service import CommentService

router = APIRouter(tags=["Comments"])


@router.get(
    "/api/recipes/{recipe_id}/comments",
    status_code=status.HTTP_200_OK,
    response_model=ApiResponse[List[Comment]],
)
def list_comments(
    recipe_id: str,
    service: CommentService = Depends(get_comment_service),
):
    """레시피 댓글 목록 (최신순)"""
    return success_response(service.list_comments(recipe_id))


@router.post(
    "/api/recipes/{recipe_id}/comments",
    status_code=status.HTTP_201_CREATED,
    response_model=ApiResponse[List[Comment]],
)
@limiter.limit(COMMENT_RATE_LIMIT)
def create_comment(
    request: Request,
    recipe_id: str,
    body: CommentCreate,
    user: CurrentUser = Depends(get_required_user),
    service: CommentService = Depends(get_comment_service),
):
    """
    댓글 작성

    - **Body**: {"content": str} (공백만 있으면 422)

    Returns:
        201 Created: 작성 후 다시 조회한 댓글 목록
    """
    return success_response(service.add_comment(user, recipe_id, body.content))


@router.delete(
    "/api/comments/{comment_id}",
    status_code=status.HTTP_200_OK,
)
def delete_comment(
    comment_id: str,
    user: CurrentUser = Depends(get_required_user),
    service: CommentService = Depends(get_comment_service),
) -> ApiResponse[dict]:
    """
    댓글 삭제 (작성자 본인만)

    Returns:
        200 OK: {"deleted": true}
        403: 다른 사용자의 댓글
        404: 댓글 없음
    """
    service.delete_comment(user, comment_id)
    return success_response({"deleted": True})
