from typing import Optional
from fastapi import APIRouter, Depends, Query, status
from app.api.dependencies import get_like_service, get_optional_user
from app.core.response import ApiResponse, success_response
from app.models.dto import CurrentUser, LikeState
from app.services.like_service import LikeService

router = APIRouter(
    prefix="/api/recipes/{recipe_id}/likes",
    tags=["Likes"],
)


def _user_id(user: Optional[CurrentUser]) -> Optional[str]:
    return user.id if user else None


@router.get("", status_code=status.HTTP_200_OK, response_model=ApiResponse[LikeState])
def get_like_state(
    recipe_id: str,
    user: Optional[CurrentUser] = Depends(get_optional_user),
    service: LikeService = Depends(get_like_service),
):
    """
    좋아요 상태 조회

    - **recipe_id**: 레시피 ID (Path Parameter)
    - **Header(Authorization)**: `Bearer <access token>` (선택, 없으면 liked=false)

    Returns:
        200 OK: {"liked": bool, "count": int}
    """
    return success_response(service.fetch_state(_user_id(user), recipe_id))


@router.post("/toggle", status_code=status.HTTP_200_OK, response_model=ApiResponse[LikeState])
def toggle_like(
    recipe_id: str,
    current: LikeState,
    user: Optional[CurrentUser] = Depends(get_optional_user),
    service: LikeService = Depends(get_like_service),
):
    """
    좋아요 토글

    - **recipe_id**: 레시피 ID (Path Parameter)
    - **Body**: 클라이언트가 표시 중인 상태 {"liked": bool, "count": int}

    Returns:
        200 OK: 다음 상태. 비로그인/저장 실패 시 요청 상태를 그대로 반환
    """
    return success_response(service.toggle(_user_id(user), recipe_id, current))


@router.get("/refresh", status_code=status.HTTP_200_OK, response_model=ApiResponse[LikeState])
def refresh_like_state(
    recipe_id: str,
    liked: bool = Query(False, description="표시 중인 liked"),
    count: int = Query(0, ge=0, description="표시 중인 count"),
    user: Optional[CurrentUser] = Depends(get_optional_user),
    service: LikeService = Depends(get_like_service),
):
    """
    실제 집계값으로 재동기화 (조회 실패 시 표시 중인 상태 유지)
    """
    current = LikeState(liked=liked, count=count)
    return success_response(service.refresh(_user_id(user), recipe_id, current))
