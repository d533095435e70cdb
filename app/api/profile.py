from fastapi import APIRouter, Depends, status
from app.api.dependencies import get_profile_service, get_required_user
from app.core.response import ApiResponse, success_response
from app.models.dto import CurrentUser, Profile, ProfileUpdate
from app.services.profile_service import ProfileService

router = APIRouter(
    prefix="/api/profile",
    tags=["Profile"],
)


@router.get("", status_code=status.HTTP_200_OK, response_model=ApiResponse[Profile])
def get_my_profile(
    user: CurrentUser = Depends(get_required_user),
    service: ProfileService = Depends(get_profile_service),
):
    """내 프로필 조회"""
    return success_response(service.get_profile(user))


@router.patch("", status_code=status.HTTP_200_OK, response_model=ApiResponse[Profile])
def update_my_profile(
    body: ProfileUpdate,
    user: CurrentUser = Depends(get_required_user),
    service: ProfileService = Depends(get_profile_service),
):
    """
    내 프로필 수정

    - **Body**: {"email", "username", "full_name"} 필수, "bio" 선택
    - 필수값이 비어 있으면 422 (VALIDATION-001)

    Returns:
        200 OK: 수정된 프로필
        404: 프로필 행 없음 (PROFILE-001)
    """
    return success_response(service.update_profile(user, body), message="프로필이 수정되었습니다.")
