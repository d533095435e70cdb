"""
내 프로필 조회/수정 서비스

profiles 행은 회원가입 시 Supabase 트리거로 생성된다고 가정하므로,
행이 없으면 새로 만들지 않고 ProfileNotFoundError(404)를 반환합니다.
"""

from __future__ import annotations
import logging
from datetime import datetime, timezone
from app.exception.domain.resource_exception import ProfileNotFoundError
from app.exception.domain.store_exception import StoreUnavailableError
from app.models.dto import CurrentUser, Profile, ProfileUpdate
from app.repositories.base import IProfileRepository

logger = logging.getLogger(__name__)


class ProfileService:

    def __init__(self, profile_repo: IProfileRepository):
        self.profile_repo = profile_repo

    def get_profile(self, user: CurrentUser) -> Profile:
        try:
            profile = self.profile_repo.get(user.id)
        except Exception as e:
            raise StoreUnavailableError("프로필을 불러오지 못했습니다.") from e
        if profile is None:
            raise ProfileNotFoundError()
        return profile

    def update_profile(self, user: CurrentUser, data: ProfileUpdate) -> Profile:
        """
        프로필 수정

        Args:
            user (CurrentUser): 현재 사용자 (본인 프로필만 수정)
            data (ProfileUpdate): email, username, full_name(필수)과 bio

        Returns:
            Profile: 수정된 프로필 (updated_at 갱신)
        """
        changes = {
            **data.model_dump(),
            "updated_at": datetime.now(timezone.utc).isoformat(),
        }
        try:
            profile = self.profile_repo.update(user.id, changes)
        except Exception as e:
            raise StoreUnavailableError("프로필 수정에 실패했습니다.") from e
        if profile is None:
            raise ProfileNotFoundError()

        logger.info({"message": "Profile updated", "user_id": user.id})
        return profile
