import logging
from typing import Optional
from supabase import Client
from app.core.supabase import get_supabase_client
from app.models.dto import CurrentUser

logger = logging.getLogger(__name__)


class SupabaseIdentityProvider:
    """
    Supabase Auth 기반 현재 사용자 조회

    Rationale:
        로그인/회원가입은 Supabase Auth에 위임하고, API는 클라이언트가 보낸 access token으로
        사용자만 확인합니다. 조회 실패는 예외 대신 None(비로그인)으로 처리하여
        좋아요 수 조회 등 공개 기능이 계속 동작하도록 합니다.
    """

    def __init__(self, client: Optional[Client] = None):
        self._client = client

    @property
    def client(self) -> Client:
        if self._client is None:
            self._client = get_supabase_client()
        return self._client

    def get_current_user(self, access_token: Optional[str]) -> Optional[CurrentUser]:
        if not access_token or not access_token.strip():
            return None

        try:
            response = self.client.auth.get_user(access_token)
        except Exception as e:
            logger.warning(f"Failed to resolve current user: {e}")
            return None

        user = getattr(response, "user", None) if response else None
        if not user or not getattr(user, "id", None):
            return None

        return CurrentUser(id=str(user.id), email=getattr(user, "email", None))


def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    """'Authorization: Bearer <token>' 헤더에서 토큰만 추출"""
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()
