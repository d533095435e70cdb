from enum import Enum

class ErrorCode(str, Enum):
    """
    애플리케이션 전반에서 사용하는 에러 코드 정의.
    형식: 카테고리(영문)-번호(3자리)
    """
    # 1. COMMON: 공통/일반 에러
    GENERIC_UNKNOWN = "GENERIC-000"
    COMMON_INTERNAL_ERROR = "COMMON-001"
    COMMON_BAD_REQUEST = "COMMON-002"

    # 2. AUTH: 인증/권한
    AUTH_REQUIRED = "AUTH-001"
    AUTH_FORBIDDEN = "AUTH-002"

    # 3. STORE: 외부 저장소(Supabase/DB)
    STORE_UNAVAILABLE = "STORE-001"
    STORE_DUPLICATE = "STORE-002"

    # 4. 리소스
    RECIPE_NOT_FOUND = "RECIPE-001"
    COMMENT_NOT_FOUND = "COMMENT-001"
    PROFILE_NOT_FOUND = "PROFILE-001"

    # 5. RATE LIMIT
    RATE_LIMIT_EXCEEDED = "RATE-001"


class BaseCustomException(Exception):
    """
    모든 커스텀 예외의 최상위 클래스.
    이 클래스를 상속받아 구체적인 예외를 정의해야 함.
    """
    error_code: ErrorCode = ErrorCode.GENERIC_UNKNOWN
    message: str = "알 수 없는 오류가 발생했습니다."
    status_code: int = 500

    def __init__(self, message: str = None, error_code: ErrorCode = None, status_code: int = None):
        if message:
            self.message = message
        if error_code:
            self.error_code = error_code
        if status_code:
            self.status_code = status_code
        super().__init__(self.message)
