from app.exception.base_exception import BaseCustomException, ErrorCode

class StoreUnavailableError(BaseCustomException):
    """외부 저장소 호출 실패(네트워크/타임아웃/권한 등)"""
    error_code = ErrorCode.STORE_UNAVAILABLE
    message = "저장소 호출에 실패했습니다."
    status_code = 503

class DuplicateFavoriteError(BaseCustomException):
    """
    (user_id, recipe_id) 유니크 제약 위반.

    Rationale:
        좋아요 토글의 동시성 정합성은 저장소의 유니크 제약이 유일한 안전장치입니다.
        저장소 구현체는 제약 위반을 이 예외로 변환하여 서비스 계층에 알립니다.
    """
    error_code = ErrorCode.STORE_DUPLICATE
    message = "이미 좋아요한 레시피입니다."
    status_code = 409
