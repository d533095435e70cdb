from app.exception.base_exception import BaseCustomException, ErrorCode

class OverRateLimitError(BaseCustomException):
    error_code = ErrorCode.RATE_LIMIT_EXCEEDED
    message = "일정 시간 내 너무 많은 요청이 발생했습니다."
    status_code = 429
