from app.exception.base_exception import BaseCustomException, ErrorCode

class UnauthenticatedError(BaseCustomException):
    error_code = ErrorCode.AUTH_REQUIRED
    message = "로그인이 필요합니다."
    status_code = 401

class ForbiddenError(BaseCustomException):
    error_code = ErrorCode.AUTH_FORBIDDEN
    message = "본인이 작성한 항목만 수정/삭제할 수 있습니다."
    status_code = 403
