from fastapi import Request, status
from starlette.exceptions import HTTPException
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from datetime import datetime
import logging
import traceback

from app.core.config import IS_DEBUG
from app.core.error_codes import ResponseCode
from app.core.response import error_response, ValidationErrorDetail
from app.exception.base_exception import BaseCustomException, ErrorCode
from app.exception.domain.rate_limit_exception import OverRateLimitError

logger = logging.getLogger("app")


async def custom_exception_handler(request: Request, exc: BaseCustomException):
    """
    커스텀 예외 처리 핸들러 (4xx, 도메인 에러)
    """
    # error_code가 Enum이면 .value, 아니면 그대로 사용
    error_code_value = exc.error_code.value if hasattr(exc.error_code, "value") else exc.error_code

    # 경고 수준 로깅 (스택 트레이스 불필요)
    logger.warning({
        "timestamp": datetime.now().isoformat(timespec="seconds"),
        "status": exc.status_code,
        "errorCode": error_code_value,
        "message": exc.message,
        "path": request.url.path
    })

    return JSONResponse(
        status_code=exc.status_code,
        content=error_response(
            code=error_code_value,
            message=exc.message
        ).model_dump()
    )


async def http_exception_handler(request: Request, exc: HTTPException):
    """
    HTTPException을 Envelope 포맷으로 변환
    """
    return JSONResponse(
        status_code=exc.status_code,
        content=error_response(
            message=exc.detail,
            code=ResponseCode.http_error(exc.status_code)
        ).model_dump()
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """
    요청 검증 실패(422)를 필드별 상세 정보와 함께 Envelope 포맷으로 변환
    """
    error_details = {}
    for error in exc.errors():
        field = ".".join(str(loc) for loc in error["loc"])
        error_details[field] = ValidationErrorDetail(
            message=error["msg"],
            type=error["type"],
            input=error.get("input")
        )

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=error_response(
            message="입력값을 확인해주세요.",
            code=ResponseCode.VALIDATION_ERROR,
            result=error_details
        ).model_dump(mode="json")
    )


async def rate_limit_exception_handler(request: Request, exc: RateLimitExceeded):
    """
    slowapi의 RateLimitExceeded를 OverRateLimitError로 변환하여 동일한 에러 포맷 유지
    """
    return await custom_exception_handler(request, OverRateLimitError())


async def global_exception_handler(request: Request, exc: Exception):
    """
    전역 예외 처리 핸들러 (5xx, 미처리 예외)
    """
    error_msg = str(exc)
    stack_trace = traceback.format_exc()

    # 에러 수준 로깅 (항상 스택 트레이스 포함하여 서버 로그에 남김)
    logger.exception({
        "timestamp": datetime.now().isoformat(timespec="seconds"),
        "status": 500,
        "errorCode": ErrorCode.COMMON_INTERNAL_ERROR.value,
        "message": "서버 내부 오류가 발생했습니다.",
        "detail": error_msg,
        "path": request.url.path
    })

    response_content = error_response(
        code=ErrorCode.COMMON_INTERNAL_ERROR.value,
        message="서버 내부 오류가 발생했습니다."
    ).model_dump()

    # 개발 환경(IS_DEBUG=True)인 경우에만 스택 트레이스 포함
    if IS_DEBUG:
        response_content["result"] = {
            "error_detail": error_msg,
            "stack_trace": stack_trace
        }

    return JSONResponse(
        status_code=500,
        content=response_content
    )
