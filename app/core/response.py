from typing import TypeVar, Generic, Optional, Any
from pydantic import BaseModel, ConfigDict
from app.core.error_codes import ResponseCode

# Rationale:
# result에 Pydantic 모델뿐 아니라 dict/list 등 일반 타입도 담을 수 있도록 bound를 두지 않음
T = TypeVar('T')

class ApiResponse(BaseModel, Generic[T]):
    """
    API 공통 응답 모델 (Envelope Pattern)

    Attributes:
        isSuccess (bool): 성공 여부
        code (str): 응답 코드 (성공: "COMMON200", 실패: 에러코드)
        message (str): 사용자 노출 가능한 메시지
        result (T | None): 실제 데이터 (실패 시 에러 상세 또는 null)
    """
    isSuccess: bool
    code: str
    message: str
    result: Optional[T] = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "isSuccess": True,
                    "code": "COMMON200",
                    "message": "성공입니다.",
                    "result": {"liked": True, "count": 4}
                },
                {
                    "isSuccess": False,
                    "code": "AUTH-001",
                    "message": "로그인이 필요합니다.",
                    "result": None
                }
            ]
        }
    )


class ValidationErrorDetail(BaseModel):
    """Validation 에러의 필드별 상세 정보"""
    message: str
    type: str
    input: Any | None = None


def success_response(result: Any = None, code: str = ResponseCode.COMMON_SUCCESS, message: str = "성공입니다.") -> ApiResponse[Any]:
    return ApiResponse(isSuccess=True, code=code, message=message, result=result)


def error_response(message: str, code: str = "ERROR", result: Optional[Any] = None) -> ApiResponse[Any]:
    return ApiResponse(isSuccess=False, code=code, message=message, result=result)
