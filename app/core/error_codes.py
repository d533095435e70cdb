"""
응답 코드 상수 정의

도메인 예외 코드는 app.exception.base_exception.ErrorCode에,
envelope 공통 코드(성공/HTTP/검증)는 이곳에 둡니다.
"""

class ResponseCode:
    """Envelope 공통 응답 코드"""

    COMMON_SUCCESS = "COMMON200"
    INTERNAL_ERROR = "COMMON-001"
    VALIDATION_ERROR = "VALIDATION-001"

    @staticmethod
    def http_error(status_code: int) -> str:
        """
        HTTP 상태 코드 기반 에러 코드 생성

        Args:
            status_code: HTTP 상태 코드 (예: 400, 404)

        Returns:
            str: 에러 코드 (예: "HTTP_400")
        """
        return f"HTTP_{status_code}"
