import json
import pytest
from unittest.mock import patch, MagicMock
from fastapi import Request, HTTPException
from app.exception.exception_handler import (
    global_exception_handler,
    custom_exception_handler,
    http_exception_handler,
)
from app.exception.base_exception import BaseCustomException, ErrorCode
from app.exception.domain.store_exception import StoreUnavailableError


# Test Custom Exception
class SampleBadRequest(BaseCustomException):
    def __init__(self):
        super().__init__(
            message="Test Error",
            error_code=ErrorCode.COMMON_BAD_REQUEST,
            status_code=400
        )


def _request(path="/test"):
    request = MagicMock(spec=Request)
    request.url.path = path
    return request


@pytest.mark.asyncio
async def test_custom_exception_handler_structure():
    """
    BaseCustomException 발생 시 ApiResponse 포맷(JSON)으로 응답하는지 검증
    """
    response = await custom_exception_handler(_request(), SampleBadRequest())

    assert response.status_code == 400

    body = json.loads(response.body)
    assert body["isSuccess"] is False
    assert body["code"] == "COMMON-002"
    assert body["message"] == "Test Error"
    assert body["result"] is None


@pytest.mark.asyncio
async def test_domain_exception_keeps_its_status_and_code():
    response = await custom_exception_handler(_request("/api/recipes"), StoreUnavailableError())

    assert response.status_code == 503
    assert json.loads(response.body)["code"] == "STORE-001"


@pytest.mark.asyncio
async def test_http_exception_handler_maps_status_to_code():
    response = await http_exception_handler(_request(), HTTPException(status_code=404, detail="Not Found"))

    body = json.loads(response.body)
    assert response.status_code == 404
    assert body["code"] == "HTTP_404"
    assert body["message"] == "Not Found"


@pytest.mark.asyncio
async def test_global_exception_handler_structure_prod():
    """
    운영 환경(IS_DEBUG=False)에서 500 에러 발생 시 스택 트레이스가 숨겨지는지 검증
    """
    with patch("app.exception.exception_handler.IS_DEBUG", False):
        response = await global_exception_handler(_request(), Exception("Unexpected Server Error"))

    assert response.status_code == 500

    body = json.loads(response.body)
    assert body["isSuccess"] is False
    assert body["code"] == "COMMON-001"
    assert body["result"] is None


@pytest.mark.asyncio
async def test_global_exception_handler_structure_dev():
    """
    개발 환경(IS_DEBUG=True)에서 500 에러 발생 시 스택 트레이스가 포함되는지 검증
    """
    with patch("app.exception.exception_handler.IS_DEBUG", True):
        response = await global_exception_handler(_request(), Exception("Unexpected Server Error"))

    body = json.loads(response.body)
    assert body["result"] is not None
    assert "stack_trace" in body["result"]
    assert body["result"]["error_detail"] == "Unexpected Server Error"
