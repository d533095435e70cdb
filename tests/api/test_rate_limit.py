import pytest
from app.core.config import RATE_LIMIT_PER_MINUTE
from app.core.limiter import limiter


@pytest.fixture
def limited_client(client):
    """limiter를 활성화하고 storage를 리셋한 클라이언트"""
    limiter.enabled = True
    limiter.reset()
    yield client
    limiter.reset()


def test_comment_rate_limit_exceeded(limited_client, alice_headers):
    """
    댓글 작성 Rate Limit 초과 시 429 및 Envelope 에러 포맷 검증
    환경변수 RATE_LIMIT_PER_MINUTE 값을 사용하여 동적으로 테스트
    """
    url = "/api/recipes/recipe-1/comments"

    for i in range(RATE_LIMIT_PER_MINUTE):
        response = limited_client.post(url, json={"content": f"comment {i}"}, headers=alice_headers)
        assert response.status_code == 201, f"Request {i+1} unexpectedly hit rate limit"

    response = limited_client.post(url, json={"content": "one too many"}, headers=alice_headers)

    assert response.status_code == 429
    data = response.json()
    assert data["isSuccess"] is False
    assert data["code"] == "RATE-001"
