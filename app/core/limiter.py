"""
Rate Limiter 모듈
라우터와 main.py 사이 순환 임포트를 피하기 위해 limiter를 한 곳에 둡니다.
"""
from slowapi import Limiter
from slowapi.util import get_remote_address
from app.core.config import RATE_LIMIT_PER_MINUTE

# 클라이언트 IP 기준 제한 (댓글 작성 스팸 방지)
limiter = Limiter(key_func=get_remote_address)

COMMENT_RATE_LIMIT = f"{RATE_LIMIT_PER_MINUTE}/minute"
