from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.comments import router as comments_router
from app.api.favorites import router as favorites_router
from app.api.likes import router as likes_router
from app.api.profile import router as profile_router
from app.api.recipes import router as recipes_router
from app.core.config import ALLOWED_ORIGINS, LOG_DIR
from app.core.limiter import limiter
from app.core.logging_config import setup_logging
from app.core.middleware import TraceIDMiddleware, CacheControlMiddleware
from app.exception.base_exception import BaseCustomException
from app.exception.exception_handler import (
    custom_exception_handler,
    http_exception_handler,
    validation_exception_handler,
    rate_limit_exception_handler,
    global_exception_handler,
)

# 로깅 설정(콘솔 + 일자별 파일 로테이션, JSON 포맷)
setup_logging(LOG_DIR)

app = FastAPI(title="Recipe Share API")

app.state.limiter = limiter

# CORS 설정 (환경변수 기반)
app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(CacheControlMiddleware)
# NOTE: 마지막에 추가한 미들웨어가 가장 바깥에서 실행되므로 Trace ID가 모든 로그에 먼저 설정됨
app.add_middleware(TraceIDMiddleware)


@app.get("/ping")
def ping():
    return {"ok": True}


# API 라우터 포함
app.include_router(recipes_router)
app.include_router(likes_router)
app.include_router(comments_router)
app.include_router(favorites_router)
app.include_router(profile_router)

app.add_exception_handler(BaseCustomException, custom_exception_handler)
# NOTE: 라우팅 404/405도 Envelope로 변환되도록 Starlette HTTPException에 등록
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(RateLimitExceeded, rate_limit_exception_handler)
app.add_exception_handler(Exception, global_exception_handler)
