import os
from dotenv import load_dotenv

load_dotenv()

APP_ENV = os.getenv("APP_ENV", "production")
IS_DEBUG = APP_ENV == "development"

SUPABASE_URL = os.getenv("SUPABASE_URL")
SUPABASE_KEY = os.getenv("SUPABASE_KEY")

# 테이블명 (Supabase 프로젝트별로 다를 수 있음)
FAVORITES_TABLE = os.getenv("FAVORITES_TABLE", "favorites")
COMMENTS_TABLE = os.getenv("COMMENTS_TABLE", "comments")
RECIPES_TABLE = os.getenv("RECIPES_TABLE", "recipes")
PROFILES_TABLE = os.getenv("PROFILES_TABLE", "profiles")

# 즐겨찾기 저장소 선택: "supabase" | "sql"
STORE_BACKEND = os.getenv("STORE_BACKEND", "supabase")
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./recipes.db")

RATE_LIMIT_PER_MINUTE = int(os.getenv("RATE_LIMIT_PER_MINUTE", "5"))

LOG_DIR = os.getenv("LOG_DIR", "logs")


# CORS 허용 오리진 (환경변수 기반)
def _parse_origins(value: str | None) -> list[str]:
    if not value:
        return []
    normalized = value.replace("\n", ",").replace(";", ",")
    items = [item.strip() for item in normalized.split(",")]
    return [item for item in items if item]

_DEFAULT_ALLOWED_ORIGINS = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]

# 우선순위: CORS_ALLOWED_ORIGINS(복수) > FRONTEND_URL(단일)
_cors_allowed_origins = _parse_origins(os.getenv("CORS_ALLOWED_ORIGINS"))
_single_frontend_url = [os.getenv("FRONTEND_URL")] if os.getenv("FRONTEND_URL") else []

# 중복 제거를 위해 dict 키 보존 방식 사용
ALLOWED_ORIGINS = list(dict.fromkeys(_DEFAULT_ALLOWED_ORIGINS + _cors_allowed_origins + _single_frontend_url))
