from functools import lru_cache
from supabase import create_client, Client
from app.core.config import SUPABASE_URL, SUPABASE_KEY

@lru_cache
def get_supabase_client() -> Client:
    """
    Supabase 클라이언트 반환 (Singleton via lru_cache)

    Returns:
        Client: Supabase Client 인스턴스 (auth + postgrest 공용)

    Rationale:
        - functools.lru_cache를 사용하여 Thread-safe한 싱글톤 패턴 구현
        - import 시점이 아닌 최초 사용 시점에 환경변수를 검증하여,
          Supabase 없이도 테스트(Mock 저장소)가 동작하도록 함
    """
    if not SUPABASE_URL or not SUPABASE_KEY:
        raise ValueError("SUPABASE_URL and SUPABASE_KEY must be set in environment variables")

    return create_client(SUPABASE_URL, SUPABASE_KEY)
