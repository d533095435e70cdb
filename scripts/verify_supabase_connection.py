import sys
import os

# 현재 스크립트의 상위 디렉터리(프로젝트 루트)를 path에 추가
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.core.config import FAVORITES_TABLE, COMMENTS_TABLE, RECIPES_TABLE, PROFILES_TABLE
from app.core.supabase import get_supabase_client


def verify():
    """
    Supabase 연결 상태와 서비스가 사용하는 테이블 접근 권한을 검증하는 유틸리티 스크립트.
    보안을 위해 API Key는 출력하지 않습니다.
    """
    print("Verifying Supabase Connection...")
    try:
        client = get_supabase_client()
        print("✅ Client Initialization: Success")
    except Exception as e:
        print(f"❌ Client Initialization Failed: {e}")
        sys.exit(1)

    failed = False
    for table in (RECIPES_TABLE, FAVORITES_TABLE, COMMENTS_TABLE, PROFILES_TABLE):
        # 데이터가 없어도 에러가 나지 않는지(테이블 존재 여부 및 권한) 확인
        try:
            client.table(table).select("*").limit(1).execute()
            print(f"✅ Table '{table}': Success")
        except Exception as e:
            print(f"❌ Table '{table}': {e}")
            failed = True

    if failed:
        sys.exit(1)


if __name__ == "__main__":
    verify()
