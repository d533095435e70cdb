from app.core.config import DATABASE_URL
from app.core.database import init_db


def main():
    """로컬 SQL 저장소(STORE_BACKEND=sql)의 favorites 테이블을 생성합니다.

    Rationale:
        UNIQUE(user_id, recipe_id) 제약이 포함된 스키마를 한 번에 만들기 위한 개발용 스크립트입니다.
        Supabase 환경에서는 대시보드/마이그레이션으로 동일한 제약을 걸어야 합니다.
    """
    print(f"Creating tables on {DATABASE_URL.split('@')[-1]} ...")
    try:
        init_db()
        print("Tables created successfully.")
    except Exception as e:
        print(f"Error creating tables: {e}")
        raise SystemExit(1)


if __name__ == "__main__":
    # NOTE: 루트 디렉토리에서 'python -m scripts.init_db' 명령어로 실행해야 함
    main()
