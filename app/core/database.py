from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from app.core.config import DATABASE_URL

# Rationale:
# SQLite는 기본적으로 단일 스레드에서만 연결을 허용합니다(check_same_thread=True).
# FastAPI는 동기 엔드포인트를 ThreadPoolExecutor에서 실행하므로 check_same_thread=False가 필요합니다.
_connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(DATABASE_URL, connect_args=_connect_args)

# NOTE: 요청마다 독립적인 세션을 생성하기 위해 SessionLocal 팩토리를 사용함.
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def init_db(bind=None) -> None:
    """SQLAlchemy 모델 메타데이터를 기반으로 테이블을 생성합니다.

    Args:
        bind: 대상 엔진. 생략 시 DATABASE_URL 기반 기본 엔진 사용.
    """
    # NOTE: 모델 모듈을 import해야 Base.metadata에 테이블이 등록됨
    from app.models import favorite  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)
