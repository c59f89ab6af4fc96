# -------------------------------------------------------
# db.py - SQLAlchemy 엔진/세션팩토리 생성 및 FastAPI 의존성 정의
# -------------------------------------------------------

import logging

from fastapi import Request
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from .config import Settings

logger = logging.getLogger(__name__)

# ----------------------------------------------
# Declarative Base
# ----------------------------------------------
# - 모든 ORM 모델이 상속받는 베이스 클래스
Base = declarative_base()


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite는 커넥션마다 PRAGMA를 켜야 FK 제약이 적용됨
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_db_engine(settings: Settings) -> Engine:
    """
    설정으로부터 SQLAlchemy Engine(=커넥션 풀)을 생성합니다.

    - 서버형 DB(MySQL 등):
        pool_pre_ping=True  → 빌려오기 전 ping으로 죽은 커넥션 감지/재연결
        pool_recycle        → 커넥션 수명(초)
        pool_size / max_overflow → 동시 커넥션 상한
    - SQLite:
        check_same_thread=False → FastAPI 스레드풀에서 공유
        메모리 DB(sqlite://)는 StaticPool로 단일 커넥션 유지
        connect 이벤트에서 PRAGMA foreign_keys=ON
    """
    url = settings.database_url

    if url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
        engine = create_engine(url, **kwargs)
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    else:
        engine = create_engine(
            url,
            pool_pre_ping=True,
            pool_recycle=settings.pool_recycle,
            pool_size=settings.pool_size,
            max_overflow=settings.max_overflow,
        )

    logger.info("Database engine created for %s", engine.url.render_as_string(hide_password=True))
    return engine


def create_session_factory(engine: Engine) -> sessionmaker:
    # - autocommit=False: 명시적 commit() 전까지 커밋되지 않음
    # - autoflush=False: 쿼리 시점 자동 flush 방지
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db(request: Request):
    """
    FastAPI 의존성 주입용 DB 세션 제공자(Generator)

    세션팩토리는 모듈 전역이 아니라 앱 팩토리가 app.state에 넣어둔 것을 사용합니다.

    동작:
    1) 요청이 들어오면 app.state.session_factory()로 세션 생성
    2) 핸들러에 주입(yield)
    3) 응답 후 finally 블록에서 세션 종료(close) → 미커밋 작업 롤백, 커넥션 풀 반환
    """
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
