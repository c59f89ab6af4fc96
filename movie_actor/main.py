# ------------------------------------------------------------
# main.py - FastAPI 앱 팩토리/미들웨어/라우터 등록 진입점
# ------------------------------------------------------------

import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.engine import Engine

from . import models  # noqa: F401  (Base.metadata에 actors/movies 테이블 등록)
from .config import Settings
from .db import Base, create_db_engine, create_session_factory
from .errors import request_validation_handler
from .routers import actors, movies

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # --- startup ---
    # Base.metadata.create_all()은 "존재하지 않는 테이블만" 생성
    Base.metadata.create_all(bind=app.state.engine)
    logger.info("Movie-Actor API running on port %s", app.state.settings.app_port)

    yield

    # --- shutdown ---
    # 커넥션 풀 정리
    app.state.engine.dispose()


def create_app(settings: Optional[Settings] = None, engine: Optional[Engine] = None) -> FastAPI:
    """
    앱 팩토리.

    - settings가 없으면 환경변수(.env 포함)에서 읽음
    - engine을 넘기면 그 커넥션 풀을 그대로 사용(테스트에서 SQLite 주입)
    - 엔진/세션팩토리는 app.state에 보관 → db.get_db가 요청마다 세션 생성
    """
    settings = settings or Settings.from_env()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    engine = engine or create_db_engine(settings)

    app = FastAPI(title="Movie-Actor API", lifespan=lifespan)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)

    # -------------------------------
    # CORS 설정
    # -------------------------------
    # - 개발 단계에서는 allow_* 를 "*" 로 넓게 두고, 운영에서는 특정 도메인으로 제한
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # FastAPI 기본 422 → 400
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    # -------------------------------
    # 라우터 등록
    # -------------------------------
    # - actors: /actors
    # - movies: /movies
    app.include_router(actors.router)
    app.include_router(movies.router)

    # 상태 확인(헬스체크)용 루트 엔드포인트
    @app.get("/")
    def root():
        return {"ok": True, "service": "movie-actor-api"}

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(app, host=app.state.settings.app_host, port=app.state.settings.app_port)
