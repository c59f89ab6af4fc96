from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from movie_actor.config import Settings
from movie_actor.db import create_db_engine, get_db
from movie_actor.main import create_app

DB_ERROR_TEXT = "server closed the connection unexpectedly"


@pytest.fixture
def app():
    # 테스트마다 새 메모리 SQLite (StaticPool + PRAGMA foreign_keys=ON)
    settings = Settings(database_url_override="sqlite://", log_level="WARNING")
    engine = create_db_engine(settings)
    return create_app(settings, engine=engine)


@pytest.fixture
def client(app):
    # with 블록 → lifespan 실행(테이블 생성, 종료 시 engine.dispose)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def broken_client(app):
    """모든 DB 호출이 OperationalError를 던지는 세션을 주입한 클라이언트"""

    def fail(*args, **kwargs):
        raise OperationalError("SELECT 1", {}, Exception(DB_ERROR_TEXT))

    def broken_db():
        yield SimpleNamespace(query=fail, get=fail, add=fail, commit=fail, refresh=fail)

    app.dependency_overrides[get_db] = broken_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def meryl(client):
    resp = client.post(
        "/actors",
        json={"firstName": "Meryl", "lastName": "Streep", "dateOfBirth": "1949-06-22"},
    )
    assert resp.status_code == 201
    return resp.json()
