# -----------------------------------------------------------
# actors.py - 배우(actors) 테이블 CRUD 서비스
# -----------------------------------------------------------

from typing import List, Optional

from fastapi import Depends
from sqlalchemy.orm import Session

from ..db import get_db
from ..models import MAX_ID, Actor
from ..schemas import ActorIn


def valid_id(value: int) -> bool:
    """
    PK 컬럼 범위(1 ~ MAX_ID) 안의 id인지 확인합니다.
    - 범위 밖 id는 DB 드라이버에 넘기지 않음(SQLite는 int64 초과 시 OverflowError)
    - 호출 측은 범위 밖 id를 "해당 행 없음"으로 취급
    """
    return 1 <= value <= MAX_ID


class ActorService:
    """
    actors 테이블 CRUD.
    세션은 생성자로 주입받으며 커밋은 각 쓰기 메서드 안에서 수행합니다.
    """

    def __init__(self, db: Session):
        self.db = db

    def create(self, payload: ActorIn) -> Actor:
        # INSERT INTO actors (first_name, last_name, date_of_birth) VALUES (...)
        actor = Actor(
            first_name=payload.first_name,
            last_name=payload.last_name,
            date_of_birth=payload.date_of_birth,
        )
        self.db.add(actor)
        self.db.commit()    # 트랜잭션 커밋 (INSERT 반영)
        self.db.refresh(actor)  # 생성된 id 등 DB 값으로 새로고침
        return actor

    def list(self) -> List[Actor]:
        # SELECT * FROM actors ORDER BY id
        return self.db.query(Actor).order_by(Actor.id).all()

    def get(self, actor_id: int) -> Optional[Actor]:
        # 없는 id(범위 밖 포함)면 None
        if not valid_id(actor_id):
            return None
        return self.db.get(Actor, actor_id)

    def update(self, actor_id: int, payload: ActorIn) -> Optional[Actor]:
        """세 필드를 통째로 교체. 대상이 없으면 None"""
        actor = self.get(actor_id)
        if actor is None:
            return None

        actor.first_name = payload.first_name
        actor.last_name = payload.last_name
        actor.date_of_birth = payload.date_of_birth

        self.db.commit()
        self.db.refresh(actor)
        return actor

    def delete(self, actor_id: int) -> bool:
        """
        DELETE FROM actors WHERE id = :id
        - 삭제된 행이 없으면 False
        - 참조 중인 영화가 있으면 FK RESTRICT로 IntegrityError (행은 그대로)
        """
        if not valid_id(actor_id):
            return False

        # 벌크 DELETE: ORM 객체를 로드하지 않고 단일 문장으로 실행
        deleted = (
            self.db.query(Actor)
            .filter(Actor.id == actor_id)
            .delete(synchronize_session=False)
        )
        self.db.commit()
        return deleted > 0


def get_actor_service(db: Session = Depends(get_db)) -> ActorService:
    """Dependency: 요청 단위 세션을 가진 ActorService"""
    return ActorService(db)
