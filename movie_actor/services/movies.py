# -----------------------------------------------------------
# movies.py - 영화(movies) 테이블 CRUD + 배우 조인 조회 서비스
# -----------------------------------------------------------

from typing import Any, Dict, List, Optional

from fastapi import Depends
from sqlalchemy.orm import Session

from ..db import get_db
from ..errors import MissingActorError
from ..models import Actor, Movie
from ..schemas import MovieIn
from .actors import valid_id


class MovieService:
    """
    movies 테이블 CRUD + actors 조인 조회.

    등록/수정 시 배우 존재 확인과 INSERT/UPDATE는 같은 세션 트랜잭션 안에서
    실행되고, 마지막에 한 번만 commit 합니다. movies.actor_id의 FK 제약이
    최종 보장을 맡습니다.
    """

    def __init__(self, db: Session):
        self.db = db

    def _ensure_actor(self, actor_id: int) -> None:
        # SELECT id FROM actors WHERE id = :actor_id
        # - 결과가 없으면(범위 밖 id 포함) MissingActorError
        if valid_id(actor_id):
            exists = self.db.query(Actor.id).filter(Actor.id == actor_id).first()
            if exists is not None:
                return
        raise MissingActorError(actor_id)

    def _joined_query(self):
        # SELECT movies.id, movies.title, movies.creation_date, movies.actor_id,
        #        actors.first_name, actors.last_name
        # FROM movies JOIN actors ON movies.actor_id = actors.id
        return self.db.query(
            Movie.id,
            Movie.title,
            Movie.creation_date,
            Movie.actor_id,
            Actor.first_name,
            Actor.last_name,
        ).join(Actor, Movie.actor_id == Actor.id)

    def create(self, payload: MovieIn) -> Movie:
        """배우가 없으면 MissingActorError (행은 추가되지 않음)"""
        self._ensure_actor(payload.actor_id)

        movie = Movie(
            title=payload.title,
            creation_date=payload.creation_date,
            actor_id=payload.actor_id,
        )
        self.db.add(movie)
        self.db.commit()    # 확인 + INSERT를 한 번에 커밋
        self.db.refresh(movie)
        return movie

    def list(self) -> List[Dict[str, Any]]:
        # Row → dict: 키는 컬럼명(snake_case), 응답 스키마가 camelCase로 직렬화
        rows = self._joined_query().order_by(Movie.id).all()
        return [row._asdict() for row in rows]

    def get(self, movie_id: int) -> Optional[Dict[str, Any]]:
        if not valid_id(movie_id):
            return None
        row = self._joined_query().filter(Movie.id == movie_id).first()
        return row._asdict() if row is not None else None

    def update(self, movie_id: int, payload: MovieIn) -> Optional[Movie]:
        """
        세 필드를 통째로 교체.
        - 영화가 없으면 None
        - 새 actor_id가 없으면 MissingActorError (기존 행 변경 없음)
        """
        if not valid_id(movie_id):
            return None
        movie = self.db.get(Movie, movie_id)
        if movie is None:
            return None

        self._ensure_actor(payload.actor_id)

        movie.title = payload.title
        movie.creation_date = payload.creation_date
        movie.actor_id = payload.actor_id

        self.db.commit()
        self.db.refresh(movie)
        return movie

    def delete(self, movie_id: int) -> bool:
        # DELETE FROM movies WHERE id = :id → 삭제된 행 수로 존재 여부 판단
        if not valid_id(movie_id):
            return False
        deleted = (
            self.db.query(Movie)
            .filter(Movie.id == movie_id)
            .delete(synchronize_session=False)
        )
        self.db.commit()
        return deleted > 0


def get_movie_service(db: Session = Depends(get_db)) -> MovieService:
    """Dependency: 요청 단위 세션을 가진 MovieService"""
    return MovieService(db)
