# ------------------------------------------------------------
# models.py - SQLAlchemy ORM 모델 정의 (actors/movies)
# ------------------------------------------------------------

from sqlalchemy import Column, Date, ForeignKey, Integer, String

from .db import Base  # Declarative Base: 모든 ORM 모델의 베이스 클래스

# 컬럼명은 전부 snake_case로 통일 (JSON 쪽 camelCase는 schemas.py의 alias가 담당)

# Integer(INT) PK가 가질 수 있는 최대값. 이보다 큰 id는 어떤 행과도 일치할 수 없음
MAX_ID = 2**31 - 1


# ------------------------------
# Actor: 배우 테이블
# ------------------------------
class Actor(Base):
    __tablename__ = "actors"

    id = Column(Integer, primary_key=True, index=True)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    date_of_birth = Column(Date, nullable=False)

    def __repr__(self):
        return f"<Actor(id={self.id}, first_name='{self.first_name}', last_name='{self.last_name}')>"


# ------------------------------
# Movie: 영화 테이블
# ------------------------------
class Movie(Base):
    __tablename__ = "movies"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    creation_date = Column(Date, nullable=False)

    # 참조 중인 배우는 삭제 불가(ON DELETE RESTRICT)
    actor_id = Column(
        Integer,
        ForeignKey("actors.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )

    def __repr__(self):
        return f"<Movie(id={self.id}, title='{self.title}', actor_id={self.actor_id})>"
