from datetime import date

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

# ------------------------------------------------------------
# 공통 설정
# - alias_generator=to_camel: JSON은 camelCase(firstName), 파이썬 속성은 snake_case(first_name)
# - populate_by_name=True: 속성 이름으로도 채울 수 있음(ORM 객체/Row 변환 시 사용)
# - from_attributes=True: ORM 객체(예: SQLAlchemy 모델)로부터 필드 맵핑 허용
# ------------------------------------------------------------
class CamelModel(BaseModel):
    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


# ------------------------------------------------------------
# ActorIn: 배우 등록/수정 요청 바디(JSON) 스키마
# ------------------------------------------------------------
class ActorIn(CamelModel):
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    date_of_birth: date


# ------------------------------------------------------------
# ActorOut: 클라이언트로 내보낼 "배우" 응답 스키마
# ------------------------------------------------------------
class ActorOut(CamelModel):
    id: int
    first_name: str
    last_name: str
    date_of_birth: date


# ------------------------------------------------------------
# MovieIn: 영화 등록/수정 요청 바디(JSON) 스키마
# ------------------------------------------------------------
class MovieIn(CamelModel):
    title: str = Field(..., min_length=1, max_length=255)
    creation_date: date
    actor_id: int


# ------------------------------------------------------------
# MovieOut: movies 테이블 한 행 (등록/수정 응답)
# ------------------------------------------------------------
class MovieOut(CamelModel):
    id: int
    title: str
    creation_date: date
    actor_id: int


# ------------------------------------------------------------
# MovieWithActorOut: 영화 + 참조 배우 이름 (목록/단건 조회 응답)
# ------------------------------------------------------------
class MovieWithActorOut(MovieOut):
    first_name: str
    last_name: str


class Message(BaseModel):
    """에러 응답 바디 문서화용: {"detail": "..."}"""
    detail: str
