# -----------------------------------------------------------
# actors.py - 배우(actors) CRUD REST 엔드포인트
# -----------------------------------------------------------

import logging
from datetime import date
from typing import List

from fastapi import APIRouter, Depends, Response
from sqlalchemy.exc import IntegrityError

from ..errors import InternalError, NotFoundError, ValidationError
from ..schemas import ActorIn, ActorOut, Message
from ..services.actors import ActorService, get_actor_service

logger = logging.getLogger(__name__)

# 이 모듈의 엔드포인트는 "/actors"로 시작
router = APIRouter(
    prefix="/actors",
    tags=["actors"],
    responses={500: {"model": Message}},
)

ACTOR_NOT_FOUND = "Actor not found."


def _check_date_of_birth(payload: ActorIn) -> None:
    # 오늘 날짜까지는 허용, 내일 이후는 거부
    if payload.date_of_birth > date.today():
        raise ValidationError("Date of birth cannot be in the future.")


@router.post("", response_model=ActorOut, status_code=201, responses={400: {"model": Message}})
def create_actor(payload: ActorIn, service: ActorService = Depends(get_actor_service)):
    """
    배우를 등록합니다.

    요청 바디(JSON) 예:
    {
      "firstName": "Meryl",
      "lastName": "Streep",
      "dateOfBirth": "1949-06-22"
    }
    - 필드 누락/형식 오류 → 400 (errors.request_validation_handler)
    - 생년월일이 미래 → 400
    """
    _check_date_of_birth(payload)

    try:
        actor = service.create(payload)
    except Exception:
        logger.exception("Failed to create actor")
        raise InternalError("Error creating actor")

    logger.info("Created actor id=%s", actor.id)
    return actor


@router.get("", response_model=List[ActorOut])
def list_actors(service: ActorService = Depends(get_actor_service)):
    """전체 배우 목록 (id 오름차순)"""
    try:
        return service.list()
    except Exception:
        logger.exception("Failed to list actors")
        raise InternalError("Error retrieving actors")


@router.get("/{actor_id}", response_model=ActorOut, responses={404: {"model": Message}})
def get_actor(actor_id: int, service: ActorService = Depends(get_actor_service)):
    try:
        actor = service.get(actor_id)
    except Exception:
        logger.exception("Failed to retrieve actor %s", actor_id)
        raise InternalError("Error retrieving actor")

    if actor is None:
        raise NotFoundError(ACTOR_NOT_FOUND)
    return actor


@router.put(
    "/{actor_id}",
    response_model=ActorOut,
    responses={400: {"model": Message}, 404: {"model": Message}},
)
def update_actor(actor_id: int, payload: ActorIn, service: ActorService = Depends(get_actor_service)):
    """
    firstName / lastName / dateOfBirth 전체 교체.
    등록과 같은 검증(필수 필드, 미래 생년월일 금지)을 적용합니다.
    """
    _check_date_of_birth(payload)

    try:
        actor = service.update(actor_id, payload)
    except Exception:
        logger.exception("Failed to update actor %s", actor_id)
        raise InternalError("Error updating actor")

    if actor is None:
        raise NotFoundError(ACTOR_NOT_FOUND)
    return actor


@router.delete(
    "/{actor_id}",
    status_code=204,
    response_class=Response,
    responses={404: {"model": Message}},
)
def delete_actor(actor_id: int, service: ActorService = Depends(get_actor_service)):
    """
    배우 삭제. 응답 바디 없음(204).
    - 이 배우를 참조하는 영화가 남아 있으면 FK RESTRICT로 거부됨
      → 다른 데이터 접근 실패와 똑같이 500 "Error deleting actor" (영화/배우 행은 그대로)
    """
    try:
        deleted = service.delete(actor_id)
    except IntegrityError:
        logger.exception("Failed to delete actor %s: still referenced by movies", actor_id)
        raise InternalError("Error deleting actor")
    except Exception:
        logger.exception("Failed to delete actor %s", actor_id)
        raise InternalError("Error deleting actor")

    if not deleted:
        raise NotFoundError(ACTOR_NOT_FOUND)
    return Response(status_code=204)
