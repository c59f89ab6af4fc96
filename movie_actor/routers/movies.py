# ---------------------------------------------
# movies.py - 영화(movies) CRUD 엔드포인트
# ---------------------------------------------

import logging
from typing import List

from fastapi import APIRouter, Depends, Response

from ..errors import InternalError, MissingActorError, NotFoundError
from ..schemas import Message, MovieIn, MovieOut, MovieWithActorOut
from ..services.movies import MovieService, get_movie_service

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/movies",
    tags=["movies"],
    responses={500: {"model": Message}},
)

MOVIE_NOT_FOUND = "Movie not found."
ACTOR_NOT_FOUND = "Actor not found."


@router.post(
    "",
    response_model=MovieOut,
    status_code=201,
    responses={400: {"model": Message}, 404: {"model": Message}},
)
def create_movie(payload: MovieIn, service: MovieService = Depends(get_movie_service)):
    """
    영화를 등록합니다. actorId가 가리키는 배우가 있어야 합니다.

    요청 바디(JSON) 예:
    {
      "title": "Doubt",
      "creationDate": "2008-12-12",
      "actorId": 1
    }
    - 배우가 없으면 404, 행은 추가되지 않음
    """
    try:
        movie = service.create(payload)
    except MissingActorError:
        raise NotFoundError(ACTOR_NOT_FOUND)
    except Exception:
        logger.exception("Failed to create movie")
        raise InternalError("Error creating movie")

    logger.info("Created movie id=%s for actor id=%s", movie.id, movie.actor_id)
    return movie


@router.get("", response_model=List[MovieWithActorOut])
def list_movies(service: MovieService = Depends(get_movie_service)):
    """
    영화 목록 + 참조 배우의 firstName/lastName.
    - 조인(INNER JOIN)이므로 배우 행이 없는 영화는 나오지 않음
    """
    try:
        return service.list()
    except Exception:
        logger.exception("Failed to list movies")
        raise InternalError("Error retrieving movies")


@router.get("/{movie_id}", response_model=MovieWithActorOut, responses={404: {"model": Message}})
def get_movie(movie_id: int, service: MovieService = Depends(get_movie_service)):
    try:
        movie = service.get(movie_id)
    except Exception:
        logger.exception("Failed to retrieve movie %s", movie_id)
        raise InternalError("Error retrieving movie")

    if movie is None:
        raise NotFoundError(MOVIE_NOT_FOUND)
    return movie


@router.put(
    "/{movie_id}",
    response_model=MovieOut,
    responses={400: {"model": Message}, 404: {"model": Message}},
)
def update_movie(movie_id: int, payload: MovieIn, service: MovieService = Depends(get_movie_service)):
    """
    title / creationDate / actorId 전체 교체. 응답에는 배우 이름이 포함되지 않습니다.
    - 영화가 없으면 404 "Movie not found."
    - 새 actorId의 배우가 없으면 404 "Actor not found."
    """
    try:
        movie = service.update(movie_id, payload)
    except MissingActorError:
        raise NotFoundError(ACTOR_NOT_FOUND)
    except Exception:
        logger.exception("Failed to update movie %s", movie_id)
        raise InternalError("Error updating movie")

    if movie is None:
        raise NotFoundError(MOVIE_NOT_FOUND)
    return movie


@router.delete(
    "/{movie_id}",
    status_code=204,
    response_class=Response,
    responses={404: {"model": Message}},
)
def delete_movie(movie_id: int, service: MovieService = Depends(get_movie_service)):
    try:
        deleted = service.delete(movie_id)
    except Exception:
        logger.exception("Failed to delete movie %s", movie_id)
        raise InternalError("Error deleting movie")

    if not deleted:
        raise NotFoundError(MOVIE_NOT_FOUND)
    return Response(status_code=204)
