# ------------------------------------------------------------
# errors.py - HTTP 에러 분류 및 요청 검증 실패 핸들러
# ------------------------------------------------------------

import logging
from http import HTTPStatus

from fastapi import HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class ValidationError(HTTPException):
    """누락/형식 오류/범위 밖 입력 → 400"""

    def __init__(self, detail: str):
        super().__init__(status_code=HTTPStatus.BAD_REQUEST, detail=detail)


class NotFoundError(HTTPException):
    """요청한 id 또는 참조 배우가 없음 → 404"""

    def __init__(self, detail: str):
        super().__init__(status_code=HTTPStatus.NOT_FOUND, detail=detail)


class InternalError(HTTPException):
    """데이터 접근 예외 → 500. detail은 작업별 고정 메시지만 사용"""

    def __init__(self, detail: str):
        super().__init__(status_code=HTTPStatus.INTERNAL_SERVER_ERROR, detail=detail)


class MissingActorError(Exception):
    """영화가 참조하는 actor_id가 actors 테이블에 없을 때 서비스 레이어가 발생"""

    def __init__(self, actor_id: int):
        super().__init__(f"actor {actor_id} does not exist")
        self.actor_id = actor_id


def _field_name(loc) -> str:
    # loc 예: ("body", "firstName") / ("path", "actor_id") / ("body",)
    parts = [str(p) for p in loc[1:]]
    return ".".join(parts) if parts else str(loc[0])


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    FastAPI 기본 422 대신 400으로 응답합니다.

    - 필수 필드 누락: "Fields required: firstName, dateOfBirth"
    - 그 외(타입/형식/길이): "Invalid value for field: dateOfBirth"
    """
    errors = exc.errors()
    missing = [_field_name(e["loc"]) for e in errors if e.get("type") == "missing"]

    if missing:
        detail = "Fields required: " + ", ".join(missing)
    else:
        invalid = sorted({_field_name(e["loc"]) for e in errors})
        detail = "Invalid value for field: " + ", ".join(invalid)

    logger.info("Rejected %s %s: %s", request.method, request.url.path, detail)
    return JSONResponse(status_code=HTTPStatus.BAD_REQUEST, content={"detail": detail})
