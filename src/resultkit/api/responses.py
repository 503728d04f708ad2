"""Result → HTTP 응답 변환"""
from http import HTTPStatus

from fastapi import Response
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from resultkit.core import (
    AnyResult, ResultStateError, ResultStatus, UnsupportedStatusError,
    outcome_of,
)
from resultkit.api.converters import result_to_dto
from resultkit.api.dto.responses import ProblemDetailsDTO

HTTP_STATUS_CODES: dict[ResultStatus, int] = {
    ResultStatus.SUCCESS: 200,
    ResultStatus.NO_CONTENT: 204,
    ResultStatus.FAILURE: 400,
    ResultStatus.INVALID: 400,
    ResultStatus.VALIDATION_ERROR: 400,
    ResultStatus.UNAUTHORIZED: 401,
    ResultStatus.FORBIDDEN: 403,
    ResultStatus.NOT_FOUND: 404,
    ResultStatus.CONFLICT: 409,
    ResultStatus.CRITICAL_ERROR: 500,
    ResultStatus.UNSUPPORTED: 501,
    ResultStatus.UNAVAILABLE: 503,
}

# 본문 없이 응답하는 상태
_BODYLESS = frozenset({ResultStatus.FORBIDDEN, ResultStatus.NO_CONTENT})

PROBLEM_MEDIA_TYPE = "application/problem+json"


def status_code_for(status: ResultStatus) -> int:
    """ResultStatus → HTTP 상태 코드 (모르는 상태는 UnsupportedStatusError)"""
    try:
        return HTTP_STATUS_CODES[status]
    except (KeyError, TypeError):
        raise UnsupportedStatusError(status, "no HTTP mapping") from None


def _json(result: AnyResult, status_code: int, headers: dict[str, str] | None = None) -> JSONResponse:
    return JSONResponse(
        content=result_to_dto(result).model_dump(mode="json"),
        status_code=status_code,
        headers=headers,
    )


def to_response(result: AnyResult) -> Response:
    """상태에 맞는 응답 (Forbidden, NoContent 는 본문 없음)"""
    status = outcome_of(result).status
    status_code = status_code_for(status)
    if status in _BODYLESS:
        return Response(status_code=status_code)
    return _json(result, status_code)


def to_response_with_status(result: AnyResult, status_code: int) -> JSONResponse:
    """상태와 무관하게 지정한 코드로 전체 Result 직렬화"""
    return _json(result, status_code)


# ============================================================
# Success 전용 응답 (다른 상태는 ResultStateError)
# ============================================================

def _require(result: AnyResult, *allowed: ResultStatus) -> None:
    status = outcome_of(result).status
    if status not in allowed:
        expected = " or ".join(s.value for s in allowed)
        raise ResultStateError(
            f"{type(result).__name__} must have a status of {expected}, got {status.value}"
        )


def to_ok_response(result: AnyResult) -> JSONResponse:
    _require(result, ResultStatus.SUCCESS)
    return _json(result, 200)


def to_created_response(result: AnyResult, location: str) -> JSONResponse:
    """201 Created, 본문은 값"""
    _require(result, ResultStatus.SUCCESS)
    return JSONResponse(
        content=jsonable_encoder(getattr(result, "value", None)),
        status_code=201,
        headers={"Location": location},
    )


def to_accepted_response(result: AnyResult, location: str) -> JSONResponse:
    """202 Accepted, 본문은 값"""
    _require(result, ResultStatus.SUCCESS)
    return JSONResponse(
        content=jsonable_encoder(getattr(result, "value", None)),
        status_code=202,
        headers={"Location": location},
    )


def to_no_content_response(result: AnyResult) -> Response:
    _require(result, ResultStatus.SUCCESS, ResultStatus.NO_CONTENT)
    return Response(status_code=204)


# ============================================================
# 실패 상태 전용 응답 (상태가 다르면 ResultStateError)
# ============================================================

def to_bad_request_response(result: AnyResult) -> JSONResponse:
    """Failure 또는 ValidationError → 400"""
    _require(result, ResultStatus.FAILURE, ResultStatus.VALIDATION_ERROR)
    return _json(result, 400)


def to_unauthorized_response(result: AnyResult) -> JSONResponse:
    _require(result, ResultStatus.UNAUTHORIZED)
    return _json(result, 401)


def to_forbidden_response(result: AnyResult) -> Response:
    """403, 본문 없음"""
    _require(result, ResultStatus.FORBIDDEN)
    return Response(status_code=403)


def to_not_found_response(result: AnyResult) -> JSONResponse:
    _require(result, ResultStatus.NOT_FOUND)
    return _json(result, 404)


def to_conflict_response(result: AnyResult) -> JSONResponse:
    _require(result, ResultStatus.CONFLICT)
    return _json(result, 409)


def to_critical_error_response(result: AnyResult) -> JSONResponse:
    _require(result, ResultStatus.CRITICAL_ERROR)
    return _json(result, 500)


def to_unsupported_response(result: AnyResult) -> JSONResponse:
    _require(result, ResultStatus.UNSUPPORTED)
    return _json(result, 501)


def to_unavailable_response(result: AnyResult) -> JSONResponse:
    _require(result, ResultStatus.UNAVAILABLE)
    return _json(result, 503)


# ============================================================
# Problem Details
# ============================================================

def to_problem_details(result: AnyResult, instance: str | None = None) -> ProblemDetailsDTO | None:
    """실패 Result → ProblemDetails (성공 상태는 None)"""
    outcome = outcome_of(result)
    status_code = status_code_for(outcome.status)
    if outcome.is_success:
        return None
    return ProblemDetailsDTO(
        title=f"{HTTPStatus(status_code).phrase} ({outcome.status.value})",
        status=status_code,
        detail=", ".join(outcome.error_messages),
        instance=instance,
    )


def to_problem_response(result: AnyResult, instance: str | None = None) -> Response:
    """실패면 application/problem+json, 성공이면 to_response"""
    problem = to_problem_details(result, instance)
    if problem is None:
        return to_response(result)
    return JSONResponse(
        content=problem.model_dump(mode="json"),
        status_code=problem.status,
        media_type=PROBLEM_MEDIA_TYPE,
    )
