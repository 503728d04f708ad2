"""필드 단위 검증 실패 → Error / Result 변환"""
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Literal, TypeVar

from pydantic import BaseModel, ValidationError as PydanticValidationError

from resultkit.core import Error, Outcome, PagedInfo, PagedResult, Result

T = TypeVar('T')
M = TypeVar('M', bound=BaseModel)

Severity = Literal["Error", "Warning", "Info"]


@dataclass(frozen=True)
class ValidationFailure:
    """검증 라이브러리가 보고한 필드 하나의 실패"""
    message: str
    property_name: str = ""
    code: str | None = None
    severity: Severity = "Error"
    attempted_value: Any = None


def failures_to_errors(failures: Iterable[ValidationFailure]) -> tuple[Error, ...]:
    """Severity/PropertyName/AttemptedValue 를 메타데이터로 옮긴 Error 목록"""
    errors = []
    for failure in failures:
        error = Error(failure.message, code=failure.code)
        error.add_or_update_metadata("Severity", failure.severity)
        error.add_or_update_metadata("PropertyName", failure.property_name)
        error.add_or_update_metadata("AttemptedValue", failure.attempted_value)
        errors.append(error)
    return tuple(errors)


# ============================================================
# 실패 목록 → Result (비어 있으면 Success)
# ============================================================

def to_outcome(failures: Iterable[ValidationFailure], message: str = "") -> Outcome:
    errors = failures_to_errors(failures)
    if not errors:
        return Outcome.success(message)
    return Outcome.validation_error(*errors)


def to_result(
    failures: Iterable[ValidationFailure],
    value: T | None = None,
    message: str = "",
) -> Result[T]:
    errors = failures_to_errors(failures)
    if not errors:
        return Result.success(value, message)
    return Result.validation_error(*errors, value=value)


def to_paged_result(
    failures: Iterable[ValidationFailure],
    paged_info: PagedInfo,
    value: T | None = None,
    message: str = "",
) -> PagedResult[T]:
    errors = failures_to_errors(failures)
    if not errors:
        return PagedResult.success(value, paged_info, message)
    return PagedResult.validation_error(*errors, value=value)


# ============================================================
# Pydantic 어댑터
# ============================================================

def _property_name(loc: tuple[int | str, ...]) -> str:
    """('items', 0, 'name') → 'items[0].name'"""
    name = ""
    for part in loc:
        if isinstance(part, int):
            name += f"[{part}]"
        else:
            name += f".{part}" if name else str(part)
    return name


def failures_from_details(details: Iterable[Mapping[str, Any]]) -> list[ValidationFailure]:
    """pydantic 형식 에러 딕셔너리 (loc/msg/type/input) 변환"""
    return [
        ValidationFailure(
            message=detail["msg"],
            property_name=_property_name(tuple(detail.get("loc", ()))),
            code=detail.get("type"),
            attempted_value=detail.get("input"),
        )
        for detail in details
    ]


def failures_from_pydantic(exc: PydanticValidationError) -> list[ValidationFailure]:
    return failures_from_details(exc.errors(include_url=False))


def from_pydantic_error(exc: PydanticValidationError, value: T | None = None) -> Result[T]:
    """pydantic ValidationError → ValidationError 상태 Result"""
    return to_result(failures_from_pydantic(exc), value)


def validate_model(model_cls: type[M], data: Mapping[str, Any] | Any) -> Result[M]:
    """모델 검증 후 생성"""
    try:
        return Result.success(model_cls.model_validate(data))
    except PydanticValidationError as e:
        return from_pydantic_error(e)
