"""Result 조합 연산 (순수 함수)

단락(short-circuit) 규칙: 실패는 원래 상태/에러를 그대로 전달하고,
combine 만 모든 실패를 모은다.
"""
from collections.abc import Callable, Iterable
from typing import Any, TypeVar

import structlog

from resultkit.core.errors import Error
from resultkit.core.result import (
    AnyResult,
    Outcome,
    Result,
    as_result,
    outcome_of,
)
from resultkit.core.types import ErrorType

T = TypeVar('T')
U = TypeVar('U')

logger = structlog.get_logger(__name__)


def _carry_failure(result: Result[Any]) -> Result[U]:
    """실패를 다른 값 타입의 Result 로 전달 (상태/에러/메타데이터 유지)"""
    return as_result(result.outcome)


# ============================================================
# Functor / Monad
# ============================================================

def map_result(result: Result[T], f: Callable[[T | None], U]) -> Result[U]:
    """Success 값에 함수 적용, 실패면 f 를 호출하지 않음"""
    if result.is_success:
        return Result.success(f(result.value), result.success_message)
    return _carry_failure(result)


def bind(result: Result[T], f: Callable[[T | None], Result[U]]) -> Result[U]:
    """Result 반환 함수 체이닝"""
    if result.is_success:
        return f(result.value)
    return _carry_failure(result)


def map_error(result: Result[T], f: Callable[[Error], Error]) -> Result[T]:
    """실패의 각 Error 변환 (상태 유지)"""
    if result.is_success:
        return result
    outcome = result.outcome
    mapped = Outcome._build(
        outcome.status,
        tuple(f(e) for e in outcome.errors),
        outcome.success_message,
        outcome.metadata,
        outcome.correlation_id,
    )
    return Result(mapped, result.value)


def flatten(result: Result[Result[T]]) -> Result[T]:
    """Result[Result[T]] → Result[T]"""
    if not result.is_success:
        return _carry_failure(result)
    inner = result.value
    if inner is None:
        return Result.success(None, result.success_message)
    if not inner.is_success:
        return _carry_failure(inner)
    return Result.success(inner.value, inner.success_message)


def recover(result: Result[T], f: Callable[[tuple[Error, ...]], Result[T]]) -> Result[T]:
    """실패면 에러로부터 대체 Result 계산"""
    if result.is_success:
        return result
    return f(result.errors)


# ============================================================
# 분기 / 부수효과
# ============================================================

def match_result(
    result: Result[T],
    on_success: Callable[[T | None], U],
    on_failure: Callable[[tuple[Error, ...]], U],
) -> U:
    """정확히 한 분기만 실행 (실패 분기는 Error 튜플)"""
    if result.is_success:
        return on_success(result.value)
    return on_failure(result.errors)


def match_messages(
    result: Result[T],
    on_success: Callable[[T | None], U],
    on_failure: Callable[[list[str]], U],
) -> U:
    """정확히 한 분기만 실행 (실패 분기는 메시지 목록)"""
    if result.is_success:
        return on_success(result.value)
    return on_failure(result.error_messages)


def tap(result: Result[T], action: Callable[[T | None], None]) -> Result[T]:
    """성공일 때만 값으로 부수효과 실행 (로깅 등)"""
    if result.is_success:
        action(result.value)
    return result


def tap_error(result: Result[T], action: Callable[[tuple[Error, ...]], None]) -> Result[T]:
    """실패일 때만 에러로 부수효과 실행"""
    if not result.is_success:
        action(result.errors)
    return result


def if_success(result: Result[T], action: Callable[[Result[T]], None]) -> Result[T]:
    if result.is_success:
        action(result)
    return result


def if_failure(result: Result[T], action: Callable[[Result[T]], None]) -> Result[T]:
    if not result.is_success:
        action(result)
    return result


# ============================================================
# 검증 / 예외 가드
# ============================================================

def ensure(
    result: Result[T],
    predicate: Callable[[T | None], bool],
    error_message: str,
) -> Result[T]:
    """성공 값이 조건을 만족하지 않으면 Failure (실패면 조건 평가 안 함)"""
    if not result.is_success or predicate(result.value):
        return result
    return Result.failure(error_message)


def _fallback_error(error: Error | ErrorType | str) -> Error:
    match error:
        case Error():
            return error
        case ErrorType():
            return Error(error.value, error_type=error)
        case str():
            return Error(error, error_type=ErrorType.FAILURE)
        case _:
            raise TypeError(f"Expected Error, ErrorType or str, got {type(error).__name__}")


def try_catch(
    result: Result[T],
    func: Callable[[T | None], U],
    error: Error | ErrorType | str,
) -> Result[U]:
    """
    성공 값에 func 적용, 예외는 Failure(error) 로 변환

    입력이 실패면 func 를 호출하지 않고 그대로 전달. 예외는 밖으로 나가지 않는다.
    """
    fallback = _fallback_error(error)
    if not result.is_success:
        return _carry_failure(result)
    try:
        return Result.success(func(result.value))
    except Exception:
        logger.debug("try_catch_caught", fallback=fallback.message, exc_info=True)
        return Result.failure(fallback)


# ============================================================
# 값 추출 / 교체
# ============================================================

def unwrap_or(result: Result[T], default: T) -> T | None:
    """값 추출 또는 기본값"""
    return result.value if result.is_success else default


def unwrap_or_else(result: Result[T], f: Callable[[tuple[Error, ...]], T]) -> T | None:
    """값 추출 또는 에러로부터 계산"""
    return result.value if result.is_success else f(result.errors)


def with_value(result: Result[T], new_value: U) -> Result[U] | Result[T]:
    """성공이면 값 교체, 실패면 그대로"""
    if result.is_success:
        return Result.success(new_value, result.success_message)
    return result


# ============================================================
# 여러 Result 결합
# ============================================================

def aggregate(results: Iterable[Result[T]]) -> Result[list[T | None]]:
    """
    모두 성공이면 값 목록, 아니면 첫 번째 실패 (왼쪽부터 단락)
    """
    values: list[T | None] = []
    for r in results:
        if not r.is_success:
            return _carry_failure(r)
        values.append(r.value)
    return Result.success(values)


def combine(results: Iterable[AnyResult], separator: str = ", ") -> Outcome:
    """
    모든 실패 메시지를 모아 하나의 Failure 로 (단락 없음)

    실패가 하나도 없으면 Success, 실패에 메시지가 없으면 에러 없는 Failure
    """
    messages: list[str] = []
    failed = False
    for r in results:
        outcome = outcome_of(r)
        if not outcome.is_success:
            failed = True
            messages.extend(outcome.error_messages)

    if not failed:
        return Outcome.success()
    if not messages:
        return Outcome.failure()
    return Outcome.failure(separator.join(messages))
