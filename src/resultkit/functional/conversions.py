"""Result[T] ↔ Option / Either / Validation / Exceptional 변환

에러 채널이 없는 래퍼(Option, Either[Unit, T])로 갈 때만 에러 정보가 사라진다.
"""
from typing import Any, TypeVar

from resultkit.core import Result
from resultkit.functional.types import (
    NOTHING, UNIT,
    Either, Exceptional, Invalid, Left, Nothing, Option, Raised, Returned, Right, Some, Unit,
    Valid, Validation,
)

T = TypeVar('T')


# ============================================================
# Option
# ============================================================

def to_option(result: Result[T]) -> Option[T | None]:
    """성공이면 Some, 아니면 Nothing (에러 버림)"""
    return Some(result.value) if result.is_success else NOTHING


def option_to_result(option: Option[T], none_message: str = "Option has no value.") -> Result[T]:
    match option:
        case Some(value):
            return Result.success(value)
        case Nothing():
            return Result.failure(none_message)
        case _:
            raise TypeError(f"Expected Some or Nothing, got {type(option).__name__}")


# ============================================================
# Either
# ============================================================

def to_either(result: Result[T], separator: str = ", ") -> Either[str, T | None]:
    """성공이면 Right, 아니면 Left(에러 메시지 결합)"""
    if result.is_success:
        return Right(result.value)
    return Left(separator.join(result.error_messages))


def to_unit_either(result: Result[T]) -> Either[Unit, T | None]:
    """성공이면 Right, 아니면 Left(UNIT) (에러 버림)"""
    return Right(result.value) if result.is_success else Left(UNIT)


def either_to_result(either: Either[Any, T]) -> Result[T]:
    match either:
        case Right(value):
            return Result.success(value)
        case Left(value):
            return Result.failure(f"Error: {value}")
        case _:
            raise TypeError(f"Expected Left or Right, got {type(either).__name__}")


# ============================================================
# Validation
# ============================================================

def to_validation(result: Result[T]) -> Validation[T | None]:
    """에러 메시지 목록 ↔ 실패 목록"""
    if result.is_success:
        return Valid(result.value)
    return Invalid(tuple(result.error_messages))


def validation_to_result(validation: Validation[T]) -> Result[T]:
    match validation:
        case Valid(value):
            return Result.success(value)
        case Invalid(errors):
            return Result.failure(*errors)
        case _:
            raise TypeError(f"Expected Valid or Invalid, got {type(validation).__name__}")


# ============================================================
# Exceptional
# ============================================================

def to_exceptional(result: Result[T], separator: str = ", ") -> Exceptional[T | None]:
    """성공이면 Returned, 아니면 에러 메시지를 결합한 Exception"""
    if result.is_success:
        return Returned(result.value)
    return Raised(Exception(separator.join(result.error_messages)))


def exceptional_to_result(exceptional: Exceptional[T]) -> Result[T]:
    """Raised 는 예외 메시지를 가진 Failure"""
    match exceptional:
        case Returned(value):
            return Result.success(value)
        case Raised(exception):
            return Result.failure(exception)
        case _:
            raise TypeError(f"Expected Returned or Raised, got {type(exceptional).__name__}")
