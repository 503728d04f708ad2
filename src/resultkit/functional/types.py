"""함수형 래퍼 타입 (Option / Either / Validation / Exceptional)"""
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

T = TypeVar('T')
L = TypeVar('L')
R = TypeVar('R')


# ============================================================
# Option (값 있음 / 없음)
# ============================================================

@dataclass(frozen=True)
class Some(Generic[T]):
    """값 있음"""
    value: T

    def __repr__(self) -> str:
        return f"Some({self.value!r})"


@dataclass(frozen=True)
class Nothing:
    """값 없음"""

    def __repr__(self) -> str:
        return "Nothing"


NOTHING = Nothing()

Option = Union[Some[T], Nothing]


def option_of(value: T | None) -> Option[T]:
    """None 이면 Nothing"""
    return NOTHING if value is None else Some(value)


# ============================================================
# Either (Left = 실패 트랙, Right = 성공 트랙)
# ============================================================

@dataclass(frozen=True)
class Left(Generic[L]):
    value: L

    def __repr__(self) -> str:
        return f"Left({self.value!r})"


@dataclass(frozen=True)
class Right(Generic[R]):
    value: R

    def __repr__(self) -> str:
        return f"Right({self.value!r})"


Either = Union[Left[L], Right[R]]


@dataclass(frozen=True)
class Unit:
    """정보 없는 값"""

    def __repr__(self) -> str:
        return "()"


UNIT = Unit()


# ============================================================
# Validation (실패 누적)
# ============================================================

@dataclass(frozen=True)
class Valid(Generic[T]):
    value: T

    def __repr__(self) -> str:
        return f"Valid({self.value!r})"


@dataclass(frozen=True)
class Invalid:
    errors: tuple[str, ...]

    def __repr__(self) -> str:
        return f"Invalid({list(self.errors)!r})"


Validation = Union[Valid[T], Invalid]


def validate_all(*validations: Validation[T]) -> Validation[list[T]]:
    """모든 검증 실행, 에러 누적"""
    values: list[T] = []
    errors: list[str] = []

    for v in validations:
        match v:
            case Valid(value):
                values.append(value)
            case Invalid(errs):
                errors.extend(errs)

    if errors:
        return Invalid(tuple(errors))
    return Valid(values)


# ============================================================
# Exceptional (값 또는 예외)
# ============================================================

@dataclass(frozen=True)
class Returned(Generic[T]):
    value: T

    def __repr__(self) -> str:
        return f"Returned({self.value!r})"


@dataclass(frozen=True)
class Raised:
    exception: Exception

    def __repr__(self) -> str:
        return f"Raised({self.exception!r})"


Exceptional = Union[Returned[T], Raised]


def exceptional_of(func: Callable[..., T], *args: Any, **kwargs: Any) -> Exceptional[T]:
    """func 실행, Exception 은 Raised 로 잡는다"""
    try:
        return Returned(func(*args, **kwargs))
    except Exception as e:
        return Raised(e)
