"""Result 타입 (Outcome → Result[T] → PagedResult[T], 합성 구조)"""
from collections.abc import Callable, Iterable
from dataclasses import InitVar, dataclass, field
from typing import Any, Generic, Self, TypeVar, Union

from resultkit.core.errors import Error, ResultStateError, UnsupportedStatusError
from resultkit.core.types import PagedInfo, ResultStatus

T = TypeVar('T')
U = TypeVar('U')

# str → 상태에 맞는 ErrorType 으로 감싸고, Error 는 그대로, 예외는 메시지로 변환
ErrorInput = Union[str, Error, BaseException]

_FACTORY_TOKEN = object()


def _to_errors(items: Iterable[ErrorInput], status: ResultStatus) -> tuple[Error, ...]:
    error_type = status.error_type
    errors: list[Error] = []
    for item in items:
        match item:
            case Error():
                errors.append(item)
            case str():
                errors.append(Error(item, error_type=error_type))
            case BaseException():
                errors.append(Error.from_exception(item, error_type))
            case _:
                raise TypeError(f"Expected str, Error or exception, got {type(item).__name__}")
    return tuple(errors)


# ============================================================
# Outcome (값 없는 Result)
# ============================================================

@dataclass(frozen=True)
class Outcome:
    """
    연산 결과 스냅샷 (상태 + 에러 + 메타데이터)

    팩토리로만 생성 가능. metadata 를 제외하면 생성 후 불변.
    """
    status: ResultStatus
    errors: tuple[Error, ...] = ()
    success_message: str = ""
    metadata: dict[str, Any] = field(default_factory=dict, hash=False)
    correlation_id: str | None = None
    _token: InitVar[object] = None

    def __post_init__(self, _token: object) -> None:
        if _token is not _FACTORY_TOKEN:
            raise ResultStateError(
                "Outcome must be created through a factory such as Outcome.success()"
            )
        if not isinstance(self.status, ResultStatus):
            raise UnsupportedStatusError(self.status)

    @classmethod
    def _build(
        cls,
        status: ResultStatus,
        errors: tuple[Error, ...] = (),
        success_message: str = "",
        metadata: dict[str, Any] | None = None,
        correlation_id: str | None = None,
    ) -> Self:
        return cls(
            status,
            errors,
            success_message,
            dict(metadata or {}),
            correlation_id,
            _FACTORY_TOKEN,
        )

    @classmethod
    def _failed(cls, status: ResultStatus, items: tuple[ErrorInput, ...]) -> Self:
        return cls._build(status, _to_errors(items, status))

    # --------------------------------------------------------
    # 접근자
    # --------------------------------------------------------

    @property
    def is_success(self) -> bool:
        return self.status.is_success

    @property
    def error_messages(self) -> list[str]:
        return [e.message for e in self.errors]

    def add_or_update_metadata(self, key: str, value: Any) -> None:
        """메타데이터 추가 또는 덮어쓰기"""
        self.metadata[key] = value

    def with_correlation_id(self, correlation_id: str | None) -> Self:
        """correlation id 만 바꾼 새 Outcome"""
        return self._build(
            self.status,
            self.errors,
            self.success_message,
            self.metadata,
            correlation_id,
        )

    # --------------------------------------------------------
    # 팩토리
    # --------------------------------------------------------

    @classmethod
    def success(cls, message: str = "") -> Self:
        return cls._build(ResultStatus.SUCCESS, success_message=message)

    @classmethod
    def no_content(cls) -> Self:
        return cls._build(ResultStatus.NO_CONTENT)

    @classmethod
    def failure(cls, *errors: ErrorInput) -> Self:
        return cls._failed(ResultStatus.FAILURE, errors)

    @classmethod
    def forbidden(cls, *errors: ErrorInput) -> Self:
        return cls._failed(ResultStatus.FORBIDDEN, errors)

    @classmethod
    def unauthorized(cls, *errors: ErrorInput) -> Self:
        return cls._failed(ResultStatus.UNAUTHORIZED, errors)

    @classmethod
    def invalid(cls, *errors: ErrorInput) -> Self:
        return cls._failed(ResultStatus.INVALID, errors)

    @classmethod
    def not_found(cls, *errors: ErrorInput) -> Self:
        return cls._failed(ResultStatus.NOT_FOUND, errors)

    @classmethod
    def conflict(cls, *errors: ErrorInput) -> Self:
        return cls._failed(ResultStatus.CONFLICT, errors)

    @classmethod
    def unavailable(cls, *errors: ErrorInput) -> Self:
        return cls._failed(ResultStatus.UNAVAILABLE, errors)

    @classmethod
    def unsupported(cls, *errors: ErrorInput) -> Self:
        return cls._failed(ResultStatus.UNSUPPORTED, errors)

    @classmethod
    def validation_error(cls, *errors: ErrorInput) -> Self:
        return cls._failed(ResultStatus.VALIDATION_ERROR, errors)

    @classmethod
    def critical_error(cls, *errors: ErrorInput) -> Self:
        return cls._failed(ResultStatus.CRITICAL_ERROR, errors)


# ============================================================
# Result[T] (값을 가진 Result)
# ============================================================

@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome + 값"""
    outcome: Outcome
    value: T | None = None

    @property
    def status(self) -> ResultStatus:
        return self.outcome.status

    @property
    def is_success(self) -> bool:
        return self.outcome.is_success

    @property
    def errors(self) -> tuple[Error, ...]:
        return self.outcome.errors

    @property
    def error_messages(self) -> list[str]:
        return self.outcome.error_messages

    @property
    def success_message(self) -> str:
        return self.outcome.success_message

    @property
    def metadata(self) -> dict[str, Any]:
        return self.outcome.metadata

    @property
    def correlation_id(self) -> str | None:
        return self.outcome.correlation_id

    @property
    def value_type(self) -> type:
        """값의 런타임 타입 (직렬화 제외)"""
        return type(self.value)

    def add_or_update_metadata(self, key: str, value: Any) -> None:
        self.outcome.add_or_update_metadata(key, value)

    def with_correlation_id(self, correlation_id: str | None) -> 'Result[T]':
        return Result(self.outcome.with_correlation_id(correlation_id), self.value)

    # --------------------------------------------------------
    # 명시적 변환 (암묵 변환 대체)
    # --------------------------------------------------------

    @classmethod
    def from_value(cls, value: T | None) -> 'Result[T]':
        """값을 Success 로 감싸기"""
        return cls.success(value)

    def to_value(self) -> T | None:
        """
        값만 꺼내기

        손실 변환: status 와 errors 는 버려진다.
        실패 Result 도 값(보통 None)을 그대로 돌려주므로 is_success 를 먼저 확인할 것.
        """
        return self.value

    # --------------------------------------------------------
    # 팩토리
    # --------------------------------------------------------

    @classmethod
    def success(cls, value: T | None = None, message: str = "") -> 'Result[T]':
        return cls(Outcome.success(message), value)

    @classmethod
    def no_content(cls) -> 'Result[T]':
        return cls(Outcome.no_content())

    @classmethod
    def failure(cls, *errors: ErrorInput, value: T | None = None) -> 'Result[T]':
        return cls(Outcome.failure(*errors), value)

    @classmethod
    def forbidden(cls, *errors: ErrorInput, value: T | None = None) -> 'Result[T]':
        return cls(Outcome.forbidden(*errors), value)

    @classmethod
    def unauthorized(cls, *errors: ErrorInput, value: T | None = None) -> 'Result[T]':
        return cls(Outcome.unauthorized(*errors), value)

    @classmethod
    def invalid(cls, *errors: ErrorInput, value: T | None = None) -> 'Result[T]':
        return cls(Outcome.invalid(*errors), value)

    @classmethod
    def not_found(cls, *errors: ErrorInput, value: T | None = None) -> 'Result[T]':
        return cls(Outcome.not_found(*errors), value)

    @classmethod
    def conflict(cls, *errors: ErrorInput, value: T | None = None) -> 'Result[T]':
        return cls(Outcome.conflict(*errors), value)

    @classmethod
    def unavailable(cls, *errors: ErrorInput, value: T | None = None) -> 'Result[T]':
        return cls(Outcome.unavailable(*errors), value)

    @classmethod
    def unsupported(cls, *errors: ErrorInput, value: T | None = None) -> 'Result[T]':
        return cls(Outcome.unsupported(*errors), value)

    @classmethod
    def validation_error(cls, *errors: ErrorInput, value: T | None = None) -> 'Result[T]':
        return cls(Outcome.validation_error(*errors), value)

    @classmethod
    def critical_error(cls, *errors: ErrorInput, value: T | None = None) -> 'Result[T]':
        return cls(Outcome.critical_error(*errors), value)

    # --------------------------------------------------------
    # Fluent 조합 (combinators 위임)
    # --------------------------------------------------------

    def map(self, f: Callable[[T | None], U]) -> 'Result[U]':
        from resultkit.core.combinators import map_result
        return map_result(self, f)

    def bind(self, f: Callable[[T | None], 'Result[U]']) -> 'Result[U]':
        from resultkit.core.combinators import bind
        return bind(self, f)

    def match(
        self,
        on_success: Callable[[T | None], U],
        on_failure: Callable[[tuple[Error, ...]], U],
    ) -> U:
        from resultkit.core.combinators import match_result
        return match_result(self, on_success, on_failure)

    def match_messages(
        self,
        on_success: Callable[[T | None], U],
        on_failure: Callable[[list[str]], U],
    ) -> U:
        from resultkit.core.combinators import match_messages
        return match_messages(self, on_success, on_failure)

    def tap(self, action: Callable[[T | None], None]) -> 'Result[T]':
        from resultkit.core.combinators import tap
        return tap(self, action)

    def tap_error(self, action: Callable[[tuple[Error, ...]], None]) -> 'Result[T]':
        from resultkit.core.combinators import tap_error
        return tap_error(self, action)

    def if_success(self, action: Callable[['Result[T]'], None]) -> 'Result[T]':
        from resultkit.core.combinators import if_success
        return if_success(self, action)

    def if_failure(self, action: Callable[['Result[T]'], None]) -> 'Result[T]':
        from resultkit.core.combinators import if_failure
        return if_failure(self, action)

    def ensure(self, predicate: Callable[[T | None], bool], error_message: str) -> 'Result[T]':
        from resultkit.core.combinators import ensure
        return ensure(self, predicate, error_message)

    def try_catch(self, func: Callable[[T | None], U], error: Any) -> 'Result[U]':
        from resultkit.core.combinators import try_catch
        return try_catch(self, func, error)

    def unwrap_or(self, default: T) -> T | None:
        from resultkit.core.combinators import unwrap_or
        return unwrap_or(self, default)

    def with_value(self, new_value: U) -> 'Result[U] | Result[T]':
        from resultkit.core.combinators import with_value
        return with_value(self, new_value)


# ============================================================
# PagedResult[T] (페이지 정보를 가진 Result)
# ============================================================

@dataclass(frozen=True)
class PagedResult(Generic[T]):
    """
    Result[T] + 페이지 정보

    paged_info 는 success 팩토리로 만든 Success 에만 존재한다.
    Result[T] 연산은 ``paged.result`` 로 꺼내서 사용.
    """
    result: Result[T]
    paged_info: PagedInfo | None = None

    def __post_init__(self) -> None:
        if self.paged_info is not None and self.result.status is not ResultStatus.SUCCESS:
            raise ResultStateError(
                f"paged_info is only allowed on Success, got {self.result.status.value}"
            )

    @property
    def has_paged_info(self) -> bool:
        return self.paged_info is not None

    @property
    def outcome(self) -> Outcome:
        return self.result.outcome

    @property
    def value(self) -> T | None:
        return self.result.value

    @property
    def status(self) -> ResultStatus:
        return self.result.status

    @property
    def is_success(self) -> bool:
        return self.result.is_success

    @property
    def errors(self) -> tuple[Error, ...]:
        return self.result.errors

    @property
    def error_messages(self) -> list[str]:
        return self.result.error_messages

    @property
    def success_message(self) -> str:
        return self.result.success_message

    @property
    def metadata(self) -> dict[str, Any]:
        return self.result.metadata

    @property
    def correlation_id(self) -> str | None:
        return self.result.correlation_id

    @property
    def value_type(self) -> type:
        return self.result.value_type

    def add_or_update_metadata(self, key: str, value: Any) -> None:
        self.result.add_or_update_metadata(key, value)

    def with_correlation_id(self, correlation_id: str | None) -> 'PagedResult[T]':
        return PagedResult(self.result.with_correlation_id(correlation_id), self.paged_info)

    # --------------------------------------------------------
    # 팩토리
    # --------------------------------------------------------

    @classmethod
    def success(
        cls,
        value: T | None,
        paged_info: PagedInfo,
        message: str = "",
    ) -> 'PagedResult[T]':
        """페이지 정보가 필수인 Success (페이지 정보 없는 Success 는 없음)"""
        if paged_info is None:
            raise ValueError("PagedResult.success requires paged_info")
        return cls(Result.success(value, message), paged_info)

    @classmethod
    def failure(cls, *errors: ErrorInput, value: T | None = None) -> 'PagedResult[T]':
        return cls(Result.failure(*errors, value=value))

    @classmethod
    def forbidden(cls, *errors: ErrorInput, value: T | None = None) -> 'PagedResult[T]':
        return cls(Result.forbidden(*errors, value=value))

    @classmethod
    def unauthorized(cls, *errors: ErrorInput, value: T | None = None) -> 'PagedResult[T]':
        return cls(Result.unauthorized(*errors, value=value))

    @classmethod
    def invalid(cls, *errors: ErrorInput, value: T | None = None) -> 'PagedResult[T]':
        return cls(Result.invalid(*errors, value=value))

    @classmethod
    def not_found(cls, *errors: ErrorInput, value: T | None = None) -> 'PagedResult[T]':
        return cls(Result.not_found(*errors, value=value))

    @classmethod
    def conflict(cls, *errors: ErrorInput, value: T | None = None) -> 'PagedResult[T]':
        return cls(Result.conflict(*errors, value=value))

    @classmethod
    def unavailable(cls, *errors: ErrorInput, value: T | None = None) -> 'PagedResult[T]':
        return cls(Result.unavailable(*errors, value=value))

    @classmethod
    def unsupported(cls, *errors: ErrorInput, value: T | None = None) -> 'PagedResult[T]':
        return cls(Result.unsupported(*errors, value=value))

    @classmethod
    def validation_error(cls, *errors: ErrorInput, value: T | None = None) -> 'PagedResult[T]':
        return cls(Result.validation_error(*errors, value=value))

    @classmethod
    def critical_error(cls, *errors: ErrorInput, value: T | None = None) -> 'PagedResult[T]':
        return cls(Result.critical_error(*errors, value=value))


# 세 Result 형태 공통 (어댑터 입력)
AnyResult = Union[Outcome, Result[Any], PagedResult[Any]]


def outcome_of(result: AnyResult) -> Outcome:
    """어떤 Result 형태든 Outcome 추출"""
    match result:
        case Outcome():
            return result
        case Result() | PagedResult():
            return result.outcome
        case _:
            raise TypeError(f"Expected a result, got {type(result).__name__}")


# ============================================================
# 상태 보존 변환 (AsResult / AsPagedResult)
# ============================================================

def _rebuilt(outcome: Outcome) -> Outcome:
    return Outcome._build(
        outcome.status,
        outcome.errors,
        outcome.success_message,
        outcome.metadata,
        outcome.correlation_id,
    )


_RESULT_STATUSES = frozenset(ResultStatus)
_PAGED_STATUSES = _RESULT_STATUSES - {ResultStatus.NO_CONTENT}


def as_result(outcome: Outcome, value: T | None = None) -> Result[T]:
    """Outcome 을 같은 상태의 Result[T] 로 변환"""
    if outcome.status not in _RESULT_STATUSES:
        raise UnsupportedStatusError(outcome.status)
    return Result(_rebuilt(outcome), value)


def as_paged_result(
    outcome: Outcome,
    paged_info: PagedInfo | None = None,
    value: T | None = None,
) -> PagedResult[T]:
    """
    Outcome 을 같은 상태의 PagedResult[T] 로 변환

    Success 는 paged_info 필수, NoContent 는 변환 불가 (둘 다 UnsupportedStatusError)
    """
    if outcome.status not in _PAGED_STATUSES:
        raise UnsupportedStatusError(outcome.status, "no paged counterpart")
    if outcome.status is ResultStatus.SUCCESS:
        if paged_info is None:
            raise UnsupportedStatusError(outcome.status, "paged_info is required")
        return PagedResult(Result(_rebuilt(outcome), value), paged_info)
    return PagedResult(Result(_rebuilt(outcome), value))
