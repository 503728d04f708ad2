"""도메인 타입 정의 (상태 분류, 페이지 정보)"""
from dataclasses import dataclass
from enum import Enum
from typing import Self


# ============================================================
# 에러 분류 (OR Type)
# ============================================================

class ErrorType(str, Enum):
    """개별 Error 분류 (Result 상태와 독립)"""
    ERROR = "Error"
    FORBIDDEN = "Forbidden"
    UNAUTHORIZED = "Unauthorized"
    INVALID = "Invalid"
    NOT_FOUND = "NotFound"
    CONFLICT = "Conflict"
    UNAVAILABLE = "Unavailable"
    UNSUPPORTED = "Unsupported"
    FAILURE = "Failure"
    VALIDATION_ERROR = "ValidationError"


# ============================================================
# 결과 상태 (OR Type)
# ============================================================

class ResultStatus(str, Enum):
    """Result 상태 (HTTP 매핑 순서)"""
    SUCCESS = "Success"
    FAILURE = "Failure"
    FORBIDDEN = "Forbidden"
    UNAUTHORIZED = "Unauthorized"
    INVALID = "Invalid"
    NOT_FOUND = "NotFound"
    CONFLICT = "Conflict"
    UNAVAILABLE = "Unavailable"
    UNSUPPORTED = "Unsupported"
    VALIDATION_ERROR = "ValidationError"
    CRITICAL_ERROR = "CriticalError"
    NO_CONTENT = "NoContent"

    @property
    def is_success(self) -> bool:
        return self in (ResultStatus.SUCCESS, ResultStatus.NO_CONTENT)

    @property
    def error_type(self) -> ErrorType | None:
        """문자열 메시지에 붙일 ErrorType (성공 상태는 None)"""
        return _STATUS_ERROR_TYPES.get(self)


_STATUS_ERROR_TYPES: dict[ResultStatus, ErrorType] = {
    ResultStatus.FAILURE: ErrorType.FAILURE,
    ResultStatus.FORBIDDEN: ErrorType.FORBIDDEN,
    ResultStatus.UNAUTHORIZED: ErrorType.UNAUTHORIZED,
    ResultStatus.INVALID: ErrorType.INVALID,
    ResultStatus.NOT_FOUND: ErrorType.NOT_FOUND,
    ResultStatus.CONFLICT: ErrorType.CONFLICT,
    ResultStatus.UNAVAILABLE: ErrorType.UNAVAILABLE,
    ResultStatus.UNSUPPORTED: ErrorType.UNSUPPORTED,
    ResultStatus.VALIDATION_ERROR: ErrorType.VALIDATION_ERROR,
    ResultStatus.CRITICAL_ERROR: ErrorType.ERROR,
}


# ============================================================
# 페이지 정보 (AND Type)
# ============================================================

@dataclass(frozen=True)
class PagedInfo:
    """페이지 위치 메타데이터"""
    first_item_on_page: int = 0
    last_item_on_page: int = 0
    page_number: int = 0
    page_size: int = 0
    page_count: int = 0
    total_count: int = 0
    has_next_page: bool = False
    has_previous_page: bool = False
    is_first_page: bool = False
    is_last_page: bool = False

    @classmethod
    def from_counts(cls, page_number: int, page_size: int, total_count: int) -> Self:
        """
        페이지 번호/크기/전체 개수로 계산 (1부터 시작)

        항목이 없으면 page_count=0, first/last item 은 0
        """
        if page_number < 1:
            raise ValueError(f"page_number must be >= 1, got {page_number}")
        if page_size < 1:
            raise ValueError(f"page_size must be >= 1, got {page_size}")
        if total_count < 0:
            raise ValueError(f"total_count must be >= 0, got {total_count}")

        page_count = -(-total_count // page_size)
        in_range = page_number <= page_count

        first_item = (page_number - 1) * page_size + 1 if in_range else 0
        last_item = min(page_number * page_size, total_count) if in_range else 0

        return cls(
            first_item_on_page=first_item,
            last_item_on_page=last_item,
            page_number=page_number,
            page_size=page_size,
            page_count=page_count,
            total_count=total_count,
            has_next_page=page_number < page_count,
            has_previous_page=in_range and page_number > 1,
            is_first_page=in_range and page_number == 1,
            is_last_page=in_range and page_number == page_count,
        )
