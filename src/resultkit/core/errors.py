"""에러 타입 정의 (Error 엔티티 + API 오용 예외)"""
from dataclasses import dataclass, field
from typing import Any, Self

from resultkit.core.types import ErrorType, ResultStatus


# ============================================================
# Error 엔티티
# ============================================================

@dataclass(frozen=True)
class Error:
    """
    단일 진단 레코드

    message/code/error_type 은 생성 후 고정, metadata 만 추가 가능
    """
    message: str
    code: str | None = None
    error_type: ErrorType | None = None
    metadata: dict[str, Any] | None = field(default=None, hash=False)

    def __post_init__(self) -> None:
        if not isinstance(self.message, str):
            raise TypeError(f"Error message must be str, got {type(self.message).__name__}")
        # 전달받은 dict 는 복사해서 소유
        object.__setattr__(self, "metadata", dict(self.metadata or {}))

    @classmethod
    def from_exception(cls, exc: BaseException, error_type: ErrorType | None = None) -> Self:
        """예외 메시지로 생성"""
        return cls(str(exc) or type(exc).__name__, error_type=error_type)

    def add_or_update_metadata(self, key: str, value: Any) -> None:
        """메타데이터 추가 또는 덮어쓰기"""
        self.metadata[key] = value


def error_to_dict(error: Error) -> dict[str, Any]:
    """에러를 딕셔너리로 변환 (직렬화용)"""
    return {
        "message": error.message,
        "code": error.code,
        "error_type": error.error_type.value if error.error_type else None,
        "metadata": dict(error.metadata),
    }


# ============================================================
# API 오용 (치명적, Result 채널로 가지 않음)
# ============================================================

class ResultKitError(Exception):
    """resultkit 오용 예외의 기반"""


class UnsupportedStatusError(ResultKitError, ValueError):
    """처리할 수 없는 ResultStatus"""

    def __init__(self, status: object, reason: str | None = None) -> None:
        self.status = status
        detail = f": {reason}" if reason else ""
        label = status.value if isinstance(status, ResultStatus) else repr(status)
        super().__init__(f"Unsupported result status {label}{detail}")


class ResultStateError(ResultKitError):
    """Result 상태가 호출 계약과 맞지 않음"""
