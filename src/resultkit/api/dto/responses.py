"""응답 DTO (Result 직렬화 형태)"""
from typing import Any
from pydantic import BaseModel, Field


class ErrorDTO(BaseModel):
    """Error DTO"""
    message: str
    code: str | None = None
    error_type: str | None = None
    metadata: dict[str, Any] = Field(default_factory=dict)


class PagedInfoDTO(BaseModel):
    """페이지 정보 DTO"""
    first_item_on_page: int
    last_item_on_page: int
    page_number: int
    page_size: int
    page_count: int
    total_count: int
    has_next_page: bool
    has_previous_page: bool
    is_first_page: bool
    is_last_page: bool


class OutcomeDTO(BaseModel):
    """값 없는 Result DTO"""
    status: str
    is_success: bool
    errors: list[ErrorDTO] = Field(default_factory=list)
    success_message: str = ""
    metadata: dict[str, Any] = Field(default_factory=dict)
    correlation_id: str | None = None


class ResultDTO(OutcomeDTO):
    """Result[T] DTO (value_type 은 직렬화하지 않음)"""
    value: Any = None


class PagedResultDTO(ResultDTO):
    """PagedResult[T] DTO"""
    paged_info: PagedInfoDTO | None = None
    has_paged_info: bool = False


class ProblemDetailsDTO(BaseModel):
    """RFC 7807 Problem Details"""
    type: str = "about:blank"
    title: str
    status: int
    detail: str
    instance: str | None = None
