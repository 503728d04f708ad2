"""페이지 목록 → PagedResult 변환"""
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Generic, Self, TypeVar

from resultkit.core import PagedInfo, PagedResult

T = TypeVar('T')


@dataclass(frozen=True)
class PagedList(Generic[T]):
    """외부에서 잘라낸 한 페이지의 항목 + 위치 카운터"""
    items: tuple[T, ...]
    info: PagedInfo

    @classmethod
    def of(
        cls,
        items: Sequence[T],
        page_number: int,
        page_size: int,
        total_count: int,
    ) -> Self:
        """이미 잘린 페이지 (DB 쿼리 결과 등)"""
        if len(items) > page_size:
            raise ValueError(f"Page holds {len(items)} items, page_size is {page_size}")
        return cls(tuple(items), PagedInfo.from_counts(page_number, page_size, total_count))

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)


def paginate(source: Sequence[T], page_number: int, page_size: int) -> PagedList[T]:
    """메모리 시퀀스에서 한 페이지 잘라내기 (1부터 시작)"""
    info = PagedInfo.from_counts(page_number, page_size, len(source))
    start = (page_number - 1) * page_size
    return PagedList(tuple(source[start:start + page_size]), info)


def to_paged_result(page: PagedList[T], message: str = "") -> PagedResult[list[T]]:
    """PagedList → PagedResult.success(items, paged_info)"""
    return PagedResult.success(list(page.items), page.info, message)
