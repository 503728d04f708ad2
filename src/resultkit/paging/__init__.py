"""페이지네이션 어댑터"""
from resultkit.paging.paged_list import PagedList, paginate, to_paged_result

__all__ = ["PagedList", "paginate", "to_paged_result"]
