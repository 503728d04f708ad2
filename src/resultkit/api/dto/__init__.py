from resultkit.api.dto.responses import (
    ErrorDTO, PagedInfoDTO,
    OutcomeDTO, ResultDTO, PagedResultDTO,
    ProblemDetailsDTO,
)

__all__ = [
    "ErrorDTO", "PagedInfoDTO",
    "OutcomeDTO", "ResultDTO", "PagedResultDTO",
    "ProblemDetailsDTO",
]
