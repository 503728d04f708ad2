"""FastAPI 어댑터 (HTTP 응답 / 미들웨어 / DTO)"""
from resultkit.api.dto import (
    ErrorDTO, PagedInfoDTO, OutcomeDTO, ResultDTO, PagedResultDTO,
    ProblemDetailsDTO,
)
from resultkit.api.converters import error_to_dto, paged_info_to_dto, result_to_dto
from resultkit.api.responses import (
    HTTP_STATUS_CODES, PROBLEM_MEDIA_TYPE,
    status_code_for,
    to_response, to_response_with_status,
    to_ok_response, to_created_response, to_accepted_response, to_no_content_response,
    to_bad_request_response, to_unauthorized_response, to_forbidden_response,
    to_not_found_response, to_conflict_response, to_critical_error_response,
    to_unsupported_response, to_unavailable_response,
    to_problem_details, to_problem_response,
)
from resultkit.api.middleware import (
    TRACE_ID_KEY,
    ResultExceptionMiddleware,
    exception_to_outcome, request_validation_handler, setup_result_handling,
)
from resultkit.api.routing import returns_result

__all__ = [
    # DTO
    "ErrorDTO", "PagedInfoDTO", "OutcomeDTO", "ResultDTO", "PagedResultDTO",
    "ProblemDetailsDTO",
    "error_to_dto", "paged_info_to_dto", "result_to_dto",
    # Responses
    "HTTP_STATUS_CODES", "PROBLEM_MEDIA_TYPE",
    "status_code_for",
    "to_response", "to_response_with_status",
    "to_ok_response", "to_created_response", "to_accepted_response", "to_no_content_response",
    "to_bad_request_response", "to_unauthorized_response", "to_forbidden_response",
    "to_not_found_response", "to_conflict_response", "to_critical_error_response",
    "to_unsupported_response", "to_unavailable_response",
    "to_problem_details", "to_problem_response",
    # Middleware
    "TRACE_ID_KEY",
    "ResultExceptionMiddleware",
    "exception_to_outcome", "request_validation_handler", "setup_result_handling",
    "returns_result",
]
