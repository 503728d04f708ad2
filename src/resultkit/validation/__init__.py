"""검증 라이브러리 어댑터"""
from resultkit.validation.adapters import (
    Severity, ValidationFailure,
    failures_to_errors,
    to_outcome, to_result, to_paged_result,
    failures_from_details, failures_from_pydantic,
    from_pydantic_error, validate_model,
)

__all__ = [
    "Severity", "ValidationFailure",
    "failures_to_errors",
    "to_outcome", "to_result", "to_paged_result",
    "failures_from_details", "failures_from_pydantic",
    "from_pydantic_error", "validate_model",
]
