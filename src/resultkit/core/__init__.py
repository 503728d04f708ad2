"""resultkit core - Result 타입과 조합 연산 (순수 도메인 계층)"""
from resultkit.core.types import (
    ErrorType, ResultStatus, PagedInfo,
)
from resultkit.core.errors import (
    Error, error_to_dict,
    ResultKitError, UnsupportedStatusError, ResultStateError,
)
from resultkit.core.result import (
    Outcome, Result, PagedResult,
    AnyResult, ErrorInput,
    outcome_of, as_result, as_paged_result,
)
from resultkit.core.combinators import (
    map_result, bind, map_error, flatten, recover,
    match_result, match_messages,
    tap, tap_error, if_success, if_failure,
    ensure, try_catch,
    unwrap_or, unwrap_or_else, with_value,
    aggregate, combine,
)
from resultkit.core.config import (
    ResultKitConfig,
    load_yaml, parse_config, load_config, merge_config,
)
from resultkit.core.logging import configure_logging

__all__ = [
    # Types
    "ErrorType", "ResultStatus", "PagedInfo",
    # Errors
    "Error", "error_to_dict",
    "ResultKitError", "UnsupportedStatusError", "ResultStateError",
    # Result
    "Outcome", "Result", "PagedResult",
    "AnyResult", "ErrorInput",
    "outcome_of", "as_result", "as_paged_result",
    # Combinators
    "map_result", "bind", "map_error", "flatten", "recover",
    "match_result", "match_messages",
    "tap", "tap_error", "if_success", "if_failure",
    "ensure", "try_catch",
    "unwrap_or", "unwrap_or_else", "with_value",
    "aggregate", "combine",
    # Config
    "ResultKitConfig",
    "load_yaml", "parse_config", "load_config", "merge_config",
    "configure_logging",
]
