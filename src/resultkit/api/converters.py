"""Domain -> DTO 변환기"""
from dataclasses import asdict

from fastapi.encoders import jsonable_encoder

from resultkit.core import (
    AnyResult, Error, Outcome, PagedInfo, PagedResult, Result,
    error_to_dict,
)
from resultkit.api.dto.responses import (
    ErrorDTO, PagedInfoDTO,
    OutcomeDTO, ResultDTO, PagedResultDTO,
)


def error_to_dto(error: Error) -> ErrorDTO:
    data = error_to_dict(error)
    data["metadata"] = jsonable_encoder(data["metadata"])
    return ErrorDTO(**data)


def paged_info_to_dto(info: PagedInfo) -> PagedInfoDTO:
    return PagedInfoDTO(**asdict(info))


def _outcome_fields(outcome: Outcome) -> dict:
    return {
        "status": outcome.status.value,
        "is_success": outcome.is_success,
        "errors": [error_to_dto(e) for e in outcome.errors],
        "success_message": outcome.success_message,
        "metadata": jsonable_encoder(outcome.metadata),
        "correlation_id": outcome.correlation_id,
    }


def result_to_dto(result: AnyResult) -> OutcomeDTO:
    """Result 형태에 맞는 DTO 생성"""
    match result:
        case PagedResult():
            return PagedResultDTO(
                **_outcome_fields(result.outcome),
                value=jsonable_encoder(result.value),
                paged_info=paged_info_to_dto(result.paged_info) if result.paged_info else None,
                has_paged_info=result.has_paged_info,
            )
        case Result():
            return ResultDTO(
                **_outcome_fields(result.outcome),
                value=jsonable_encoder(result.value),
            )
        case Outcome():
            return OutcomeDTO(**_outcome_fields(result))
        case _:
            raise TypeError(f"Expected a result, got {type(result).__name__}")
