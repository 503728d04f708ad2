"""처리되지 않은 예외 / 요청 검증 실패 → Result 응답"""
import uuid

import structlog
from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.types import ASGIApp

from resultkit.core import Error, ErrorType, Outcome, ResultKitConfig
from resultkit.validation import failures_from_details, to_outcome
from resultkit.api.responses import to_response, to_response_with_status

logger = structlog.get_logger(__name__)

TRACE_ID_KEY = "TraceId"


def exception_to_outcome(exc: Exception, trace_id: str, config: ResultKitConfig) -> Outcome:
    """예외 → Failure (development 에서만 원본 메시지 노출)"""
    if config.is_development:
        message = str(exc) or type(exc).__name__
    else:
        message = config.generic_error_message
    outcome = Outcome.failure(Error(message, error_type=ErrorType.FAILURE)).with_correlation_id(trace_id)
    outcome.add_or_update_metadata(TRACE_ID_KEY, trace_id)
    return outcome


class ResultExceptionMiddleware(BaseHTTPMiddleware):
    """처리되지 않은 예외를 500 + Failure 본문으로 변환"""

    def __init__(self, app: ASGIApp, config: ResultKitConfig | None = None) -> None:
        super().__init__(app)
        self.config = config or ResultKitConfig()

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            trace_id = request.headers.get(self.config.trace_header) or uuid.uuid4().hex
            logger.error(
                "unhandled_exception",
                method=request.method,
                path=request.url.path,
                trace_id=trace_id,
                exc_info=exc,
            )
            outcome = exception_to_outcome(exc, trace_id, self.config)
            return to_response_with_status(outcome, 500)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> Response:
    """요청 바인딩 실패 → ValidationError 응답 (400)"""
    outcome = to_outcome(failures_from_details(exc.errors()))
    logger.info(
        "request_validation_failed",
        method=request.method,
        path=request.url.path,
        error_count=len(outcome.errors),
    )
    return to_response(outcome)


def setup_result_handling(app: FastAPI, config: ResultKitConfig | None = None) -> FastAPI:
    """예외 미들웨어 + 요청 검증 핸들러 등록"""
    app.add_middleware(ResultExceptionMiddleware, config=config or ResultKitConfig())
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    return app
