"""Result 를 반환하는 엔드포인트 → 응답 자동 변환"""
import functools
import inspect
from collections.abc import Callable
from typing import Any

from fastapi import Response
from fastapi.concurrency import run_in_threadpool

from resultkit.core import Outcome, PagedResult, Result
from resultkit.api.responses import to_response


def returns_result(endpoint: Callable[..., Any]) -> Callable[..., Any]:
    """
    엔드포인트 데코레이터

    반환값이 Outcome/Result/PagedResult 면 to_response 로 변환, 그 외는 그대로.
    라우트 데코레이터 아래에 둘 것:

        @router.get("/users/{user_id}")
        @returns_result
        def get_user(user_id: int) -> Result[User]: ...
    """
    is_async = inspect.iscoroutinefunction(endpoint)

    @functools.wraps(endpoint)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        if is_async:
            returned = await endpoint(*args, **kwargs)
        else:
            returned = await run_in_threadpool(endpoint, *args, **kwargs)
        if isinstance(returned, (Outcome, Result, PagedResult)):
            return to_response(returned)
        return returned

    # 파라미터는 원래 시그니처 그대로, response_model 추론은 막는다
    wrapper.__signature__ = inspect.signature(endpoint).replace(return_annotation=Response)
    return wrapper
