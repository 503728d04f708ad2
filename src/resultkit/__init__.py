"""
resultkit - 상태 기반 Result 타입과 FastAPI 어댑터

    from resultkit import Result

    def find_user(user_id: int) -> Result[User]:
        user = repo.get(user_id)
        if user is None:
            return Result.not_found(f"User {user_id} not found")
        return Result.success(user)
"""
from resultkit.core import *  # noqa: F401,F403
from resultkit.core import __all__ as _core_all

__version__ = "0.1.0"

__all__ = [*_core_all, "__version__"]
