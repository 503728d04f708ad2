"""설정 타입 (Pydantic + YAML)"""
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ValidationError as PydanticValidationError

from resultkit.core.result import Result


class ResultKitConfig(BaseModel):
    """어댑터/로깅 설정"""
    environment: Literal["development", "production", "test"] = "production"
    generic_error_message: str = "An unexpected error occurred on the server."
    trace_header: str = "X-Request-ID"
    log_json: bool | None = None  # None 이면 environment 로 결정

    model_config = {"frozen": True}

    @property
    def is_development(self) -> bool:
        return self.environment == "development"


# ============================================================
# YAML 로더 (순수 함수)
# ============================================================

def load_yaml(path: Path) -> Result[dict]:
    """YAML 파일 로드"""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        return Result.not_found(f"Config file not found: {path}")
    except yaml.YAMLError as e:
        return Result.invalid(f"Invalid YAML: {e}")

    if data is None:
        return Result.success({})
    if not isinstance(data, dict):
        return Result.invalid(f"Config root must be a mapping, got {type(data).__name__}")
    return Result.success(data)


def parse_config(data: dict[str, Any]) -> Result[ResultKitConfig]:
    """딕셔너리를 ResultKitConfig 로 파싱"""
    from resultkit.validation import from_pydantic_error

    try:
        return Result.success(ResultKitConfig(**data))
    except PydanticValidationError as e:
        return from_pydantic_error(e)


def load_config(path: Path | str | None = None) -> Result[ResultKitConfig]:
    """
    설정 로드 (YAML + 기본값)

    path 가 없으면 기본 경로 탐색, 파일이 없으면 기본값
    """
    if path is None:
        default_paths = [
            Path("resultkit.yaml"),
            Path("resultkit.yml"),
            Path.home() / ".config" / "resultkit" / "config.yaml",
        ]
        for p in default_paths:
            if p.exists():
                path = p
                break

    if path is None:
        return Result.success(ResultKitConfig())

    return load_yaml(Path(path)).bind(parse_config)


def merge_config(base: ResultKitConfig, overrides: dict[str, Any]) -> ResultKitConfig:
    """설정 덮어쓰기 (환경별 값 등), 결과는 다시 검증"""
    return ResultKitConfig.model_validate({**base.model_dump(), **overrides})
