"""Tests for YAML config loading and logging setup."""

import logging
from pathlib import Path

import pytest
from pydantic import ValidationError

from resultkit.core import (
    ResultKitConfig,
    ResultStatus,
    configure_logging,
    load_config,
    load_yaml,
    merge_config,
    parse_config,
)


class TestLoadYaml:
    def test_missing_file_is_not_found(self, tmp_path: Path) -> None:
        result = load_yaml(tmp_path / "absent.yaml")
        assert result.status is ResultStatus.NOT_FOUND

    def test_malformed_yaml_is_invalid(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text("environment: [unclosed\n", encoding="utf-8")
        assert load_yaml(path).status is ResultStatus.INVALID

    def test_non_mapping_root_is_invalid(self, tmp_path: Path) -> None:
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")
        result = load_yaml(path)
        assert result.status is ResultStatus.INVALID
        assert "mapping" in result.error_messages[0]

    def test_empty_file_is_empty_mapping(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert load_yaml(path).value == {}


class TestLoadConfig:
    def test_explicit_path(self, tmp_path: Path) -> None:
        path = tmp_path / "resultkit.yaml"
        path.write_text("environment: development\ntrace_header: X-Trace\n", encoding="utf-8")

        result = load_config(path)
        assert result.is_success
        assert result.value.is_development
        assert result.value.trace_header == "X-Trace"

    def test_invalid_value_is_validation_error(self, tmp_path: Path) -> None:
        path = tmp_path / "resultkit.yaml"
        path.write_text("environment: staging\n", encoding="utf-8")

        result = load_config(path)
        assert result.status is ResultStatus.VALIDATION_ERROR
        assert result.errors[0].metadata["PropertyName"] == "environment"

    def test_missing_explicit_path_is_not_found(self, tmp_path: Path) -> None:
        assert load_config(tmp_path / "nope.yaml").status is ResultStatus.NOT_FOUND

    def test_defaults_when_nothing_found(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("HOME", str(tmp_path))
        result = load_config()
        assert result.value == ResultKitConfig()

    def test_default_search_path(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("HOME", str(tmp_path))
        (tmp_path / "resultkit.yml").write_text("environment: test\n", encoding="utf-8")
        assert load_config().value.environment == "test"


class TestConfigModel:
    def test_defaults(self) -> None:
        config = ResultKitConfig()
        assert config.environment == "production"
        assert not config.is_development
        assert config.trace_header == "X-Request-ID"

    def test_frozen(self) -> None:
        with pytest.raises(ValidationError):
            ResultKitConfig().environment = "development"  # type: ignore[misc]

    def test_parse_config(self) -> None:
        assert parse_config({"log_json": True}).value.log_json is True

    def test_merge_config(self) -> None:
        merged = merge_config(ResultKitConfig(), {"environment": "development"})
        assert merged.is_development
        assert merged.generic_error_message == ResultKitConfig().generic_error_message

    def test_merge_config_keeps_base_values(self) -> None:
        base = ResultKitConfig(trace_header="X-Trace")
        merged = merge_config(base, {"log_json": False})
        assert merged.trace_header == "X-Trace"
        assert merged.log_json is False

    def test_merge_config_revalidates_overrides(self) -> None:
        with pytest.raises(ValidationError):
            merge_config(ResultKitConfig(), {"environment": "staging"})


@pytest.mark.usefixtures("reset_logging")
class TestConfigureLogging:
    def test_development_is_verbose(self) -> None:
        configure_logging("development")
        package_logger = logging.getLogger("resultkit")
        assert package_logger.level == logging.DEBUG
        assert not package_logger.propagate
        assert len(package_logger.handlers) == 1

    def test_production_is_info(self) -> None:
        configure_logging("production")
        assert logging.getLogger("resultkit").level == logging.INFO

    def test_reconfigure_replaces_handler(self) -> None:
        configure_logging("production")
        configure_logging("production", log_json=False)
        assert len(logging.getLogger("resultkit").handlers) == 1
