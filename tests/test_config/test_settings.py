"""Tests for the configuration system."""

from __future__ import annotations

import textwrap
from typing import TYPE_CHECKING

import pytest

from monero_request.config.settings import LogLevel, OutputConfig, ToolConfig, _load_yaml

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "MONEROREQUEST_LOG_LEVEL",
        "MONEROREQUEST_CONFIG_PATH",
        "MONEROREQUEST_OUTPUT__PRETTY",
        "MONEROREQUEST_OUTPUT__PAYMENT_ID_COUNT",
    ):
        monkeypatch.delenv(name, raising=False)


# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------


class TestDefaults:
    """Verify all default values are correct."""

    def test_output_defaults(self) -> None:
        cfg = OutputConfig()
        assert cfg.pretty is True
        assert cfg.payment_id_count == 1

    def test_tool_config_defaults(self) -> None:
        cfg = ToolConfig()
        assert cfg.log_level == LogLevel.WARNING
        assert cfg.config_path == ""
        assert isinstance(cfg.output, OutputConfig)


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


class TestValidation:
    def test_log_level_valid(self) -> None:
        cfg = ToolConfig(log_level=LogLevel.DEBUG)
        assert cfg.log_level == LogLevel.DEBUG

    def test_log_level_invalid(self) -> None:
        with pytest.raises(Exception):  # noqa: B017
            ToolConfig(log_level="CHATTY")  # type: ignore[arg-type]

    def test_payment_id_count_positive(self) -> None:
        with pytest.raises(Exception):  # noqa: B017
            OutputConfig(payment_id_count=0)


# ---------------------------------------------------------------------------
# Environment variable override
# ---------------------------------------------------------------------------


class TestEnvOverride:
    """Verify environment variables override defaults."""

    def test_top_level_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MONEROREQUEST_LOG_LEVEL", "DEBUG")
        cfg = ToolConfig()
        assert cfg.log_level == LogLevel.DEBUG

    def test_nested_env_via_delimiter(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MONEROREQUEST_OUTPUT__PRETTY", "false")
        monkeypatch.setenv("MONEROREQUEST_OUTPUT__PAYMENT_ID_COUNT", "5")
        cfg = ToolConfig()
        assert cfg.output.pretty is False
        assert cfg.output.payment_id_count == 5


# ---------------------------------------------------------------------------
# YAML loading
# ---------------------------------------------------------------------------


class TestYAML:
    """YAML config file loading."""

    def test_load_yaml_nonexistent(self, tmp_path: Path) -> None:
        assert _load_yaml(tmp_path / "nonexistent.yaml") == {}

    def test_load_yaml_empty_file(self, tmp_path: Path) -> None:
        f = tmp_path / "empty.yaml"
        f.write_text("")
        assert _load_yaml(f) == {}

    def test_load_yaml_non_dict(self, tmp_path: Path) -> None:
        f = tmp_path / "list.yaml"
        f.write_text("- item1\n- item2\n")
        assert _load_yaml(f) == {}

    def test_from_yaml(self, tmp_path: Path) -> None:
        f = tmp_path / "tool.yaml"
        f.write_text(
            textwrap.dedent("""\
                log_level: INFO
                output:
                  pretty: false
                  payment_id_count: 3
            """)
        )
        cfg = ToolConfig.from_yaml(f)
        assert cfg.log_level == LogLevel.INFO
        assert cfg.output.pretty is False
        assert cfg.output.payment_id_count == 3

    def test_config_path_from_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        f = tmp_path / "tool.yaml"
        f.write_text("log_level: ERROR\n")
        monkeypatch.setenv("MONEROREQUEST_CONFIG_PATH", str(f))
        cfg = ToolConfig()
        assert cfg.log_level == LogLevel.ERROR

    def test_env_overrides_yaml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Env vars have higher priority than YAML values."""
        f = tmp_path / "tool.yaml"
        f.write_text("log_level: INFO\n")
        monkeypatch.setenv("MONEROREQUEST_LOG_LEVEL", "DEBUG")
        cfg = ToolConfig.from_yaml(f)
        assert cfg.log_level == LogLevel.DEBUG
