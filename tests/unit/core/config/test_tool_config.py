"""Unit tests for environment-driven tool configuration."""

import logging

import pytest
from qcctool.core.common.exceptions import ConfigurationError
from qcctool.core.config.app_config import (
    LogLevel,
    ToolConfig,
    load_config,
)
from qcctool.core.services.option_scanner import ShortClusterMode


def test_defaults_from_empty_environment():
    config = ToolConfig.from_env({})

    assert config.logging.level is LogLevel.WARNING
    assert config.logging.numeric_level == logging.WARNING
    assert config.logging.log_file is None
    assert config.run_on_caller_thread is False
    assert config.short_cluster_mode is ShortClusterMode.FIRST_CHARACTER


def test_values_from_environment(tmp_path):
    log_file = str(tmp_path / "qcctool.log")
    env = {
        "QCCTOOL_LOG_LEVEL": "debug",
        "QCCTOOL_LOG_FILE": log_file,
        "QCCTOOL_DEBUG_RUN_INLINE": "yes",
        "QCCTOOL_SHORT_CLUSTERS": "ALL",
    }

    config = ToolConfig.from_env(env)

    assert config.logging.level is LogLevel.DEBUG
    assert config.logging.numeric_level == logging.DEBUG
    assert config.logging.log_file == log_file
    assert config.run_on_caller_thread is True
    assert config.short_cluster_mode is ShortClusterMode.ALL_CHARACTERS


@pytest.mark.parametrize("value", ["0", "false", "no", "off", ""])
def test_false_boolean_values(value: str):
    config = ToolConfig.from_env({"QCCTOOL_DEBUG_RUN_INLINE": value})

    assert config.run_on_caller_thread is False


def test_invalid_log_level():
    with pytest.raises(ConfigurationError) as exc_info:
        ToolConfig.from_env({"QCCTOOL_LOG_LEVEL": "LOUD"})

    assert exc_info.value.details["errors"]


def test_invalid_cluster_mode():
    with pytest.raises(ConfigurationError):
        ToolConfig.from_env({"QCCTOOL_SHORT_CLUSTERS": "some"})


def test_load_config_reads_process_environment(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("QCCTOOL_SHORT_CLUSTERS", "all")

    config = load_config()

    assert config.short_cluster_mode is ShortClusterMode.ALL_CHARACTERS


def test_config_is_immutable():
    config = ToolConfig.from_env({})

    with pytest.raises(Exception):
        config.run_on_caller_thread = True  # type: ignore[misc]
