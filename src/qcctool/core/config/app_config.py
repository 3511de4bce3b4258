from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from enum import Enum

from pydantic import Field, ValidationError, field_validator

from qcctool.core.common.exceptions import ConfigurationError
from qcctool.core.interfaces.model_bases import DomainModel
from qcctool.core.services.option_scanner import ShortClusterMode

logger = logging.getLogger(__name__)

ENV_LOG_LEVEL = "QCCTOOL_LOG_LEVEL"
ENV_LOG_FILE = "QCCTOOL_LOG_FILE"
ENV_RUN_INLINE = "QCCTOOL_DEBUG_RUN_INLINE"
ENV_SHORT_CLUSTERS = "QCCTOOL_SHORT_CLUSTERS"


def _env_to_bool(name: str, default: bool, env: Mapping[str, str]) -> bool:
    """Return an environment variable parsed as a boolean flag."""
    value = env.get(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


class LogLevel(str, Enum):
    """Log levels for configuration."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LoggingConfig(DomainModel):
    """Logging configuration."""

    level: LogLevel = LogLevel.WARNING
    log_file: str | None = None

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @property
    def numeric_level(self) -> int:
        return getattr(logging, self.level.value)


class ToolConfig(DomainModel):
    """Runtime configuration of the command-line tool."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    # Run operations directly on the calling thread instead of the worker.
    run_on_caller_thread: bool = False
    short_cluster_mode: ShortClusterMode = ShortClusterMode.FIRST_CHARACTER

    @field_validator("short_cluster_mode", mode="before")
    @classmethod
    def _normalize_cluster_mode(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> ToolConfig:
        """Build the configuration from environment variables."""
        env = os.environ if env is None else env

        logging_values: dict[str, object] = {}
        if env.get(ENV_LOG_LEVEL):
            logging_values["level"] = env[ENV_LOG_LEVEL]
        if env.get(ENV_LOG_FILE):
            logging_values["log_file"] = env[ENV_LOG_FILE]

        values: dict[str, object] = {
            "logging": logging_values,
            "run_on_caller_thread": _env_to_bool(ENV_RUN_INLINE, False, env),
        }
        if env.get(ENV_SHORT_CLUSTERS):
            values["short_cluster_mode"] = env[ENV_SHORT_CLUSTERS]

        try:
            return cls.model_validate(values)
        except ValidationError as e:
            raise ConfigurationError(
                "Invalid qcctool environment configuration",
                details={"errors": e.errors(include_url=False)},
            ) from e


def load_config(env: Mapping[str, str] | None = None) -> ToolConfig:
    """Load the tool configuration, logging where each setting came from."""
    config = ToolConfig.from_env(env)
    logger.debug(
        "Loaded configuration: level=%s, log_file=%s, run_on_caller_thread=%s, short_cluster_mode=%s",
        config.logging.level.value,
        config.logging.log_file,
        config.run_on_caller_thread,
        config.short_cluster_mode.value,
    )
    return config
