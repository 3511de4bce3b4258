"""
Logging utilities for the tool.

This module provides:
- Test/production environment tagging of log records
- One-shot logging configuration for the command-line entry point
- Structured loggers bridged onto the standard logging handlers
"""

import logging
import os
import sys
from typing import Literal

import structlog

DEFAULT_LOG_FORMAT = (
    "%(asctime)s [%(levelname)-8s] [%(env_tag)s] %(name)s:%(lineno)d %(message)s"
)


def _is_running_under_pytest() -> bool:
    """Detect if we're running under pytest."""
    return "pytest" in sys.modules or os.getenv("PYTEST_CURRENT_TEST") is not None


def _get_environment_tag() -> str:
    """Return 'test' if running under pytest, 'prod' otherwise."""
    return "test" if _is_running_under_pytest() else "prod"


class EnvironmentTaggingFilter(logging.Filter):
    """Logging filter that adds environment tags to log records."""

    def __init__(self) -> None:
        super().__init__()
        self._env_tag = _get_environment_tag()

    def filter(self, record: logging.LogRecord) -> bool:  # type: ignore[override]
        record.env_tag = self._env_tag
        return True


class EnvironmentTaggingFormatter(logging.Formatter):
    """Logging formatter that includes environment tags."""

    def __init__(
        self,
        fmt: str | None = None,
        datefmt: str | None = None,
        style: Literal["%", "{", "$"] = "%",
    ) -> None:
        super().__init__(fmt or DEFAULT_LOG_FORMAT, datefmt, style=style)

    def format(self, record: logging.LogRecord) -> str:
        if not hasattr(record, "env_tag"):
            record.env_tag = _get_environment_tag()
        return super().format(record)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger.

    Args:
        name: Optional logger name

    Returns:
        A structured logger
    """
    if not structlog.is_configured():
        _configure_structlog()
    return structlog.get_logger(name)  # type: ignore


def _configure_structlog() -> None:
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.processors.format_exc_info,
            structlog.processors.KeyValueRenderer(
                key_order=["event"], drop_missing=True
            ),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def install_environment_tagging() -> None:
    """Install environment tagging filter on the root logger and its handlers."""
    root = logging.getLogger()
    filter_instance = EnvironmentTaggingFilter()
    root.addFilter(filter_instance)
    for handler in list(root.handlers):
        handler.addFilter(filter_instance)
        if isinstance(handler.formatter, logging.Formatter) and not isinstance(
            handler.formatter, EnvironmentTaggingFormatter
        ):
            handler.setFormatter(
                EnvironmentTaggingFormatter(
                    fmt=handler.formatter._fmt, datefmt=handler.formatter.datefmt
                )
            )


def configure_logging_with_environment_tagging(
    level: int = logging.WARNING,
    log_format: str | None = None,
    log_file: str | None = None,
) -> None:
    """Configure logging with environment tagging.

    Console output goes to stderr so that command output on stdout stays
    clean.

    Args:
        level: Logging level
        log_format: Optional log format string
        log_file: Optional log file path
    """
    formatter = EnvironmentTaggingFormatter(fmt=log_format)

    handlers: list[logging.Handler] = []

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    handlers.append(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    logging.basicConfig(
        level=level,
        handlers=handlers,
        force=True,
    )

    install_environment_tagging()
    _configure_structlog()
