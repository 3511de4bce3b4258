"""Unit tests for logging configuration."""

import logging

from qcctool.core.common.logging_utils import (
    EnvironmentTaggingFilter,
    EnvironmentTaggingFormatter,
    configure_logging_with_environment_tagging,
    get_logger,
)


def test_filter_tags_records_as_test():
    record = logging.LogRecord("x", logging.INFO, __file__, 1, "msg", None, None)

    assert EnvironmentTaggingFilter().filter(record) is True
    assert record.env_tag == "test"


def test_formatter_includes_tag_without_filter():
    record = logging.LogRecord("x", logging.INFO, __file__, 1, "hello", None, None)

    output = EnvironmentTaggingFormatter().format(record)

    assert "[test]" in output
    assert "hello" in output


def test_configure_writes_to_log_file(tmp_path, restore_root_logger):
    log_file = tmp_path / "tool.log"

    configure_logging_with_environment_tagging(
        level=logging.INFO, log_file=str(log_file)
    )
    logging.getLogger("qcctool.test").info("written to file")
    for handler in restore_root_logger.handlers:
        handler.flush()

    content = log_file.read_text()
    assert "written to file" in content
    assert "[test]" in content
    assert restore_root_logger.level == logging.INFO


def test_get_logger_returns_bound_logger():
    logger = get_logger("qcctool.test")

    # Structured loggers accept keyword context.
    logger.debug("event_name", key="value")
