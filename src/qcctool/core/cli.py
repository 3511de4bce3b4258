"""
Command-line entry point.

Strips the program name, loads the environment configuration, configures
logging, then validates and runs ``MainCommand``. Validation failures print
the full usage text; run failures print a ``<program>: error: <domain> /
<code>`` line. Both exit with status 1.
"""

import logging
import sys
from collections.abc import Mapping, Sequence

from qcctool.commands.main_cmd import MainCommand
from qcctool.constants import EXIT_FAILURE, EXIT_SUCCESS
from qcctool.core.common.exceptions import (
    ConfigurationError,
    ToolRunError,
    UsageError,
)
from qcctool.core.common.logging_utils import configure_logging_with_environment_tagging
from qcctool.core.config.app_config import ToolConfig, load_config
from qcctool.core.services.task_runner import SynchronousTaskRunner

logger = logging.getLogger(__name__)


def options_and_arguments(argv: Sequence[str]) -> list[str]:
    """Drop the program name, as is standard for UNIX tools."""
    return list(argv[1:])


def _configure_logging(cfg: ToolConfig) -> None:
    """Configure logging based on configuration."""
    configure_logging_with_environment_tagging(
        level=cfg.logging.numeric_level,
        log_file=cfg.logging.log_file,
    )


def validated_main_command(
    argv: Sequence[str],
    task_runner: SynchronousTaskRunner,
    cfg: ToolConfig,
) -> MainCommand:
    """Build and validate ``MainCommand``, raising ``UsageError`` on failure."""
    main_command = MainCommand(
        task_runner=task_runner, cluster_mode=cfg.short_cluster_mode
    )
    arguments = options_and_arguments(argv)
    if not arguments or not main_command.validate(arguments):
        raise UsageError(
            details={"arguments": arguments}, usage=MainCommand.command_usage
        )
    return main_command


def _report_run_error(error: ToolRunError | OSError) -> None:
    if isinstance(error, ToolRunError):
        domain, code = error.domain, error.code
    else:
        domain, code = type(error).__name__, error.errno
    sys.stderr.write(f"{MainCommand.command_name}: error: {domain} / {code}\n")


def main(
    argv: Sequence[str] | None = None,
    env: Mapping[str, str] | None = None,
) -> int:
    """Run the tool and return its exit status."""
    argv = sys.argv if argv is None else argv

    try:
        cfg = load_config(env)
    except ConfigurationError as e:
        sys.stderr.write(f"{MainCommand.command_name}: {e.message}\n")
        return EXIT_FAILURE

    _configure_logging(cfg)

    with SynchronousTaskRunner(cfg.run_on_caller_thread) as task_runner:
        try:
            main_command = validated_main_command(argv, task_runner, cfg)
        except UsageError as e:
            logger.debug("Validation failed: %s", e.details)
            sys.stderr.write(f"usage: {e.usage}\n\n")
            return EXIT_FAILURE

        if main_command.debug:
            task_runner.run_on_caller_thread = True

        try:
            main_command.run()
        except (ToolRunError, OSError) as e:
            logger.debug("Command failed", exc_info=True)
            _report_run_error(e)
            return EXIT_FAILURE

        if main_command.verbose != 0:
            sys.stderr.write("Success!\n")

    return EXIT_SUCCESS


def run() -> None:
    """Console script entry point."""
    sys.exit(main())
