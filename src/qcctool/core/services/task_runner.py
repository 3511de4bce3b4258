"""
Synchronous task runner.

Commands hand their operations to a runner and inspect the operation once
``run()`` returns. A single runner is created by the entry point, shared by
every command of the invocation and shut down at exit.
"""

from __future__ import annotations

import concurrent.futures
import logging
from typing import Protocol

from qcctool.core.common.exceptions import OperationError
from qcctool.operations.base import Operation

logger = logging.getLogger(__name__)

# Code reported for value errors raised out of an operation
INVALID_PARAMETER_ERROR = -1


class TaskRunner(Protocol):
    """Runs one operation to completion."""

    def run(self, operation: Operation) -> None:
        ...


class SynchronousTaskRunner:
    """Runs operations on a worker thread and waits for them.

    When ``run_on_caller_thread`` is set, ``operation.main()`` is called
    directly instead, which keeps everything on one thread for debugging.
    """

    def __init__(self, run_on_caller_thread: bool = False) -> None:
        self.run_on_caller_thread = run_on_caller_thread
        self._executor: concurrent.futures.ThreadPoolExecutor | None = None

    def run(self, operation: Operation) -> None:
        name = type(operation).__name__
        try:
            if self.run_on_caller_thread:
                logger.debug("Running %s on the calling thread", name)
                operation.main()
            else:
                logger.debug("Running %s on the worker thread", name)
                future = self._get_executor().submit(operation.main)
                future.result()
        except (ValueError, ArithmeticError) as e:
            logger.debug("%s raised %s", name, type(e).__name__, exc_info=True)
            operation.error = OperationError(
                type(e).__name__, INVALID_PARAMETER_ERROR, str(e)
            )
        operation.finished = True
        if operation.error is not None:
            logger.debug("%s finished with error: %s", name, operation.error)

    def _get_executor(self) -> concurrent.futures.ThreadPoolExecutor:
        if self._executor is None:
            self._executor = concurrent.futures.ThreadPoolExecutor(
                max_workers=1, thread_name_prefix="qcctool-op"
            )
        return self._executor

    def shutdown(self) -> None:
        if self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None

    def __enter__(self) -> SynchronousTaskRunner:
        return self

    def __exit__(self, *args: object) -> None:
        self.shutdown()
