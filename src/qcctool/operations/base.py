"""
Base class for units of work run by the task runner.

An operation is configured through its constructor and attributes, executed
once through ``main()``, and then inspected. Failures are recorded on
``error`` instead of being raised out of ``main()``, so the runner never has
to know what an operation does.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from qcctool.core.common.exceptions import OperationError


class Operation(ABC):
    def __init__(self) -> None:
        self.error: OperationError | None = None
        self.finished = False

    @abstractmethod
    def main(self) -> None:
        """Perform the work. Called exactly once, possibly on a worker thread."""

    def raise_for_error(self) -> None:
        if self.error is not None:
            raise self.error
