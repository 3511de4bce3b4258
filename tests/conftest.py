import logging
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest
from qcctool.core.services.task_runner import SynchronousTaskRunner


@pytest.fixture
def restore_root_logger() -> Iterator[logging.Logger]:
    """Undo handler, filter and level changes made to the root logger."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    filters = list(root.filters)
    level = root.level
    yield root
    for handler in list(root.handlers):
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.filters = filters
    root.setLevel(level)


@pytest.fixture
def task_runner() -> Iterator[SynchronousTaskRunner]:
    with SynchronousTaskRunner(run_on_caller_thread=True) as runner:
        yield runner


@pytest.fixture
def input_file(tmp_path: Path) -> Callable[[bytes], Path]:
    """Factory writing ``content`` to a fresh file under ``tmp_path``."""
    counter = 0

    def _write(content: bytes) -> Path:
        nonlocal counter
        counter += 1
        path = tmp_path / f"input-{counter}.dat"
        path.write_bytes(content)
        return path

    return _write
