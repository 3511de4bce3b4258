"""Input/output helpers shared by the concrete commands."""

from __future__ import annotations

import re
import sys
from pathlib import Path

from qcctool.core.common.exceptions import OperationError

STANDARD_STREAM = "-"

# Read error reported for input that is not in the expected text encoding
READ_ERROR_DOMAIN = "NSCocoaErrorDomain"
INAPPLICABLE_STRING_ENCODING_ERROR = 261

# Largest count accepted for numeric options
MAX_COUNT = 2**31 - 1

_COUNT = re.compile(r"[0-9]+")


def read_input_bytes(path: str) -> bytes:
    """Read a whole file, or standard input when ``path`` is ``-``."""
    if path == STANDARD_STREAM:
        return sys.stdin.buffer.read()
    return Path(path).read_bytes()


def read_input_text(path: str) -> str:
    """Read a whole file as UTF-8 text.

    Raises ``OperationError`` when the content is not valid UTF-8.
    """
    content = read_input_bytes(path)
    try:
        return content.decode("utf-8")
    except UnicodeDecodeError as e:
        raise OperationError(
            READ_ERROR_DOMAIN,
            INAPPLICABLE_STRING_ENCODING_ERROR,
            details={"path": path, "position": e.start},
        ) from e


def write_output_line(text: str) -> None:
    sys.stdout.write(f"{text}\n")
    sys.stdout.flush()


def write_output_bytes(data: bytes) -> None:
    sys.stdout.flush()
    sys.stdout.buffer.write(data)
    sys.stdout.buffer.flush()


def write_diagnostic(text: str) -> None:
    sys.stderr.write(text)
    sys.stderr.flush()


def parse_count(argument: str) -> int:
    """Parse a decimal count in ``0..MAX_COUNT``; -1 when ``argument`` is not one."""
    if not _COUNT.fullmatch(argument):
        return -1
    count = int(argument)
    if count > MAX_COUNT:
        return -1
    return count
