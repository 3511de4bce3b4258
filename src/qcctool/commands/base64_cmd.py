from __future__ import annotations

from collections.abc import Sequence

from qcctool.commands.tool_io import (
    read_input_bytes,
    read_input_text,
    write_diagnostic,
    write_output_bytes,
)
from qcctool.core.commands.base_command import ToolCommand
from qcctool.core.common.exceptions import OperationError
from qcctool.operations.base64_ops import Base64Decode, Base64Encode

BASE64_DECODE_ERROR_DOMAIN = "Base64DecodeErrorDomain"
# Same code as a "corrupt file" read error
CORRUPT_INPUT_ERROR = 259


class Base64EncodeCommand(ToolCommand):
    command_name = "base64-encode"
    command_usage = "base64-encode [-l] file"

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.add_line_breaks = False

    def set_option_l(self) -> None:
        self.add_line_breaks = True

    option_funcs = {"l": set_option_l}

    def validate(self, argv: Sequence[str]) -> bool:
        return super().validate(argv) and len(self.arguments) == 1

    def run(self) -> None:
        op = Base64Encode(read_input_bytes(self.arguments[0]), self.add_line_breaks)
        self.task_runner.run(op)
        op.raise_for_error()
        write_diagnostic(op.output_string)


class Base64DecodeCommand(ToolCommand):
    command_name = "base64-decode"
    command_usage = "base64-decode file"

    def validate(self, argv: Sequence[str]) -> bool:
        return super().validate(argv) and len(self.arguments) == 1

    def run(self) -> None:
        op = Base64Decode(read_input_text(self.arguments[0]))
        self.task_runner.run(op)
        op.raise_for_error()
        if op.output_data is None:
            raise OperationError(BASE64_DECODE_ERROR_DOMAIN, CORRUPT_INPUT_ERROR)
        write_output_bytes(op.output_data)
