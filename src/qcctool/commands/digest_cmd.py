"""Commands for SHA digests and HMAC."""

from __future__ import annotations

from collections.abc import Sequence

from qcctool.commands.tool_io import read_input_bytes, write_output_line
from qcctool.core.commands.base_command import ToolCommand
from qcctool.core.utils import hex_utils
from qcctool.operations.digest import (
    ALGORITHM_CHOICES,
    HmacShaAuthentication,
    ShaAlgorithm,
    ShaDigest,
)


class DigestCommand(ToolCommand):
    command_name = "digest"
    command_usage = f"digest -a {ALGORITHM_CHOICES} file"

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.algorithm: ShaAlgorithm | None = None

    def set_option_a(self, argument: str) -> bool:
        self.algorithm = ShaAlgorithm.from_argument(argument)
        return self.algorithm is not None

    option_funcs_with_arg = {"a": set_option_a}

    def validate(self, argv: Sequence[str]) -> bool:
        if not super().validate(argv):
            return False
        if len(self.arguments) != 1:
            return False
        if self.algorithm is None:
            # SHA1 is the default.
            self.algorithm = ShaAlgorithm.SHA1
        return True

    def run(self) -> None:
        assert self.algorithm is not None
        op = ShaDigest(self.algorithm, read_input_bytes(self.arguments[0]))
        self.task_runner.run(op)
        op.raise_for_error()
        assert op.output_digest is not None
        write_output_line(hex_utils.hex_string(op.output_digest))


class HmacCommand(ToolCommand):
    command_name = "hmac"
    command_usage = f"hmac -a {ALGORITHM_CHOICES} -k keyHexStr file"

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.algorithm = ShaAlgorithm.SHA1
        self.key_data: bytes | None = None

    def set_option_a(self, argument: str) -> bool:
        algorithm = ShaAlgorithm.from_argument(argument)
        if algorithm is None:
            return False
        self.algorithm = algorithm
        return True

    def set_option_k(self, argument: str) -> bool:
        self.key_data = hex_utils.optional_data(argument)
        return self.key_data is not None

    option_funcs_with_arg = {"a": set_option_a, "k": set_option_k}

    def validate(self, argv: Sequence[str]) -> bool:
        if not super().validate(argv):
            return False
        return len(self.arguments) == 1 and self.key_data is not None

    def run(self) -> None:
        assert self.key_data is not None
        op = HmacShaAuthentication(
            self.algorithm, read_input_bytes(self.arguments[0]), self.key_data
        )
        self.task_runner.run(op)
        op.raise_for_error()
        assert op.output_hmac is not None
        write_output_line(hex_utils.hex_string(op.output_hmac))
