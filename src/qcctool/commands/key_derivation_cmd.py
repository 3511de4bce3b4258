from __future__ import annotations

from collections.abc import Sequence

from qcctool.commands.tool_io import parse_count, write_output_line
from qcctool.core.commands.base_command import ToolCommand
from qcctool.core.utils import hex_utils
from qcctool.operations.digest import ALGORITHM_CHOICES, ShaAlgorithm
from qcctool.operations.key_derivation import Pbkdf2ShaKeyDerivation


class Pbkdf2KeyDerivationCommand(ToolCommand):
    """Implements the ``pbkdf2-key-derivation`` command.

    ``-r 0`` (the default) lets the operation calibrate the round count and
    ``-z 0`` keeps its default key length.
    """

    command_name = "pbkdf2-key-derivation"
    command_usage = (
        f"pbkdf2-key-derivation -a {ALGORITHM_CHOICES} -p passwordStr "
        "-s saltHexStr [-r rounds] [-z derivedKeyLength]"
    )

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.algorithm = ShaAlgorithm.SHA1
        self.password: str | None = None
        self.salt_data: bytes | None = None
        self.rounds = 0
        self.derived_key_length = 0

    def set_option_a(self, argument: str) -> bool:
        algorithm = ShaAlgorithm.from_argument(argument)
        if algorithm is None:
            return False
        self.algorithm = algorithm
        return True

    def set_option_p(self, argument: str) -> bool:
        self.password = argument
        return True

    def set_option_s(self, argument: str) -> bool:
        self.salt_data = hex_utils.optional_data(argument)
        return self.salt_data is not None

    def set_option_r(self, argument: str) -> bool:
        self.rounds = parse_count(argument)
        return self.rounds >= 0

    def set_option_z(self, argument: str) -> bool:
        self.derived_key_length = parse_count(argument)
        return self.derived_key_length >= 0

    option_funcs_with_arg = {
        "a": set_option_a,
        "p": set_option_p,
        "s": set_option_s,
        "r": set_option_r,
        "z": set_option_z,
    }

    def validate(self, argv: Sequence[str]) -> bool:
        if not super().validate(argv):
            return False
        return (
            len(self.arguments) == 0
            and self.password is not None
            and self.salt_data is not None
        )

    def run(self) -> None:
        assert self.password is not None and self.salt_data is not None
        op = Pbkdf2ShaKeyDerivation(self.algorithm, self.password, self.salt_data)
        if self.rounds != 0:
            op.rounds = self.rounds
        if self.derived_key_length != 0:
            op.derived_key_length = self.derived_key_length
        self.task_runner.run(op)
        op.raise_for_error()
        assert op.derived_key_data is not None
        write_output_line(hex_utils.hex_string(op.derived_key_data))
