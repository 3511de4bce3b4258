from __future__ import annotations

from qcctool.commands.base64_cmd import Base64DecodeCommand, Base64EncodeCommand
from qcctool.commands.digest_cmd import DigestCommand, HmacCommand
from qcctool.commands.key_derivation_cmd import Pbkdf2KeyDerivationCommand
from qcctool.constants import PROGRAM_NAME
from qcctool.core.commands.router import CommandRouter


class MainCommand(CommandRouter):
    """The top-level command: global options followed by a subcommand."""

    command_name = PROGRAM_NAME
    usage_synopsis = f"{PROGRAM_NAME} [-v] [-d] subcommand"
    subcommand_classes = (
        Base64EncodeCommand,
        Base64DecodeCommand,
        DigestCommand,
        HmacCommand,
        Pbkdf2KeyDerivationCommand,
    )

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.verbose = 0
        self.debug = False

    def set_option_v(self) -> None:
        self.verbose += 1

    def set_option_d(self) -> None:
        self.debug = True

    option_funcs = {"v": set_option_v, "d": set_option_d}
