from .base64_cmd import Base64DecodeCommand, Base64EncodeCommand
from .digest_cmd import DigestCommand, HmacCommand
from .key_derivation_cmd import Pbkdf2KeyDerivationCommand
from .main_cmd import MainCommand

__all__ = [
    "Base64DecodeCommand",
    "Base64EncodeCommand",
    "DigestCommand",
    "HmacCommand",
    "MainCommand",
    "Pbkdf2KeyDerivationCommand",
]
