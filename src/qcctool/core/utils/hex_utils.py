"""Hex string conversion helpers used by command option handlers."""

from __future__ import annotations

import string

_HEX_DIGITS = frozenset(string.hexdigits)


def hex_string(data: bytes) -> str:
    """Return ``data`` as lower case hex with no separators."""
    return data.hex()


def optional_data(hex_str: str) -> bytes | None:
    """Parse a hex string (either case, no spaces).

    Returns None for odd-length strings or non-hex characters.
    """
    if len(hex_str) % 2 != 0:
        return None
    if not all(char in _HEX_DIGITS for char in hex_str):
        return None
    return bytes.fromhex(hex_str)

