"""Base64 encode and decode operations."""

from __future__ import annotations

import base64
import binascii
import re

from qcctool.operations.base import Operation

LINE_LENGTH = 64

_NON_BASE64 = re.compile(r"[^A-Za-z0-9+/=]")


class Base64Encode(Operation):
    """Encodes data as a Base64 string.

    With ``add_line_breaks`` the output is split into 64 character lines
    separated by LF.
    """

    def __init__(self, input_data: bytes, add_line_breaks: bool = False) -> None:
        super().__init__()
        self.input_data = input_data
        self.add_line_breaks = add_line_breaks
        self.output_string = ""

    def main(self) -> None:
        encoded = base64.b64encode(self.input_data).decode("ascii")
        if self.add_line_breaks:
            encoded = "\n".join(
                encoded[start : start + LINE_LENGTH]
                for start in range(0, len(encoded), LINE_LENGTH)
            )
        self.output_string = encoded


class Base64Decode(Operation):
    """Decodes a Base64 string, ignoring characters outside the alphabet.

    ``output_data`` stays None when the string cannot be decoded.
    """

    def __init__(self, input_string: str) -> None:
        super().__init__()
        self.input_string = input_string
        self.output_data: bytes | None = None

    def main(self) -> None:
        cleaned = _NON_BASE64.sub("", self.input_string)
        try:
            self.output_data = base64.b64decode(cleaned, validate=True)
        except binascii.Error:
            self.output_data = None
