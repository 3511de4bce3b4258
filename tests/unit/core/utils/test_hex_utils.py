import pytest
from qcctool.core.utils import hex_utils


def test_hex_string_is_lower_case():
    assert hex_utils.hex_string(b"\x00\xab\xff") == "00abff"
    assert hex_utils.hex_string(b"") == ""


@pytest.mark.parametrize(
    "text, expected",
    [
        ("", b""),
        ("00", b"\x00"),
        ("abCD", b"\xab\xcd"),
        ("0102030405", b"\x01\x02\x03\x04\x05"),
    ],
)
def test_optional_data_valid(text: str, expected: bytes):
    assert hex_utils.optional_data(text) == expected


@pytest.mark.parametrize("text", ["a", "abc", "zz", "0x01", "ab cd", "+1"])
def test_optional_data_invalid(text: str):
    assert hex_utils.optional_data(text) is None
