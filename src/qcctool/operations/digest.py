"""SHA digest and HMAC operations."""

from __future__ import annotations

import hashlib
import hmac
from enum import Enum

from qcctool.operations.base import Operation


class ShaAlgorithm(str, Enum):
    """SHA family algorithms, by their command-line names."""

    SHA1 = "sha1"
    SHA2_224 = "sha2-224"
    SHA2_256 = "sha2-256"
    SHA2_384 = "sha2-384"
    SHA2_512 = "sha2-512"

    @property
    def hashlib_name(self) -> str:
        return _HASHLIB_NAMES[self]

    @classmethod
    def from_argument(cls, argument: str) -> ShaAlgorithm | None:
        try:
            return cls(argument)
        except ValueError:
            return None


_HASHLIB_NAMES = {
    ShaAlgorithm.SHA1: "sha1",
    ShaAlgorithm.SHA2_224: "sha224",
    ShaAlgorithm.SHA2_256: "sha256",
    ShaAlgorithm.SHA2_384: "sha384",
    ShaAlgorithm.SHA2_512: "sha512",
}

ALGORITHM_CHOICES = "|".join(algorithm.value for algorithm in ShaAlgorithm)


class ShaDigest(Operation):
    """Computes a SHA digest of a block of data."""

    def __init__(self, algorithm: ShaAlgorithm, input_data: bytes) -> None:
        super().__init__()
        self.algorithm = algorithm
        self.input_data = input_data
        self.output_digest: bytes | None = None

    def main(self) -> None:
        self.output_digest = hashlib.new(
            self.algorithm.hashlib_name, self.input_data
        ).digest()


class HmacShaAuthentication(Operation):
    """Computes an HMAC-SHA authentication code."""

    def __init__(self, algorithm: ShaAlgorithm, input_data: bytes, key: bytes) -> None:
        super().__init__()
        self.algorithm = algorithm
        self.input_data = input_data
        self.key = key
        self.output_hmac: bytes | None = None

    def main(self) -> None:
        self.output_hmac = hmac.new(
            self.key, self.input_data, self.algorithm.hashlib_name
        ).digest()
