"""
PBKDF2 key derivation.

When ``rounds`` is 0 the operation picks a round count so that derivation
takes roughly ``derivation_time`` seconds on the current machine, and
reports it in ``actual_rounds``. Store that count with the derived key to
check a password later.
"""

from __future__ import annotations

import hashlib
import logging
import time

from qcctool.core.common.exceptions import OperationError
from qcctool.operations.base import Operation
from qcctool.operations.digest import ShaAlgorithm

logger = logging.getLogger(__name__)

KEY_DERIVATION_ERROR_DOMAIN = "PBKDF2KeyDerivationErrorDomain"
# Common Crypto's kCCParamError
PARAM_ERROR = -4300

MAX_ROUNDS = 2**31 - 1
MAX_DERIVED_KEY_LENGTH = 2**31 - 1
_CALIBRATION_ROUNDS = 10_000
_CALIBRATION_KEY_LENGTH = 16


class Pbkdf2ShaKeyDerivation(Operation):
    def __init__(
        self, algorithm: ShaAlgorithm, password: str, salt: bytes
    ) -> None:
        super().__init__()
        self.algorithm = algorithm
        self.password = password
        self.salt = salt
        self.rounds = 0
        self.derivation_time = 0.1
        self.derived_key_length = 16
        self.actual_rounds = 0
        self.derived_key_data: bytes | None = None

    def calibrate_rounds(self) -> int:
        """Estimate the round count that takes ``derivation_time`` seconds."""
        start = time.perf_counter()
        hashlib.pbkdf2_hmac(
            self.algorithm.hashlib_name,
            self.password.encode("utf-8"),
            self.salt,
            _CALIBRATION_ROUNDS,
            _CALIBRATION_KEY_LENGTH,
        )
        elapsed = max(time.perf_counter() - start, 1e-6)
        rounds = int(_CALIBRATION_ROUNDS * self.derivation_time / elapsed)
        return min(max(rounds, 1), MAX_ROUNDS)

    def main(self) -> None:
        if not 0 < self.derived_key_length <= MAX_DERIVED_KEY_LENGTH:
            self.error = OperationError(KEY_DERIVATION_ERROR_DOMAIN, PARAM_ERROR)
            return

        if self.rounds != 0:
            self.actual_rounds = self.rounds
        else:
            self.actual_rounds = self.calibrate_rounds()
            logger.debug(
                "Calibrated %d PBKDF2 rounds for %.3fs",
                self.actual_rounds,
                self.derivation_time,
            )

        if not 0 < self.actual_rounds <= MAX_ROUNDS:
            self.error = OperationError(KEY_DERIVATION_ERROR_DOMAIN, PARAM_ERROR)
            return

        self.derived_key_data = hashlib.pbkdf2_hmac(
            self.algorithm.hashlib_name,
            self.password.encode("utf-8"),
            self.salt,
            self.actual_rounds,
            self.derived_key_length,
        )
