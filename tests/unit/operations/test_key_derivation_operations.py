import pytest
from qcctool.core.services.task_runner import SynchronousTaskRunner
from qcctool.core.utils import hex_utils
from qcctool.operations.digest import ShaAlgorithm
from qcctool.operations.key_derivation import (
    KEY_DERIVATION_ERROR_DOMAIN,
    MAX_DERIVED_KEY_LENGTH,
    PARAM_ERROR,
    Pbkdf2ShaKeyDerivation,
)

PASSWORD = "Hello Cruel World!"
SALT = b"Some salt sir?"


@pytest.fixture
def runner():
    with SynchronousTaskRunner(run_on_caller_thread=True) as task_runner:
        yield task_runner


def test_pbkdf2_sha1_known_answer(runner):
    op = Pbkdf2ShaKeyDerivation(ShaAlgorithm.SHA1, PASSWORD, SALT)
    op.rounds = 1000
    op.derived_key_length = 10

    runner.run(op)

    assert op.error is None
    assert op.actual_rounds == 1000
    assert hex_utils.hex_string(op.derived_key_data) == "e56c27f5eed251db50a3"


def test_pbkdf2_empty_salt(runner):
    op = Pbkdf2ShaKeyDerivation(ShaAlgorithm.SHA1, PASSWORD, b"")
    op.rounds = 1000
    op.derived_key_length = 10

    runner.run(op)

    assert op.error is None
    assert hex_utils.hex_string(op.derived_key_data) == "98b4c8aec38c64c8e2de"


def test_pbkdf2_empty_password_and_salt(runner):
    op = Pbkdf2ShaKeyDerivation(ShaAlgorithm.SHA1, "", b"")
    op.rounds = 1000
    op.derived_key_length = 10

    runner.run(op)

    assert op.error is None
    assert hex_utils.hex_string(op.derived_key_data) == "6e40910ac02ec89cebb9"


def test_default_key_length(runner):
    op = Pbkdf2ShaKeyDerivation(ShaAlgorithm.SHA2_256, PASSWORD, SALT)
    op.rounds = 10

    runner.run(op)

    assert len(op.derived_key_data) == 16


def test_calibrated_rounds_are_reported(runner):
    op = Pbkdf2ShaKeyDerivation(ShaAlgorithm.SHA1, PASSWORD, SALT)
    op.derivation_time = 0.01

    runner.run(op)

    assert op.error is None
    assert op.actual_rounds > 0

    check = Pbkdf2ShaKeyDerivation(ShaAlgorithm.SHA1, PASSWORD, SALT)
    check.rounds = op.actual_rounds
    runner.run(check)
    assert check.derived_key_data == op.derived_key_data


@pytest.mark.parametrize("rounds", [0, 1000])
def test_zero_key_length_is_a_parameter_error(runner, rounds: int):
    op = Pbkdf2ShaKeyDerivation(ShaAlgorithm.SHA1, PASSWORD, SALT)
    op.derived_key_length = 0
    op.rounds = rounds

    runner.run(op)

    assert op.error is not None
    assert op.error.domain == KEY_DERIVATION_ERROR_DOMAIN
    assert op.error.code == PARAM_ERROR
    assert op.derived_key_data is None


def test_oversized_key_length_is_a_parameter_error(runner):
    op = Pbkdf2ShaKeyDerivation(ShaAlgorithm.SHA1, PASSWORD, SALT)
    op.derived_key_length = MAX_DERIVED_KEY_LENGTH + 1
    op.rounds = 1

    runner.run(op)

    assert op.error is not None
    assert op.error.code == PARAM_ERROR
    assert op.derived_key_data is None
