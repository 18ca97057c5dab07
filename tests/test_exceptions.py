from __future__ import annotations

import pickle

import pytest

from codeforge.core.exceptions import (
    GenerationStalledError,
    GenerationTimeoutError,
    InvalidConfigurationError,
    InvalidOptionsError,
    UnknownGeneratorError,
    UnknownValidatorError,
)


def _round_trip(error):
    return pickle.loads(pickle.dumps(error))


def test_invalid_configuration_error_survives_pickling():
    error = _round_trip(InvalidConfigurationError(6, 5))

    assert type(error) is InvalidConfigurationError
    assert error.quantity == 6
    assert error.max_quantity == 5
    assert str(error) == str(InvalidConfigurationError(6, 5))


def test_custom_message_survives_pickling():
    error = _round_trip(InvalidConfigurationError(-1, message="must be non-negative"))

    assert error.quantity == -1
    assert error.max_quantity is None
    assert str(error) == "must be non-negative"


@pytest.mark.parametrize("error_class", [UnknownGeneratorError, UnknownValidatorError])
def test_unknown_alias_errors_survive_pickling(error_class):
    error = _round_trip(error_class("nope", ["random", "sequential"]))

    assert type(error) is error_class
    assert error.alias == "nope"
    assert error.available == ["random", "sequential"]
    assert str(error) == str(error_class("nope", ["random", "sequential"]))


def test_invalid_options_error_survives_pickling():
    original = InvalidOptionsError("max_repeats: too small", alias="max_repeated_characters")

    error = _round_trip(original)

    assert error.alias == "max_repeated_characters"
    assert str(error) == str(original)


@pytest.mark.parametrize("error_class", [GenerationStalledError, GenerationTimeoutError])
def test_stalled_errors_survive_pickling(error_class):
    error = _round_trip(error_class("stuck", generated=3, attempts=40))

    assert type(error) is error_class
    assert error.generated == 3
    assert error.attempts == 40
    assert str(error) == "stuck"
