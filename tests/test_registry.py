from __future__ import annotations

import pytest

from codeforge.core.exceptions import UnknownGeneratorError, UnknownValidatorError
from codeforge.core.registry import GeneratorRegistry, ValidatorRegistry
from codeforge.generators import RandomCodeGenerator, SequentialCodeGenerator
from codeforge.validators import RegexValidator


def test_default_registries_hold_builtins(generator_registry, validator_registry):
    assert generator_registry.aliases() == ["random", "sequential"]
    assert validator_registry.aliases() == [
        "excluded_codes",
        "forbidden_words",
        "max_repeated_characters",
        "min_distinct_characters",
        "regex",
    ]


def test_register_and_get():
    registry = GeneratorRegistry()
    generator = SequentialCodeGenerator()

    registry.register("counter", generator)

    assert "counter" in registry
    assert len(registry) == 1
    assert registry.get("counter") is generator


def test_register_overwrites_existing_alias():
    registry = GeneratorRegistry()
    replacement = RandomCodeGenerator()
    registry.register("random", RandomCodeGenerator())

    registry.register("random", replacement)

    assert registry.get("random") is replacement


def test_get_unknown_generator():
    registry = GeneratorRegistry()
    registry.register("random", RandomCodeGenerator())

    with pytest.raises(UnknownGeneratorError) as exc_info:
        registry.get("nope")

    assert "nope" in str(exc_info.value)
    assert "random" in str(exc_info.value)
    assert isinstance(exc_info.value, KeyError)


def test_get_unknown_validator():
    with pytest.raises(UnknownValidatorError):
        ValidatorRegistry().get("luhn")


def test_register_rejects_wrong_strategy_type():
    with pytest.raises(TypeError):
        GeneratorRegistry().register("regex", RegexValidator())

    with pytest.raises(TypeError):
        ValidatorRegistry().register("random", RandomCodeGenerator())


def test_register_rejects_empty_alias():
    with pytest.raises(ValueError):
        GeneratorRegistry().register("", RandomCodeGenerator())
