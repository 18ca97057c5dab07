"""Wiring of the built-in strategies into registries and a manager."""

import random

from codeforge.core.configurator import BaseConfiguratorBuilder, ConfiguratorBuilder
from codeforge.core.generator_types import GeneratorType, ValidatorType
from codeforge.core.manager import CodeGeneratorManager
from codeforge.core.registry import GeneratorRegistry, ValidatorRegistry
from codeforge.generators import RandomCodeGenerator, SequentialCodeGenerator
from codeforge.settings import Settings
from codeforge.validators import (
    ExcludedCodesValidator,
    ForbiddenWordsValidator,
    MaxRepeatedCharactersValidator,
    MinDistinctCharactersValidator,
    RegexValidator,
)


def default_generator_registry(rng: random.Random | None = None) -> GeneratorRegistry:
    """Registry holding the built-in generators."""
    registry = GeneratorRegistry()
    registry.register(GeneratorType.RANDOM.value, RandomCodeGenerator(rng))
    registry.register(GeneratorType.SEQUENTIAL.value, SequentialCodeGenerator())
    return registry


def default_validator_registry() -> ValidatorRegistry:
    """Registry holding the built-in validators."""
    registry = ValidatorRegistry()
    registry.register(ValidatorType.REGEX.value, RegexValidator())
    registry.register(ValidatorType.FORBIDDEN_WORDS.value, ForbiddenWordsValidator())
    registry.register(ValidatorType.MAX_REPEATED_CHARACTERS.value, MaxRepeatedCharactersValidator())
    registry.register(ValidatorType.MIN_DISTINCT_CHARACTERS.value, MinDistinctCharactersValidator())
    registry.register(ValidatorType.EXCLUDED_CODES.value, ExcludedCodesValidator())
    return registry


def build_manager(
    configurator_builder: BaseConfiguratorBuilder | None = None,
    generator_registry: GeneratorRegistry | None = None,
    validator_registry: ValidatorRegistry | None = None,
    settings: Settings | None = None,
) -> CodeGeneratorManager:
    """Create a manager, filling any missing collaborator with the defaults."""
    if settings is None:
        settings = Settings()
    if generator_registry is None:
        generator_registry = default_generator_registry()
    if validator_registry is None:
        validator_registry = default_validator_registry()

    return CodeGeneratorManager(
        configurator_builder=configurator_builder or ConfiguratorBuilder(),
        generator_registry=generator_registry,
        validator_registry=validator_registry,
        max_consecutive_rejections=settings.max_consecutive_rejections,
    )
