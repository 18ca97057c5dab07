"""Core contracts and the generation loop."""

from codeforge.core.base_generator import BaseCodeGenerator
from codeforge.core.base_validator import BaseCodeValidator, ValidatorOptions, resolve_options
from codeforge.core.configurator import BaseConfiguratorBuilder, ConfiguratorBuilder
from codeforge.core.exceptions import (
    CodeGenerationError,
    ConfigurationError,
    GenerationStalledError,
    GenerationTimeoutError,
    InvalidConfigurationError,
    InvalidOptionsError,
    UnknownGeneratorError,
    UnknownValidatorError,
)
from codeforge.core.manager import CodeGeneratorManager
from codeforge.core.models import Configurator, GenerationConfiguration, GenerationRequest
from codeforge.core.registry import GeneratorRegistry, ValidatorRegistry

__all__ = [
    "BaseCodeGenerator",
    "BaseCodeValidator",
    "ValidatorOptions",
    "resolve_options",
    "BaseConfiguratorBuilder",
    "ConfiguratorBuilder",
    "CodeGeneratorManager",
    "Configurator",
    "GenerationConfiguration",
    "GenerationRequest",
    "GeneratorRegistry",
    "ValidatorRegistry",
    "CodeGenerationError",
    "ConfigurationError",
    "InvalidConfigurationError",
    "InvalidOptionsError",
    "UnknownGeneratorError",
    "UnknownValidatorError",
    "GenerationStalledError",
    "GenerationTimeoutError",
]
