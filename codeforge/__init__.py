"""Generate batches of unique, validated codes (coupons, vouchers, keys)."""

from codeforge.core import (
    CodeGenerationError,
    CodeGeneratorManager,
    ConfigurationError,
    GenerationConfiguration,
    InvalidConfigurationError,
    InvalidOptionsError,
    UnknownGeneratorError,
    UnknownValidatorError,
)
from codeforge.factory import build_manager, default_generator_registry, default_validator_registry

__version__ = "0.1.0"

__all__ = [
    "CodeGeneratorManager",
    "GenerationConfiguration",
    "build_manager",
    "default_generator_registry",
    "default_validator_registry",
    "CodeGenerationError",
    "ConfigurationError",
    "InvalidConfigurationError",
    "InvalidOptionsError",
    "UnknownGeneratorError",
    "UnknownValidatorError",
]
