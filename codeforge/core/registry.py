import logging
from typing import Generic, TypeVar

from codeforge.core.base_generator import BaseCodeGenerator
from codeforge.core.base_validator import BaseCodeValidator
from codeforge.core.exceptions import (
    UnknownAliasError,
    UnknownGeneratorError,
    UnknownValidatorError,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class AliasRegistry(Generic[T]):
    """
    Registry of strategy instances by alias.

    Populated at startup through direct register() calls.
    """

    strategy_type: type = object
    error_class: type[UnknownAliasError] = UnknownAliasError

    def __init__(self):
        self._strategies: dict[str, T] = {}

    def register(self, alias: str, strategy: T) -> None:
        """Register a strategy instance under alias, replacing any previous one."""
        if not isinstance(alias, str) or not alias:
            raise ValueError("Alias must be a non-empty string")
        if not isinstance(strategy, self.strategy_type):
            raise TypeError(
                f"Strategy registered under '{alias}' must be a {self.strategy_type.__name__}, "
                f"got {type(strategy).__name__}"
            )

        if alias in self._strategies:
            logger.warning(f"Alias '{alias}' already registered, overwriting")
        self._strategies[alias] = strategy
        logger.debug(f"Registered {type(strategy).__name__} as '{alias}'")

    def get(self, alias: str) -> T:
        """Get strategy by alias."""
        try:
            return self._strategies[alias]
        except KeyError:
            raise self.error_class(alias, self.aliases()) from None

    def aliases(self) -> list[str]:
        """Return the registered aliases, sorted."""
        return sorted(self._strategies)

    def __contains__(self, alias: object) -> bool:
        return alias in self._strategies

    def __len__(self) -> int:
        return len(self._strategies)


class GeneratorRegistry(AliasRegistry[BaseCodeGenerator]):
    """Registry for code generators."""

    strategy_type = BaseCodeGenerator
    error_class = UnknownGeneratorError


class ValidatorRegistry(AliasRegistry[BaseCodeValidator]):
    """Registry for code validators."""

    strategy_type = BaseCodeValidator
    error_class = UnknownValidatorError
