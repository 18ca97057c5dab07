import logging
import time
from collections import Counter
from collections.abc import Mapping
from typing import Any

from codeforge.core.base_validator import BaseCodeValidator, ValidatorOptions
from codeforge.core.configurator import BaseConfiguratorBuilder
from codeforge.core.exceptions import (
    GenerationStalledError,
    GenerationTimeoutError,
    InvalidConfigurationError,
    InvalidOptionsError,
)
from codeforge.core.models import GenerationConfiguration
from codeforge.core.registry import GeneratorRegistry, ValidatorRegistry

logger = logging.getLogger(__name__)

DEFAULT_QUANTITY = 42
DEFAULT_GENERATOR = "random"


class CodeGeneratorManager:
    """Generates batches of unique codes accepted by every requested validator.

    Liveness: the capacity check only guarantees the code space is large
    enough. A generator whose practical entropy is far below ``max_quantity``
    can still make the loop run long; set ``max_consecutive_rejections`` or
    pass a ``timeout`` to bound it.
    """

    def __init__(
        self,
        configurator_builder: BaseConfiguratorBuilder,
        generator_registry: GeneratorRegistry,
        validator_registry: ValidatorRegistry,
        max_consecutive_rejections: int | None = None,
    ):
        if max_consecutive_rejections is not None and max_consecutive_rejections < 1:
            raise ValueError("max_consecutive_rejections must be positive or None")

        self.configurator_builder = configurator_builder
        self.generator_registry = generator_registry
        self.validator_registry = validator_registry
        self.max_consecutive_rejections = max_consecutive_rejections

    def generate(
        self,
        quantity: int = DEFAULT_QUANTITY,
        configuration: GenerationConfiguration | None = None,
        generator_alias: str = DEFAULT_GENERATOR,
        validators: Mapping[str, Mapping[str, Any] | None] | None = None,
        *,
        timeout: float | None = None,
    ) -> list[str]:
        """
        Generate codes.

        Args:
            quantity: Number of codes to generate
            configuration: Code shape; a default configuration when None
            generator_alias: Alias of the generator to use
            validators: Validator alias -> raw options, applied in iteration order
            timeout: Optional deadline in seconds for the whole call

        Returns:
            Exactly ``quantity`` distinct codes, in generation order

        Raises:
            ConfigurationError: If the configuration cannot be built
            InvalidConfigurationError: If quantity exceeds the configurator's max quantity
            UnknownGeneratorError / UnknownValidatorError: If an alias is not registered
            InvalidOptionsError: If validator options fail resolution
            GenerationStalledError: If the rejection ceiling or timeout is reached
        """
        if configuration is None:
            configuration = GenerationConfiguration()
        if isinstance(quantity, bool) or not isinstance(quantity, int):
            raise InvalidConfigurationError(
                quantity, message=f"The requested quantity of codes must be an integer, got {quantity!r}"
            )
        if quantity < 0:
            raise InvalidConfigurationError(
                quantity, message=f"The requested quantity of codes must be non-negative, got {quantity}"
            )

        configurator = self.configurator_builder.build(configuration)

        # Ensure we can generate as many codes as asked
        if quantity > configurator.max_quantity:
            raise InvalidConfigurationError(quantity, configurator.max_quantity)

        generator = self.generator_registry.get(generator_alias)
        chain = self._resolve_validators(validators or {})

        deadline = time.monotonic() + timeout if timeout is not None else None
        codes: dict[str, str] = {}
        attempts = 0
        duplicates = 0
        consecutive_rejections = 0
        rejections: Counter[str] = Counter()

        logger.debug(
            f"Generating {quantity} codes with '{generator_alias}' "
            f"(max quantity {configurator.max_quantity}, validators {[alias for alias, _, _ in chain]})"
        )

        while len(codes) < quantity:
            if deadline is not None and time.monotonic() >= deadline:
                raise GenerationTimeoutError(
                    f"Timed out after {timeout}s with {len(codes)}/{quantity} codes "
                    f"generated in {attempts} attempts",
                    generated=len(codes),
                    attempts=attempts,
                )

            attempts += 1
            code = generator.generate(configurator)

            # Do not allow same generated codes
            if code in codes:
                duplicates += 1
                consecutive_rejections += 1
                self._check_stalled(consecutive_rejections, len(codes), quantity, attempts)
                continue

            rejected_by = self._first_rejecting_validator(code, chain)
            if rejected_by is not None:
                rejections[rejected_by] += 1
                consecutive_rejections += 1
                self._check_stalled(consecutive_rejections, len(codes), quantity, attempts)
                continue

            consecutive_rejections = 0
            codes[code] = code

        logger.info(
            f"Generated {quantity} codes in {attempts} attempts "
            f"({duplicates} duplicates, rejections: {dict(rejections)})"
        )

        return list(codes.values())

    def is_code_valid(
        self,
        code: str,
        validators: Mapping[str, Mapping[str, Any] | None] | None = None,
    ) -> bool:
        """Return whether the code passes every validator."""
        chain = self._resolve_validators(validators or {})
        return self._first_rejecting_validator(code, chain) is None

    def _resolve_validators(
        self,
        validators: Mapping[str, Mapping[str, Any] | None],
    ) -> list[tuple[str, BaseCodeValidator, ValidatorOptions]]:
        """Look up every validator and resolve its options before any code is generated."""
        chain = []
        for alias, raw_options in validators.items():
            validator = self.validator_registry.get(alias)
            try:
                options = validator.resolve_options(raw_options)
            except InvalidOptionsError as e:
                raise InvalidOptionsError(str(e), alias=alias) from e
            chain.append((alias, validator, options))
        return chain

    @staticmethod
    def _first_rejecting_validator(
        code: str,
        chain: list[tuple[str, BaseCodeValidator, ValidatorOptions]],
    ) -> str | None:
        """Run the chain in order and return the alias of the first rejecting validator."""
        for alias, validator, options in chain:
            if not validator.validate(code, options):
                return alias
        return None

    def _check_stalled(self, consecutive_rejections: int, generated: int, quantity: int, attempts: int) -> None:
        if (
            self.max_consecutive_rejections is not None
            and consecutive_rejections >= self.max_consecutive_rejections
        ):
            raise GenerationStalledError(
                f"No new code accepted in {consecutive_rejections} consecutive attempts "
                f"({generated}/{quantity} codes generated)",
                generated=generated,
                attempts=attempts,
            )
