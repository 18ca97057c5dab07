from abc import ABC, abstractmethod

from codeforge.core.exceptions import ConfigurationError
from codeforge.core.models import Configurator, GenerationConfiguration


class BaseConfiguratorBuilder(ABC):
    """Turns a configuration into the configurator generators consume."""

    @abstractmethod
    def build(self, configuration: GenerationConfiguration) -> Configurator:
        """Build a configurator; raise ConfigurationError on invalid input."""
        pass


class ConfiguratorBuilder(BaseConfiguratorBuilder):
    """Builds configurators for charset/length/pattern configurations."""

    def build(self, configuration: GenerationConfiguration) -> Configurator:
        charset = tuple(dict.fromkeys(configuration.charset))
        if not charset:
            raise ConfigurationError("Configuration charset must not be empty")

        template = self._build_template(configuration)

        slots = sum(1 for part in template if part is None)
        return Configurator(
            charset=charset,
            template=template,
            prefix=configuration.prefix,
            suffix=configuration.suffix,
            max_quantity=len(charset) ** slots,
        )

    def _build_template(self, configuration: GenerationConfiguration) -> tuple[str | None, ...]:
        """Split the pattern (or plain length) into literals and slots."""
        if configuration.pattern is None:
            if configuration.length < 1:
                raise ConfigurationError(
                    f"Configuration length must be at least 1, got {configuration.length}"
                )
            return (None,) * configuration.length

        placeholder = configuration.placeholder
        if len(placeholder) != 1:
            raise ConfigurationError(
                f"Placeholder must be a single character, got '{placeholder}'"
            )
        if placeholder not in configuration.pattern:
            raise ConfigurationError(
                f"Pattern '{configuration.pattern}' contains no '{placeholder}' placeholder"
            )

        return tuple(None if char == placeholder else char for char in configuration.pattern)
