"""
Exceptions raised while building configurators and generating codes.

Duplicate or rejected candidates are normal loop control and never raise.
"""


class CodeGenerationError(Exception):
    """Base exception for code generation."""
    pass


class ConfigurationError(CodeGenerationError):
    """Raised when a configuration cannot be built into a configurator."""
    pass


class InvalidConfigurationError(ConfigurationError):
    """Raised when the requested quantity cannot be produced from a configuration."""

    def __init__(self, quantity: int, max_quantity: int | None = None, message: str | None = None):
        self.quantity = quantity
        self.max_quantity = max_quantity
        if message is None:
            message = (
                f"The requested quantity of codes `{quantity}` is greater than the "
                f"maximum quantity of codes that can be generated `{max_quantity}`"
            )
        super().__init__(message)

    def __reduce__(self):
        return type(self), (self.quantity, self.max_quantity, str(self))


class UnknownAliasError(CodeGenerationError, KeyError):
    """Raised when an alias is not registered."""

    kind = "strategy"

    def __init__(self, alias: str, available: list[str] | None = None):
        self.alias = alias
        self.available = available or []
        super().__init__(alias)

    def __reduce__(self):
        return type(self), (self.alias, self.available)

    def __str__(self) -> str:
        hint = ", ".join(self.available) if self.available else "<empty>"
        return f"Unknown {self.kind} alias '{self.alias}'. Available: {hint}"


class UnknownGeneratorError(UnknownAliasError):
    """Raised when a generator alias is not registered."""

    kind = "generator"


class UnknownValidatorError(UnknownAliasError):
    """Raised when a validator alias is not registered."""

    kind = "validator"


class InvalidOptionsError(CodeGenerationError, ValueError):
    """Raised when validator options fail resolution."""

    def __init__(self, message: str, alias: str | None = None):
        self.alias = alias
        self.reason = message
        if alias:
            message = f"Invalid options for validator '{alias}': {message}"
        super().__init__(message)

    def __reduce__(self):
        return type(self), (self.reason, self.alias)


class GenerationStalledError(CodeGenerationError):
    """Raised when the generation loop stops making progress."""

    def __init__(self, message: str, generated: int = 0, attempts: int = 0):
        self.generated = generated
        self.attempts = attempts
        super().__init__(message)

    def __reduce__(self):
        return type(self), (str(self), self.generated, self.attempts)


class GenerationTimeoutError(GenerationStalledError):
    """Raised when the generation loop exceeds its deadline."""
    pass
