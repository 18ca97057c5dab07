"""Built-in code validators."""

from codeforge.validators.exclusion_validator import ExcludedCodesValidator
from codeforge.validators.rule_validators import (
    ForbiddenWordsValidator,
    MaxRepeatedCharactersValidator,
    MinDistinctCharactersValidator,
    RegexValidator,
)

__all__ = [
    "RegexValidator",
    "ForbiddenWordsValidator",
    "MaxRepeatedCharactersValidator",
    "MinDistinctCharactersValidator",
    "ExcludedCodesValidator",
]
