from enum import Enum


class GeneratorType(str, Enum):
    """Aliases of the built-in generators."""

    RANDOM = "random"
    SEQUENTIAL = "sequential"


class ValidatorType(str, Enum):
    """Aliases of the built-in validators."""

    REGEX = "regex"
    FORBIDDEN_WORDS = "forbidden_words"
    MAX_REPEATED_CHARACTERS = "max_repeated_characters"
    MIN_DISTINCT_CHARACTERS = "min_distinct_characters"
    EXCLUDED_CODES = "excluded_codes"
