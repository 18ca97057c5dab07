import re
from itertools import groupby

from pydantic import Field, field_validator

from codeforge.core.base_validator import BaseCodeValidator, ValidatorOptions


class RegexOptions(ValidatorOptions):
    pattern: str = Field(default=".*", description="Regular expression codes must match")
    full_match: bool = Field(default=True, description="Require the whole code to match")
    ignore_case: bool = Field(default=False, description="Case-insensitive matching")

    @field_validator("pattern")
    @classmethod
    def validate_pattern(cls, v: str) -> str:
        try:
            re.compile(v)
        except re.error as e:
            raise ValueError(f"invalid regular expression: {e}") from e
        return v


class RegexValidator(BaseCodeValidator):
    """Accept codes matching a regular expression."""

    options_model = RegexOptions

    def validate(self, code: str, options: RegexOptions) -> bool:
        flags = re.IGNORECASE if options.ignore_case else 0
        if options.full_match:
            return re.fullmatch(options.pattern, code, flags) is not None
        return re.search(options.pattern, code, flags) is not None


class ForbiddenWordsOptions(ValidatorOptions):
    words: list[str] = Field(default_factory=list, description="Substrings codes must not contain")
    case_sensitive: bool = Field(default=False, description="Match words case-sensitively")


class ForbiddenWordsValidator(BaseCodeValidator):
    """Reject codes containing an offensive or reserved word."""

    options_model = ForbiddenWordsOptions

    def validate(self, code: str, options: ForbiddenWordsOptions) -> bool:
        haystack = code if options.case_sensitive else code.casefold()
        for word in options.words:
            needle = word if options.case_sensitive else word.casefold()
            if needle and needle in haystack:
                return False
        return True


class MaxRepeatedCharactersOptions(ValidatorOptions):
    max_repeats: int = Field(default=2, ge=1, description="Longest allowed run of one character")


class MaxRepeatedCharactersValidator(BaseCodeValidator):
    """Reject codes with a run of identical characters longer than max_repeats."""

    options_model = MaxRepeatedCharactersOptions

    def validate(self, code: str, options: MaxRepeatedCharactersOptions) -> bool:
        return all(len(list(run)) <= options.max_repeats for _, run in groupby(code))


class MinDistinctCharactersOptions(ValidatorOptions):
    minimum: int = Field(default=2, ge=1, description="Minimum number of distinct characters")


class MinDistinctCharactersValidator(BaseCodeValidator):
    """Reject codes built from too few distinct characters."""

    options_model = MinDistinctCharactersOptions

    def validate(self, code: str, options: MinDistinctCharactersOptions) -> bool:
        return len(set(code)) >= options.minimum
