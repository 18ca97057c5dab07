from pydantic import Field

from codeforge.core.base_validator import BaseCodeValidator, ValidatorOptions


class ExcludedCodesOptions(ValidatorOptions):
    codes: frozenset[str] = Field(
        default_factory=frozenset,
        description="Codes already issued elsewhere that must not be produced again",
    )


class ExcludedCodesValidator(BaseCodeValidator):
    """Reject codes that the caller has already issued.

    The caller owns persistence; previously issued codes are passed in as
    options for the duration of one generation call.
    """

    options_model = ExcludedCodesOptions

    def validate(self, code: str, options: ExcludedCodesOptions) -> bool:
        return code not in options.codes
