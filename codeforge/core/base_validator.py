from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError

from codeforge.core.exceptions import InvalidOptionsError


class ValidatorOptions(BaseModel):
    """Base options model: immutable, unknown keys are rejected."""

    model_config = ConfigDict(frozen=True, extra="forbid")


def resolve_options(
    options_model: type[ValidatorOptions],
    raw_options: Mapping[str, Any] | None = None,
) -> ValidatorOptions:
    """Merge raw options over the model defaults, rejecting unknown keys and bad values."""
    if raw_options is None:
        raw_options = {}
    if not isinstance(raw_options, Mapping):
        raise InvalidOptionsError(
            f"Expected a mapping of options, got {type(raw_options).__name__}"
        )

    try:
        return options_model.model_validate(dict(raw_options))
    except ValidationError as e:
        errors = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or 'options'}: {err['msg']}"
            for err in e.errors()
        )
        raise InvalidOptionsError(errors) from e


class BaseCodeValidator(ABC):
    """Base class for validators that accept or reject a single code."""

    options_model: type[ValidatorOptions] = ValidatorOptions

    def resolve_options(self, raw_options: Mapping[str, Any] | None = None) -> ValidatorOptions:
        """Resolve raw options against this validator's options model."""
        return resolve_options(self.options_model, raw_options)

    @abstractmethod
    def validate(self, code: str, options: ValidatorOptions) -> bool:
        """Return True if the code is acceptable under the resolved options."""
        raise NotImplementedError
