from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_CHARSET = "ABCDEFGHJKLMNPQRSTUVWXYZ23456789"


class GenerationConfiguration(BaseModel):
    """Caller-supplied description of the shape of the codes to generate."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    charset: str = Field(
        default=DEFAULT_CHARSET,
        description="Characters a slot may take (duplicates are ignored)",
    )
    length: int = Field(
        default=8,
        description="Number of random slots when no pattern is given",
    )
    pattern: str | None = Field(
        None,
        description="Code layout such as 'XXXX-XXXX'; placeholder characters are slots",
    )
    placeholder: str = Field(default="X", description="Slot marker used in pattern")
    prefix: str = Field(default="", description="Literal text prepended to every code")
    suffix: str = Field(default="", description="Literal text appended to every code")


class Configurator(BaseModel):
    """Effective, immutable generation constraints derived from a configuration.

    ``template`` holds one entry per output position: a literal string, or
    ``None`` for a slot filled from ``charset``. Rendering is injective, so
    ``max_quantity`` is the exact number of distinct codes obtainable.
    """

    model_config = ConfigDict(frozen=True)

    charset: tuple[str, ...] = Field(default=(), description="Distinct slot characters")
    template: tuple[str | None, ...] = Field(default=(), description="Literals and slots")
    prefix: str = Field(default="", description="Literal prefix")
    suffix: str = Field(default="", description="Literal suffix")
    max_quantity: int = Field(..., ge=0, description="Number of distinct producible codes")

    @property
    def slots(self) -> int:
        """Number of positions filled from the charset."""
        return sum(1 for part in self.template if part is None)

    def render(self, symbols: Sequence[str]) -> str:
        """Fill the template slots with ``symbols`` in order."""
        if len(symbols) != self.slots:
            raise ValueError(f"Expected {self.slots} symbols, got {len(symbols)}")

        filled = iter(symbols)
        body = "".join(next(filled) if part is None else part for part in self.template)
        return f"{self.prefix}{body}{self.suffix}"


class GenerationRequest(BaseModel):
    """A full generation job, as read from a YAML recipe."""

    model_config = ConfigDict(extra="forbid")

    quantity: int = Field(default=42, ge=0, description="Number of codes to generate")
    generator: str = Field(default="random", description="Generator alias")
    configuration: GenerationConfiguration = Field(
        default_factory=GenerationConfiguration,
        description="Code shape",
    )
    validators: dict[str, dict[str, Any] | None] = Field(
        default_factory=dict,
        description="Validator alias -> raw options, applied in order",
    )
