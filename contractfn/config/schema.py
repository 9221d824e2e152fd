# contractfn/config/schema.py
"""Pydantic schema for contractfn configuration."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from contractfn.core.exceptions import ContractDefinitionError
from contractfn.core.modes import ValidationMode, coerce_mode


class ContractConfig(BaseModel):
    """
    Process-wide settings.

    Attributes:
        default_mode: Mode of contracts that never set one explicitly
        strict: Run the schema engine in strict mode (no lax coercion)
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    default_mode: ValidationMode = Field(
        default=ValidationMode.BOTH,
        description="Validation mode used when a contract does not set one",
    )
    strict: bool = Field(default=True, description="Disable lax type coercion")

    @field_validator("default_mode", mode="before")
    @classmethod
    def normalize_mode(cls, v):
        # Accept "Both", "NONE", ... as well as enum members.
        try:
            return coerce_mode(v)
        except ContractDefinitionError as e:
            raise ValueError(str(e)) from e
