# contractfn/core/modes.py
"""
Validation modes - which boundaries of a checked function are enforced.

The argument gate and the return gate are independent decisions:
enabling one never implies the other.

    mode    args    return
    NONE    no      no
    ARGS    yes     no
    RET     no      yes
    BOTH    yes     yes
"""

from __future__ import annotations

from enum import Enum
from typing import Union

from .exceptions import ContractDefinitionError


class ValidationMode(str, Enum):
    """Boundaries enforced by a checked function."""

    NONE = "none"
    ARGS = "args"
    RET = "ret"
    BOTH = "both"

    @property
    def validates_args(self) -> bool:
        return should_validate(self, Boundary.ARGS)

    @property
    def validates_return(self) -> bool:
        return should_validate(self, Boundary.RETURN)


class Boundary(str, Enum):
    """The two places a checked function can be gated."""

    ARGS = "args"
    RETURN = "return"


_ENFORCED_BY = {
    Boundary.ARGS: frozenset({ValidationMode.ARGS, ValidationMode.BOTH}),
    Boundary.RETURN: frozenset({ValidationMode.RET, ValidationMode.BOTH}),
}


def coerce_mode(mode: Union[ValidationMode, str]) -> ValidationMode:
    """
    Normalize a mode given as an enum member or its string value.

    Matching is case-insensitive, so "Both" and "BOTH" are accepted.

    Raises:
        ContractDefinitionError: If the value names no mode.
    """
    if isinstance(mode, ValidationMode):
        return mode

    if isinstance(mode, str):
        try:
            return ValidationMode(mode.strip().lower())
        except ValueError:
            pass

    available = [m.value for m in ValidationMode]
    raise ContractDefinitionError(f"Unknown validation mode: {mode!r}. Available: {available}")


def should_validate(mode: Union[ValidationMode, str], boundary: Boundary) -> bool:
    """Return True if `mode` enforces the given boundary."""
    return coerce_mode(mode) in _ENFORCED_BY[boundary]


__all__ = ["ValidationMode", "Boundary", "coerce_mode", "should_validate"]
