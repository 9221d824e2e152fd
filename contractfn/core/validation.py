# contractfn/core/validation.py
"""
Validation façade - uniform check/validate over the schema engine (pydantic).

    check(schema, value)          -> bool, never raises on invalid input
    validate(schema, value)       -> validated (possibly coerced) value, or
                                     raises ValidationError
    safe_validate(schema, value)  -> SafeParseResult, never raises on invalid
                                     input

For every schema S and value v, check(S, v) is True exactly when
validate(S, v) does not raise.

Strictness: by default the engine runs in strict mode, so "2" is not accepted
where an int is expected. Pass strict=False (or set `strict: false` in the
config) to allow the engine's lax coercions.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Dict, List, Optional

import pydantic
from pydantic import TypeAdapter

from .exceptions import ValidationError
from .schema import Schema, as_schema

# pydantic error type -> name used in "Expected <name>, received <type>"
_EXPECTED_NAMES: Dict[str, str] = {
    "string_type": "string",
    "int_type": "integer",
    "float_type": "number",
    "bool_type": "boolean",
    "bytes_type": "bytes",
    "list_type": "list",
    "tuple_type": "tuple",
    "dict_type": "dict",
    "set_type": "set",
    "frozen_set_type": "frozenset",
    "callable_type": "function",
    "none_required": "None",
}


@dataclass(frozen=True)
class SafeParseResult:
    """
    Outcome of a non-raising validation.

    Attributes:
        success: True if the value matched the schema
        data: The validated value (None on failure)
        error: The ValidationError that validate() would have raised
    """

    success: bool
    data: Any = None
    error: Optional[ValidationError] = None

    @classmethod
    def ok(cls, data: Any) -> "SafeParseResult":
        return cls(success=True, data=data)

    @classmethod
    def failed(cls, error: ValidationError) -> "SafeParseResult":
        return cls(success=False, error=error)


# =============================================================================
# Engine access
# =============================================================================


@lru_cache(maxsize=1024)
def _cached_adapter(schema: Schema) -> TypeAdapter:
    return TypeAdapter(schema.annotation())


def get_adapter(schema: Any) -> TypeAdapter:
    """
    Return the pydantic TypeAdapter for `schema`.

    Adapters are cached per schema. Schemas wrapping unhashable annotations
    get a fresh adapter on every call.
    """
    schema = as_schema(schema)
    try:
        hash(schema)
    except TypeError:
        return TypeAdapter(schema.annotation())
    return _cached_adapter(schema)


def clear_adapter_cache() -> None:
    """Drop every cached adapter."""
    _cached_adapter.cache_clear()


def _resolve_strict(strict: Optional[bool]) -> bool:
    if strict is not None:
        return strict

    from contractfn.config import get_config

    return get_config().strict


def _describe_issue(issue: Dict[str, Any]) -> Dict[str, Any]:
    """Rewrite type-mismatch messages as "Expected <type>, received <type>"."""
    expected = _EXPECTED_NAMES.get(issue.get("type", ""))
    if expected is None:
        return issue

    received = type(issue.get("input")).__name__
    return {**issue, "msg": f"Expected {expected}, received {received}"}


def to_issues(error: pydantic.ValidationError) -> List[Dict[str, Any]]:
    """Convert an engine error into the structured issue list we expose."""
    return [_describe_issue(issue) for issue in error.errors(include_url=False)]


# =============================================================================
# Public API
# =============================================================================


def validate(schema: Any, value: Any, *, strict: Optional[bool] = None) -> Any:
    """
    Validate `value` against `schema` and return the validated value.

    Args:
        schema: A Schema, or anything as_schema() accepts
        value: The value to validate
        strict: Override the configured strictness for this call

    Returns:
        The validated value. Composite schemas return new containers
        (a TupleSchema yields a tuple, an ArraySchema a list).

    Raises:
        ValidationError: If the value does not match. The engine's error is
            kept as __cause__.
    """
    adapter = get_adapter(schema)
    try:
        return adapter.validate_python(value, strict=_resolve_strict(strict))
    except pydantic.ValidationError as e:
        raise ValidationError(to_issues(e)) from e


def safe_validate(schema: Any, value: Any, *, strict: Optional[bool] = None) -> SafeParseResult:
    """Validate without raising on invalid input."""
    try:
        return SafeParseResult.ok(validate(schema, value, strict=strict))
    except ValidationError as e:
        return SafeParseResult.failed(e)


def check(schema: Any, value: Any, *, strict: Optional[bool] = None) -> bool:
    """Return True if `value` matches `schema`."""
    return safe_validate(schema, value, strict=strict).success


__all__ = [
    "SafeParseResult",
    "check",
    "validate",
    "safe_validate",
    "get_adapter",
    "clear_adapter_cache",
    "to_issues",
]
