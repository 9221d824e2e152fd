# contractfn/core/schema.py
"""
Schemas - immutable validators for the values crossing a function boundary.

A schema is one variant of a small tagged union:

- Primitive:      any annotation the engine understands (int, str, list[int],
                  a pydantic model, ...)
- AnySchema:      accepts every value
- Refined:        a base schema plus a predicate and a failure message
- TupleSchema:    an ordered, fixed-length sequence of schemas
- ArraySchema:    a homogeneous list with optional length constraints
- FunctionSchema: a function signature (argument tuple + return schema)

Validation itself is delegated to pydantic. Every variant translates to a
pydantic-compatible annotation through annotation(); the translation is a
single recursive dispatch, so no reflection happens at call time.

Schemas are frozen and hashable. Contracts share them by reference.

Examples:
    >>> from contractfn.core.schema import primitive, refine, tuple_of, array_of
    >>> Int = primitive(int)
    >>> Even = refine(Int, lambda x: x % 2 == 0, "should be even")
    >>> Pair = tuple_of(Even, Even)
    >>> Row = array_of(Int, length=3)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Annotated, Any, Callable, Optional, Tuple

from pydantic import AfterValidator, Field
from pydantic_core import PydanticCustomError

from .exceptions import ContractDefinitionError


class Schema:
    """Base class of every schema variant."""

    def annotation(self) -> Any:
        """Translate this schema into an annotation pydantic can validate."""
        raise NotImplementedError

    def refine(self, predicate: Callable[[Any], bool], message: str) -> "Refined":
        """Return this schema narrowed by `predicate`."""
        return refine(self, predicate, message)

    def array(
        self,
        length: Optional[int] = None,
        *,
        min_length: Optional[int] = None,
        max_length: Optional[int] = None,
    ) -> "ArraySchema":
        """Return a list schema whose elements match this schema."""
        return array_of(self, length, min_length=min_length, max_length=max_length)


@dataclass(frozen=True)
class Primitive(Schema):
    """A schema backed directly by a type annotation."""

    type_: Any

    def annotation(self) -> Any:
        return self.type_


@dataclass(frozen=True)
class AnySchema(Schema):
    """Accepts every value unchanged."""

    def annotation(self) -> Any:
        return Any


@dataclass(frozen=True)
class Refined(Schema):
    """
    A base schema plus an extra predicate.

    The predicate runs on the value after the base schema accepted it. When it
    returns a falsy value, validation fails with `message` as the issue text.
    """

    base: Schema
    predicate: Callable[[Any], bool]
    message: str = "Invalid input"

    def annotation(self) -> Any:
        return Annotated[self.base.annotation(), AfterValidator(self._check)]

    def _check(self, value: Any) -> Any:
        if not self.predicate(value):
            raise PydanticCustomError("refinement_failed", self.message)
        return value


@dataclass(frozen=True)
class TupleSchema(Schema):
    """
    A fixed-length, ordered sequence of schemas.

    Used as the arguments schema of every contract. The empty tuple is valid
    and matches a call with no arguments.
    """

    items: Tuple[Schema, ...] = ()

    def annotation(self) -> Any:
        if not self.items:
            return tuple[()]
        return tuple[tuple(item.annotation() for item in self.items)]


@dataclass(frozen=True)
class ArraySchema(Schema):
    """A list whose elements all match `element`."""

    element: Schema
    length: Optional[int] = None
    min_length: Optional[int] = None
    max_length: Optional[int] = None

    def __post_init__(self):
        for name in ("length", "min_length", "max_length"):
            value = getattr(self, name)
            if value is not None and value < 0:
                raise ContractDefinitionError(f"{name} must be non-negative, got {value}")

        if self.length is not None and (self.min_length is not None or self.max_length is not None):
            raise ContractDefinitionError("length cannot be combined with min_length or max_length")
        if (
            self.min_length is not None
            and self.max_length is not None
            and self.min_length > self.max_length
        ):
            raise ContractDefinitionError(
                f"min_length ({self.min_length}) exceeds max_length ({self.max_length})"
            )

    def annotation(self) -> Any:
        min_length, max_length = self.min_length, self.max_length
        if self.length is not None:
            min_length = max_length = self.length

        inner = list[self.element.annotation()]
        if min_length is None and max_length is None:
            return inner
        return Annotated[inner, Field(min_length=min_length, max_length=max_length)]


@dataclass(frozen=True)
class FunctionSchema(Schema):
    """
    A function signature: an arguments tuple and a return schema.

    Only the shape is validated: the value must be callable. The callable is
    returned as-is, it is not wrapped with gates of its own.
    """

    args: TupleSchema = TupleSchema()
    returns: Schema = AnySchema()

    def annotation(self) -> Any:
        return Callable


# =============================================================================
# Constructors
# =============================================================================

ANY = AnySchema()
EMPTY_TUPLE = TupleSchema()


def as_schema(value: Any) -> Schema:
    """
    Promote `value` to a Schema.

    Schemas pass through. A list or tuple *instance* becomes a TupleSchema of
    its promoted items. Anything else is treated as a type annotation.
    """
    if isinstance(value, Schema):
        return value
    if isinstance(value, (list, tuple)):
        return TupleSchema(tuple(as_schema(item) for item in value))
    if value is None:
        return Primitive(type(None))
    return Primitive(value)


def primitive(type_: Any) -> Primitive:
    """Schema for a plain annotation."""
    return Primitive(type_)


def refine(base: Any, predicate: Callable[[Any], bool], message: str = "Invalid input") -> Refined:
    """Narrow `base` with `predicate`, failing with `message`."""
    if not callable(predicate):
        raise ContractDefinitionError("Refinement predicate must be callable")
    return Refined(as_schema(base), predicate, message)


def tuple_of(*items: Any) -> TupleSchema:
    """Fixed-length tuple of the given schemas."""
    return TupleSchema(tuple(as_schema(item) for item in items))


def array_of(
    element: Any,
    length: Optional[int] = None,
    *,
    min_length: Optional[int] = None,
    max_length: Optional[int] = None,
) -> ArraySchema:
    """List of `element`, optionally with an exact length or bounds."""
    return ArraySchema(as_schema(element), length, min_length, max_length)


def function_of(args: Any = (), returns: Any = ANY) -> FunctionSchema:
    """Function-signature schema from an argument sequence and a return schema."""
    args_schema = as_schema(args)
    if not isinstance(args_schema, TupleSchema):
        args_schema = TupleSchema((args_schema,))
    return FunctionSchema(args_schema, as_schema(returns))


__all__ = [
    "Schema",
    "Primitive",
    "AnySchema",
    "Refined",
    "TupleSchema",
    "ArraySchema",
    "FunctionSchema",
    "ANY",
    "EMPTY_TUPLE",
    "as_schema",
    "primitive",
    "refine",
    "tuple_of",
    "array_of",
    "function_of",
]
