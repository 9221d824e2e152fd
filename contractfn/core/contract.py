# contractfn/core/contract.py
"""
Checked functions - implementations gated by an argument and a return schema.

Two equivalent ways to build one:

Direct:
    >>> inc = Fn(tuple_of(int), int, lambda x: x + 1, ValidationMode.BOTH)

Builder (each step returns a new contract, earlier ones are untouched):
    >>> inc = (
    ...     Fn()
    ...     .args(int)
    ...     .returns(int)
    ...     .set_validation_mode(ValidationMode.BOTH)
    ...     .implement(lambda x: x + 1)
    ... )

Invocation pipeline:
    caller -> argument gate -> implementation -> return gate -> caller

- The argument gate runs when the mode enforces Boundary.ARGS. On failure the
  implementation is never called.
- The return gate runs when the mode enforces Boundary.RETURN. On failure the
  implementation has already run and its side effects stand.
- Both gates pass on the validated value, so engine coercions are visible to
  the implementation and to the caller.
- Exceptions raised by the implementation pass through unmodified.
"""

from __future__ import annotations

import functools
import inspect
import types
from dataclasses import dataclass, replace
from typing import Any, Callable, Dict, Optional, Sequence, Tuple, Union

from contractfn.logging.logger import get_logger
from contractfn.logging.tags import CONTRACT, VALIDATION

from .exceptions import ContractDefinitionError, ValidationError
from .modes import Boundary, ValidationMode, coerce_mode
from .schema import ANY, EMPTY_TUPLE, AnySchema, Schema, TupleSchema, as_schema
from .validation import validate

logger = get_logger(__name__)

ArgsSpec = Union[TupleSchema, AnySchema, Sequence[Any]]

# Marks an Fn() parameter that was not passed at all.
_UNSET: Any = object()


def _as_args_schema(value: ArgsSpec) -> Schema:
    """Normalize an arguments schema given to Fn()."""
    if isinstance(value, (TupleSchema, AnySchema)):
        return value
    if isinstance(value, (list, tuple)):
        return as_schema(tuple(value))
    raise ContractDefinitionError(
        "Arguments schema must be a TupleSchema, ANY, or a sequence of schemas, "
        f"got {type(value).__name__}"
    )


# =============================================================================
# Contract
# =============================================================================


@dataclass(frozen=True)
class FunctionContract:
    """
    The input/output contract of a function, before it has an implementation.

    Attributes:
        args_schema: Schema of the positional arguments, as a tuple
        return_schema: Schema of the return value
        mode: Boundaries to enforce. None means the configured default,
            resolved when implement() is called.
    """

    args_schema: Schema = EMPTY_TUPLE
    return_schema: Schema = ANY
    mode: Optional[ValidationMode] = None

    def args(self, *schemas: Any) -> "FunctionContract":
        """Return a new contract whose arguments match `schemas`, in order."""
        return replace(self, args_schema=TupleSchema(tuple(as_schema(s) for s in schemas)))

    def returns(self, schema: Any) -> "FunctionContract":
        """Return a new contract whose return value must match `schema`."""
        return replace(self, return_schema=as_schema(schema))

    def set_validation_mode(self, mode: Union[ValidationMode, str]) -> "FunctionContract":
        """Return a new contract enforcing `mode`."""
        return replace(self, mode=coerce_mode(mode))

    def resolved_mode(self) -> ValidationMode:
        """The mode this contract enforces right now."""
        if self.mode is not None:
            return self.mode

        from contractfn.config import get_config

        return get_config().default_mode

    def implement(self, implementation: Callable[..., Any]) -> "CheckedFunction":
        """
        Attach an implementation and produce the checked function.

        The contract's fields (including the resolved mode) are captured now.
        Works as a decorator:

            >>> @Fn().args(int).returns(int).implement
            ... def double(x):
            ...     return x * 2
        """
        if not callable(implementation):
            raise ContractDefinitionError(
                f"Implementation must be callable, got {type(implementation).__name__}"
            )

        snapshot = replace(self, mode=self.resolved_mode())
        checked = CheckedFunction(snapshot, implementation)
        logger.debug(f"{CONTRACT} Implemented {checked.name} (mode={snapshot.mode.value})")
        return checked


# =============================================================================
# Checked function
# =============================================================================


def _signature_of(func: Callable[..., Any]) -> Optional[inspect.Signature]:
    try:
        return inspect.signature(func)
    except (TypeError, ValueError):
        # Some builtins expose no signature.
        return None


class CheckedFunction:
    """
    A callable wrapping an implementation with boundary validation gates.

    Immutable once built: the contract is a snapshot taken at implement(), and
    calling the function never changes how it is gated.
    """

    def __init__(self, contract: FunctionContract, implementation: Callable[..., Any]):
        if contract.mode is None:
            raise ContractDefinitionError("CheckedFunction needs a contract with a resolved mode")

        # The wrapped __dict__ is not copied; gate state belongs to this wrapper.
        functools.update_wrapper(self, implementation, updated=())
        self._contract = contract
        self._implementation = implementation
        self._signature = _signature_of(implementation)
        self._name = getattr(implementation, "__name__", type(implementation).__name__)
        self._sealed = True

    def __setattr__(self, name: str, value: Any) -> None:
        if getattr(self, "_sealed", False):
            raise AttributeError(f"{type(self).__name__} is immutable")
        super().__setattr__(name, value)

    # -------------------------------------------------------------------------
    # Introspection
    # -------------------------------------------------------------------------

    @property
    def name(self) -> str:
        return self._name

    @property
    def contract(self) -> FunctionContract:
        return self._contract

    @property
    def implementation(self) -> Callable[..., Any]:
        return self._implementation

    @property
    def args_schema(self) -> Schema:
        return self._contract.args_schema

    @property
    def return_schema(self) -> Schema:
        return self._contract.return_schema

    @property
    def mode(self) -> ValidationMode:
        return self._contract.mode

    # -------------------------------------------------------------------------
    # Invocation
    # -------------------------------------------------------------------------

    def __get__(self, instance: Any, owner: Optional[type] = None) -> Any:
        # Used as a method: the instance becomes the first checked argument.
        if instance is None:
            return self
        return types.MethodType(self, instance)

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        mode = self._contract.mode

        if mode.validates_args:
            args, kwargs = self._bind(args, kwargs)
            args = self._gate(Boundary.ARGS, self._contract.args_schema, args)

        result = self._implementation(*args, **kwargs)

        if mode.validates_return:
            result = self._gate(Boundary.RETURN, self._contract.return_schema, result)

        return result

    def _bind(
        self, args: Tuple[Any, ...], kwargs: Dict[str, Any]
    ) -> Tuple[Tuple[Any, ...], Dict[str, Any]]:
        """
        Move keyword arguments that name positional parameters into `args`.

        Keyword-only parameters stay in kwargs and are not validated.
        """
        if not kwargs or self._signature is None:
            return args, kwargs

        bound = self._signature.bind(*args, **kwargs)
        return bound.args, bound.kwargs

    def _gate(self, boundary: Boundary, schema: Schema, value: Any) -> Any:
        try:
            return validate(schema, value)
        except ValidationError as e:
            logger.debug(f"{VALIDATION} {boundary.value} check failed for {self._name}: {e}")
            raise e.with_context(boundary.value, self._name) from e

    def __repr__(self) -> str:
        return (
            f"<CheckedFunction {self._name} "
            f"mode={self._contract.mode.value} "
            f"args={self._contract.args_schema!r} "
            f"returns={self._contract.return_schema!r}>"
        )


# =============================================================================
# Factory
# =============================================================================


def Fn(
    args_schema: Optional[ArgsSpec] = _UNSET,
    return_schema: Any = _UNSET,
    implementation: Optional[Callable[..., Any]] = None,
    mode: Optional[Union[ValidationMode, str]] = None,
) -> Union[FunctionContract, CheckedFunction]:
    """
    Build a checked function, or a contract to finish later.

    Called with an implementation, returns the CheckedFunction directly.
    Called without one, returns the FunctionContract built from whatever was
    given, ready for further builder calls or implement().

    Args:
        args_schema: TupleSchema (or sequence of schemas) for the arguments.
            None (or ANY) leaves arguments unchecked. When omitted, the
            builder default applies: the empty tuple.
        return_schema: Schema of the return value. Defaults to ANY. None
            means the function must return None.
        implementation: The function to wrap
        mode: Boundaries to enforce. Defaults to the configured default mode.

    Examples:
        >>> f = Fn([Even], Odd, lambda x: x + 1, ValidationMode.BOTH)
        >>> contract = Fn().returns(str)
    """
    contract = FunctionContract()

    if args_schema is None:
        contract = replace(contract, args_schema=ANY)
    elif args_schema is not _UNSET:
        contract = replace(contract, args_schema=_as_args_schema(args_schema))
    if return_schema is not _UNSET:
        contract = contract.returns(return_schema)
    if mode is not None:
        contract = contract.set_validation_mode(mode)

    if implementation is None:
        return contract
    return contract.implement(implementation)


__all__ = ["FunctionContract", "CheckedFunction", "Fn"]
