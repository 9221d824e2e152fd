# contractfn/core/generic.py
"""
Generic contracts - families of checked functions indexed by variables.

A generic contract is a factory from a variables record (schemas, lengths,
any parameter chosen at call time) to a checked function. GenericFn gives
every such family the same calling convention; it validates nothing itself.

Example:
    >>> Map = GenericFn(
    ...     lambda v: Fn(
    ...         [array_of(v["X"], v["L"]), function_of([v["X"]], v["Y"])],
    ...         array_of(v["Y"], v["L"]),
    ...         lambda xs, f: [f(x) for x in xs],
    ...     )
    ... )
    >>> Map({"X": int, "Y": int, "L": 3})([1, 2, 3], lambda x: x + 1)
    [2, 3, 4]
    >>> Map(X=int, Y=int, L=3)([1, 2, 3], lambda x: x + 1)
    [2, 3, 4]
"""

from __future__ import annotations

import functools
from typing import Any, Callable, Generic, Optional, TypeVar

from contractfn.logging.logger import get_logger
from contractfn.logging.tags import GENERIC

from .exceptions import ContractDefinitionError

logger = get_logger(__name__)

V = TypeVar("V")
R = TypeVar("R")


class GenericFn(Generic[V, R]):
    """
    A contract family: `GenericFn(factory)(vars) == factory(vars)`.

    Args:
        factory: Function from a variables record to a checked function
            (or to a FunctionContract still to be implemented)
    """

    def __init__(self, factory: Callable[[V], R]):
        if not callable(factory):
            raise ContractDefinitionError(
                f"Generic factory must be callable, got {type(factory).__name__}"
            )
        self._factory = factory
        functools.update_wrapper(self, factory, updated=())

    @property
    def factory(self) -> Callable[[V], R]:
        return self._factory

    def __call__(self, vars: Optional[V] = None, **kw: Any) -> R:
        """
        Instantiate the family for `vars`.

        Keyword arguments are sugar for a dict record:
        `generic(X=int)` is `generic({"X": int})`. Mixing both forms is an error.
        """
        if kw:
            if vars is not None:
                raise ContractDefinitionError(
                    "Pass variables either as a record or as keywords, not both"
                )
            vars = kw  # type: ignore[assignment]

        logger.debug(f"{GENERIC} Instantiating {getattr(self._factory, '__name__', 'generic')}")
        return self._factory(vars)

    def __repr__(self) -> str:
        return f"<GenericFn {getattr(self._factory, '__name__', repr(self._factory))}>"


__all__ = ["GenericFn"]
