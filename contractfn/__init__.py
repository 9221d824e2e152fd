"""
contractfn - runtime contracts for Python functions.

Wraps ordinary functions with schema-validated argument and return checks,
selectable by a validation mode. Schemas are validated by pydantic.

Quick Start:
    >>> from contractfn import Fn, ValidationMode, refine
    >>> Even = refine(int, lambda x: x % 2 == 0, "should be even")
    >>> Odd = refine(int, lambda x: x % 2 == 1, "should be odd")
    >>> inc = Fn().args(Even).returns(Odd).implement(lambda x: x + 1)
    >>> inc(2)
    3
    >>> inc(3)
    Traceback (most recent call last):
    ...
    contractfn.core.exceptions.ValidationError: Invalid args for <lambda>:
      - 0: should be even

Public API:
    Schemas:
        - primitive, refine, tuple_of, array_of, function_of, as_schema
        - ANY, EMPTY_TUPLE
    Validation:
        - check: bool check
        - validate: validated value or ValidationError
        - safe_validate: non-raising SafeParseResult
    Contracts:
        - Fn: direct factory / builder entry point
        - FunctionContract: immutable builder
        - CheckedFunction: the gated callable
        - GenericFn: contract families indexed by variables
        - ValidationMode: NONE, ARGS, RET, BOTH

Architecture:
    contractfn/
    ├── core/       # schemas, validation, modes, contracts
    ├── config/     # layered YAML + env configuration
    └── logging/    # logger helpers and tags
"""

__version__ = "0.1.0"

from contractfn.config import (
    ConfigError,
    ContractConfig,
    get_config,
    load_config,
    reset_config,
    set_config,
)
from contractfn.core import (
    ANY,
    EMPTY_TUPLE,
    AnySchema,
    ArraySchema,
    Boundary,
    CheckedFunction,
    ContractDefinitionError,
    ContractError,
    Fn,
    FunctionContract,
    FunctionSchema,
    GenericFn,
    Primitive,
    Refined,
    SafeParseResult,
    Schema,
    TupleSchema,
    ValidationError,
    ValidationMode,
    array_of,
    as_schema,
    check,
    function_of,
    primitive,
    refine,
    safe_validate,
    should_validate,
    tuple_of,
    validate,
)
from contractfn.logging import configure_logging, get_logger

__all__ = [
    # Version
    "__version__",
    # Schemas
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
    # Validation
    "SafeParseResult",
    "check",
    "validate",
    "safe_validate",
    # Modes
    "ValidationMode",
    "Boundary",
    "should_validate",
    # Contracts
    "Fn",
    "FunctionContract",
    "CheckedFunction",
    "GenericFn",
    # Exceptions
    "ContractError",
    "ValidationError",
    "ContractDefinitionError",
    # Config
    "ContractConfig",
    "ConfigError",
    "get_config",
    "load_config",
    "set_config",
    "reset_config",
    # Logging
    "configure_logging",
    "get_logger",
]
