# contractfn/core/__init__.py
"""
contractfn core - schemas, validation modes and checked functions.

Public API:
    - Schemas: Primitive, AnySchema, Refined, TupleSchema, ArraySchema,
      FunctionSchema and their constructors
    - Validation: check, validate, safe_validate
    - Modes: ValidationMode, Boundary, should_validate
    - Contracts: Fn, FunctionContract, CheckedFunction, GenericFn
    - Exceptions: ContractError, ValidationError, ContractDefinitionError
"""

from .exceptions import ContractDefinitionError, ContractError, ValidationError
from .modes import Boundary, ValidationMode, coerce_mode, should_validate
from .schema import (
    ANY,
    EMPTY_TUPLE,
    AnySchema,
    ArraySchema,
    FunctionSchema,
    Primitive,
    Refined,
    Schema,
    TupleSchema,
    array_of,
    as_schema,
    function_of,
    primitive,
    refine,
    tuple_of,
)
from .validation import SafeParseResult, check, safe_validate, validate
from .contract import CheckedFunction, Fn, FunctionContract
from .generic import GenericFn

__all__ = [
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
    "coerce_mode",
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
]
