# tests/test_generic.py
"""
Tests for GenericFn - contract families indexed by variables.

These tests verify:
1. map and reduce built as generic contracts
2. Variables as a record or as keywords
3. Gates of the instantiated contract still apply
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import pytest

from contractfn import (
    Fn,
    FunctionContract,
    GenericFn,
    ValidationError,
    ValidationMode,
    array_of,
    check,
    function_of,
    primitive,
)
from contractfn.core.exceptions import ContractDefinitionError

from tests.conftest import EVEN, INT

pytestmark = pytest.mark.tier1


# =============================================================================
# Generic operations
# =============================================================================


def _map(v):
    X, Y, L = v["X"], v["Y"], v["L"]
    return Fn(
        [array_of(X, L), function_of([X], Y)],
        array_of(Y, L),
        lambda xs, f: [f(x) for x in xs],
        ValidationMode.BOTH,
    )


def _reduce(v):
    X, Acc = v["X"], v["Acc"]
    return Fn(
        [array_of(X), function_of([Acc, X], Acc), Acc],
        Acc,
        _fold,
        ValidationMode.BOTH,
    )


def _fold(xs, f, init):
    acc = init
    for x in xs:
        acc = f(acc, x)
    return acc


Map = GenericFn(_map)
Reduce = GenericFn(_reduce)


# =============================================================================
# Tests: map
# =============================================================================


class TestGenericMap:
    """map({X, Y, L})(xs, f)."""

    @pytest.fixture
    def ys(self):
        xs = [1, 2, 3]
        return Map({"X": INT, "Y": INT, "L": len(xs)})(xs, lambda x: x + 1)

    def test_returns_list_of_y(self, ys):
        assert check(array_of(INT), ys)

    def test_returns_expected_elements(self, ys):
        assert ys == [2, 3, 4]

    def test_returns_same_length(self, ys):
        assert check(array_of(INT, 3), ys)

    def test_wrong_length_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            Map({"X": INT, "Y": INT, "L": 2})([1, 2, 3], lambda x: x + 1)
        assert exc_info.value.boundary == "args"

    def test_wrong_output_type_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            Map({"X": INT, "Y": INT, "L": 2})([1, 2], lambda x: str(x))
        assert exc_info.value.boundary == "return"

    def test_other_instantiation(self):
        to_str = Map(X=INT, Y=primitive(str), L=2)
        assert to_str([1, 2], str) == ["1", "2"]

    def test_refined_variable(self):
        evens = Map(X=INT, Y=EVEN, L=2)
        assert evens([1, 3], lambda x: x + 1) == [2, 4]
        with pytest.raises(ValidationError, match="should be even"):
            evens([1, 2], lambda x: x + 1)


# =============================================================================
# Tests: reduce
# =============================================================================


class TestGenericReduce:
    """reduce({X, Acc})(xs, f, init)."""

    def test_concatenates(self):
        concat = Reduce({"X": INT, "Acc": primitive(str)})
        assert concat([1, 2, 3], lambda acc, x: acc + str(x), "") == "123"

    def test_sum(self):
        total = Reduce(X=INT, Acc=INT)
        assert total([1, 2, 3], lambda acc, x: acc + x, 0) == 6

    def test_bad_initial_value_rejected(self):
        concat = Reduce(X=INT, Acc=primitive(str))
        with pytest.raises(ValidationError):
            concat([1, 2, 3], lambda acc, x: acc + str(x), 0)


# =============================================================================
# Tests: GenericFn itself
# =============================================================================


class TestGenericFn:
    """GenericFn(factory)(vars) == factory(vars)."""

    def test_passes_record_through(self):
        seen = []

        def factory(v):
            seen.append(v)
            return v

        record = {"X": INT}
        assert GenericFn(factory)(record) is record
        assert seen == [record]

    def test_dataclass_record(self):
        @dataclass(frozen=True)
        class Vars:
            X: Any
            L: int

        pair = GenericFn(lambda v: Fn().args(array_of(v.X, v.L)).implement(sum))
        assert pair(Vars(INT, 2))([1, 2]) == 3

    def test_keyword_sugar(self):
        g = GenericFn(lambda v: v)
        assert g(X=INT, L=3) == {"X": INT, "L": 3}

    def test_record_and_keywords_rejected(self):
        g = GenericFn(lambda v: v)
        with pytest.raises(ContractDefinitionError):
            g({"X": INT}, L=3)

    def test_may_yield_contract(self):
        returns_of = GenericFn(lambda v: Fn().returns(v["R"]))
        contract = returns_of({"R": INT})
        assert isinstance(contract, FunctionContract)
        assert contract.implement(lambda: 1)() == 1

    def test_non_callable_rejected(self):
        with pytest.raises(ContractDefinitionError):
            GenericFn(42)

    def test_keeps_factory_metadata(self):
        assert Map.__name__ == "_map"
        assert Map.factory is _map
