"""Tests for StandardStrategy: deep equality, ordering and derived helpers.

Covers:
- None handling, identity, NaN equality
- numpy arrays (same/different shape, dtype kinds, NaN, object arrays)
- nested lists/tuples holding arrays
- ordering with and without a native ordering (InvalidOperation)
- case-sensitive string predicates
- contains / remove_first_equal / remove_all_equal / find_duplicates
- protocol conformance and the shared STANDARD instance
"""

from __future__ import annotations

import math
from typing import Any

import numpy as np
import pytest

from recursive_comparison.errors import InvalidOperation
from recursive_comparison.protocols import ComparisonStrategy
from recursive_comparison.strategies import STANDARD, StandardStrategy


def _object_array(*items: Any) -> np.ndarray:
    array = np.empty(len(items), dtype=object)
    for position, item in enumerate(items):
        array[position] = item
    return array


# ---------------------------------------------------------------------------
# Equality
# ---------------------------------------------------------------------------


class TestEqual:
    def test_none_equals_none(self) -> None:
        assert STANDARD.equal(None, None)

    def test_none_never_equals_a_value(self) -> None:
        assert not STANDARD.equal(None, 0)
        assert not STANDARD.equal("", None)

    def test_equal_scalars(self) -> None:
        assert STANDARD.equal(1, 1)
        assert STANDARD.equal("a", "a")

    def test_int_equals_float_by_value(self) -> None:
        assert STANDARD.equal(1, 1.0)

    def test_different_scalars(self) -> None:
        assert not STANDARD.equal(1, 2)

    def test_nan_equals_nan(self) -> None:
        assert STANDARD.equal(math.nan, float("nan"))

    def test_numpy_nan_equals_nan(self) -> None:
        assert STANDARD.equal(np.float64("nan"), math.nan)

    def test_string_comparison_is_case_sensitive(self) -> None:
        assert not STANDARD.equal("Frodo", "frodo")


class TestArrays:
    def test_equal_arrays(self) -> None:
        assert STANDARD.equal(np.array([1, 2, 3]), np.array([1, 2, 3]))

    def test_different_shapes(self) -> None:
        assert not STANDARD.equal(np.array([1, 2]), np.array([[1, 2]]))

    def test_different_elements(self) -> None:
        assert not STANDARD.equal(np.array([1, 2]), np.array([1, 3]))

    def test_float_arrays_with_nan(self) -> None:
        assert STANDARD.equal(np.array([1.0, np.nan]), np.array([1.0, np.nan]))

    def test_different_dtype_kinds_are_unequal(self) -> None:
        assert not STANDARD.equal(np.array([1, 2]), np.array([1.0, 2.0]))

    def test_object_arrays_compared_deeply(self) -> None:
        assert STANDARD.equal(_object_array([1, 2], "x"), _object_array([1, 2], "x"))
        assert not STANDARD.equal(_object_array([1, 2], "x"), _object_array([1, 3], "x"))

    def test_array_against_list_is_unequal(self) -> None:
        assert not STANDARD.equal(np.array([1, 2]), [1, 2])

    def test_lists_of_arrays(self) -> None:
        assert STANDARD.equal([np.array([1, 2])], [np.array([1, 2])])
        assert not STANDARD.equal([np.array([1, 2])], [np.array([2, 1])])

    def test_tuples_of_arrays(self) -> None:
        assert STANDARD.equal((np.array([1.0]),), (np.array([1.0]),))


# ---------------------------------------------------------------------------
# Ordering
# ---------------------------------------------------------------------------


class TestOrdering:
    def test_greater_than(self) -> None:
        assert STANDARD.is_greater_than(2, 1)
        assert not STANDARD.is_greater_than(1, 2)

    def test_less_than(self) -> None:
        assert STANDARD.is_less_than("a", "b")

    def test_or_equal_variants(self) -> None:
        assert STANDARD.is_greater_than_or_equal_to(2, 2)
        assert STANDARD.is_less_than_or_equal_to(1, 2)

    def test_value_without_ordering_raises(self) -> None:
        with pytest.raises(InvalidOperation, match="orderable"):
            STANDARD.is_greater_than(object(), object())

    def test_invalid_operation_is_a_type_error(self) -> None:
        with pytest.raises(TypeError):
            STANDARD.is_less_than(object(), object())

    @pytest.mark.parametrize(("actual", "other"), [({}, {}), (1j, 2j), ("a", 1)])
    def test_builtins_without_ordering_raise_invalid_operation(
        self, actual: object, other: object
    ) -> None:
        with pytest.raises(InvalidOperation, match="orderable"):
            STANDARD.is_greater_than(actual, other)
        with pytest.raises(InvalidOperation, match="orderable"):
            STANDARD.is_less_than(actual, other)

    def test_reflected_ordering_is_used(self) -> None:
        assert STANDARD.is_greater_than(2, 1.5)
        assert STANDARD.is_less_than(1.5, 2)

    def test_type_error_from_operator_propagates(self) -> None:
        class Picky:
            def __gt__(self, other: object) -> bool:
                raise TypeError("picky comparison")

        with pytest.raises(TypeError, match="picky comparison") as excinfo:
            STANDARD.is_greater_than(Picky(), 1)
        assert not isinstance(excinfo.value, InvalidOperation)


# ---------------------------------------------------------------------------
# Strings
# ---------------------------------------------------------------------------


class TestStrings:
    def test_starts_with(self) -> None:
        assert STANDARD.string_starts_with("Frodo", "Fro")
        assert not STANDARD.string_starts_with("Frodo", "fro")

    def test_ends_with(self) -> None:
        assert STANDARD.string_ends_with("Frodo", "do")
        assert not STANDARD.string_ends_with("Frodo", "DO")

    def test_contains(self) -> None:
        assert STANDARD.string_contains("Frodo", "rod")
        assert not STANDARD.string_contains("Frodo", "ROD")


# ---------------------------------------------------------------------------
# Iterable helpers
# ---------------------------------------------------------------------------


class TestIterableHelpers:
    def test_contains(self) -> None:
        assert STANDARD.contains([1, 2, 3], 2)
        assert not STANDARD.contains([1, 2, 3], 4)

    def test_contains_none_iterable(self) -> None:
        assert not STANDARD.contains(None, 1)

    def test_contains_nan(self) -> None:
        assert STANDARD.contains([1.0, math.nan], math.nan)

    def test_remove_first_equal(self) -> None:
        values = [1, 2, 1]
        assert STANDARD.remove_first_equal(values, 1)
        assert values == [2, 1]

    def test_remove_first_equal_without_match(self) -> None:
        values = [1, 2]
        assert not STANDARD.remove_first_equal(values, 3)
        assert values == [1, 2]

    def test_remove_first_equal_none_sequence(self) -> None:
        assert not STANDARD.remove_first_equal(None, 1)

    def test_remove_all_equal(self) -> None:
        values = [1, 2, 1, 3, 1]
        assert STANDARD.remove_all_equal(values, 1) == 3
        assert values == [2, 3]

    def test_remove_all_equal_none_sequence(self) -> None:
        assert STANDARD.remove_all_equal(None, 1) == 0

    def test_find_duplicates(self) -> None:
        assert STANDARD.find_duplicates([3, 1, 3, 2, 1, 3]) == (3, 1)

    def test_find_duplicates_unhashable_elements(self) -> None:
        assert STANDARD.find_duplicates([[1], [2], [1]]) == ([1],)

    def test_find_duplicates_none_iterable(self) -> None:
        assert STANDARD.find_duplicates(None) == ()


# ---------------------------------------------------------------------------
# Identity of the strategy itself
# ---------------------------------------------------------------------------


class TestStrategyObject:
    def test_satisfies_protocol(self) -> None:
        assert isinstance(STANDARD, ComparisonStrategy)

    def test_is_standard(self) -> None:
        assert STANDARD.is_standard()

    def test_instances_are_interchangeable(self) -> None:
        assert StandardStrategy() == STANDARD
        assert hash(StandardStrategy()) == hash(STANDARD)

    def test_repr_names_description(self) -> None:
        assert repr(STANDARD) == "StandardStrategy('standard equality')"
