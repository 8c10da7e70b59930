"""Tests for ComparatorStrategy: equality, ordering and string predicates from a comparator."""

from __future__ import annotations

from typing import Any

import pytest

from recursive_comparison.protocols import ComparisonStrategy
from recursive_comparison.strategies import ComparatorStrategy

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _by_length(a: Any, b: Any) -> int:
    return len(a) - len(b)


CASE_INSENSITIVE = ComparatorStrategy.case_insensitive()


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------


class TestConstruction:
    def test_non_callable_comparator_rejected(self) -> None:
        with pytest.raises(TypeError, match="callable"):
            ComparatorStrategy("not a function")  # type: ignore[arg-type]

    def test_description_defaults_to_function_name(self) -> None:
        assert ComparatorStrategy(_by_length).description == "_by_length"

    def test_explicit_description(self) -> None:
        strategy = ComparatorStrategy(_by_length, description="length")
        assert strategy.description == "length"

    def test_comparator_property(self) -> None:
        assert ComparatorStrategy(_by_length).comparator is _by_length

    def test_case_insensitive_description(self) -> None:
        assert CASE_INSENSITIVE.description == "case-insensitive comparison"

    def test_satisfies_protocol(self) -> None:
        assert isinstance(CASE_INSENSITIVE, ComparisonStrategy)

    def test_is_not_standard(self) -> None:
        assert not CASE_INSENSITIVE.is_standard()


# ---------------------------------------------------------------------------
# Equality and ordering
# ---------------------------------------------------------------------------


class TestEqual:
    def test_zero_means_equal(self) -> None:
        strategy = ComparatorStrategy(_by_length)
        assert strategy.equal("abc", "xyz")
        assert not strategy.equal("abc", "xy")

    def test_none_handled_without_calling_comparator(self) -> None:
        def explode(a: Any, b: Any) -> int:
            raise AssertionError("comparator must not be called")

        strategy = ComparatorStrategy(explode)
        assert strategy.equal(None, None)
        assert not strategy.equal(None, "x")
        assert not strategy.equal("x", None)

    def test_case_insensitive_equality(self) -> None:
        assert CASE_INSENSITIVE.equal("Frodo", "FRODO")
        assert not CASE_INSENSITIVE.equal("Frodo", "Sam")

    def test_from_key(self) -> None:
        strategy = ComparatorStrategy.from_key(abs)
        assert strategy.equal(-3, 3)
        assert strategy.description == "abs"

    def test_comparator_errors_propagate(self) -> None:
        strategy = ComparatorStrategy(_by_length)
        with pytest.raises(TypeError):
            strategy.equal(1, 2)


class TestOrdering:
    def test_sign_of_comparator_drives_ordering(self) -> None:
        strategy = ComparatorStrategy(_by_length)
        assert strategy.is_greater_than("abc", "a")
        assert strategy.is_less_than("a", "abc")
        assert not strategy.is_greater_than("abc", "xyz")

    def test_or_equal_variants(self) -> None:
        strategy = ComparatorStrategy(_by_length)
        assert strategy.is_greater_than_or_equal_to("abc", "xyz")
        assert strategy.is_less_than_or_equal_to("ab", "xyz")


# ---------------------------------------------------------------------------
# String predicates
# ---------------------------------------------------------------------------


class TestStrings:
    @pytest.mark.parametrize("suffix", ["do", "DO", "Do", "frodo", "FRODO"])
    def test_ends_with_ignoring_case(self, suffix: str) -> None:
        assert CASE_INSENSITIVE.string_ends_with("Frodo", suffix)

    @pytest.mark.parametrize("suffix", ["Fr", "Mr Frodo", "rod"])
    def test_does_not_end_with(self, suffix: str) -> None:
        assert not CASE_INSENSITIVE.string_ends_with("Frodo", suffix)

    def test_starts_with_ignoring_case(self) -> None:
        assert CASE_INSENSITIVE.string_starts_with("Frodo", "fRO")
        assert not CASE_INSENSITIVE.string_starts_with("Frodo", "Frodo Baggins")

    def test_contains_ignoring_case(self) -> None:
        assert CASE_INSENSITIVE.string_contains("Frodo", "ROD")
        assert not CASE_INSENSITIVE.string_contains("Frodo", "sam")

    def test_empty_needle_is_contained(self) -> None:
        assert CASE_INSENSITIVE.string_contains("Frodo", "")
        assert CASE_INSENSITIVE.string_ends_with("Frodo", "")


# ---------------------------------------------------------------------------
# Derived iterable helpers use the comparator
# ---------------------------------------------------------------------------


class TestIterableHelpers:
    def test_contains_ignoring_case(self) -> None:
        assert CASE_INSENSITIVE.contains(["Frodo", "Sam"], "SAM")

    def test_remove_all_equal_ignoring_case(self) -> None:
        names = ["Frodo", "FRODO", "Sam"]
        assert CASE_INSENSITIVE.remove_all_equal(names, "frodo") == 2
        assert names == ["Sam"]

    def test_find_duplicates_ignoring_case(self) -> None:
        assert CASE_INSENSITIVE.find_duplicates(["Frodo", "Sam", "FRODO"]) == ("FRODO",)
