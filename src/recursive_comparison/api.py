"""Public API functions for recursive-comparison.

This module provides the three user-facing functions: compare, is_equal and
assert_equal.  Each call creates a fresh RecursiveComparator to guarantee
zero global state mutation between calls.
"""

from __future__ import annotations

from typing import Any

from recursive_comparison.algorithm.config import RuleSet
from recursive_comparison.comparator import RecursiveComparator
from recursive_comparison.rendering import format_report
from recursive_comparison.result import DifferenceReport

__all__ = ["assert_equal", "compare", "is_equal"]


def compare(
    actual: Any,
    expected: Any,
    rules: RuleSet | None = None,
) -> DifferenceReport:
    """Compare two object graphs and return every difference.

    Args:
        actual:   The value under test.
        expected: The reference value.
        rules:    Comparison configuration. Defaults to ``RuleSet()`` when None.

    Returns:
        A ``DifferenceReport``; empty if and only if the graphs are equal.

    Raises:
        ConfigurationError: If ``rules`` contradicts itself.
    """
    comparator = RecursiveComparator(rules=rules)
    return comparator.compare(actual, expected)


def is_equal(
    actual: Any,
    expected: Any,
    rules: RuleSet | None = None,
) -> bool:
    """Return True if the two object graphs are recursively equal."""
    return compare(actual, expected, rules=rules).is_empty


def assert_equal(
    actual: Any,
    expected: Any,
    rules: RuleSet | None = None,
) -> None:
    """Raise ``AssertionError`` listing every difference, if there is any.

    Args:
        actual:   The value under test.
        expected: The reference value.
        rules:    Comparison configuration. Defaults to ``RuleSet()`` when None.

    Raises:
        AssertionError: When the report is not empty; the message is the
            ``format_report`` rendering of the report.
    """
    report = compare(actual, expected, rules=rules)
    if not report.is_empty:
        raise AssertionError(format_report(report))
