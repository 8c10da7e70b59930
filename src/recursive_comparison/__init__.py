"""Recursive comparison - deep, configurable structural equality for object graphs."""

from __future__ import annotations

from recursive_comparison.algorithm.config import ElementMatching, RuleSet
from recursive_comparison.api import assert_equal, compare, is_equal
from recursive_comparison.comparator import RecursiveComparator
from recursive_comparison.errors import (
    ConfigurationError,
    InvalidOperation,
    RecursiveComparisonError,
)
from recursive_comparison.protocols import ComparisonStrategy
from recursive_comparison.result import (
    MISSING,
    Difference,
    DifferenceReason,
    DifferenceReport,
)
from recursive_comparison.strategies import (
    STANDARD,
    ComparatorStrategy,
    StandardStrategy,
)
from recursive_comparison.tree.path import Path

__version__: str = "0.1.0"
__all__: list[str] = [
    "MISSING",
    "STANDARD",
    "ComparatorStrategy",
    "ComparisonStrategy",
    "ConfigurationError",
    "Difference",
    "DifferenceReason",
    "DifferenceReport",
    "ElementMatching",
    "InvalidOperation",
    "Path",
    "RecursiveComparator",
    "RecursiveComparisonError",
    "RuleSet",
    "StandardStrategy",
    "assert_equal",
    "compare",
    "is_equal",
]
