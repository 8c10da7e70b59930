"""Strategies subpackage: the built-in leaf-level equality policies.

- ``StandardStrategy`` (shared as ``STANDARD``): deep ``==`` equality with
  element-wise array comparison and native ordering.
- ``ComparatorStrategy``: equality and ordering from a caller-supplied
  three-way comparator.

Both satisfy the ``ComparisonStrategy`` Protocol structurally; custom
strategies do not need to inherit from ``AbstractComparisonStrategy``.
"""

from recursive_comparison.strategies.base import AbstractComparisonStrategy
from recursive_comparison.strategies.comparator import ComparatorStrategy
from recursive_comparison.strategies.standard import STANDARD, StandardStrategy

__all__ = [
    "STANDARD",
    "AbstractComparisonStrategy",
    "ComparatorStrategy",
    "StandardStrategy",
]
