"""ComparatorStrategy: equality and ordering from one three-way comparator.

The comparator returns a negative number, zero, or a positive number; two
values are equal when it returns zero.  String predicates apply the
comparator to the relevant window of the string, so a case-insensitive
comparator yields case-insensitive ``starts_with``/``ends_with``/``contains``.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from recursive_comparison.protocols import Comparator
from recursive_comparison.strategies.base import AbstractComparisonStrategy

__all__ = ["ComparatorStrategy"]


def _sign(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


class ComparatorStrategy(AbstractComparisonStrategy):
    """Leaf strategy driven by a caller-supplied three-way comparator.

    ``None`` handling never reaches the comparator: two ``None`` values are
    equal, ``None`` and anything else are not.  Errors raised by the
    comparator propagate unchanged.

    Args:
        comparator:  Three-way comparison function ``(a, b) -> int``.
        description: Human-readable name used in reports.  Defaults to the
            comparator's ``__name__``.

    Example::

        strategy = ComparatorStrategy.case_insensitive()
        strategy.equal("Frodo", "FRODO")              # True
        strategy.string_ends_with("Frodo", "DO")      # True
        strategy.string_ends_with("Frodo", "Mr Frodo")  # False
    """

    def __init__(self, comparator: Comparator, description: str | None = None) -> None:
        if not callable(comparator):
            msg = f"comparator must be callable, got {comparator!r}"
            raise TypeError(msg)
        self._comparator = comparator
        self._description = (
            description
            if description is not None
            else getattr(comparator, "__name__", repr(comparator))
        )

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    @classmethod
    def from_key(
        cls, key: Callable[[Any], Any], description: str | None = None
    ) -> ComparatorStrategy:
        """Build a strategy comparing ``key(a)`` with ``key(b)``."""

        def compare_keys(a: Any, b: Any) -> int:
            return _sign(key(a), key(b))

        name = description if description is not None else getattr(key, "__name__", "key")
        return cls(compare_keys, description=name)

    @classmethod
    def case_insensitive(cls) -> ComparatorStrategy:
        """Build the case-insensitive string strategy (``str.casefold`` keys)."""
        return cls.from_key(str.casefold, description="case-insensitive comparison")

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def comparator(self) -> Comparator:
        return self._comparator

    @property
    def description(self) -> str:
        return self._description

    # ------------------------------------------------------------------
    # Equality and ordering
    # ------------------------------------------------------------------

    def equal(self, actual: Any, other: Any) -> bool:
        if actual is None or other is None:
            return actual is other
        return self._comparator(actual, other) == 0

    def is_greater_than(self, actual: Any, other: Any) -> bool:
        return self._comparator(actual, other) > 0

    def is_less_than(self, actual: Any, other: Any) -> bool:
        return self._comparator(actual, other) < 0

    # ------------------------------------------------------------------
    # Strings
    # ------------------------------------------------------------------

    def string_starts_with(self, string: str, prefix: str) -> bool:
        if len(prefix) > len(string):
            return False
        return self.equal(string[: len(prefix)], prefix)

    def string_ends_with(self, string: str, suffix: str) -> bool:
        if len(suffix) > len(string):
            return False
        return self.equal(string[len(string) - len(suffix) :], suffix)

    def string_contains(self, string: str, sequence: str) -> bool:
        width = len(sequence)
        return any(
            self.equal(string[start : start + width], sequence)
            for start in range(len(string) - width + 1)
        )
