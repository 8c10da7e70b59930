"""Shared behaviour of the built-in comparison strategies.

Subclasses only define equality, ordering and the three string predicates;
membership, removal and duplicate detection are derived from ``equal`` so
they always agree with it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, MutableSequence
from typing import Any

__all__ = ["AbstractComparisonStrategy"]


class AbstractComparisonStrategy(ABC):
    """Base class of ``StandardStrategy`` and ``ComparatorStrategy``.

    Satisfies the ``ComparisonStrategy`` protocol once ``equal``, the
    ordering methods and the string predicates are implemented.
    """

    @property
    @abstractmethod
    def description(self) -> str: ...

    def is_standard(self) -> bool:
        return False

    @abstractmethod
    def equal(self, actual: Any, other: Any) -> bool: ...

    @abstractmethod
    def is_greater_than(self, actual: Any, other: Any) -> bool: ...

    @abstractmethod
    def is_less_than(self, actual: Any, other: Any) -> bool: ...

    @abstractmethod
    def string_starts_with(self, string: str, prefix: str) -> bool: ...

    @abstractmethod
    def string_ends_with(self, string: str, suffix: str) -> bool: ...

    @abstractmethod
    def string_contains(self, string: str, sequence: str) -> bool: ...

    # ------------------------------------------------------------------
    # Derived ordering
    # ------------------------------------------------------------------

    def is_greater_than_or_equal_to(self, actual: Any, other: Any) -> bool:
        return self.equal(actual, other) or self.is_greater_than(actual, other)

    def is_less_than_or_equal_to(self, actual: Any, other: Any) -> bool:
        return self.equal(actual, other) or self.is_less_than(actual, other)

    # ------------------------------------------------------------------
    # Iterable helpers derived from equal()
    # ------------------------------------------------------------------

    def contains(self, iterable: Iterable[Any] | None, value: Any) -> bool:
        """Return True if any element of ``iterable`` is equal to ``value``.

        A ``None`` iterable contains nothing.
        """
        if iterable is None:
            return False
        return any(self.equal(element, value) for element in iterable)

    def remove_first_equal(
        self, sequence: MutableSequence[Any] | None, value: Any
    ) -> bool:
        """Remove, in place, the first element equal to ``value``.

        Returns:
            True if an element was removed.
        """
        if sequence is None:
            return False
        for position, element in enumerate(sequence):
            if self.equal(element, value):
                del sequence[position]
                return True
        return False

    def remove_all_equal(
        self, sequence: MutableSequence[Any] | None, value: Any
    ) -> int:
        """Remove, in place, every element equal to ``value``.

        Returns:
            The number of removed elements.
        """
        if sequence is None:
            return 0
        kept = [element for element in sequence if not self.equal(element, value)]
        removed = len(sequence) - len(kept)
        if removed:
            sequence.clear()
            sequence.extend(kept)
        return removed

    def find_duplicates(self, iterable: Iterable[Any] | None) -> tuple[Any, ...]:
        """Return the elements appearing more than once, each reported once.

        Works with unhashable elements; duplicates are returned in the order
        of their second occurrence.
        """
        if iterable is None:
            return ()
        seen: list[Any] = []
        duplicates: list[Any] = []
        for element in iterable:
            if not self.contains(seen, element):
                seen.append(element)
            elif not self.contains(duplicates, element):
                duplicates.append(element)
        return tuple(duplicates)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.description!r})"
