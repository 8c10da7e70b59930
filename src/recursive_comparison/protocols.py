"""Structural protocols for the pluggable parts of a recursive comparison.

``ComparisonStrategy`` is the leaf-level equality policy.  Users can plug in
their own strategy without inheriting from any base class: any object with
the conformant methods passes ``isinstance`` checks.

``Comparator`` is the three-way comparison function accepted wherever a
custom comparison is registered: it returns a negative number, zero or a
positive number, and zero means "equal".

Example::

    from recursive_comparison.protocols import ComparisonStrategy
    from recursive_comparison.strategies import ComparatorStrategy

    strategy = ComparatorStrategy(lambda a, b: (a > b) - (a < b))
    assert isinstance(strategy, ComparisonStrategy)  # True, structural conformance
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, MutableSequence
from typing import Any, Protocol, TypeAlias, runtime_checkable

__all__ = ["Comparator", "ComparatorLike", "ComparisonStrategy"]

Comparator: TypeAlias = Callable[[Any, Any], int]


@runtime_checkable
class ComparisonStrategy(Protocol):
    """Structural protocol for leaf-level equality strategies.

    Implementations must:
    - define ``equal`` as an equivalence between two leaf values, with two
      ``None`` values equal and ``None`` never equal to anything else;
    - derive every other membership and string helper from that equality;
    - raise ``InvalidOperation`` from the ordering methods when a value has
      no ordering.
    """

    @property
    def description(self) -> str: ...

    def is_standard(self) -> bool: ...

    def equal(self, actual: Any, other: Any) -> bool: ...

    def contains(self, iterable: Iterable[Any] | None, value: Any) -> bool: ...

    def remove_first_equal(
        self, sequence: MutableSequence[Any] | None, value: Any
    ) -> bool: ...

    def remove_all_equal(
        self, sequence: MutableSequence[Any] | None, value: Any
    ) -> int: ...

    def find_duplicates(self, iterable: Iterable[Any] | None) -> tuple[Any, ...]: ...

    def is_greater_than(self, actual: Any, other: Any) -> bool: ...

    def is_less_than(self, actual: Any, other: Any) -> bool: ...

    def string_starts_with(self, string: str, prefix: str) -> bool: ...

    def string_ends_with(self, string: str, suffix: str) -> bool: ...

    def string_contains(self, string: str, sequence: str) -> bool: ...


ComparatorLike: TypeAlias = "Comparator | ComparisonStrategy"
