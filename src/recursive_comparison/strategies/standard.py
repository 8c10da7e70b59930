"""StandardStrategy: deep value equality with native ordering.

Equality rules, in order:

1. ``None`` is only equal to ``None``.
2. The same object is always equal to itself.
3. Two NaN floats are equal (boxed-value semantics, unlike ``==``).
4. Two numpy arrays are equal when their shapes match and their elements
   are equal: arrays of primitive dtypes of the same kind are compared with
   ``numpy.array_equal`` (NaN equal to NaN for float/complex kinds), object
   arrays element-wise and deeply.  Arrays of different dtype kinds, or an
   object array against a primitive one, are never equal.
5. Two lists, or two tuples, are compared element-wise and deeply, so arrays
   nested inside them are handled by rule 4.
6. Anything else delegates to the value's own ``==``.

Ordering needs a native ordering between the two values: when neither
``actual.__gt__(other)`` nor the reflected ``other.__lt__(actual)`` is
implemented (``dict`` or ``complex`` values, for instance) the call raises
``InvalidOperation``.  A ``TypeError`` raised by the operator itself
propagates unchanged.
"""

from __future__ import annotations

import math
from typing import Any

import numpy as np

from recursive_comparison.errors import InvalidOperation
from recursive_comparison.strategies.base import AbstractComparisonStrategy

__all__ = ["STANDARD", "StandardStrategy"]


def _is_nan(value: Any) -> bool:
    return isinstance(value, (float, np.floating)) and math.isnan(value)


def _order(actual: Any, other: Any, op: str, reflected: str) -> bool:
    result = getattr(type(actual), op)(actual, other)
    if result is NotImplemented:
        result = getattr(type(other), reflected)(other, actual)
    if result is NotImplemented:
        msg = (
            f"argument {actual!r} should be orderable against {other!r} but is not"
        )
        raise InvalidOperation(msg)
    return bool(result)


class StandardStrategy(AbstractComparisonStrategy):
    """Leaf strategy based on deep ``==`` equality.

    Stateless and immutable: the module-level ``STANDARD`` instance is safe to
    share across threads and comparisons.

    Example::

        from recursive_comparison.strategies import STANDARD

        STANDARD.equal([np.array([1, 2])], [np.array([1, 2])])   # True
        STANDARD.equal(float("nan"), float("nan"))               # True
        STANDARD.is_greater_than(2, 1)                           # True
        STANDARD.is_greater_than({}, {})                         # InvalidOperation
    """

    @property
    def description(self) -> str:
        return "standard equality"

    def is_standard(self) -> bool:
        return True

    # ------------------------------------------------------------------
    # Equality
    # ------------------------------------------------------------------

    def equal(self, actual: Any, other: Any) -> bool:
        if actual is None or other is None:
            return actual is other
        if actual is other:
            return True
        if _is_nan(actual) and _is_nan(other):
            return True

        actual_is_array = isinstance(actual, np.ndarray)
        other_is_array = isinstance(other, np.ndarray)
        if actual_is_array and other_is_array:
            return self._arrays_equal(actual, other)
        if actual_is_array or other_is_array:
            return False

        if (isinstance(actual, list) and isinstance(other, list)) or (
            isinstance(actual, tuple)
            and isinstance(other, tuple)
            and type(actual) is type(other)
        ):
            return len(actual) == len(other) and all(
                self.equal(a, b) for a, b in zip(actual, other, strict=True)
            )

        return bool(actual == other)

    def _arrays_equal(self, actual: np.ndarray, other: np.ndarray) -> bool:
        if actual.shape != other.shape:
            return False

        actual_kind = actual.dtype.kind
        other_kind = other.dtype.kind
        if actual_kind == "O" and other_kind == "O":
            return all(
                self.equal(a, b) for a, b in zip(actual.flat, other.flat, strict=True)
            )
        if actual_kind != other_kind:
            return False
        return bool(np.array_equal(actual, other, equal_nan=actual_kind in "fc"))

    # ------------------------------------------------------------------
    # Ordering
    # ------------------------------------------------------------------

    def is_greater_than(self, actual: Any, other: Any) -> bool:
        return _order(actual, other, "__gt__", "__lt__")

    def is_less_than(self, actual: Any, other: Any) -> bool:
        return _order(actual, other, "__lt__", "__gt__")

    # ------------------------------------------------------------------
    # Strings (case-sensitive)
    # ------------------------------------------------------------------

    def string_starts_with(self, string: str, prefix: str) -> bool:
        return string.startswith(prefix)

    def string_ends_with(self, string: str, suffix: str) -> bool:
        return string.endswith(suffix)

    def string_contains(self, string: str, sequence: str) -> bool:
        return sequence in string

    def __eq__(self, other: object) -> bool:
        return isinstance(other, StandardStrategy)

    def __hash__(self) -> int:
        return hash(StandardStrategy)


# Shared immutable instance; never mutated, so sharing it is safe.
STANDARD = StandardStrategy()
