"""Difference and DifferenceReport: the output of a recursive comparison.

This module provides the structured data a message renderer needs; it does
not decide how a difference is worded.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum, StrEnum
from typing import Any

from recursive_comparison.tree.path import Path

__all__ = ["MISSING", "Difference", "DifferenceReason", "DifferenceReport"]


class _Missing(Enum):
    TOKEN = "missing"

    def __repr__(self) -> str:
        return "<missing>"


# Stands for the absent side of a missing/extra key, element or field.
MISSING = _Missing.TOKEN


class DifferenceReason(StrEnum):
    """Human-neutral code explaining why a location differs."""

    VALUE_MISMATCH = "value-mismatch"
    TYPE_MISMATCH = "type-mismatch"
    SIZE_MISMATCH = "size-mismatch"
    MISSING_KEY = "missing-key"
    EXTRA_KEY = "extra-key"
    MISSING_ELEMENT = "missing-element"
    EXTRA_ELEMENT = "extra-element"
    MISSING_FIELD = "missing-field"
    EXTRA_FIELD = "extra-field"


@dataclass(frozen=True, slots=True)
class Difference:
    """One mismatch between actual and expected.

    Attributes:
        path:        Location of the mismatch; the root path for top-level values.
        actual:      Actual value at ``path`` (``MISSING`` when absent).
        expected:    Expected value at ``path`` (``MISSING`` when absent).
        reason:      Why the location differs.
        description: Optional neutral detail, e.g. the two sizes of a
            ``SIZE_MISMATCH`` or the two types of a ``TYPE_MISMATCH``.
    """

    path: Path
    actual: Any
    expected: Any
    reason: DifferenceReason
    description: str = ""


@dataclass(frozen=True, slots=True)
class DifferenceReport:
    """Ordered, immutable collection of every Difference found by one run.

    The report is empty if, and only if, actual and expected are equal under
    the rule set used.  Differences appear in depth-first traversal order.

    Attributes:
        differences: The differences, in traversal order.
    """

    differences: tuple[Difference, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.differences

    def __len__(self) -> int:
        return len(self.differences)

    def __iter__(self) -> Iterator[Difference]:
        return iter(self.differences)

    def __getitem__(self, position: int) -> Difference:
        return self.differences[position]

    def paths(self) -> list[str]:
        """Return the rendered path of every difference, in report order."""
        return [str(d.path) for d in self.differences]

    def with_reason(self, reason: DifferenceReason) -> DifferenceReport:
        """Return the sub-report of differences carrying ``reason``."""
        return DifferenceReport(tuple(d for d in self.differences if d.reason == reason))

    def at(self, path: Path | str) -> Difference | None:
        """Return the first difference located at ``path``, or None.

        Field and key segments are interchangeable here, so ``"b"`` finds the
        difference of a map key ``b`` as well as of a field ``b``.
        """
        target = Path.of(path)
        for difference in self.differences:
            if difference.path.matches(target):
                return difference
        return None
