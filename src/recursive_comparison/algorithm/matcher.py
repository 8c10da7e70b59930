"""Multiset element matching via optimal bipartite assignment.

Unordered collections are compared as multisets: every expected element must
consume one distinct equal actual element.  A greedy "first equal element"
scan can strand elements when the equality in use is not transitive (custom
comparators often are not), so the matching is computed as a maximum
bipartite matching instead.

The equality matrix is turned into a cost matrix (0 for equal pairs,
``np.inf`` for unequal ones) and solved with scipy's
``linear_sum_assignment``.  Infinite cells never reach the solver (it would
raise ``ValueError``): they are replaced by a guard value that dominates all
finite costs, and pairs that landed on them are dropped afterwards.

Guard value formula: ``finite_max * 2.0 + 1.0``
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

import numpy as np
from scipy.optimize import linear_sum_assignment  # type: ignore[import-untyped]

__all__ = ["ElementMatch", "hungarian_match", "match_elements"]


@dataclass(frozen=True, slots=True)
class ElementMatch:
    """Outcome of matching actual elements against expected elements.

    Attributes:
        pairs: ``(actual_index, expected_index)`` of every matched pair,
            ordered by actual index.
        unmatched_actual: Indices of actual elements left over (extra).
        unmatched_expected: Indices of expected elements left over (missing).
    """

    pairs: tuple[tuple[int, int], ...]
    unmatched_actual: tuple[int, ...]
    unmatched_expected: tuple[int, ...]


def hungarian_match(
    cost_matrix: np.ndarray,
) -> tuple[np.ndarray, np.ndarray]:
    """Compute optimal bipartite assignment with np.inf guard.

    Args:
        cost_matrix: 2-D cost matrix of shape ``(m, n)``.  May contain
            ``np.inf`` to mark forbidden assignments.

    Returns:
        Tuple ``(row_ind, col_ind)`` of 1-D integer arrays giving the
        optimal assignment, with any pair whose *original* cost was
        infinite removed.  Empty arrays are returned when no valid
        assignment exists.
    """
    if cost_matrix.size == 0:
        return np.array([], dtype=int), np.array([], dtype=int)

    cost = np.asarray(cost_matrix, dtype=float)
    inf_mask = np.isinf(cost)

    if inf_mask.all():
        return np.array([], dtype=int), np.array([], dtype=int)

    if inf_mask.any():
        finite_max = float(cost[~inf_mask].max())
        cost = np.where(inf_mask, finite_max * 2.0 + 1.0, cost)

    row_ind, col_ind = linear_sum_assignment(cost)

    if inf_mask.any():
        keep = ~inf_mask[row_ind, col_ind]
        row_ind = row_ind[keep]
        col_ind = col_ind[keep]

    return row_ind, col_ind


def match_elements(
    actual: Sequence[Any],
    expected: Sequence[Any],
    equal: Callable[[Any, Any], bool],
) -> ElementMatch:
    """Match ``actual`` against ``expected`` as multisets.

    Multiplicity-aware: ``[1, 2, 2]`` against ``[1, 2]`` leaves exactly one
    ``2`` unmatched on the actual side.  Each pair is tested with
    ``equal(actual_element, expected_element)`` exactly once; exceptions
    raised by ``equal`` propagate.

    Args:
        actual:   Actual elements, in iteration order.
        expected: Expected elements, in iteration order.
        equal:    Element equality in force for this collection.

    Returns:
        An ``ElementMatch`` with the largest possible number of pairs.
    """
    m = len(actual)
    n = len(expected)

    cost_matrix = np.full((m, n), np.inf, dtype=float)
    for i, actual_element in enumerate(actual):
        for j, expected_element in enumerate(expected):
            if equal(actual_element, expected_element):
                cost_matrix[i, j] = 0.0

    row_ind, col_ind = hungarian_match(cost_matrix)
    pairs = tuple(
        sorted(zip(row_ind.tolist(), col_ind.tolist(), strict=True))
    )

    matched_actual = {i for i, _ in pairs}
    matched_expected = {j for _, j in pairs}
    return ElementMatch(
        pairs=pairs,
        unmatched_actual=tuple(i for i in range(m) if i not in matched_actual),
        unmatched_expected=tuple(j for j in range(n) if j not in matched_expected),
    )
