"""GraphWalker: the lockstep traversal behind a recursive comparison.

Walks an actual and an expected object graph side by side, starting at the
root Path, and appends one ``Difference`` per mismatch.  A walker is created
for a single run and owns all of that run's mutable state: the visited-pair
tracker and the growing list of differences.

Per node pair, in order:

1. Ignored by the rule set (path, field name, regex, type, None-field flags,
   outside ``compared_paths``): equal, no descent.
2. Same object on both sides: equal.  Exactly one side ``None``:
   VALUE_MISMATCH.
3. Composite node pair already on the active path: a cycle, equal.
4. A per-path or per-type override applies: it decides equality as a leaf.
5. Strict mode: the two types must be identical or registered compatible,
   otherwise TYPE_MISMATCH.  Both modes: the two node kinds must agree,
   otherwise TYPE_MISMATCH.
6. Dispatch on the NodeKind through the handler table.

Nothing short-circuits: every difference below a node is collected.
Exceptions raised by user comparators or by ``__eq__`` propagate unchanged.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from functools import partial
from typing import TYPE_CHECKING, Any

from recursive_comparison.algorithm.config import ElementMatching
from recursive_comparison.algorithm.matcher import match_elements
from recursive_comparison.algorithm.tracker import VisitedPairTracker
from recursive_comparison.protocols import ComparatorLike, ComparisonStrategy
from recursive_comparison.result import MISSING, Difference, DifferenceReason
from recursive_comparison.tree.introspection import field_names, overrides_eq
from recursive_comparison.tree.nodes import NodeKind, classify
from recursive_comparison.tree.path import Path

if TYPE_CHECKING:
    from recursive_comparison.algorithm.config import RuleSet
    from recursive_comparison.cache import FieldCache

__all__ = ["GraphWalker"]

logger = logging.getLogger(__name__)

_Handler = Callable[[Path, Any, Any], None]


def _override_equal(override: ComparatorLike, actual: Any, expected: Any) -> bool:
    if isinstance(override, ComparisonStrategy):
        return override.equal(actual, expected)
    return override(actual, expected) == 0


def _type_name(value: Any) -> str:
    return type(value).__qualname__


class GraphWalker:
    """Single-use traversal of one (actual, expected) pair under a RuleSet.

    Args:
        rules:  A validated rule set.
        fields: Field-name cache of the owning comparator.

    Example::

        walker = GraphWalker(RuleSet(), FieldCache())
        differences = walker.walk({"a": 1}, {"a": 2})
        str(differences[0].path)   # "a"
    """

    def __init__(self, rules: RuleSet, fields: FieldCache) -> None:
        self._rules = rules
        self._fields = fields
        self._tracker = VisitedPairTracker()
        self._differences: list[Difference] = []
        self._handlers: dict[NodeKind, _Handler] = {
            NodeKind.SCALAR: self._compare_scalars,
            NodeKind.SEQUENCE: self._compare_sequences,
            NodeKind.UNORDERED: self._compare_unordered,
            NodeKind.MAP: self._compare_maps,
            NodeKind.STRUCTURED: self._compare_structured,
        }

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def walk(self, actual: Any, expected: Any) -> tuple[Difference, ...]:
        """Compare ``actual`` with ``expected`` from the root path.

        Returns:
            Every difference found, in depth-first traversal order.
        """
        self._visit(Path.root(), actual, expected)
        return tuple(self._differences)

    # ------------------------------------------------------------------
    # Node dispatch
    # ------------------------------------------------------------------

    def _visit(self, path: Path, actual: Any, expected: Any) -> None:
        if self._rules.is_ignored(path, actual, expected):
            return
        if actual is expected:
            return
        if actual is None or expected is None:
            self._report(path, actual, expected, DifferenceReason.VALUE_MISMATCH)
            return

        actual_kind = classify(actual)
        expected_kind = classify(expected)
        if not (actual_kind.is_composite or expected_kind.is_composite):
            self._compare_node(path, actual, expected, actual_kind, expected_kind)
            return

        with self._tracker.visiting(actual, expected) as first_visit:
            if not first_visit:
                logger.debug("Cycle closed at path %r", str(path))
                return
            self._compare_node(path, actual, expected, actual_kind, expected_kind)

    def _compare_node(
        self,
        path: Path,
        actual: Any,
        expected: Any,
        actual_kind: NodeKind,
        expected_kind: NodeKind,
    ) -> None:
        override = self._rules.comparator_for(path, actual)
        if override is not None:
            if not _override_equal(override, actual, expected):
                self._report(path, actual, expected, DifferenceReason.VALUE_MISMATCH)
            return

        if self._rules.strict_type_checking and not self._rules.types_compatible(
            type(actual), type(expected)
        ):
            self._report(
                path,
                actual,
                expected,
                DifferenceReason.TYPE_MISMATCH,
                f"actual type {_type_name(actual)} != expected type {_type_name(expected)}",
            )
            return

        actual_kind = self._effective_kind(path, actual_kind)
        expected_kind = self._effective_kind(path, expected_kind)
        if actual_kind is NodeKind.STRUCTURED and expected_kind is NodeKind.STRUCTURED:
            # A user-defined __eq__ on actual's class makes the pair a leaf.
            if self._rules.overridden_equals and overrides_eq(type(actual)):
                actual_kind = expected_kind = NodeKind.SCALAR

        if actual_kind is not expected_kind:
            self._report(
                path,
                actual,
                expected,
                DifferenceReason.TYPE_MISMATCH,
                f"actual kind {actual_kind} != expected kind {expected_kind}",
            )
            return

        self._handlers[actual_kind](path, actual, expected)

    def _effective_kind(self, path: Path, kind: NodeKind) -> NodeKind:
        if kind is NodeKind.SEQUENCE and self._rules.is_unordered(path):
            return NodeKind.UNORDERED
        return kind

    # ------------------------------------------------------------------
    # Handlers, one per NodeKind
    # ------------------------------------------------------------------

    def _compare_scalars(self, path: Path, actual: Any, expected: Any) -> None:
        if not self._rules.strategy.equal(actual, expected):
            self._report(path, actual, expected, DifferenceReason.VALUE_MISMATCH)

    def _compare_sequences(self, path: Path, actual: Any, expected: Any) -> None:
        actual_items = list(actual)
        expected_items = list(expected)
        m, n = len(actual_items), len(expected_items)
        if m != n:
            self._report(
                path,
                actual,
                expected,
                DifferenceReason.SIZE_MISMATCH,
                f"actual size {m} != expected size {n}",
            )

        # The overlapping prefix is compared even when sizes differ
        common = min(m, n)
        for i, (a_item, e_item) in enumerate(
            zip(actual_items[:common], expected_items[:common], strict=True)
        ):
            self._visit(path.index(i), a_item, e_item)

    def _compare_unordered(self, path: Path, actual: Any, expected: Any) -> None:
        actual_items = list(actual)
        expected_items = list(expected)

        equal: Callable[[Any, Any], bool]
        if self._rules.element_matching is ElementMatching.STRATEGY:
            equal = self._rules.strategy.equal
        else:
            equal = partial(self._probe, path.any_index())

        match = match_elements(actual_items, expected_items, equal)

        for j in match.unmatched_expected:
            self._report_unless_ignored(
                path.index(j),
                MISSING,
                expected_items[j],
                DifferenceReason.MISSING_ELEMENT,
            )
        for i in match.unmatched_actual:
            self._report_unless_ignored(
                path.index(i),
                actual_items[i],
                MISSING,
                DifferenceReason.EXTRA_ELEMENT,
            )

    def _compare_maps(
        self, path: Path, actual: Mapping[Any, Any], expected: Mapping[Any, Any]
    ) -> None:
        skip_none = self._rules.null_equals_missing

        for key, e_value in expected.items():
            if key not in actual and not (skip_none and e_value is None):
                self._report_unless_ignored(
                    path.key(key), MISSING, e_value, DifferenceReason.MISSING_KEY
                )
        for key, a_value in actual.items():
            if key not in expected and not (skip_none and a_value is None):
                self._report_unless_ignored(
                    path.key(key), a_value, MISSING, DifferenceReason.EXTRA_KEY
                )
        for key, e_value in expected.items():
            if key in actual:
                self._visit(path.key(key), actual[key], e_value)

    def _compare_structured(self, path: Path, actual: Any, expected: Any) -> None:
        actual_fields = field_names(actual, self._fields)
        expected_fields = field_names(expected, self._fields)
        actual_names = set(actual_fields)
        expected_names = set(expected_fields)

        for name in actual_fields:
            # An unset __slots__ attribute reads as MISSING
            a_value = getattr(actual, name, MISSING)
            e_value = (
                getattr(expected, name, MISSING) if name in expected_names else MISSING
            )
            if a_value is MISSING and e_value is MISSING:
                continue
            if e_value is MISSING:
                self._report_unless_ignored(
                    path.field(name), a_value, MISSING, DifferenceReason.EXTRA_FIELD
                )
            elif a_value is MISSING:
                self._report_unless_ignored(
                    path.field(name), MISSING, e_value, DifferenceReason.MISSING_FIELD
                )
            else:
                self._visit(path.field(name), a_value, e_value)

        for name in expected_fields:
            if name in actual_names:
                continue
            e_value = getattr(expected, name, MISSING)
            if e_value is not MISSING:
                self._report_unless_ignored(
                    path.field(name), MISSING, e_value, DifferenceReason.MISSING_FIELD
                )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _probe(self, path: Path, actual: Any, expected: Any) -> bool:
        """Run a nested comparison whose differences are discarded.

        Returns:
            True if the nested comparison found no difference.
        """
        outer = self._differences
        self._differences = []
        try:
            self._visit(path, actual, expected)
            return not self._differences
        finally:
            self._differences = outer

    def _report(
        self,
        path: Path,
        actual: Any,
        expected: Any,
        reason: DifferenceReason,
        description: str = "",
    ) -> None:
        self._differences.append(
            Difference(
                path=path,
                actual=actual,
                expected=expected,
                reason=reason,
                description=description,
            )
        )

    def _report_unless_ignored(
        self, path: Path, actual: Any, expected: Any, reason: DifferenceReason
    ) -> None:
        if not self._rules.is_ignored(path, actual, expected):
            self._report(path, actual, expected, reason)
