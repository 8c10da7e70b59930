"""RuleSet and ElementMatching for recursive comparison configuration.

RuleSet is a frozen (immutable) dataclass holding everything that shapes a
comparison run: what is ignored, which custom comparators override the leaf
strategy, how strictly types are checked and how collections are matched.

Builder methods never mutate the receiver; each returns a new RuleSet via
``dataclasses.replace``, so a RuleSet can be shared freely between runs and
threads::

    rules = (
        RuleSet()
        .ignore_fields("id", "created_at")
        .with_comparator_for_type(float, approx_compare)
        .with_strict_type_checking()
    )

Precedence of overrides: a comparator registered for a path beats one
registered for a type, which beats the global ``strategy``.  Ignoring always
beats comparing.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, replace
from enum import StrEnum, auto
from typing import Any

from recursive_comparison.errors import ConfigurationError
from recursive_comparison.protocols import ComparatorLike, ComparisonStrategy
from recursive_comparison.result import MISSING
from recursive_comparison.strategies.standard import STANDARD
from recursive_comparison.tree.path import Path

__all__ = ["ElementMatching", "RuleSet"]

logger = logging.getLogger(__name__)


class ElementMatching(StrEnum):
    """How candidate elements are matched inside unordered collections.

    - ACTIVE_RULES: a nested recursive comparison under the whole rule set,
      at the element path ``parent[*]``; per-type comparators and
      ``[*]``-patterned path comparators apply.
    - STRATEGY:     the global leaf strategy's ``equal`` only.
    """

    ACTIVE_RULES = auto()
    STRATEGY = auto()


def _is_comparator_like(comparator: Any) -> bool:
    return isinstance(comparator, ComparisonStrategy) or callable(comparator)


def _path_names(path: Path) -> set[str]:
    return {str(s.value) for s in path.segments if not s.is_index}


@dataclass(frozen=True, slots=True)
class RuleSet:
    """Immutable configuration of a recursive comparison.

    Attributes:
        strategy: Leaf equality for values no override applies to.
        ignored_paths: Path patterns never compared (nor anything below them).
        ignored_fields: Field or key names never compared, at any depth.
        ignored_field_patterns: Compiled regexes; a node whose rendered path
            fully matches one is not compared.
        ignored_types: A node whose actual value (expected value when actual
            is None) is an instance of one of these is not compared.
        compared_paths: When non-empty, only these paths, their ancestors
            and their descendants are compared.
        field_comparators: ``(path pattern, comparator)`` overrides.
        type_comparators: ``(type, comparator)`` overrides.
        strict_type_checking: When True, actual and expected must have the
            exact same type (or a registered compatible pair) at every node.
            When False, only their structural kind must match.
        compatible_types: ``(actual_type, expected_type)`` pairs accepted in
            strict mode.
        null_equals_missing: When True, a map key holding None on one side
            and absent on the other is not a difference.
        skip_actual_none_fields: Skip nodes whose actual value is None.
        skip_expected_none_fields: Skip nodes whose expected value is None.
        unordered_collections: Compare every sequence as a multiset.
        unordered_paths: Path patterns of sequences compared as multisets.
        element_matching: Candidate matching inside unordered collections.
        overridden_equals: Compare structured values whose class defines its
            own ``__eq__`` with that ``__eq__`` instead of field by field.

    A comparator is either a three-way callable ``(a, b) -> int`` (zero means
    equal) or any ``ComparisonStrategy``.
    """

    strategy: ComparisonStrategy = STANDARD
    ignored_paths: frozenset[Path] = frozenset()
    ignored_fields: frozenset[str] = frozenset()
    ignored_field_patterns: tuple[re.Pattern[str], ...] = ()
    ignored_types: tuple[type, ...] = ()
    compared_paths: frozenset[Path] = frozenset()
    field_comparators: tuple[tuple[Path, ComparatorLike], ...] = ()
    type_comparators: tuple[tuple[type, ComparatorLike], ...] = ()
    strict_type_checking: bool = False
    compatible_types: frozenset[tuple[type, type]] = frozenset()
    null_equals_missing: bool = False
    skip_actual_none_fields: bool = False
    skip_expected_none_fields: bool = False
    unordered_collections: bool = False
    unordered_paths: frozenset[Path] = frozenset()
    element_matching: ElementMatching = ElementMatching.ACTIVE_RULES
    overridden_equals: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.strategy, ComparisonStrategy):
            msg = f"strategy must satisfy ComparisonStrategy, got {self.strategy!r}"
            raise TypeError(msg)
        if not isinstance(self.element_matching, ElementMatching):
            msg = f"element_matching must be an ElementMatching, got {self.element_matching!r}"
            raise TypeError(msg)

    # ------------------------------------------------------------------
    # Builder operations (each returns a new RuleSet)
    # ------------------------------------------------------------------

    def ignore_fields(self, *names: str) -> RuleSet:
        return replace(self, ignored_fields=self.ignored_fields | frozenset(names))

    def ignore_fields_matching(self, *regexes: str | re.Pattern[str]) -> RuleSet:
        compiled = tuple(re.compile(regex) for regex in regexes)
        return replace(
            self, ignored_field_patterns=self.ignored_field_patterns + compiled
        )

    def ignore_fields_of_types(self, *types: type) -> RuleSet:
        return replace(self, ignored_types=self.ignored_types + tuple(types))

    def ignore_paths(self, *paths: Path | str) -> RuleSet:
        parsed = frozenset(Path.of(path) for path in paths)
        return replace(self, ignored_paths=self.ignored_paths | parsed)

    def compare_only_fields(self, *paths: Path | str) -> RuleSet:
        parsed = frozenset(Path.of(path) for path in paths)
        return replace(self, compared_paths=self.compared_paths | parsed)

    def with_comparator_for_field(
        self, path: Path | str, comparator: ComparatorLike
    ) -> RuleSet:
        entry = (Path.of(path), comparator)
        return replace(self, field_comparators=(*self.field_comparators, entry))

    def with_comparator_for_type(
        self, type_: type, comparator: ComparatorLike
    ) -> RuleSet:
        entry = (type_, comparator)
        return replace(self, type_comparators=(*self.type_comparators, entry))

    def with_strict_type_checking(self, strict: bool = True) -> RuleSet:
        return replace(self, strict_type_checking=strict)

    def with_compatible_types(self, actual_type: type, expected_type: type) -> RuleSet:
        pair = frozenset({(actual_type, expected_type)})
        return replace(self, compatible_types=self.compatible_types | pair)

    def with_strategy(self, strategy: ComparisonStrategy) -> RuleSet:
        return replace(self, strategy=strategy)

    def ignore_collection_order(self, *paths: Path | str) -> RuleSet:
        """Compare sequences as multisets: everywhere, or only at ``paths``."""
        if not paths:
            return replace(self, unordered_collections=True)
        parsed = frozenset(Path.of(path) for path in paths)
        return replace(self, unordered_paths=self.unordered_paths | parsed)

    def with_element_matching(self, mode: ElementMatching) -> RuleSet:
        return replace(self, element_matching=mode)

    def with_null_equals_missing(self, enabled: bool = True) -> RuleSet:
        return replace(self, null_equals_missing=enabled)

    def ignore_actual_none_fields(self, enabled: bool = True) -> RuleSet:
        return replace(self, skip_actual_none_fields=enabled)

    def ignore_expected_none_fields(self, enabled: bool = True) -> RuleSet:
        return replace(self, skip_expected_none_fields=enabled)

    def use_overridden_equals(self, enabled: bool = True) -> RuleSet:
        return replace(self, overridden_equals=enabled)

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def validate(self) -> None:
        """Reject a self-contradictory rule set before any traversal starts.

        Raises:
            ConfigurationError: On the first contradiction found.
        """
        for path in (*self.ignored_paths, *self.compared_paths, *self.unordered_paths):
            if not isinstance(path, Path):
                msg = f"expected a Path, got {path!r}"
                raise ConfigurationError(msg)
        for type_ in self.ignored_types:
            if not isinstance(type_, type):
                msg = f"ignored type {type_!r} is not a class"
                raise ConfigurationError(msg)
        for pair in self.compatible_types:
            if not all(isinstance(type_, type) for type_ in pair):
                msg = f"compatible types {pair!r} must both be classes"
                raise ConfigurationError(msg)

        self._validate_field_comparators()
        self._validate_type_comparators()
        logger.debug("Rule set accepted: %r", self)

    def _validate_field_comparators(self) -> None:
        registered: dict[Path, ComparatorLike] = {}
        for path, comparator in self.field_comparators:
            if not isinstance(path, Path):
                msg = f"expected a Path, got {path!r}"
                raise ConfigurationError(msg)
            if not _is_comparator_like(comparator):
                msg = f"comparator registered for field {str(path)!r} is not callable: {comparator!r}"
                raise ConfigurationError(msg)
            previous = registered.setdefault(path, comparator)
            if previous is not comparator:
                msg = f"conflicting comparators registered for field {str(path)!r}"
                raise ConfigurationError(msg)
            if any(path.starts_with(ignored) for ignored in self.ignored_paths):
                msg = f"field {str(path)!r} is ignored, its comparator would never run"
                raise ConfigurationError(msg)
            shadowing = _path_names(path) & self.ignored_fields
            if shadowing:
                msg = (
                    f"field {str(path)!r} passes through ignored field(s) "
                    f"{sorted(shadowing)}, its comparator would never run"
                )
                raise ConfigurationError(msg)

    def _validate_type_comparators(self) -> None:
        registered: dict[type, ComparatorLike] = {}
        for type_, comparator in self.type_comparators:
            if not isinstance(type_, type):
                msg = f"comparator registered for {type_!r}, which is not a class"
                raise ConfigurationError(msg)
            if not _is_comparator_like(comparator):
                msg = f"comparator registered for type {type_.__name__} is not callable: {comparator!r}"
                raise ConfigurationError(msg)
            previous = registered.setdefault(type_, comparator)
            if previous is not comparator:
                msg = f"conflicting comparators registered for type {type_.__name__}"
                raise ConfigurationError(msg)
            if self.ignored_types and issubclass(type_, self.ignored_types):
                msg = f"type {type_.__name__} is ignored, its comparator would never run"
                raise ConfigurationError(msg)

    # ------------------------------------------------------------------
    # Lookups used by the comparison engine
    # ------------------------------------------------------------------

    def is_ignored(self, path: Path, actual: Any, expected: Any) -> bool:
        """Return True if the node at ``path`` must not be compared."""
        if self.compared_paths and not any(
            path.starts_with(compared) or path.leads_to(compared)
            for compared in self.compared_paths
        ):
            return True

        if any(path.matches(ignored) for ignored in self.ignored_paths):
            return True

        last = path.last
        if last is not None and not last.is_index and last.value in self.ignored_fields:
            return True

        if self.ignored_field_patterns:
            rendered = str(path)
            if any(pattern.fullmatch(rendered) for pattern in self.ignored_field_patterns):
                return True

        if not path.is_root():
            if self.skip_actual_none_fields and actual is None:
                return True
            if self.skip_expected_none_fields and expected is None:
                return True

        if self.ignored_types:
            subject = expected if actual is None or actual is MISSING else actual
            return isinstance(subject, self.ignored_types)
        return False

    def comparator_for(self, path: Path, actual: Any) -> ComparatorLike | None:
        """Return the override applying at ``path``, or None.

        The most recently registered matching path comparator wins, then the
        type comparator registered for the most specific class of ``actual``.
        """
        for pattern, comparator in reversed(self.field_comparators):
            if path.matches(pattern):
                return comparator

        if self.type_comparators:
            for klass in type(actual).__mro__:
                for type_, comparator in reversed(self.type_comparators):
                    if type_ is klass:
                        return comparator
        return None

    def is_unordered(self, path: Path) -> bool:
        """Return True if the sequence at ``path`` is compared as a multiset."""
        return self.unordered_collections or any(
            path.matches(pattern) for pattern in self.unordered_paths
        )

    def types_compatible(self, actual_type: type, expected_type: type) -> bool:
        """Return True if the strict type check accepts this pair of types."""
        return (
            actual_type is expected_type
            or (actual_type, expected_type) in self.compatible_types
        )
