"""RecursiveComparator: orchestrator wiring RuleSet + GraphWalker + FieldCache.

This is the central wiring layer between the traversal and the public API.
It validates the rule set once, then turns every ``compare()`` call into a
fresh ``GraphWalker`` run and wraps the collected differences into an
immutable ``DifferenceReport``.

Architecture:
- ``__init__`` validates the RuleSet eagerly, so a contradictory rule set is
  rejected with ``ConfigurationError`` before any traversal.
- compare() starts a wall-clock timer, runs a run-local GraphWalker from the
  root path and logs the difference count and elapsed time at DEBUG level.
- Class-level field names are cached via FieldCache (LRU), per instance.
  Cached or not, the report is the same.
"""

from __future__ import annotations

import logging
import time
from typing import Any

from recursive_comparison.algorithm.config import RuleSet
from recursive_comparison.algorithm.graph import GraphWalker
from recursive_comparison.cache import FieldCache
from recursive_comparison.result import DifferenceReport

__all__ = ["RecursiveComparator"]

logger = logging.getLogger(__name__)


class RecursiveComparator:
    """Deep structural comparison of two object graphs under one RuleSet.

    Two separate ``RecursiveComparator`` instances never share cache state.
    A single instance may be reused for any number of sequential
    comparisons; each run gets its own tracker and difference list.

    Example::

        from recursive_comparison import RecursiveComparator, RuleSet

        cmp = RecursiveComparator(RuleSet().ignore_fields("id"))
        report = cmp.compare(actual_person, expected_person)
        report.is_empty        # True when equal under the rules
        report.paths()         # e.g. ["friends[0].name"]
    """

    def __init__(
        self,
        rules: RuleSet | None = None,
        max_cache_size: int = 256,
    ) -> None:
        """Initialise the comparator.

        Args:
            rules: Comparison configuration.  Defaults to ``RuleSet()``.
            max_cache_size: Maximum number of classes whose field names are
                held in the per-instance LRU cache.  This is an
                infrastructure parameter, not part of ``RuleSet``.

        Raises:
            ConfigurationError: If ``rules`` contradicts itself.
        """
        self._rules: RuleSet = rules if rules is not None else RuleSet()
        self._rules.validate()
        self._fields = FieldCache(max_size=max_cache_size)

    @property
    def rules(self) -> RuleSet:
        return self._rules

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def compare(self, actual: Any, expected: Any) -> DifferenceReport:
        """Compare ``actual`` against ``expected`` and report every difference.

        Neither graph is mutated.  Calling this twice with the same inputs
        yields equal reports.

        Args:
            actual:   The value under test.
            expected: The reference value.

        Returns:
            A ``DifferenceReport``, empty if and only if the two graphs are
            equal under the rule set.
        """
        t0 = time.perf_counter()

        walker = GraphWalker(self._rules, self._fields)
        differences = walker.walk(actual, expected)

        elapsed_ms = (time.perf_counter() - t0) * 1000.0
        logger.debug(
            "Recursive comparison finished with %d difference(s) in %.3f ms",
            len(differences),
            elapsed_ms,
        )
        return DifferenceReport(differences)
