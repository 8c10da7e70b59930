"""algorithm subpackage: public API for the recursive comparison engine.

Provides the rule set, the traversal and its helpers.  Import from this
module (not from sub-modules directly) to stay on the stable public
interface.

Example::

    from recursive_comparison.algorithm import GraphWalker, RuleSet
    from recursive_comparison.cache import FieldCache

    walker = GraphWalker(RuleSet().ignore_fields("id"), FieldCache())
    differences = walker.walk({"id": 1, "a": 1}, {"id": 2, "a": 1})
    # differences == ()
"""

from __future__ import annotations

from recursive_comparison.algorithm.config import ElementMatching, RuleSet
from recursive_comparison.algorithm.graph import GraphWalker
from recursive_comparison.algorithm.matcher import (
    ElementMatch,
    hungarian_match,
    match_elements,
)
from recursive_comparison.algorithm.tracker import VisitedPairTracker

__all__ = [
    "ElementMatch",
    "ElementMatching",
    "GraphWalker",
    "RuleSet",
    "VisitedPairTracker",
    "hungarian_match",
    "match_elements",
]
