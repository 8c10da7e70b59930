"""Tree subpackage: locating and classifying nodes of a compared object graph.

Re-exports the public API for the tree module:
- Path, Segment, SegmentKind: immutable locations inside an object graph
- NodeKind, classify: the five node kinds and the probe that assigns them
"""

from recursive_comparison.tree.nodes import NodeKind, classify
from recursive_comparison.tree.path import WILDCARD, Path, Segment, SegmentKind

__all__ = ["WILDCARD", "NodeKind", "Path", "Segment", "SegmentKind", "classify"]
