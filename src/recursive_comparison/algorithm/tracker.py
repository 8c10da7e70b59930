"""VisitedPairTracker: cycle detection for a single comparison run.

Records which (actual, expected) pairs of composite nodes are currently being
compared on the active recursion path.  Membership is by identity
(``id()``), never by value, and the tracker is owned by one run only.

Meeting a pair that is already on the path means the walk went around a
cycle; the engine treats that pair as equal instead of recursing forever.
Both graphs are borrowed for the whole run, so the ``id()`` of every tracked
object stays valid while its entry exists.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

__all__ = ["VisitedPairTracker"]


class VisitedPairTracker:
    """Identity-based set of the (actual, expected) pairs on the active path.

    Example::

        tracker = VisitedPairTracker()
        with tracker.visiting(node_a, node_b) as first_visit:
            if first_visit:
                ...  # compare children; a nested visit of the same pair
                     # yields False
    """

    def __init__(self) -> None:
        self._active: set[tuple[int, int]] = set()

    def enter(self, actual: Any, expected: Any) -> bool:
        """Record the pair; return False if it was already on the path (cycle)."""
        key = (id(actual), id(expected))
        if key in self._active:
            return False
        self._active.add(key)
        return True

    def leave(self, actual: Any, expected: Any) -> None:
        """Remove the pair from the active path."""
        self._active.discard((id(actual), id(expected)))

    @contextmanager
    def visiting(self, actual: Any, expected: Any) -> Iterator[bool]:
        """Scoped ``enter``/``leave``: the pair is released on every exit path.

        Yields:
            The result of ``enter``.  A pair that was already active is left
            untouched on exit, since an outer visit still owns it.
        """
        entered = self.enter(actual, expected)
        try:
            yield entered
        finally:
            if entered:
                self.leave(actual, expected)

    def __contains__(self, pair: tuple[Any, Any]) -> bool:
        actual, expected = pair
        return (id(actual), id(expected)) in self._active

    def __len__(self) -> int:
        return len(self._active)
