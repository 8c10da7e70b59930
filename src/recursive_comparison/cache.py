"""FieldCache: LRU-backed cache of class-level field metadata.

Enumerating a class's declared fields (dataclass fields, ``__slots__`` walked
across the MRO, ...) only depends on the class, so the result is cached per
class.  The cache is a pure performance detail: a cached and an uncached
lookup always return the same names.

Each ``FieldCache`` instance maintains its own ``LRUCache``; there is no
class-level shared state, so two comparators never interfere with each other.

Example::

    from recursive_comparison.cache import FieldCache

    cache = FieldCache(max_size=128)
    cache.field_names(MyDataclass)   # computed
    cache.field_names(MyDataclass)   # served from memory
"""

from __future__ import annotations

from cachetools import LRUCache

from recursive_comparison.tree.introspection import class_field_names

__all__ = ["FieldCache"]


class FieldCache:
    """LRU cache mapping a class to its declared field names.

    Args:
        max_size: Maximum number of classes to remember.  Defaults to 256.
            When exceeded, the least-recently-used class is silently evicted.
    """

    def __init__(self, max_size: int = 256) -> None:
        self._cache: LRUCache[type, tuple[str, ...]] = LRUCache(maxsize=max_size)

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def max_size(self) -> int:
        """The maximum number of classes this cache can hold."""
        return int(self._cache.maxsize)

    @property
    def curr_size(self) -> int:
        """The current number of classes stored in the cache."""
        return int(self._cache.currsize)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def field_names(self, cls: type) -> tuple[str, ...]:
        """Return the declared field names of ``cls``, computing them once."""
        names = self._cache.get(cls)
        if names is None:
            names = class_field_names(cls)
            self._cache[cls] = names
        return names
