"""NodeKind StrEnum and the capability probe that classifies a runtime value.

Every value met during a recursive comparison is classified exactly once into
one of five node kinds, and the comparison engine dispatches on that kind
instead of scattering type tests through the traversal.
"""

from __future__ import annotations

import datetime
import numbers
import re
import types
import uuid
from collections.abc import Mapping, Sequence, Set, ValuesView
from enum import Enum, StrEnum, auto
from pathlib import PurePath
from typing import Any

import numpy as np

from recursive_comparison.tree.introspection import is_namedtuple, is_structured

__all__ = ["NodeKind", "classify"]


class NodeKind(StrEnum):
    """Enumeration of the five node kinds of a compared object graph.

    StrEnum values are the lowercased member names (Python 3.11+):
    - SCALAR     -> "scalar"     : leaf compared with the leaf strategy
    - SEQUENCE   -> "sequence"   : ordered, index-addressable container
    - UNORDERED  -> "unordered"  : set-like container compared as a multiset
    - MAP        -> "map"        : key -> value container
    - STRUCTURED -> "structured" : record value with named fields
    """

    SCALAR = auto()
    SEQUENCE = auto()
    UNORDERED = auto()
    MAP = auto()
    STRUCTURED = auto()

    @property
    def is_composite(self) -> bool:
        return self is not NodeKind.SCALAR


# Values of these types are always leaves, even when they are sequences
# (str, bytes) or carry a __dict__ (functions, modules, enum members).
_SCALAR_TYPES: tuple[type, ...] = (
    str,
    bytes,
    bytearray,
    memoryview,
    numbers.Number,
    Enum,
    datetime.date,
    datetime.time,
    datetime.timedelta,
    datetime.tzinfo,
    uuid.UUID,
    PurePath,
    re.Pattern,
    type,
    types.FunctionType,
    types.BuiltinFunctionType,
    types.MethodType,
    types.ModuleType,
    np.generic,
)


def classify(value: Any) -> NodeKind:
    """Return the NodeKind of ``value``.

    The probe order is critical:
    - scalars first, because ``str`` is a ``Sequence`` and enum members
      carry a ``__dict__``;
    - named tuples before sequences, because they are tuples whose
      positions have names;
    - mappings before sets and sequences.

    Numpy arrays are sequences of their first axis; 0-d arrays are scalars.
    Anything unrecognised that has no fields is a scalar compared with ``==``.
    """
    if value is None or isinstance(value, _SCALAR_TYPES):
        return NodeKind.SCALAR

    if isinstance(value, np.ndarray):
        return NodeKind.SCALAR if value.ndim == 0 else NodeKind.SEQUENCE

    if is_namedtuple(value):
        return NodeKind.STRUCTURED

    if isinstance(value, Mapping):
        return NodeKind.MAP

    if isinstance(value, (Set, ValuesView)):
        return NodeKind.UNORDERED

    if isinstance(value, Sequence):
        return NodeKind.SEQUENCE

    if is_structured(value):
        return NodeKind.STRUCTURED

    return NodeKind.SCALAR
