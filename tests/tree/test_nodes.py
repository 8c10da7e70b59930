"""Tests for NodeKind StrEnum and the classify() capability probe.

Covers:
- NodeKind has exactly five members with lowercase string values
- Scalars: None, numbers, strings, bytes, enums, dates, UUIDs, paths, types
- numpy: 0-d arrays and numpy scalars are scalars, n-d arrays are sequences
- Named tuples are structured (probed before plain tuples)
- Mappings, sets and dict views, sequences, structured objects
"""

from __future__ import annotations

import datetime
import decimal
import uuid
from collections import OrderedDict, deque, namedtuple
from dataclasses import dataclass
from enum import Enum
from pathlib import PurePosixPath
from typing import Any, NamedTuple

import numpy as np
import pytest

from recursive_comparison.tree.nodes import NodeKind, classify

Point = namedtuple("Point", ["x", "y"])


class Pair(NamedTuple):
    left: int
    right: int


class Color(Enum):
    RED = 1


@dataclass
class Person:
    name: str


class Slotted:
    __slots__ = ("a",)

    def __init__(self, a: int) -> None:
        self.a = a


class Plain:
    def __init__(self) -> None:
        self.value = 1


# ---------------------------------------------------------------------------
# NodeKind
# ---------------------------------------------------------------------------


class TestNodeKind:
    def test_has_exactly_five_members(self) -> None:
        assert len(list(NodeKind)) == 5

    def test_values_are_lowercase_names(self) -> None:
        assert {m.value for m in NodeKind} == {
            "scalar",
            "sequence",
            "unordered",
            "map",
            "structured",
        }

    def test_only_scalar_is_not_composite(self) -> None:
        assert not NodeKind.SCALAR.is_composite
        assert all(m.is_composite for m in NodeKind if m is not NodeKind.SCALAR)


# ---------------------------------------------------------------------------
# classify()
# ---------------------------------------------------------------------------


class TestClassifyScalars:
    @pytest.mark.parametrize(
        "value",
        [
            None,
            True,
            1,
            1.5,
            complex(1, 2),
            decimal.Decimal("1.1"),
            "text",
            b"bytes",
            bytearray(b"x"),
            Color.RED,
            datetime.date(2020, 1, 1),
            datetime.datetime(2020, 1, 1, 12),
            datetime.timedelta(seconds=1),
            uuid.UUID(int=1),
            PurePosixPath("/tmp"),
            int,
            len,
            object(),
        ],
    )
    def test_leaf_values_are_scalars(self, value: Any) -> None:
        assert classify(value) is NodeKind.SCALAR

    def test_function_is_scalar(self) -> None:
        def fn() -> None:
            pass

        assert classify(fn) is NodeKind.SCALAR

    def test_numpy_scalar_is_scalar(self) -> None:
        assert classify(np.float64(1.0)) is NodeKind.SCALAR

    def test_zero_dim_array_is_scalar(self) -> None:
        assert classify(np.array(3)) is NodeKind.SCALAR


class TestClassifyComposites:
    @pytest.mark.parametrize(
        "value",
        [[1], (1, 2), deque([1]), range(3), np.array([1, 2]), np.zeros((2, 2))],
    )
    def test_sequences(self, value: Any) -> None:
        assert classify(value) is NodeKind.SEQUENCE

    @pytest.mark.parametrize("value", [{1}, frozenset({1}), {"a": 1}.keys()])
    def test_unordered(self, value: Any) -> None:
        assert classify(value) is NodeKind.UNORDERED

    def test_dict_values_view_is_unordered(self) -> None:
        assert classify({"a": 1}.values()) is NodeKind.UNORDERED

    @pytest.mark.parametrize("value", [{}, {"a": 1}, OrderedDict(a=1)])
    def test_maps(self, value: Any) -> None:
        assert classify(value) is NodeKind.MAP

    @pytest.mark.parametrize(
        "value",
        [Point(1, 2), Pair(1, 2), Person("Frodo"), Slotted(1), Plain()],
    )
    def test_structured(self, value: Any) -> None:
        assert classify(value) is NodeKind.STRUCTURED

    def test_namedtuple_is_not_a_sequence(self) -> None:
        # Probed before the Sequence check
        assert classify(Point(1, 2)) is not NodeKind.SEQUENCE
