"""Integration tests for the recursive-comparison pytest plugin.

These tests verify that the assert_recursively_equal fixture is auto-discovered
via the pytest11 entry point and behaves correctly.

NOTE: These tests require recursive-comparison to be installed (even in editable
mode via ``pip install -e .``). The pytest11 entry point is only registered at
install time -- running from a raw source checkout without installing will not
discover the fixture.
"""

from __future__ import annotations

import subprocess
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pytest

from recursive_comparison import RuleSet


@dataclass
class Hobbit:
    name: str
    age: int


def test_fixture_passes_equal_objects(assert_recursively_equal: Any) -> None:
    """Structurally equal graphs should pass."""
    assert_recursively_equal(Hobbit("Frodo", 33), Hobbit("Frodo", 33))


def test_fixture_fails_on_difference(assert_recursively_equal: Any) -> None:
    """A leaf difference should raise AssertionError naming its path."""
    with pytest.raises(AssertionError, match=r"- age: value-mismatch"):
        assert_recursively_equal(Hobbit("Frodo", 33), Hobbit("Frodo", 50))


def test_fixture_custom_rules(assert_recursively_equal: Any) -> None:
    """The rules parameter should be forwarded to compare()."""
    assert_recursively_equal(
        Hobbit("Frodo", 33),
        Hobbit("Frodo", 50),
        rules=RuleSet().ignore_fields("age"),
    )


def test_fixture_error_message_contents(assert_recursively_equal: Any) -> None:
    """AssertionError message should list every difference."""
    with pytest.raises(AssertionError) as exc_info:
        assert_recursively_equal({"a": 1, "b": 2}, {"a": 9, "c": 3})

    error_message = str(exc_info.value)
    assert "Objects are not recursively equal" in error_message
    assert "- c: missing-key" in error_message
    assert "- b: extra-key" in error_message
    assert "- a: value-mismatch" in error_message


def test_fixture_returns_callable(assert_recursively_equal: Any) -> None:
    """The fixture should return a callable, not a direct assertion result."""
    assert callable(assert_recursively_equal)


def test_plugin_discovery() -> None:
    """Verify assert_recursively_equal appears in pytest --fixtures output."""
    result = subprocess.run(
        [sys.executable, "-m", "pytest", "--fixtures", "-q"],
        capture_output=True,
        text=True,
        cwd=str(Path(__file__).resolve().parents[2]),
    )
    assert "assert_recursively_equal" in result.stdout, (
        f"assert_recursively_equal not found in pytest --fixtures output.\n"
        f"stdout:\n{result.stdout}\n"
        f"stderr:\n{result.stderr}"
    )
