"""pytest plugin for recursive-comparison.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from typing import Any

import pytest

from recursive_comparison import RuleSet, compare
from recursive_comparison.rendering import format_report


@pytest.fixture(scope="session")
def assert_recursively_equal() -> Any:
    """Fixture that returns a callable recursive equality asserter.

    The fixture is session-scoped because the returned callable is stateless
    (delegates to compare() which creates a fresh RecursiveComparator per call).

    Usage in tests::

        def test_person(assert_recursively_equal):
            assert_recursively_equal(Person("Frodo"), Person("Frodo"))

        def test_ignoring_ids(assert_recursively_equal):
            rules = RuleSet().ignore_fields("id")
            assert_recursively_equal(
                {"id": 1, "name": "x"}, {"id": 2, "name": "x"}, rules=rules
            )

    Returns:
        A callable ``_assert(actual, expected, rules=None) -> None`` that raises
        ``AssertionError`` when the two values differ.
    """

    def _assert(
        actual: Any,
        expected: Any,
        rules: RuleSet | None = None,
    ) -> None:
        """Assert that two object graphs are recursively equal.

        Args:
            actual:   The value produced by the code under test.
            expected: The reference value.
            rules:    Optional RuleSet customising the comparison.

        Raises:
            AssertionError: When at least one difference is found, with a
                message listing every difference with its path.
        """
        report = compare(actual, expected, rules=rules)
        if not report.is_empty:
            raise AssertionError(
                f"Objects are not recursively equal\n{format_report(report)}"
            )

    return _assert
