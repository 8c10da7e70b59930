"""Plain-text rendering of a DifferenceReport.

Values are rendered with ``reprlib`` so that huge or deeply nested values
cannot blow up an assertion message.  The wording is deliberately neutral;
callers needing another layout can walk the report themselves.

Example output::

    2 difference(s) found:
    - name: value-mismatch
        actual:   'Frodo'
        expected: 'Sam'
    - friends: size-mismatch (actual size 1 != expected size 2)
        actual:   [Person(...)]
        expected: [Person(...), Person(...)]
"""

from __future__ import annotations

import reprlib

from recursive_comparison.result import Difference, DifferenceReport

__all__ = ["format_difference", "format_report"]

_ROOT_LABEL = "<root>"


def _make_repr(max_repr: int) -> reprlib.Repr:
    limits = reprlib.Repr()
    limits.maxstring = max_repr
    limits.maxother = max_repr
    limits.maxlevel = 3
    return limits


def format_difference(difference: Difference, max_repr: int = 80) -> str:
    """Render one difference as an indented block of lines."""
    limits = _make_repr(max_repr)
    return _render(difference, limits)


def _render(difference: Difference, limits: reprlib.Repr) -> str:
    location = str(difference.path) or _ROOT_LABEL
    headline = f"- {location}: {difference.reason}"
    if difference.description:
        headline += f" ({difference.description})"
    return "\n".join(
        [
            headline,
            f"    actual:   {limits.repr(difference.actual)}",
            f"    expected: {limits.repr(difference.expected)}",
        ]
    )


def format_report(report: DifferenceReport, max_repr: int = 80) -> str:
    """Render every difference of ``report``, in report order.

    Args:
        report:   The report to render.
        max_repr: Upper bound on the length of each rendered value.

    Returns:
        A multi-line string; ``"no differences"`` for an empty report.
    """
    if report.is_empty:
        return "no differences"
    limits = _make_repr(max_repr)
    lines = [f"{len(report)} difference(s) found:"]
    lines.extend(_render(difference, limits) for difference in report)
    return "\n".join(lines)
