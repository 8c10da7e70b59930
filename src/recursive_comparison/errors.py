"""Exception hierarchy for recursive-comparison.

Only genuinely exceptional conditions are raised: an inconsistent rule set or
a leaf strategy asked to do something the values cannot support.  Values that
simply do not match are never errors, they are ``Difference`` records in the
returned ``DifferenceReport``.

Exceptions raised by caller-supplied code (custom comparators, ``__eq__``,
ordering methods) are deliberately absent from this module: they propagate to
the caller exactly as raised.
"""

from __future__ import annotations

__all__ = ["ConfigurationError", "InvalidOperation", "RecursiveComparisonError"]


class RecursiveComparisonError(Exception):
    """Base class for every error raised by recursive-comparison itself."""


class ConfigurationError(RecursiveComparisonError, ValueError):
    """The ``RuleSet`` contradicts itself and cannot drive a comparison.

    Raised before any traversal starts, e.g. when a path is both ignored and
    given a custom comparator, or when two different comparators are
    registered for the same path.
    """


class InvalidOperation(RecursiveComparisonError, TypeError):
    """A comparison strategy was asked to order a value with no ordering."""
