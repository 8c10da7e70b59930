"""Field introspection for structured (record-like) values.

A structured value's fields come from two places:

- the *class*: dataclass fields, named-tuple ``_fields``, Pydantic-style
  ``model_fields`` or ``__slots__`` declared anywhere in the MRO.  This part
  only depends on the type and is cached by ``FieldCache``;
- the *instance*: attributes stored in ``__dict__`` that the class did not
  declare.  This part is read fresh from every value.

Field order is deterministic: declaration order first, then instance
attributes in insertion order.  Names starting with a double underscore are
interpreter or framework plumbing and are never reported as fields.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from recursive_comparison.cache import FieldCache

__all__ = [
    "class_field_names",
    "field_names",
    "is_namedtuple",
    "is_structured",
    "overrides_eq",
]


def is_namedtuple(value: Any) -> bool:
    """Return True for instances of ``collections.namedtuple`` / ``NamedTuple`` classes."""
    return isinstance(value, tuple) and isinstance(
        getattr(type(value), "_fields", None), tuple
    )


def is_structured(value: Any) -> bool:
    """Return True if ``value`` exposes named fields to compare.

    An instance with a ``__dict__`` counts even when it is empty: two
    instances of a field-less class are structurally equal.
    """
    if dataclasses.is_dataclass(value) or is_namedtuple(value):
        return True
    if hasattr(value, "__dict__"):
        return True
    return bool(class_field_names(type(value)))


def overrides_eq(cls: type) -> bool:
    """Return True if a user-defined class in ``cls``'s MRO defines ``__eq__``.

    Equality generated by ``dataclasses`` does not count: it is plain
    field-by-field equality, which the recursive comparison already performs.
    """
    for klass in cls.__mro__:
        if klass.__module__ == "builtins":
            continue
        if "__eq__" in vars(klass) and not dataclasses.is_dataclass(klass):
            return True
    return False


def class_field_names(cls: type) -> tuple[str, ...]:
    """Return the field names declared by ``cls``, in declaration order.

    Args:
        cls: Any class.

    Returns:
        Tuple of field names.  Empty when the class declares none (instance
        ``__dict__`` attributes are handled by ``field_names``).
    """
    if dataclasses.is_dataclass(cls):
        return tuple(f.name for f in dataclasses.fields(cls))

    fields = getattr(cls, "_fields", None)
    if issubclass(cls, tuple) and isinstance(fields, tuple):
        return tuple(fields)

    model_fields = getattr(cls, "model_fields", None)
    if isinstance(model_fields, Mapping):
        return tuple(model_fields)

    names: list[str] = []
    for klass in reversed(cls.__mro__):
        slots = vars(klass).get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if not name.startswith("__") and name not in names:
                names.append(name)
    return tuple(names)


def field_names(value: Any, cache: FieldCache) -> tuple[str, ...]:
    """Return every field name of a structured ``value``.

    Args:
        value: A structured value (see ``is_structured``).
        cache: Per-comparator cache of class-level field names.

    Returns:
        Declared fields followed by extra instance attributes.
    """
    declared = cache.field_names(type(value))
    instance_attrs = getattr(value, "__dict__", None)
    if not instance_attrs:
        return declared

    extra = tuple(
        name
        for name in instance_attrs
        if not name.startswith("__") and name not in declared
    )
    return declared + extra
