"""Path: immutable location of a node inside a compared object graph.

A ``Path`` is an ordered tuple of ``Segment`` values.  Each segment is a
named field, a sequence index, or a map key rendered as a string.  The empty
path is the root of the graph.

Paths are built during traversal exactly like JSON Pointers are built by a
tree builder: every descent derives a *new* path by appending one segment,
the parent path is never mutated.

String form (also accepted by ``Path.parse``):
- Root is ``""`` (empty string)
- Fields and keys are dot separated: ``"friend.name"``
- Indices are bracketed: ``"items[0].name"``
- Names containing ``.``, ``[`` or ``]`` (and the empty name) are quoted in
  brackets, with ``\\`` escaping ``'`` and ``\\`` inside the quotes:
  ``"headers['content.type']"``
- ``[*]`` and ``*`` are wildcards, only meaningful in rule patterns:
  ``"items[*].name"`` matches the ``name`` of every element of ``items``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Any

__all__ = ["WILDCARD", "Path", "Segment", "SegmentKind"]

WILDCARD = "*"

# One segment at a time: a (possibly dot-prefixed) name, a bracketed index,
# or a bracketed quoted name.
# '^' only matches at the real start of the string, so every name after the
# first one needs its leading dot.
_SEGMENT = re.compile(
    r"(?:^|\.)(?P<name>[^.\[\]]+)"
    r"|\[(?P<index>\d+|\*)\]"
    r"|\['(?P<quoted>(?:[^'\\]|\\.)*)'\]"
)
# Names that would not survive a render then parse round trip unquoted.
_NEEDS_QUOTING = re.compile(r"^$|[.\[\]]")
_ESCAPED = re.compile(r"\\(.)")


class SegmentKind(StrEnum):
    """The three kinds of path segment.

    - FIELD -> "field" : attribute of a structured value
    - INDEX -> "index" : position inside a sequence
    - KEY   -> "key"   : key of a mapping, rendered with ``str()``
    """

    FIELD = auto()
    INDEX = auto()
    KEY = auto()


@dataclass(frozen=True, slots=True)
class Segment:
    """One step of a ``Path``.

    Attributes:
        kind:  Which kind of step this is (see SegmentKind).
        value: Field or key name (``str``) for FIELD/KEY segments, the
               position (``int``) or ``WILDCARD`` for INDEX segments.
    """

    kind: SegmentKind
    value: str | int

    @property
    def is_index(self) -> bool:
        return self.kind == SegmentKind.INDEX

    @property
    def is_wildcard(self) -> bool:
        return self.value == WILDCARD

    @property
    def is_bracketed(self) -> bool:
        """True if the segment renders inside brackets (no leading dot)."""
        return self.is_index or _NEEDS_QUOTING.search(str(self.value)) is not None

    def matches(self, pattern: Segment) -> bool:
        """Return True if this segment is selected by ``pattern``.

        Index patterns only select index segments.  Field and key segments
        select each other by name, since both render the same way.
        """
        if pattern.is_index != self.is_index:
            return False
        return pattern.is_wildcard or pattern.value == self.value

    def __str__(self) -> str:
        if self.is_index:
            return f"[{self.value}]"
        name = str(self.value)
        if _NEEDS_QUOTING.search(name):
            escaped = name.replace("\\", "\\\\").replace("'", "\\'")
            return f"['{escaped}']"
        return name


@dataclass(frozen=True, slots=True)
class Path:
    """Immutable, hashable location inside an object graph.

    Example::

        path = Path.root().field("friends").index(0).field("name")
        str(path)                                    # "friends[0].name"
        path.matches(Path.parse("friends[*].name"))  # True
        path.is_top_level_field()                    # False
    """

    segments: tuple[Segment, ...] = ()

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def root(cls) -> Path:
        """Return the empty path denoting the root of the graph."""
        return cls()

    @classmethod
    def parse(cls, text: str) -> Path:
        """Parse the dotted/bracketed string form of a path.

        Args:
            text: e.g. ``"name"``, ``"friends[0].name"``, ``"items[*].id"``.
                The empty string is the root.

        Returns:
            The parsed Path.  Names are parsed as FIELD segments.

        Raises:
            ValueError: If ``text`` is not a well-formed path.
        """
        segments: list[Segment] = []
        pos = 0
        while pos < len(text):
            match = _SEGMENT.match(text, pos)
            if match is None:
                msg = f"Malformed path {text!r} at position {pos}"
                raise ValueError(msg)
            name, index = match.group("name"), match.group("index")
            quoted = match.group("quoted")
            if name is not None:
                segments.append(Segment(SegmentKind.FIELD, name))
            elif quoted is not None:
                unescaped = _ESCAPED.sub(r"\1", quoted)
                segments.append(Segment(SegmentKind.FIELD, unescaped))
            elif index == WILDCARD:
                segments.append(Segment(SegmentKind.INDEX, WILDCARD))
            else:
                segments.append(Segment(SegmentKind.INDEX, int(index)))
            pos = match.end()
        return cls(tuple(segments))

    @classmethod
    def of(cls, value: Path | str) -> Path:
        """Coerce a Path or its string form into a Path."""
        if isinstance(value, Path):
            return value
        if isinstance(value, str):
            return cls.parse(value)
        msg = f"Expected a Path or str, got {type(value)!r}"
        raise TypeError(msg)

    # ------------------------------------------------------------------
    # Derivation (never mutates the receiver)
    # ------------------------------------------------------------------

    def append(self, segment: Segment) -> Path:
        return Path((*self.segments, segment))

    def field(self, name: str) -> Path:
        return self.append(Segment(SegmentKind.FIELD, name))

    def index(self, position: int) -> Path:
        return self.append(Segment(SegmentKind.INDEX, position))

    def key(self, key: Any) -> Path:
        return self.append(Segment(SegmentKind.KEY, str(key)))

    def any_index(self) -> Path:
        """Return the path of "every element" of the sequence at this path."""
        return self.append(Segment(SegmentKind.INDEX, WILDCARD))

    def parent(self) -> Path:
        """Return the path one level up; the root is its own parent."""
        return Path(self.segments[:-1])

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def depth(self) -> int:
        return len(self.segments)

    @property
    def last(self) -> Segment | None:
        return self.segments[-1] if self.segments else None

    def is_root(self) -> bool:
        return not self.segments

    def is_top_level_field(self) -> bool:
        """True iff the path has exactly one segment (the root has none).

        Index segments count like any other, so ``[0]`` is top-level and
        ``[0].name`` is not.  AssertJ does the opposite and skips leading
        indices.
        """
        return len(self.segments) == 1

    def matches(self, pattern: Path) -> bool:
        """Return True if ``pattern`` selects exactly this location."""
        if len(self.segments) != len(pattern.segments):
            return False
        return all(
            seg.matches(pat)
            for seg, pat in zip(self.segments, pattern.segments, strict=True)
        )

    def starts_with(self, pattern: Path) -> bool:
        """True if this path is at, or below, a location ``pattern`` selects."""
        n = len(pattern.segments)
        if len(self.segments) < n:
            return False
        return all(
            seg.matches(pat)
            for seg, pat in zip(self.segments[:n], pattern.segments, strict=True)
        )

    def leads_to(self, pattern: Path) -> bool:
        """True if this path is an ancestor of (or equal to) a ``pattern`` location."""
        n = len(self.segments)
        if n > len(pattern.segments):
            return False
        return all(
            seg.matches(pat)
            for seg, pat in zip(self.segments, pattern.segments[:n], strict=True)
        )

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        parts: list[str] = []
        for segment in self.segments:
            if segment.is_bracketed or not parts:
                parts.append(str(segment))
            else:
                parts.append(f".{segment}")
        return "".join(parts)

    def __len__(self) -> int:
        return len(self.segments)

    def __bool__(self) -> bool:
        # The root path is falsy even though it is a valid Path
        return bool(self.segments)
