"""Public data structures used by the query builder."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Union

__all__ = [
    "Argument",
    "Conditional",
    "Literal",
    "Placeholder",
    "PlaceholderKind",
    "SKIP",
    "Segment",
    "SkipType",
]


class PlaceholderKind(str, Enum):
    """Placeholder markers understood by the template mini-language."""

    INT = "?d"
    FLOAT = "?f"
    ARRAY = "?a"
    IDENTIFIER = "?#"
    BASE = "?"

    @classmethod
    def from_marker(cls, marker: str) -> "PlaceholderKind":
        """Return the kind for ``marker``; unknown suffixes fall back to ``BASE``."""

        try:
            return cls(marker)
        except ValueError:
            return cls.BASE


class SkipType:
    """Marker type of the :data:`SKIP` sentinel.

    Only one instance exists per process.  It is deliberately distinct from
    ``None`` so that ``NULL`` values can still be bound to conditional blocks.
    """

    _instance: SkipType | None = None

    def __new__(cls) -> SkipType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "SKIP"

    def __reduce__(self) -> str:
        return "SKIP"

    def __copy__(self) -> SkipType:
        return self

    def __deepcopy__(self, memo: dict) -> SkipType:
        return self


SKIP = SkipType()


@dataclass(frozen=True)
class Literal:
    """Verbatim template text between markers."""

    text: str


@dataclass(frozen=True)
class Placeholder:
    """A bare marker such as ``?d`` consuming one argument."""

    kind: PlaceholderKind
    text: str


@dataclass(frozen=True)
class Conditional:
    """A ``{...}`` block wrapping exactly one marker.

    ``offset`` is the position of the inner marker inside ``text`` (which
    still carries the surrounding braces) and ``marker`` is the marker as
    written, so the substitution point is ``text[offset:offset + len(marker)]``.
    """

    text: str
    kind: PlaceholderKind
    offset: int
    marker: str


Segment = Union[Literal, Placeholder, Conditional]

Argument = Union[
    None,
    bool,
    int,
    float,
    Decimal,
    str,
    Sequence[object],
    Mapping[object, object],
    SkipType,
]
