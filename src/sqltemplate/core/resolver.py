"""Substitution of converted arguments into tokenized templates."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from ._template import placeholder_count
from .errors import ArgumentCountMismatch, MalformedTemplate
from .sql import format_value
from .types import SKIP, Conditional, Literal, Placeholder, Segment


def resolve(segments: Sequence[Segment], args: Sequence[object]) -> str:
    """Return the query text for ``segments`` with ``args`` bound positionally.

    The argument count is checked before any value is converted, and the
    first conversion failure aborts the whole call.
    """

    expected = placeholder_count(list(segments))
    if expected != len(args):
        raise ArgumentCountMismatch(expected, len(args))

    arguments = iter(args)
    return "".join(_resolve_segment(segment, arguments) for segment in segments)


def _resolve_segment(segment: Segment, arguments: Iterator[object]) -> str:
    if isinstance(segment, Literal):
        return segment.text
    if isinstance(segment, Placeholder):
        return format_value(segment.kind, next(arguments))
    if isinstance(segment, Conditional):
        return _resolve_conditional(segment, next(arguments))
    raise MalformedTemplate("Probably invalid query string")


def _resolve_conditional(segment: Conditional, value: object) -> str:
    """Render a ``{...}`` block, or drop it entirely when ``value`` is ``SKIP``."""

    if value is SKIP:
        return ""

    start = segment.offset
    end = start + len(segment.marker)
    rendered = segment.text[:start] + format_value(segment.kind, value) + segment.text[end:]
    return rendered[1:-1]


__all__ = ["resolve"]
