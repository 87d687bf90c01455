"""Internal helpers for splitting a template into segments."""

from __future__ import annotations

import re

from .errors import MalformedTemplate
from .types import Conditional, Literal, Placeholder, PlaceholderKind, Segment

# Alternation order matters: ``re`` takes the first alternative that matches at
# a given position, so typed markers must come before the bare ``?``.
MARKER_PATTERN = re.compile(r"({.*?}|\?d|\?f|\?a|\?#|\?)", re.DOTALL)
_INNER_MARKER_PATTERN = re.compile(r"\?[dfa#]?")


def tokenize(template: str) -> list[Segment]:
    """Return the segments of ``template`` in order.

    The result alternates between :class:`Literal` and marker segments and
    always starts and ends with a (possibly empty) literal, so joining the
    segment texts reproduces ``template`` exactly.
    """

    parts = MARKER_PATTERN.split(template)

    segments: list[Segment] = []
    for index, part in enumerate(parts):
        if index % 2 == 0:
            segments.append(_literal(part))
        elif part.startswith("{"):
            segments.append(_conditional(part))
        else:
            segments.append(Placeholder(kind=PlaceholderKind.from_marker(part), text=part))
    return segments


def placeholder_count(segments: list[Segment]) -> int:
    return sum(1 for segment in segments if not isinstance(segment, Literal))


def _literal(text: str) -> Literal:
    if "{" in text or "}" in text:
        raise MalformedTemplate(f"Unbalanced conditional block in {text!r}")
    return Literal(text)


def _conditional(text: str) -> Conditional:
    body = text[1:-1]
    if "{" in body:
        raise MalformedTemplate(f"Nested conditional blocks are not supported: {text!r}")

    markers = list(_INNER_MARKER_PATTERN.finditer(text))
    if len(markers) != 1:
        raise MalformedTemplate(
            f"Conditional block must contain exactly one placeholder, found {len(markers)}: {text!r}"
        )

    match = markers[0]
    return Conditional(
        text=text,
        kind=PlaceholderKind.from_marker(match.group()),
        offset=match.start(),
        marker=match.group(),
    )


__all__ = ["MARKER_PATTERN", "placeholder_count", "tokenize"]
