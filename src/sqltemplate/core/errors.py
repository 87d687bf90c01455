"""Exceptions raised while building a query.

Every error is a :class:`ValueError` so callers that only care about "bad
input" can catch that, while the subclasses keep enough context to produce a
useful diagnostic.
"""

from __future__ import annotations

__all__ = [
    "ArgumentCountMismatch",
    "ArrayElementTypeMismatch",
    "MalformedTemplate",
    "QueryBuildError",
    "TypeMismatch",
    "UnknownModifier",
]


class QueryBuildError(ValueError):
    """Base class for all query building failures."""


class ArgumentCountMismatch(QueryBuildError):
    def __init__(self, expected: int, passed: int) -> None:
        super().__init__(f"query expects {expected} arguments but {passed} passed")
        self.expected = expected
        self.passed = passed


class MalformedTemplate(QueryBuildError):
    """The template has unbalanced braces or an unusable conditional block."""


class TypeMismatch(QueryBuildError):
    """A value is not accepted by the placeholder it is bound to."""

    def __init__(self, kind: str, value: object, message: str | None = None) -> None:
        if message is None:
            message = f"Unexpected variable for modifier `{kind}` -> passed `{value!r}`"
        super().__init__(message)
        self.kind = kind
        self.value = value


class ArrayElementTypeMismatch(TypeMismatch):
    def __init__(self, value: object) -> None:
        super().__init__(
            "?a",
            value,
            "Only scalar values supported in array for `?a` modifier",
        )


class UnknownModifier(QueryBuildError):
    def __init__(self, marker: str) -> None:
        super().__init__(f"Unexpected modifier: `{marker}`")
        self.marker = marker
