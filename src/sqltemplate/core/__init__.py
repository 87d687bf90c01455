from .builder import QueryBuilder, QueryBuilderProtocol, build_query, skip
from .errors import (
    ArgumentCountMismatch,
    ArrayElementTypeMismatch,
    MalformedTemplate,
    QueryBuildError,
    TypeMismatch,
    UnknownModifier,
)
from .types import SKIP, PlaceholderKind, SkipType

__all__ = [
    "QueryBuilder",
    "QueryBuilderProtocol",
    "build_query",
    "skip",
    "SKIP",
    "SkipType",
    "PlaceholderKind",
    "QueryBuildError",
    "ArgumentCountMismatch",
    "ArrayElementTypeMismatch",
    "MalformedTemplate",
    "TypeMismatch",
    "UnknownModifier",
]
