"""Public package API."""

from importlib import metadata

from .core import (
    SKIP,
    ArgumentCountMismatch,
    ArrayElementTypeMismatch,
    MalformedTemplate,
    PlaceholderKind,
    QueryBuildError,
    QueryBuilder,
    QueryBuilderProtocol,
    SkipType,
    TypeMismatch,
    UnknownModifier,
    build_query,
    skip,
)

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

try:
    __version__ = metadata.version("sqltemplate")
except (
    metadata.PackageNotFoundError
):  # pragma: no cover - fallback for editable installs
    __version__ = "0.0.0"
