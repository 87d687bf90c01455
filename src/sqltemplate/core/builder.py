"""Primary entry point for building queries from placeholder templates."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from google.cloud import bigquery

from ._template import placeholder_count, tokenize
from .resolver import resolve
from .types import SKIP, SkipType

logger = logging.getLogger(__name__)


@runtime_checkable
class QueryBuilderProtocol(Protocol):
    """Structural contract for objects that can build queries."""

    def build_query(self, template: str, args: Sequence[object] = ()) -> str: ...

    def skip(self) -> SkipType: ...


class QueryBuilder:
    """Build SQL text from a template with typed ``?`` placeholders.

    Supported markers are ``?`` (generic literal), ``?d`` (integer), ``?f``
    (float), ``?a`` (list or mapping) and ``?#`` (identifier or list of
    identifiers).  A ``{...}`` block wrapping a single marker disappears from
    the output when its argument is :meth:`skip`.

    The optional ``client`` is kept for callers that pass the builder around
    together with the connection it targets; building a query never touches
    it.
    """

    def __init__(self, client: bigquery.Client | None = None) -> None:
        self.client = client

    def build_query(self, template: str, args: Sequence[object] = ()) -> str:
        """Return ``template`` with every placeholder replaced by its argument."""

        segments = tokenize(template)
        logger.debug(
            "Building query with %d placeholder(s): %s",
            placeholder_count(segments),
            template,
        )
        return resolve(segments, list(args))

    @staticmethod
    def skip() -> SkipType:
        """Return the value that removes a conditional block from the query."""

        return SKIP


_default_builder = QueryBuilder()


def build_query(template: str, args: Sequence[object] = ()) -> str:
    return _default_builder.build_query(template, args)


def skip() -> SkipType:
    return SKIP


__all__ = ["QueryBuilder", "QueryBuilderProtocol", "build_query", "skip"]
