from __future__ import annotations

import pytest

from sqltemplate.core._template import placeholder_count, tokenize
from sqltemplate.core.errors import MalformedTemplate
from sqltemplate.core.types import Conditional, Literal, Placeholder, PlaceholderKind


def _text(segment) -> str:
    return segment.text


def test_tokenize_alternates_literals_and_markers() -> None:
    segments = tokenize("SELECT ?# FROM t WHERE a = ?d AND b = ?")

    assert segments == [
        Literal("SELECT "),
        Placeholder(PlaceholderKind.IDENTIFIER, "?#"),
        Literal(" FROM t WHERE a = "),
        Placeholder(PlaceholderKind.INT, "?d"),
        Literal(" AND b = "),
        Placeholder(PlaceholderKind.BASE, "?"),
        Literal(""),
    ]


def test_tokenize_reproduces_template() -> None:
    template = "SELECT ?a, ?f FROM t{ WHERE id IN (?a)} LIMIT ?d"

    assert "".join(_text(segment) for segment in tokenize(template)) == template


def test_template_without_markers_is_one_literal() -> None:
    assert tokenize("SELECT 1") == [Literal("SELECT 1")]
    assert tokenize("") == [Literal("")]


def test_unknown_suffix_is_generic_placeholder() -> None:
    segments = tokenize("a = ?x")

    assert segments[1] == Placeholder(PlaceholderKind.BASE, "?")
    assert segments[2] == Literal("x")


def test_conditional_block_records_inner_marker() -> None:
    segments = tokenize("SELECT 1{ WHERE id = ?d}")

    assert segments[1] == Conditional(
        text="{ WHERE id = ?d}",
        kind=PlaceholderKind.INT,
        offset=13,
        marker="?d",
    )
    assert placeholder_count(segments) == 1


def test_conditional_block_defaults_to_generic_marker() -> None:
    (_, block, _) = tokenize("{ AND name = ?}")

    assert block.kind is PlaceholderKind.BASE
    assert block.marker == "?"


def test_conditional_block_may_span_lines() -> None:
    (_, block, _) = tokenize("SELECT 1{\nWHERE id = ?d\n}")

    assert block.kind is PlaceholderKind.INT


@pytest.mark.parametrize(
    "template",
    [
        "SELECT 1{ WHERE id = 1}",
        "SELECT 1{ WHERE id = ?d AND name = ?}",
        "SELECT 1{ WHERE {id = ?d}}",
        "SELECT 1{ WHERE id = ?d",
        "SELECT 1 WHERE id = ?d}",
    ],
)
def test_malformed_templates_are_rejected(template: str) -> None:
    with pytest.raises(MalformedTemplate):
        tokenize(template)
