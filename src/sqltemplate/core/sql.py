"""Conversion of Python values into SQL literal text.

Each placeholder kind accepts a strict set of input types.  Anything outside
that set raises :class:`~sqltemplate.core.errors.TypeMismatch` instead of being
coerced, so a caller passing the wrong thing finds out immediately rather than
getting a query with a silently mis-typed literal.

String values are wrapped in single quotes verbatim.  No escaping of embedded
quotes is performed; this module formats literals, it does not make arbitrary
input safe to interpolate.
"""

from __future__ import annotations

import math
import re
from collections.abc import Callable, Mapping
from decimal import Decimal

from .errors import ArrayElementTypeMismatch, TypeMismatch, UnknownModifier
from .types import PlaceholderKind

NULL = "NULL"

# CPython's default limit for int <-> str conversion.
MAX_INTEGER_DIGITS = 4300

# Mirrors the permissive "numeric string" notion: optional surrounding
# whitespace, a sign, digits with an optional fraction and an exponent.
_NUMERIC_PATTERN = re.compile(r"\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*")


def _is_numeric(value: object) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float, Decimal)):
        return True
    return isinstance(value, str) and _NUMERIC_PATTERN.fullmatch(value) is not None


def _to_decimal(value: object, kind: PlaceholderKind) -> Decimal:
    try:
        if isinstance(value, str):
            return Decimal(value.strip())
        return Decimal(value)  # type: ignore[arg-type]
    except ValueError as exc:
        raise TypeMismatch(kind.value, value) from exc


def _is_list(value: object) -> bool:
    return isinstance(value, (list, tuple))


def _digits(number: int | float, kind: PlaceholderKind, value: object) -> str:
    """Return ``repr(number)``, raising :class:`TypeMismatch` past the digit limit."""

    try:
        return repr(number)
    except ValueError as exc:
        raise TypeMismatch(kind.value, value) from exc


def _integer_digits(number: Decimal, kind: PlaceholderKind, value: object) -> str:
    # Checked before int() so "1e200000000" fails instead of materializing.
    if number.adjusted() >= MAX_INTEGER_DIGITS:
        raise TypeMismatch(kind.value, value)
    return _digits(int(number), kind, value)


def _format_number(value: int | float, kind: PlaceholderKind) -> str:
    if isinstance(value, float) and not math.isfinite(value):
        raise TypeMismatch(kind.value, value)
    return _digits(value, kind, value)


def format_int(value: object) -> str:
    """Return ``value`` formatted for a ``?d`` placeholder."""

    if value is None:
        return NULL
    if isinstance(value, bool):
        return str(int(value))
    if isinstance(value, int):
        return _digits(value, PlaceholderKind.INT, value)
    if _is_numeric(value):
        number = _to_decimal(value, PlaceholderKind.INT)
        if number.is_finite() and number == number.to_integral_value():
            return _integer_digits(number, PlaceholderKind.INT, value)
    raise TypeMismatch(PlaceholderKind.INT.value, value)


def format_float(value: object) -> str:
    """Return ``value`` formatted for a ``?f`` placeholder.

    Only genuine floats keep their fractional part.  Booleans and other
    numeric inputs (ints, decimals, numeric strings) are truncated towards
    zero, so ``"2.75"`` renders as ``2``.
    """

    if value is None:
        return NULL
    if isinstance(value, float):
        return _format_number(value, PlaceholderKind.FLOAT)
    if isinstance(value, bool) or _is_numeric(value):
        number = _to_decimal(value, PlaceholderKind.FLOAT)
        if number.is_finite():
            return _integer_digits(number, PlaceholderKind.FLOAT, value)
    raise TypeMismatch(PlaceholderKind.FLOAT.value, value)


def format_identifiers(value: object) -> str:
    """Return ``value`` as a backtick quoted identifier or identifier list."""

    if isinstance(value, str):
        names = value
    elif _is_list(value) and all(isinstance(name, str) for name in value):
        names = "`, `".join(value)  # type: ignore[arg-type]
    else:
        raise TypeMismatch(PlaceholderKind.IDENTIFIER.value, value)
    return f"`{names}`"


def format_array(value: object) -> str:
    """Return ``value`` formatted for a ``?a`` placeholder.

    Lists render as a comma separated list of literals, mappings as
    ```key` = literal`` assignments in insertion order.
    """

    if not isinstance(value, Mapping) and not _is_list(value):
        raise TypeMismatch(PlaceholderKind.ARRAY.value, value)

    try:
        if isinstance(value, Mapping):
            items = [f"`{key}` = {format_base(item)}" for key, item in value.items()]
        else:
            items = [format_base(item) for item in value]  # type: ignore[union-attr]
    except TypeMismatch as exc:
        raise ArrayElementTypeMismatch(value) from exc
    return ", ".join(items)


def format_base(value: object) -> str:
    """Return ``value`` formatted for a generic ``?`` placeholder."""

    if isinstance(value, str):
        return f"'{value}'"
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, (int, float)):
        return _format_number(value, PlaceholderKind.BASE)
    if value is None:
        return NULL
    raise TypeMismatch(PlaceholderKind.BASE.value, value)


CONVERTERS: dict[PlaceholderKind, Callable[[object], str]] = {
    PlaceholderKind.INT: format_int,
    PlaceholderKind.FLOAT: format_float,
    PlaceholderKind.IDENTIFIER: format_identifiers,
    PlaceholderKind.ARRAY: format_array,
    PlaceholderKind.BASE: format_base,
}


def format_value(kind: PlaceholderKind | str, value: object) -> str:
    """Convert ``value`` with the converter registered for ``kind``."""

    try:
        converter = CONVERTERS[PlaceholderKind(kind)]
    except (KeyError, ValueError):
        raise UnknownModifier(getattr(kind, "value", kind)) from None
    return converter(value)


__all__ = [
    "CONVERTERS",
    "MAX_INTEGER_DIGITS",
    "NULL",
    "format_array",
    "format_base",
    "format_float",
    "format_identifiers",
    "format_int",
    "format_value",
]
