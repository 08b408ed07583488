"""Kernel types – tagged value model for record fields.

Records are schema-less, so every comparison the stages make goes through
:func:`classify` first.  The tag decides how two values are compared,
matched and rendered, which keeps the filter and sort stages total over
whatever a caller puts in a record.
"""
from __future__ import annotations

import datetime
import math
from decimal import Decimal
from enum import Enum
from typing import Any

_UTC = datetime.timezone.utc


class ValueKind(str, Enum):
    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    DATE = "date"
    STRING = "string"
    LIST = "list"
    OTHER = "other"


# Mixed-kind ordering; NULL never reaches the comparator.
_KIND_RANK: dict[ValueKind, int] = {
    ValueKind.BOOLEAN: 0,
    ValueKind.NUMBER: 1,
    ValueKind.DATE: 2,
    ValueKind.STRING: 3,
    ValueKind.LIST: 4,
    ValueKind.OTHER: 5,
}


def classify(value: Any) -> ValueKind:
    """Return the :class:`ValueKind` tag for *value*.

    ``bool`` is checked before ``int`` so ``True`` is never a number.
    NaN (float or Decimal) is tagged ``NULL``: it has no place in an order.
    """
    if value is None:
        return ValueKind.NULL
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, (int, float, Decimal)):
        if isinstance(value, float) and math.isnan(value):
            return ValueKind.NULL
        if isinstance(value, Decimal) and value.is_nan():
            return ValueKind.NULL
        return ValueKind.NUMBER
    if isinstance(value, datetime.date):
        return ValueKind.DATE
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, (list, tuple)):
        return ValueKind.LIST
    return ValueKind.OTHER


def is_null(value: Any) -> bool:
    return classify(value) is ValueKind.NULL


def to_text(value: Any) -> str:
    """Canonical, deterministic text for *value*.

    >>> to_text(3.0), to_text(True), to_text(datetime.date(2024, 1, 5))
    ('3', 'true', '2024-01-05')
    """
    kind = classify(value)
    if kind is ValueKind.NULL:
        return ""
    if kind is ValueKind.BOOLEAN:
        return "true" if value else "false"
    if kind is ValueKind.NUMBER:
        if isinstance(value, float) and value.is_integer():
            return str(int(value))
        return str(value)
    if kind is ValueKind.DATE:
        return value.isoformat()
    if kind is ValueKind.LIST:
        return ",".join(to_text(item) for item in value)
    return str(value)


def coerce_datetime(value: Any) -> datetime.datetime | None:
    """Return *value* as an aware UTC datetime, or ``None`` if it is not a date.

    Plain dates become midnight UTC and naive datetimes are read as UTC.
    Strings are parsed as ISO-8601 (a trailing ``Z`` is accepted).
    """
    if isinstance(value, datetime.datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=_UTC)
        return value.astimezone(_UTC)
    if isinstance(value, datetime.date):
        return datetime.datetime(value.year, value.month, value.day, tzinfo=_UTC)
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.datetime.fromisoformat(text)
        except ValueError:
            return None
        return coerce_datetime(parsed)
    return None


def _cmp(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


def _compare_nullable(a: Any, b: Any) -> int:
    a_null, b_null = is_null(a), is_null(b)
    if a_null or b_null:
        return _cmp(not a_null, not b_null)
    return compare_values(a, b)


def compare_values(a: Any, b: Any) -> int:
    """Three-way comparison of two non-null values (-1, 0 or 1)."""
    kind_a, kind_b = classify(a), classify(b)
    if kind_a is not kind_b:
        return _cmp(_KIND_RANK[kind_a], _KIND_RANK[kind_b])
    if kind_a is ValueKind.BOOLEAN:
        return _cmp(int(a), int(b))
    if kind_a in (ValueKind.NUMBER, ValueKind.STRING):
        return _cmp(a, b)
    if kind_a is ValueKind.DATE:
        return _cmp(coerce_datetime(a), coerce_datetime(b))
    if kind_a is ValueKind.LIST:
        for left, right in zip(a, b):
            result = _compare_nullable(left, right)
            if result:
                return result
        return _cmp(len(a), len(b))
    return _cmp(to_text(a), to_text(b))


def values_equal(a: Any, b: Any) -> bool:
    """Type-aware equality: ``True != 1`` and ``"1" != 1``, but ``1 == 1.0``."""
    kind_a, kind_b = classify(a), classify(b)
    if kind_a is not kind_b:
        return False
    if kind_a is ValueKind.NULL:
        return True
    if kind_a is ValueKind.DATE:
        return coerce_datetime(a) == coerce_datetime(b)
    if kind_a is ValueKind.LIST:
        return len(a) == len(b) and all(values_equal(x, y) for x, y in zip(a, b))
    return bool(a == b)


__all__ = [
    "ValueKind",
    "classify",
    "coerce_datetime",
    "compare_values",
    "is_null",
    "to_text",
    "values_equal",
]
