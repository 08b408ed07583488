"""Kernel types – tagged value model and field access."""
from tableview.kernel.types.accessor import FieldAccessor
from tableview.kernel.types.values import (
    ValueKind,
    classify,
    coerce_datetime,
    compare_values,
    is_null,
    to_text,
    values_equal,
)

__all__ = [
    "FieldAccessor",
    "ValueKind",
    "classify",
    "coerce_datetime",
    "compare_values",
    "is_null",
    "to_text",
    "values_equal",
]
