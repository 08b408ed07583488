"""Application sorting – SortStage."""
from __future__ import annotations

import functools
from typing import Any, Sequence

from tableview.application.sorting.directive import SortDirective
from tableview.kernel.types import FieldAccessor, compare_values, is_null

__all__ = ["SortStage"]


class SortStage:
    """Stable single-key sort.

    Nulls go last in both directions; ``DESC`` only negates the comparison
    between two non-null values.
    """

    def __init__(self, accessor: FieldAccessor | None = None) -> None:
        self._accessor = accessor or FieldAccessor()

    def sort(self, records: Sequence[Any], directive: SortDirective) -> Sequence[Any]:
        if not directive.is_active:
            return records
        key = directive.key
        sign = -1 if directive.descending else 1

        def compare(a: tuple[Any, Any], b: tuple[Any, Any]) -> int:
            a_null, b_null = is_null(a[0]), is_null(b[0])
            if a_null or b_null:
                return int(a_null) - int(b_null)
            return sign * compare_values(a[0], b[0])

        # resolve each key once; sorted() is stable
        decorated = [(self._accessor.get(r, key), r) for r in records]
        decorated = sorted(decorated, key=functools.cmp_to_key(compare))
        return [r for _, r in decorated]
