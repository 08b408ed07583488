"""Application filtering – FilterStage."""
from __future__ import annotations

from typing import Any, Sequence

from tableview.application.filtering.spec import FilterKind, FilterSpec, FilterState, RangeValue
from tableview.application.search.stage import text_contains
from tableview.kernel.types import (
    FieldAccessor,
    ValueKind,
    classify,
    coerce_datetime,
    to_text,
    values_equal,
)

__all__ = ["FilterStage"]


class FilterStage:
    """Narrow a record set to those satisfying every active filter (logical AND).

    A filter on a field that no record of *universe* carries is skipped.
    Otherwise a null or non-comparable field value fails the filter.
    *universe* defaults to *records*; pass the unsearched input when
    filtering an already narrowed set.
    """

    def __init__(self, accessor: FieldAccessor | None = None) -> None:
        self._accessor = accessor or FieldAccessor()

    def filter(
        self,
        records: Sequence[Any],
        state: FilterState,
        universe: Sequence[Any] | None = None,
    ) -> Sequence[Any]:
        known_in = records if universe is None else universe
        specs = [s for s in state.active() if self._is_known(known_in, s.key)]
        if not specs:
            return records
        return [r for r in records if all(self.matches(r, s) for s in specs)]

    def matches(self, record: Any, spec: FilterSpec) -> bool:
        if spec.is_noop:
            return True
        value = self._accessor.get(record, spec.key)
        if classify(value) is ValueKind.NULL:
            return False
        match spec.kind:
            case FilterKind.EXACT:
                return values_equal(value, spec.value)
            case FilterKind.TEXT:
                return text_contains(value, to_text(spec.value).lower())
            case FilterKind.SET:
                return self._in_set(value, spec.value)
            case FilterKind.RANGE:
                return self._in_range(value, spec.value)
            case FilterKind.BOOLEAN:
                return classify(value) is ValueKind.BOOLEAN and value is spec.value
            case _:
                return True

    def _is_known(self, records: Sequence[Any], key: str) -> bool:
        return any(self._accessor.has(r, key) for r in records)

    @staticmethod
    def _in_set(value: Any, allowed: tuple[Any, ...]) -> bool:
        candidates = value if classify(value) is ValueKind.LIST else (value,)
        return any(values_equal(c, a) for c in candidates for a in allowed)

    @staticmethod
    def _in_range(value: Any, bounds: RangeValue) -> bool:
        numeric = classify(bounds.start if bounds.start is not None else bounds.end) is ValueKind.NUMBER
        if numeric:
            if classify(value) is not ValueKind.NUMBER:
                return False
            candidate = value
        else:
            if classify(value) not in (ValueKind.DATE, ValueKind.STRING):
                return False
            candidate = coerce_datetime(value)
            if candidate is None:
                return False
        if bounds.start is not None and candidate < bounds.start:
            return False
        if bounds.end is not None and candidate > bounds.end:
            return False
        return True
