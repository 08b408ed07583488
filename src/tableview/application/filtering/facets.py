"""Application filtering – facet options with record counts."""
from __future__ import annotations

import dataclasses
from typing import Any, Iterable

from tableview.kernel.types import FieldAccessor, ValueKind, classify, to_text

__all__ = ["FacetOption", "facet_counts"]


@dataclasses.dataclass(frozen=True)
class FacetOption:
    value: Any
    label: str
    count: int


def facet_counts(
    records: Iterable[Any],
    key: str,
    accessor: FieldAccessor | None = None,
) -> list[FacetOption]:
    """Distinct non-null values of *key* with how many records carry each.

    Options keep first-seen order.  List-valued fields count once per
    element, so a record tagged ``["a", "b"]`` adds to both options.
    """
    accessor = accessor or FieldAccessor()
    counts: dict[str, int] = {}
    firsts: dict[str, Any] = {}
    for record in records:
        value = accessor.get(record, key)
        candidates = value if classify(value) is ValueKind.LIST else [value]
        for candidate in candidates:
            if classify(candidate) is ValueKind.NULL:
                continue
            # bucket by kind too, so True and "true" stay apart
            bucket = f"{classify(candidate).value}:{to_text(candidate)}"
            if bucket not in counts:
                counts[bucket] = 0
                firsts[bucket] = candidate
            counts[bucket] += 1
    return [
        FacetOption(value=firsts[b], label=to_text(firsts[b]), count=n)
        for b, n in counts.items()
    ]
