"""Application search – SearchStage.

Case-insensitive substring search across a record's fields.
"""
from __future__ import annotations

from typing import Any, Iterable, Sequence

from tableview.kernel.types import FieldAccessor, ValueKind, classify, to_text

__all__ = ["SearchStage", "text_contains"]


def text_contains(value: Any, needle: str) -> bool:
    """True if the canonical text of *value* contains *needle*.

    *needle* must already be lowercased.  Null never matches; a list
    matches when any of its elements does.
    """
    kind = classify(value)
    if kind is ValueKind.NULL:
        return False
    if kind is ValueKind.LIST:
        return any(text_contains(item, needle) for item in value)
    return needle in to_text(value).lower()


class SearchStage:
    """Keep the records whose inspected fields contain the query text."""

    def __init__(self, accessor: FieldAccessor | None = None) -> None:
        self._accessor = accessor or FieldAccessor()

    def search(
        self,
        records: Sequence[Any],
        query: str,
        searchable_keys: Sequence[str] | None = None,
    ) -> Sequence[Any]:
        if not query or not query.strip():
            return records
        needle = query.lower()
        return [r for r in records if self._matches(r, needle, searchable_keys)]

    def suggest(
        self,
        records: Iterable[Any],
        prefix: str,
        key: str,
        limit: int | None = None,
    ) -> list[str]:
        """Distinct values of *key* starting with *prefix*, first-seen order."""
        lowered = prefix.lower()
        seen: set[str] = set()
        out: list[str] = []
        for record in records:
            value = self._accessor.get(record, key)
            candidates = value if classify(value) is ValueKind.LIST else [value]
            for candidate in candidates:
                if classify(candidate) is ValueKind.NULL:
                    continue
                text = to_text(candidate)
                if text.lower().startswith(lowered) and text not in seen:
                    seen.add(text)
                    out.append(text)
                    if limit is not None and len(out) >= limit:
                        return out
        return out

    def _matches(self, record: Any, needle: str, keys: Sequence[str] | None) -> bool:
        fields = keys if keys is not None else self._accessor.keys(record)
        return any(text_contains(self._accessor.get(record, k), needle) for k in fields)
