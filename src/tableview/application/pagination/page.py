"""Application pagination – PageResult and PaginationStage."""
from __future__ import annotations

import dataclasses
import math
from typing import Any, Callable, Generic, Sequence, TypeVar

from tableview.application.pagination.page_request import PageRequest

T = TypeVar("T")


def count_pages(total_count: int, size: int) -> int:
    """``ceil(total_count / size)``, and 0 for an empty set."""
    if size <= 0 or total_count <= 0:
        return 0
    return math.ceil(total_count / size)


@dataclasses.dataclass
class PageResult(Generic[T]):
    """One visible page plus the counts it was cut from."""

    items: list[T]
    total_count: int
    index: int
    size: int

    @property
    def total_pages(self) -> int:
        return count_pages(self.total_count, self.size)

    @property
    def has_next(self) -> bool:
        return self.index < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.index > 1

    @property
    def start_item(self) -> int:
        """1-based position of the first visible record (0 if none)."""
        if not self.items:
            return 0
        return (self.index - 1) * self.size + 1

    @property
    def end_item(self) -> int:
        """1-based position of the last visible record (0 if none)."""
        if not self.items:
            return 0
        return self.start_item + len(self.items) - 1

    def map(self, fn: Callable[[T], Any]) -> "PageResult[Any]":
        """Return a new :class:`PageResult` with each item transformed by *fn*."""
        return PageResult(
            items=[fn(item) for item in self.items],
            total_count=self.total_count,
            index=self.index,
            size=self.size,
        )

    @classmethod
    def of(cls, all_items: Sequence[T], request: PageRequest) -> "PageResult[T]":
        """Build a :class:`PageResult` by slicing *all_items* with *request*.

        An index past the last page yields an empty ``items`` list while
        ``total_count`` still reports the full set.
        """
        start = request.offset
        return cls(
            items=list(all_items[start:start + request.size]),
            total_count=len(all_items),
            index=request.index,
            size=request.size,
        )


class PaginationStage:
    """Slice an ordered record set into a single page."""

    def paginate(self, records: Sequence[T], request: PageRequest) -> PageResult[T]:
        return PageResult.of(records, request)


__all__ = ["PageResult", "PaginationStage", "count_pages"]
