"""Application view – ViewPipeline.

Search -> Filter -> Sort -> Paginate, always in that order.
"""
from __future__ import annotations

import time
from typing import Any, Sequence

from tableview.application.filtering import FilterStage
from tableview.application.pagination import PageRequest, PageResult, PaginationStage
from tableview.application.search import SearchStage
from tableview.application.sorting import SortStage
from tableview.application.view.state import ViewState
from tableview.kernel.types import FieldAccessor
from tableview.observability.logging import get_logger

_log = get_logger(__name__)


class ViewPipeline:
    """Single entry point turning raw records plus a :class:`ViewState` into a page.

    Input collections are never mutated: each stage returns either its
    input untouched (no-op) or a new list.
    """

    def __init__(
        self,
        searchable_keys: Sequence[str] | None = None,
        accessor: FieldAccessor | None = None,
    ) -> None:
        self._searchable_keys = list(searchable_keys) if searchable_keys is not None else None
        self._accessor = accessor or FieldAccessor()
        self._search = SearchStage(self._accessor)
        self._filter = FilterStage(self._accessor)
        self._sort = SortStage(self._accessor)
        self._paginate = PaginationStage()

    @property
    def accessor(self) -> FieldAccessor:
        return self._accessor

    @property
    def search_stage(self) -> SearchStage:
        return self._search

    def arrange(self, records: Sequence[Any], state: ViewState) -> list[Any]:
        """The full searched, filtered and sorted set, before paging."""
        start = time.perf_counter()
        searched = self._search.search(records, state.search_text, self._searchable_keys)
        filtered = self._filter.filter(searched, state.filters, universe=records)
        ordered = self._sort.sort(filtered, state.sort)
        _log.debug(
            "view.arranged",
            input_count=len(records),
            searched_count=len(searched),
            filtered_count=len(filtered),
            sort_key=state.sort.key,
            duration_ms=round((time.perf_counter() - start) * 1000, 3),
        )
        return list(ordered)

    def paginate(self, ordered: Sequence[Any], page: PageRequest) -> PageResult[Any]:
        """Cut *page* out of an arranged set and log the ``view.computed`` summary."""
        result = self._paginate.paginate(ordered, page)
        _log.debug(
            "view.computed",
            total_count=result.total_count,
            total_pages=result.total_pages,
            page_index=result.index,
            page_size=result.size,
            visible_count=len(result.items),
        )
        return result

    def compute(self, records: Sequence[Any], state: ViewState) -> PageResult[Any]:
        return self.paginate(self.arrange(records, state), state.page)


__all__ = ["ViewPipeline"]
