"""Application view – PaginationStateController.

Owns the :class:`ViewState` of one table view and keeps the page index
consistent with the rest of it:

* changing search text, filters or sort sends the view back to page 1;
* changing the page size keeps the first visible record on screen;
* after every pipeline run the index is clamped to the pages that exist.

Row selection is kept by row key, so it survives every one of those
changes; only :meth:`clear_selection` and :meth:`reset` drop it.

The controller is not synchronised.  Hosts that touch one controller from
several threads must serialise access themselves.
"""
from __future__ import annotations

import dataclasses
from typing import Any, Mapping, Sequence

from tableview.application.filtering import FilterKind, FilterSpec, FilterState
from tableview.application.pagination import PageRequest, PageResult, PageWindow, count_pages
from tableview.application.sorting import SortDirective
from tableview.application.view.pipeline import ViewPipeline
from tableview.application.view.selection import PageSelection, RowKey, RowSelection
from tableview.application.view.state import ViewState
from tableview.config.settings import ViewSettings
from tableview.observability.logging import get_logger

_log = get_logger(__name__)


class PaginationStateController:
    """Mutable view-state holder driven by user events.

    Parameters
    ----------
    page_size:
        Initial page size.  Defaults to ``settings.default_page_size``.
    settings:
        :class:`ViewSettings`; a default instance is used when omitted.
    pipeline:
        The :class:`ViewPipeline` used by :meth:`compute`.
    row_key:
        Field key or callable identifying a record for row selection.
    """

    def __init__(
        self,
        page_size: int | None = None,
        *,
        settings: ViewSettings | None = None,
        pipeline: ViewPipeline | None = None,
        row_key: RowKey = "id",
    ) -> None:
        self._settings = settings or ViewSettings()
        self._pipeline = pipeline or ViewPipeline()
        size = page_size if page_size is not None else self._settings.default_page_size
        self._initial = ViewState(page=PageRequest(index=1, size=size))
        self._state = self._initial
        self._total_count: int | None = None
        self._last_page: PageResult[Any] | None = None
        self._selection = RowSelection(row_key, self._pipeline.accessor)

    # ------------------------------------------------------------------
    # Read accessors
    # ------------------------------------------------------------------

    @property
    def state(self) -> ViewState:
        return self._state

    @property
    def search_text(self) -> str:
        return self._state.search_text

    @property
    def filters(self) -> FilterState:
        return self._state.filters

    @property
    def sort(self) -> SortDirective:
        return self._state.sort

    @property
    def page(self) -> PageRequest:
        return self._state.page

    @property
    def page_size_options(self) -> list[int]:
        return list(self._settings.page_size_options)

    @property
    def total_count(self) -> int | None:
        """Filtered total from the last :meth:`compute`/:meth:`reconcile`, if any."""
        return self._total_count

    @property
    def total_pages(self) -> int | None:
        if self._total_count is None:
            return None
        return count_pages(self._total_count, self._state.page.size)

    @property
    def has_active_filters(self) -> bool:
        return self._state.has_active_filters

    def window(self) -> PageWindow:
        return PageWindow.build(
            self._state.page.index,
            self.total_pages or 0,
            self._settings.max_page_buttons,
        )

    # ------------------------------------------------------------------
    # Result-set setters (reset to page 1 on change)
    # ------------------------------------------------------------------

    def set_search_text(self, text: str) -> None:
        self._change(search_text=text or "")

    def set_filters(self, filters: FilterState | Mapping[str, Any]) -> None:
        if not isinstance(filters, FilterState):
            filters = FilterState.from_values(filters)
        self._change(filters=filters)

    def set_filter(self, key: str, value: Any, kind: FilterKind | str | None = None) -> None:
        spec = FilterSpec.infer(key, value) if kind is None else FilterSpec(key, FilterKind(kind), value)
        self.set_filters(self._state.filters.with_filter(spec))

    def remove_filter(self, key: str) -> None:
        self.set_filters(self._state.filters.without(key))

    def clear_filters(self) -> None:
        """Drop every field filter and the search text."""
        self._change(search_text="", filters=self._state.filters.cleared())

    def set_sort(self, directive: SortDirective) -> None:
        self._change(sort=directive)

    def toggle_sort(self, key: str) -> None:
        self.set_sort(self._state.sort.toggle(key))

    # ------------------------------------------------------------------
    # Page setters
    # ------------------------------------------------------------------

    def set_page(self, index: int) -> None:
        """Move to *index*; out-of-range indexes are clamped on the next compute."""
        if not isinstance(index, int) or isinstance(index, bool) or index < 1:
            _log.debug("view.page_rejected", requested=index)
            return
        self._set_page(index, self._state.page.size)

    def set_page_size(self, size: int) -> None:
        """Change the page size, keeping the first visible record visible."""
        old = self._state.page
        if not isinstance(size, int) or isinstance(size, bool) or size < 1 or size == old.size:
            return
        index = old.offset // size + 1
        if self._total_count is not None and index > count_pages(self._total_count, size):
            index = 1
        _log.debug(
            "view.page_size_changed",
            old_size=old.size,
            new_size=size,
            old_index=old.index,
            new_index=index,
        )
        self._set_page(index, size)

    def go_to_page(self, index: int) -> None:
        """Quick jump: like :meth:`set_page` but clamped eagerly to known pages."""
        total_pages = self.total_pages
        if total_pages is not None and isinstance(index, int) and not isinstance(index, bool):
            index = max(1, min(index, total_pages))
        self.set_page(index)

    def next_page(self) -> None:
        total_pages = self.total_pages
        if total_pages is not None and self._state.page.index >= total_pages:
            return
        self.set_page(self._state.page.index + 1)

    def previous_page(self) -> None:
        if self._state.page.index > 1:
            self.set_page(self._state.page.index - 1)

    def first_page(self) -> None:
        self.set_page(1)

    def last_page(self) -> None:
        if self.total_pages:
            self.set_page(self.total_pages)

    # ------------------------------------------------------------------
    # Pipeline coupling
    # ------------------------------------------------------------------

    def reconcile(self, total_count: int) -> bool:
        """Record the filtered total and clamp the page index into range.

        Returns ``True`` if the index moved.
        """
        self._total_count = max(0, total_count)
        page = self._state.page
        clamped = max(1, min(page.index, count_pages(self._total_count, page.size)))
        if clamped == page.index:
            return False
        _log.debug("view.page_clamped", old_index=page.index, new_index=clamped, total_count=total_count)
        self._set_page(clamped, page.size)
        return True

    def compute(self, records: Sequence[Any]) -> PageResult[Any]:
        """Run the pipeline and return the page for the (clamped) index."""
        ordered = self._pipeline.arrange(records, self._state)
        self.reconcile(len(ordered))
        self._last_page = self._pipeline.paginate(ordered, self._state.page)
        return self._last_page

    def reset(self) -> None:
        self._state = self._initial
        self._total_count = None
        self._last_page = None
        self._selection.clear()

    # ------------------------------------------------------------------
    # Row selection
    # ------------------------------------------------------------------

    @property
    def selected_keys(self) -> list[Any]:
        return self._selection.keys

    def is_selected(self, record: Any) -> bool:
        return self._selection.is_selected(record)

    def toggle_row(self, record: Any) -> bool:
        return self._selection.toggle(record)

    def select_page(self, page: PageResult[Any] | None = None) -> None:
        """Select every row of *page*, by default the last computed page."""
        self._selection.select(self._page_items(page))

    def deselect_page(self, page: PageResult[Any] | None = None) -> None:
        self._selection.deselect(self._page_items(page))

    def page_selection(self, page: PageResult[Any] | None = None) -> PageSelection:
        """Header checkbox state for *page*, by default the last computed page."""
        page = page or self._last_page
        if page is None:
            return PageSelection.NONE
        return self._selection.page_state(page)

    def selected_rows(self, records: Sequence[Any]) -> list[Any]:
        return self._selection.rows(records)

    def clear_selection(self) -> None:
        self._selection.clear()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _page_items(self, page: PageResult[Any] | None) -> list[Any]:
        page = page or self._last_page
        return page.items if page is not None else []

    def _set_page(self, index: int, size: int) -> None:
        self._state = dataclasses.replace(self._state, page=PageRequest(index=index, size=size))

    def _change(self, **changes: Any) -> None:
        updated = dataclasses.replace(self._state, **changes)
        if updated == self._state:
            return
        if updated.page.index != 1:
            _log.debug("view.page_reset", old_index=updated.page.index, changed=sorted(changes))
            updated = dataclasses.replace(updated, page=PageRequest(index=1, size=updated.page.size))
        self._state = updated


__all__ = ["PaginationStateController"]
