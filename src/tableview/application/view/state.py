"""Application view – ViewState."""
from __future__ import annotations

import dataclasses

from tableview.application.filtering import FilterState
from tableview.application.pagination import PageRequest
from tableview.application.sorting import SortDirective


@dataclasses.dataclass(frozen=True)
class ViewState:
    """Search, filter, sort and page configuration of one table view."""

    search_text: str = ""
    filters: FilterState = dataclasses.field(default_factory=FilterState)
    sort: SortDirective = dataclasses.field(default_factory=SortDirective)
    page: PageRequest = dataclasses.field(default_factory=PageRequest)

    @property
    def has_active_filters(self) -> bool:
        return bool(self.search_text.strip()) or self.filters.is_active


__all__ = ["ViewState"]
