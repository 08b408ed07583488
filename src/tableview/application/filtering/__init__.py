"""Application filtering – field constraints, the filter stage and facets."""
from tableview.application.filtering.spec import (
    ALL,
    FilterKind,
    FilterSpec,
    FilterState,
    RangeValue,
    is_no_selection,
)
from tableview.application.filtering.stage import FilterStage
from tableview.application.filtering.facets import FacetOption, facet_counts

__all__ = [
    "ALL",
    "FacetOption",
    "FilterKind",
    "FilterSpec",
    "FilterStage",
    "FilterState",
    "RangeValue",
    "facet_counts",
    "is_no_selection",
]
