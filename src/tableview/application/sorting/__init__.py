"""Application sorting – sort directive and the sort stage."""
from tableview.application.sorting.directive import SortDirection, SortDirective
from tableview.application.sorting.stage import SortStage

__all__ = ["SortDirection", "SortDirective", "SortStage"]
