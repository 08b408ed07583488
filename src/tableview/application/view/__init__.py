"""Application view – the composed pipeline and the state controller around it."""
from tableview.application.view.state import ViewState
from tableview.application.view.pipeline import ViewPipeline
from tableview.application.view.selection import PageSelection, RowSelection
from tableview.application.view.controller import PaginationStateController

__all__ = ["PageSelection", "PaginationStateController", "RowSelection", "ViewPipeline", "ViewState"]
