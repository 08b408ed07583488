"""Application pagination – page request, page result and pager window."""
from tableview.application.pagination.page_request import PageRequest
from tableview.application.pagination.page import PageResult, PaginationStage, count_pages
from tableview.application.pagination.window import PageWindow

__all__ = ["PageRequest", "PageResult", "PageWindow", "PaginationStage", "count_pages"]
