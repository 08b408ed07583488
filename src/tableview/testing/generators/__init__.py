"""Testing generators – Hypothesis strategies for records and view parameters."""
from tableview.testing.generators.strategies import (
    SORTABLE_KEYS,
    STATUSES,
    TAGS,
    filter_state_strategy,
    page_request_strategy,
    record_list_strategy,
    record_strategy,
    sort_directive_strategy,
)

__all__ = [
    "SORTABLE_KEYS",
    "STATUSES",
    "TAGS",
    "filter_state_strategy",
    "page_request_strategy",
    "record_list_strategy",
    "record_strategy",
    "sort_directive_strategy",
]
