"""View errors – malformed view parameters rejected at construction time.

The pipeline itself never raises; these errors only guard the value
objects (:class:`FilterSpec`, :class:`PageRequest`) that callers build.
Both concrete errors also derive from :class:`ValueError` so plain
``except ValueError`` handlers keep working.
"""

from __future__ import annotations

from tableview.kernel.errors.base import BaseError


class ViewError(BaseError):
    """Base class for view-parameter errors."""

    default_code = "view_error"


class InvalidFilterError(ViewError, ValueError):
    """A filter spec has a shape that does not fit its kind."""

    default_code = "invalid_filter"
    context_fields = ("key", "reason")

    def __init__(self, key: str, reason: str) -> None:
        self.key = key
        self.reason = reason
        super().__init__(f"Invalid filter for '{key}': {reason}")


class InvalidPageRequestError(ViewError, ValueError):
    """Page index or page size is below 1."""

    default_code = "invalid_page_request"
    context_fields = ("field", "value")

    def __init__(self, field: str, value: object) -> None:
        self.field = field
        self.value = value
        super().__init__(f"{field} must be >= 1, got {value!r}")


__all__ = ["InvalidFilterError", "InvalidPageRequestError", "ViewError"]
