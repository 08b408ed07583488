"""Application view – RowSelection.

Checkbox selection of table rows, tracked by row key so it survives
paging, searching, filtering and sorting.
"""
from __future__ import annotations

from collections.abc import Hashable
from enum import Enum
from typing import Any, Callable, Iterable, Sequence

from tableview.application.pagination import PageResult
from tableview.kernel.types import FieldAccessor
from tableview.observability.logging import get_logger

_log = get_logger(__name__)

RowKey = str | Callable[[Any], Any]


class PageSelection(str, Enum):
    """State of the select-all checkbox for one page."""
    NONE = "none"
    SOME = "some"
    ALL = "all"


class RowSelection:
    """Ordered set of selected row keys.

    *row_key* is either a field key read through the
    :class:`FieldAccessor` or a callable returning the key of a record.
    Records whose key is ``None`` or unhashable cannot be selected.
    """

    def __init__(self, row_key: RowKey = "id", accessor: FieldAccessor | None = None) -> None:
        self._row_key = row_key
        self._accessor = accessor or FieldAccessor()
        self._keys: dict[Any, None] = {}

    @property
    def keys(self) -> list[Any]:
        """Selected keys in the order they were selected."""
        return list(self._keys)

    def __len__(self) -> int:
        return len(self._keys)

    def key_of(self, record: Any) -> Any:
        if callable(self._row_key):
            key = self._row_key(record)
        else:
            key = self._accessor.get(record, self._row_key)
        return key if isinstance(key, Hashable) else None

    def is_selected(self, record: Any) -> bool:
        key = self.key_of(record)
        return key is not None and key in self._keys

    def toggle(self, record: Any) -> bool:
        """Flip *record*'s selection; returns whether it is now selected."""
        key = self.key_of(record)
        if key is None:
            return False
        if key in self._keys:
            del self._keys[key]
            selected = False
        else:
            self._keys[key] = None
            selected = True
        self._changed("toggle")
        return selected

    def select(self, records: Iterable[Any]) -> None:
        for key in self._selectable_keys(records):
            self._keys.setdefault(key, None)
        self._changed("select")

    def deselect(self, records: Iterable[Any]) -> None:
        for key in self._selectable_keys(records):
            self._keys.pop(key, None)
        self._changed("deselect")

    def clear(self) -> None:
        if self._keys:
            self._keys.clear()
            self._changed("clear")

    def page_state(self, page: PageResult[Any]) -> PageSelection:
        keys = self._selectable_keys(page.items)
        chosen = sum(1 for k in keys if k in self._keys)
        if not keys or chosen == 0:
            return PageSelection.NONE
        return PageSelection.ALL if chosen == len(keys) else PageSelection.SOME

    def rows(self, records: Sequence[Any]) -> list[Any]:
        """The selected records of *records*, in input order."""
        return [r for r in records if self.is_selected(r)]

    def _selectable_keys(self, records: Iterable[Any]) -> list[Any]:
        return [k for k in (self.key_of(r) for r in records) if k is not None]

    def _changed(self, action: str) -> None:
        _log.debug("view.selection_changed", action=action, selected_count=len(self._keys))


__all__ = ["PageSelection", "RowKey", "RowSelection"]
