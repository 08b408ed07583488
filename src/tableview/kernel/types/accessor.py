"""Kernel types – FieldAccessor."""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

_MISSING = object()


class FieldAccessor:
    """Resolve a named field from a heterogeneous record.

    Records are normally mappings.  A key that exists literally in the
    mapping always wins; otherwise a dotted key walks nested mappings
    (``"address.city"``) and all-digit segments index into lists
    (``"tags.0"``).  Objects that are not mappings are read through their
    attributes.  Missing fields resolve to ``None``; :meth:`get` never
    raises.
    """

    def __init__(self, separator: str = ".") -> None:
        self._separator = separator

    def get(self, record: Any, key: str) -> Any:
        value = self._resolve(record, key)
        return None if value is _MISSING else value

    def has(self, record: Any, key: str) -> bool:
        """True if *key* resolves on *record*, even to ``None``."""
        return self._resolve(record, key) is not _MISSING

    def keys(self, record: Any) -> list[str]:
        """Top-level field names of *record*."""
        if isinstance(record, Mapping):
            return [str(k) for k in record.keys()]
        try:
            return [k for k in vars(record) if not k.startswith("_")]
        except TypeError:
            return []

    def _resolve(self, record: Any, key: str) -> Any:
        if record is None or not key:
            return _MISSING
        value = self._step(record, key)
        if value is not _MISSING or self._separator not in key:
            return value
        current: Any = record
        for segment in key.split(self._separator):
            current = self._step(current, segment)
            if current is _MISSING:
                return _MISSING
        return current

    @staticmethod
    def _step(container: Any, segment: str) -> Any:
        if isinstance(container, Mapping):
            return container.get(segment, _MISSING)
        if isinstance(container, Sequence) and not isinstance(container, (str, bytes)):
            if not segment.isdigit():
                return _MISSING
            index = int(segment)
            return container[index] if index < len(container) else _MISSING
        if container is None or isinstance(container, (str, bytes, int, float, bool)):
            return _MISSING
        return getattr(container, segment, _MISSING)


__all__ = ["FieldAccessor"]
