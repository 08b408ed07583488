"""Application sorting – SortDirection, SortDirective."""
from __future__ import annotations

import dataclasses
from enum import Enum


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


@dataclasses.dataclass(frozen=True)
class SortDirective:
    """Single-column sort.  ``direction`` is ignored while ``key`` is ``None``."""
    key: str | None = None
    direction: SortDirection = SortDirection.ASC

    def __post_init__(self) -> None:
        object.__setattr__(self, "direction", SortDirection(self.direction))

    @classmethod
    def none(cls) -> "SortDirective":
        return cls()

    @property
    def is_active(self) -> bool:
        return self.key is not None

    @property
    def descending(self) -> bool:
        return self.is_active and self.direction is SortDirection.DESC

    def toggle(self, key: str) -> "SortDirective":
        """Next directive after a click on column *key*.

        A new column starts ascending; the same column goes
        ascending -> descending -> unsorted.
        """
        if self.key != key:
            return SortDirective(key, SortDirection.ASC)
        if self.direction is SortDirection.ASC:
            return SortDirective(key, SortDirection.DESC)
        return SortDirective.none()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SortDirective):
            return NotImplemented
        if self.key is None or other.key is None:
            return self.key is other.key
        return (self.key, self.direction) == (other.key, other.direction)

    def __hash__(self) -> int:
        return hash((self.key, self.direction if self.key is not None else None))


__all__ = ["SortDirection", "SortDirective"]
