"""Application pagination – PageRequest."""
from __future__ import annotations

import dataclasses

from tableview.kernel.errors import InvalidPageRequestError


@dataclasses.dataclass(frozen=True)
class PageRequest:
    """1-based page index and page size."""
    index: int = 1
    size: int = 10

    def __post_init__(self) -> None:
        if self.index < 1:
            raise InvalidPageRequestError("index", self.index)
        if self.size < 1:
            raise InvalidPageRequestError("size", self.size)

    @property
    def offset(self) -> int:
        return (self.index - 1) * self.size


__all__ = ["PageRequest"]
