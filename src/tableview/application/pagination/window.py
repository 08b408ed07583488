"""Application pagination – PageWindow.

The numbered buttons a pager shows around the current page.
"""
from __future__ import annotations

import dataclasses

JUMP_DISTANCE = 5


@dataclasses.dataclass(frozen=True)
class PageWindow:
    pages: tuple[int, ...]
    current: int
    total_pages: int

    @property
    def show_left_ellipsis(self) -> bool:
        return bool(self.pages) and self.pages[0] > 1

    @property
    def show_right_ellipsis(self) -> bool:
        return bool(self.pages) and self.pages[-1] < self.total_pages

    @property
    def jump_previous(self) -> int:
        return max(1, self.current - JUMP_DISTANCE)

    @property
    def jump_next(self) -> int:
        return max(1, min(self.total_pages, self.current + JUMP_DISTANCE))

    @classmethod
    def build(cls, current: int, total_pages: int, max_buttons: int = 7) -> "PageWindow":
        """Centre at most *max_buttons* page numbers on *current*.

        Near either end the window slides so it stays full.
        """
        total_pages = max(0, total_pages)
        max_buttons = max(1, max_buttons)
        if total_pages <= max_buttons:
            return cls(tuple(range(1, total_pages + 1)), current, total_pages)

        delta = (max_buttons - 1) // 2
        start = max(1, current - delta)
        end = min(total_pages, start + max_buttons - 1)
        if end - start + 1 < max_buttons:
            start = max(1, end - max_buttons + 1)
        return cls(tuple(range(start, end + 1)), current, total_pages)


__all__ = ["PageWindow"]
