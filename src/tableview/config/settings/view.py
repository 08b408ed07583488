"""Config settings – ViewSettings."""
from __future__ import annotations

import dataclasses
import logging
from typing import ClassVar

from tableview.config.settings.base import Settings
from tableview.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class ViewSettings(Settings):
    """Defaults for a table view, read from ``TABLEVIEW_*`` variables.

    ``TABLEVIEW_DEFAULT_PAGE_SIZE=25``, ``TABLEVIEW_PAGE_SIZE_OPTIONS=10,25,50``
    and ``TABLEVIEW_MAX_PAGE_BUTTONS=5`` are typical overrides.
    """

    _prefix: ClassVar[str] = "TABLEVIEW"

    default_page_size: int = 10
    page_size_options: list[int] = dataclasses.field(default_factory=lambda: [10, 25, 50, 100])
    max_page_buttons: int = 7
    log_level: str = "INFO"

    def _validate(self) -> None:
        if self.default_page_size < 1:
            raise InvalidSettingValueError("default_page_size", self.default_page_size, "must be >= 1")
        if not self.page_size_options:
            raise InvalidSettingValueError("page_size_options", self.page_size_options, "must not be empty")
        if any(size < 1 for size in self.page_size_options):
            raise InvalidSettingValueError("page_size_options", self.page_size_options, "sizes must be >= 1")
        if self.max_page_buttons < 1:
            raise InvalidSettingValueError("max_page_buttons", self.max_page_buttons, "must be >= 1")
        if not isinstance(logging.getLevelName(str(self.log_level).upper()), int):
            raise InvalidSettingValueError("log_level", self.log_level, "not a logging level name")


__all__ = ["ViewSettings"]
