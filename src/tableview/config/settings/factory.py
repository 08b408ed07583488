"""Config settings – SettingsFactory."""
from __future__ import annotations

import dataclasses
from typing import Any, Sequence, TypeVar

from tableview.config.settings.base import Settings
from tableview.config.settings.loaders import SettingsLoader
from tableview.config.validation.errors import ConfigError, MissingRequiredSettingError
from tableview.observability.logging import get_logger

T = TypeVar("T", bound=Settings)

_log = get_logger(__name__)


def _is_required(field: dataclasses.Field[Any]) -> bool:
    return field.default is dataclasses.MISSING and field.default_factory is dataclasses.MISSING


class SettingsFactory:
    """Build a settings dataclass from layered sources.

    Sources are applied in order: each loader in *loaders*, then
    *overrides*.  A later source wins for a field it sets.  A loader that
    raises :class:`ConfigError` is skipped with a
    ``settings.loader_skipped`` warning, so a broken ``.env`` or a bad
    ``TABLEVIEW_*`` variable falls back to the remaining sources.
    """

    @staticmethod
    def create(
        settings_cls: type[T],
        loaders: Sequence[SettingsLoader] | None = None,
        overrides: dict[str, Any] | None = None,
    ) -> T:
        values = SettingsFactory._collect(settings_cls, loaders or ())
        values.update(overrides or {})

        missing = [f.name for f in dataclasses.fields(settings_cls) if _is_required(f) and f.name not in values]
        if missing:
            raise MissingRequiredSettingError(missing[0])

        try:
            return settings_cls(**values)
        except ConfigError:
            raise
        except TypeError as exc:
            raise ConfigError(f"Failed to construct {settings_cls.__name__}: {exc}") from exc

    @staticmethod
    def _collect(settings_cls: type[T], loaders: Sequence[SettingsLoader]) -> dict[str, Any]:
        values: dict[str, Any] = {}
        for loader in loaders:
            try:
                loaded = loader.load(settings_cls)
            except ConfigError as exc:
                _log.warning("settings.loader_skipped", loader=type(loader).__name__, code=exc.code)
                continue
            values.update(dataclasses.asdict(loaded))
        return values


__all__ = ["SettingsFactory"]
