"""Unit tests – SettingsFactory."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

import pytest
from structlog.testing import capture_logs

from tableview.config.settings import EnvSettingsLoader, Settings, SettingsFactory, ViewSettings
from tableview.config.settings.loaders import SettingsLoader
from tableview.config.validation import ConfigError, MissingRequiredSettingError


@dataclasses.dataclass
class RequiredSettings(Settings):
    _prefix: ClassVar[str] = "REQ"
    api_key: str  # no default -> required


class _StaticLoader(SettingsLoader):
    def __init__(self, **values: object) -> None:
        self._values = values

    def load(self, settings_class):  # type: ignore[override]
        return settings_class(**self._values)


class _FailingLoader(SettingsLoader):
    def load(self, settings_class):  # type: ignore[override]
        raise ConfigError("unreachable source")


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in ("TABLEVIEW_DEFAULT_PAGE_SIZE", "TABLEVIEW_MAX_PAGE_BUTTONS", "REQ_API_KEY"):
        monkeypatch.delenv(key, raising=False)


class TestSettingsFactory:
    def test_no_loaders_uses_defaults(self) -> None:
        assert SettingsFactory.create(ViewSettings) == ViewSettings()

    def test_later_loaders_win(self) -> None:
        settings = SettingsFactory.create(
            ViewSettings,
            loaders=[_StaticLoader(default_page_size=25), _StaticLoader(default_page_size=50)],
        )
        assert settings.default_page_size == 50

    def test_overrides_win_over_loaders(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TABLEVIEW_DEFAULT_PAGE_SIZE", "25")
        settings = SettingsFactory.create(
            ViewSettings,
            loaders=[EnvSettingsLoader()],
            overrides={"default_page_size": 100},
        )
        assert settings.default_page_size == 100

    def test_failing_loader_is_skipped_and_logged(self) -> None:
        with capture_logs() as logs:
            settings = SettingsFactory.create(
                ViewSettings,
                loaders=[_StaticLoader(max_page_buttons=5), _FailingLoader()],
            )
        assert settings.max_page_buttons == 5
        assert logs[0]["event"] == "settings.loader_skipped"
        assert logs[0]["loader"] == "_FailingLoader"
        assert logs[0]["log_level"] == "warning"

    def test_invalid_env_value_falls_back_to_defaults(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("TABLEVIEW_MAX_PAGE_BUTTONS", "lots")
        settings = SettingsFactory.create(ViewSettings, loaders=[EnvSettingsLoader()])
        assert settings.max_page_buttons == 7

    def test_missing_required_raises(self) -> None:
        with pytest.raises(MissingRequiredSettingError):
            SettingsFactory.create(RequiredSettings)

    def test_required_from_overrides(self) -> None:
        assert SettingsFactory.create(RequiredSettings, overrides={"api_key": "k"}).api_key == "k"

    def test_invalid_override_raises_config_error(self) -> None:
        with pytest.raises(ConfigError):
            SettingsFactory.create(ViewSettings, overrides={"max_page_buttons": 0})

    def test_unknown_override_wrapped(self) -> None:
        with pytest.raises(ConfigError, match="ViewSettings"):
            SettingsFactory.create(ViewSettings, overrides={"colour": "blue"})

    def test_missing_required_names_the_field(self) -> None:
        with pytest.raises(MissingRequiredSettingError) as exc_info:
            SettingsFactory.create(RequiredSettings)
        assert exc_info.value.to_dict()["context"] == {"setting_name": "api_key"}

    def test_construction_failure_keeps_cause(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            SettingsFactory.create(ViewSettings, overrides={"colour": "blue"})
        assert isinstance(exc_info.value.__cause__, TypeError)
        assert exc_info.value.code == "config_error"
