"""Config settings – env-based configuration for table views."""
from tableview.config.settings.base import Settings
from tableview.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from tableview.config.settings.factory import SettingsFactory
from tableview.config.settings.view import ViewSettings

__all__ = [
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
    "ViewSettings",
]
