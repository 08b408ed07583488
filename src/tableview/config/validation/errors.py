"""Config validation – errors raised while loading or checking settings."""
from __future__ import annotations

from tableview.kernel.errors import BaseError


class ConfigError(BaseError):
    """Settings could not be loaded or did not validate."""

    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """No source supplied a field that has no default."""

    default_code = "missing_required_setting"
    context_fields = ("setting_name",)

    def __init__(self, setting_name: str) -> None:
        self.setting_name = setting_name
        super().__init__(f"Required setting '{setting_name}' is missing")


class InvalidSettingValueError(ConfigError):
    """A setting is present but unparseable or out of range."""

    default_code = "invalid_setting_value"
    context_fields = ("setting_name", "value", "reason")

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        self.setting_name = setting_name
        self.value = value
        self.reason = reason
        super().__init__(f"Setting '{setting_name}' has invalid value {value!r}: {reason}")


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
