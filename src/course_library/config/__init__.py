"""Config – 12-factor settings and loaders."""

from course_library.config.settings import ApiSettings, EnvSettingsLoader, Settings, SettingsLoader, get_settings
from course_library.config.validation import ConfigError, InvalidSettingValueError, MissingRequiredSettingError

__all__ = [
    "ApiSettings",
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
    "get_settings",
]
