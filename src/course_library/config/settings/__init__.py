"""Config settings – 12-factor env-based configuration."""
from course_library.config.settings.api import ApiSettings, get_settings
from course_library.config.settings.base import Settings
from course_library.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = [
    "ApiSettings",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "Settings",
    "SettingsLoader",
    "get_settings",
]
