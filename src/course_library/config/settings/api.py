"""Config settings – ApiSettings for the course library service."""
from __future__ import annotations

import dataclasses
from functools import lru_cache
from typing import ClassVar

from course_library.config.settings.base import Settings
from course_library.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class ApiSettings(Settings):
    """Service settings, read from ``COURSE_LIBRARY_*`` environment variables."""

    _prefix: ClassVar[str] = "COURSE_LIBRARY"

    app_name: str = "Course Library API"
    log_level: str = "INFO"
    json_logs: bool = True
    default_page_size: int = 10
    max_page_size: int = 20
    seed_data: bool = True
    cors_origins: list[str] = dataclasses.field(default_factory=list)
    host: str = "127.0.0.1"
    port: int = 8000

    def _validate(self) -> None:
        if not 1 <= self.port <= 65535:
            raise InvalidSettingValueError("port", self.port, "must be between 1 and 65535")
        if self.max_page_size < 1:
            raise InvalidSettingValueError("max_page_size", self.max_page_size, "must be >= 1")
        if not 1 <= self.default_page_size <= self.max_page_size:
            raise InvalidSettingValueError(
                "default_page_size",
                self.default_page_size,
                f"must be between 1 and max_page_size ({self.max_page_size})",
            )


@lru_cache(maxsize=1)
def get_settings() -> ApiSettings:
    """Load :class:`ApiSettings` once per process (``.env`` first, then environment)."""
    from course_library.config.settings.loaders import DotenvSettingsLoader

    return DotenvSettingsLoader().load(ApiSettings)


__all__ = ["ApiSettings", "get_settings"]
