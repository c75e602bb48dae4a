"""Config errors – raised while building :class:`ApiSettings` at startup.

They are ``ApplicationError`` subclasses: a misconfigured service fails to
start instead of answering requests with bad paging limits or ports.
"""
from course_library.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Settings could not be loaded from ``.env`` or ``COURSE_LIBRARY_*`` variables."""
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """A settings field without a default has no environment variable."""
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(f"Required setting '{setting_name}' is missing")
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A setting does not coerce to its type or breaks a range rule.

    ``setting_name`` is the environment variable (``COURSE_LIBRARY_PORT``)
    when coercion fails, and the field name (``port``) when validation fails.
    """
    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"Setting '{setting_name}' has invalid value {value!r}: {reason}"
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
