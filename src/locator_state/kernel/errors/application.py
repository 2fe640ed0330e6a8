"""Application-layer errors – query execution and configuration."""

from __future__ import annotations

from locator_state.kernel.errors.base import LocatorError


class ApplicationError(LocatorError):
    default_code = "application_error"


class SearchExecutionError(ApplicationError):
    """A vertical query could not be executed."""

    default_code = "search_execution_error"

    def __init__(self, message: str, *, vertical: str | None = None) -> None:
        super().__init__(message, detail={"vertical": vertical})
        self.vertical = vertical


class ConfigError(ApplicationError):
    """Locator settings could not be loaded."""

    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """A setting without default (e.g. ``LOCATOR_API_KEY``) is absent from every source."""

    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(
            f"Required setting '{setting_name}' is missing",
            detail={"setting": setting_name},
        )
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A setting is present but cannot drive the locator page."""

    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"Setting '{setting_name}' has invalid value {value!r}: {reason}",
            detail={"setting": setting_name, "reason": reason},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = [
    "ApplicationError",
    "ConfigError",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "SearchExecutionError",
]
