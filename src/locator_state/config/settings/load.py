"""Config settings – load_settings."""
from __future__ import annotations

import dataclasses
from typing import Any, Sequence

from locator_state.config.settings.locator import LocatorSettings
from locator_state.config.settings.sources import EnvSource, SettingsSource
from locator_state.kernel.errors import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)
from locator_state.observability.logging import get_logger

logger = get_logger(__name__)

_TRUE = ("1", "true", "yes", "on")


def _coerce(env_key: str, raw: str, type_hint: Any) -> Any:
    try:
        if type_hint is bool:
            return raw.lower() in _TRUE
        if type_hint is int:
            return int(raw)
    except ValueError as exc:
        raise InvalidSettingValueError(env_key, raw, str(exc)) from exc
    return raw


def load_settings(
    sources: Sequence[SettingsSource] | None = None,
    overrides: dict[str, Any] | None = None,
) -> LocatorSettings:
    """Build :class:`LocatorSettings` from *sources*, then *overrides*.

    Sources default to the process environment.  Later sources win over
    earlier ones; *overrides* (already typed, keyed by field name) win over
    every source.

    Raises
    ------
    MissingRequiredSettingError
        When ``api_key`` or ``experience_key`` is found nowhere.
    InvalidSettingValueError
        When a value cannot be coerced or fails the settings' own checks.
    """
    raw: dict[str, str] = {}
    for source in sources if sources is not None else [EnvSource(LocatorSettings.env_prefix)]:
        raw.update(source.read())

    values: dict[str, Any] = {}
    for field in dataclasses.fields(LocatorSettings):
        env_key = LocatorSettings.env_key(field.name)
        if env_key in raw:
            values[field.name] = _coerce(env_key, raw[env_key], field.type)
    values.update(overrides or {})

    for name in LocatorSettings.required_fields():
        if name not in values:
            raise MissingRequiredSettingError(LocatorSettings.env_key(name))

    try:
        settings = LocatorSettings(**values)
    except TypeError as exc:
        raise ConfigError(f"Failed to construct LocatorSettings: {exc}") from exc
    logger.debug(
        "settings_loaded",
        vertical=settings.vertical_key,
        environment=settings.environment,
        facets_enabled=settings.facets_enabled,
    )
    return settings


__all__ = ["load_settings"]
