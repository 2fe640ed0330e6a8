"""Config settings – ``LOCATOR_*`` configuration of the locator page."""
from locator_state.config.settings.load import load_settings
from locator_state.config.settings.locator import ENVIRONMENTS, LocatorSettings
from locator_state.config.settings.sources import DotenvSource, EnvSource, SettingsSource

__all__ = [
    "ENVIRONMENTS",
    "DotenvSource",
    "EnvSource",
    "LocatorSettings",
    "SettingsSource",
    "load_settings",
]
