"""Import smoke tests: every subpackage loads and its ``__all__`` resolves."""
from __future__ import annotations

import importlib

import pytest

SUBPACKAGES = [
    "locator_state",
    "locator_state.kernel",
    "locator_state.kernel.errors",
    "locator_state.kernel.geo",
    "locator_state.application",
    "locator_state.application.search",
    "locator_state.application.filters",
    "locator_state.application.highlight",
    "locator_state.application.navigation",
    "locator_state.application.executor",
    "locator_state.application.locator",
    "locator_state.config",
    "locator_state.config.settings",
    "locator_state.observability",
    "locator_state.observability.logging",
    "locator_state.testing",
    "locator_state.testing.fakes",
]


@pytest.mark.parametrize("name", SUBPACKAGES)
def test_subpackage_imports(name: str) -> None:
    module = importlib.import_module(name)
    for exported in getattr(module, "__all__", []):
        assert hasattr(module, exported), f"{name}.{exported}"


def test_settings_class_defines_cleanly() -> None:
    from locator_state.config.settings import LocatorSettings

    settings = LocatorSettings(api_key="key", experience_key="locator")
    assert settings.env_key("api_key") == "LOCATOR_API_KEY"


def test_locator_wires_from_public_surface() -> None:
    from locator_state.application.locator import Locator
    from locator_state.application.navigation import UrlNavigationState
    from locator_state.config.settings import LocatorSettings
    from locator_state.testing.fakes import FakeSearchService, RecordingRenderer

    renderer = RecordingRenderer()
    locator = Locator(
        LocatorSettings(api_key="key", experience_key="locator"),
        FakeSearchService(),
        UrlNavigationState("/locator"),
        renderer,
        renderer,
    )
    assert locator.loading is True
    assert locator.filters.current() == ()
