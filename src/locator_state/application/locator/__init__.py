"""Application locator – page-level coordination."""
from locator_state.application.locator.coordinator import Locator
from locator_state.application.locator.panel import FacetTile, icon_path

__all__ = ["FacetTile", "Locator", "icon_path"]
