"""Application filters – static filter set and radius derivation."""
from locator_state.application.filters.filter_set import FilterSet
from locator_state.application.filters.radius import NEAR_CURRENT_AREA, RadiusFilterDeriver

__all__ = ["NEAR_CURRENT_AREA", "FilterSet", "RadiusFilterDeriver"]
