"""
locator_state – geo-search state coordination for store locators.

Import path convention::

    from locator_state.kernel.geo import GeoPoint, great_circle_distance
    from locator_state.application.filters import FilterSet, RadiusFilterDeriver
    from locator_state.application.locator import Locator
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
