"""Application locator – the Locator coordinator."""
from __future__ import annotations

from typing import Callable

from locator_state.application.executor import SearchExecutor
from locator_state.application.filters import FilterSet, RadiusFilterDeriver
from locator_state.application.highlight import (
    CardRenderer,
    CrossViewHighlightBridge,
    FacetColorMapper,
    PinRenderer,
)
from locator_state.application.locator.panel import FacetTile, icon_path
from locator_state.application.navigation import NavigationState, QuerySync
from locator_state.application.search import (
    Facet,
    FacetOption,
    SearchService,
    VerticalResults,
    option_identity,
)
from locator_state.config.settings import LocatorSettings
from locator_state.kernel.geo import GeoBounds, GeoPoint, ViewportDrag
from locator_state.observability.logging import get_logger

__all__ = ["Locator"]

logger = get_logger(__name__)


class Locator:
    """Coordinates query, radius filter, facets and highlight for one page.

    Every user interaction mutates shared state first and then re-runs the
    vertical query; results reach the cards and pins through the
    :class:`CrossViewHighlightBridge`.

    Usage::

        locator = Locator(settings, service, UrlNavigationState(url), cards, pins)
        await locator.mount()
        await locator.on_drag(center, bounds)
    """

    def __init__(
        self,
        settings: LocatorSettings,
        service: SearchService,
        navigation: NavigationState,
        card_renderer: CardRenderer,
        pin_renderer: PinRenderer,
        *,
        mapper: FacetColorMapper | None = None,
        deriver: RadiusFilterDeriver | None = None,
        locations_context: Callable[[str], None] | None = None,
    ) -> None:
        self.settings = settings
        self._service = service
        self._locations_context = locations_context
        self.query_sync = QuerySync(navigation)
        self.filters = FilterSet(service.static_filters)
        self.deriver = deriver or RadiusFilterDeriver()
        self.mapper = mapper or FacetColorMapper()
        self.executor = SearchExecutor(service)
        self.bridge = CrossViewHighlightBridge(self.mapper, card_renderer, pin_renderer)
        self.executor.subscribe(self.bridge.show)
        self.facet_panel_open = False
        self._log = logger.bind(vertical=settings.vertical_key)

    @property
    def loading(self) -> bool:
        return self.executor.loading

    # ------------------------------------------------------------------
    # Query
    # ------------------------------------------------------------------

    async def mount(self) -> VerticalResults | None:
        """First load: always queries, even without a persisted query."""
        query = self.query_sync.initial_query()
        self._log.info("locator_mounted", query=query)
        return await self.executor.mount(self.settings.vertical_key, query)

    async def on_search(self, query: str | None) -> VerticalResults | None:
        self._service.set_query(query or "")
        self.query_sync.record_search(query)
        return await self.executor.execute("search")

    # ------------------------------------------------------------------
    # Map
    # ------------------------------------------------------------------

    async def on_drag(self, center: GeoPoint, bounds: GeoBounds) -> VerticalResults | None:
        """Replace the radius filter from a drag-end gesture and re-query now."""
        drag = ViewportDrag(center=center, bounds=bounds)
        near = self.deriver.derive(drag)
        self.filters.replace_all(self._service.static_filters)
        self._service.set_static_filters(self.filters.replace_location_filter(near))
        self._log.info("radius_filter_derived", radius_m=near.value["radius"])
        return await self.executor.execute("drag")

    def select_location(self, location_id: str) -> None:
        self.bridge.selection.set(location_id or None)
        if location_id and self._locations_context is not None:
            self._locations_context(location_id)

    # ------------------------------------------------------------------
    # Facets
    # ------------------------------------------------------------------

    async def on_facet_option_toggle(self, field_id: str, option: FacetOption) -> VerticalResults | None:
        self._service.set_facet_option(field_id, option, not option.selected)
        self.mapper.set_highlighted(option_identity(option))
        return await self.executor.execute("facet")

    async def on_facet_click(self, facet: Facet) -> VerticalResults | None:
        """A facet tile toggles the facet's first option; empty facets do nothing."""
        if not facet.options:
            return None
        return await self.on_facet_option_toggle(facet.field_id, facet.options[0])

    def clear_highlight(self) -> None:
        self.mapper.clear_highlight()

    def facet_tiles(self) -> list[FacetTile]:
        if not self.settings.facets_enabled:
            return []
        tiles = []
        for facet in self._service.facets:
            first = facet.options[0] if facet.options else None
            tiles.append(
                FacetTile(
                    facet=facet,
                    icon=icon_path(facet.display_name),
                    color=self.mapper.color_for(option_identity(first)) if first else None,
                    selected=bool(first and first.selected),
                )
            )
        return tiles

    def toggle_facet_panel(self) -> bool:
        if not self.settings.facets_enabled:
            return False
        self.facet_panel_open = not self.facet_panel_open
        return self.facet_panel_open

    def close_facet_panel(self) -> None:
        self.facet_panel_open = False
