"""Unit tests for InMemorySearchService."""
from __future__ import annotations

import asyncio

import pytest

from locator_state.application.search import (
    LOCATION_FIELD_ID,
    FacetOption,
    InMemorySearchService,
    Matcher,
    SearchService,
    StaticFilter,
    VerticalQuery,
)
from locator_state.kernel.errors import SearchExecutionError

STORES = [
    {"id": "duomo", "name": "Milano Duomo", "c_services": ["Wifi", "Wheelchair Accessible"],
     "c_type": "store", "coordinate": {"lat": 45.4642, "lng": 9.1900}},
    {"id": "brera", "name": "Milano Brera", "c_services": ["Wifi"],
     "c_type": "store", "coordinate": {"lat": 45.4720, "lng": 9.1880}},
    {"id": "roma", "name": "Roma Termini", "c_services": ["Parking"],
     "c_type": "outlet", "coordinate": {"lat": 41.9010, "lng": 12.5010}},
    {"id": "online", "name": "Online Shop", "c_type": "outlet"},
]


def _service(**kwargs) -> InMemorySearchService:
    service = InMemorySearchService(
        {"locations": STORES},
        facet_fields={"c_services": "Services"},
        **kwargs,
    )
    service.set_vertical("locations")
    return service


def _near(lat: float, lng: float, radius: float) -> StaticFilter:
    return StaticFilter(
        field_id=LOCATION_FIELD_ID,
        matcher=Matcher.NEAR,
        value={"lat": lat, "lng": lng, "radius": radius},
    )


class TestInMemorySearchServiceBasics:
    def test_satisfies_port(self) -> None:
        assert isinstance(_service(), SearchService)

    def test_empty_query_returns_all(self) -> None:
        result = asyncio.run(_service().execute_vertical_query())
        assert result.result_count == 4

    def test_text_match_case_insensitive(self) -> None:
        service = _service()
        service.set_query("milano")
        result = asyncio.run(service.execute_vertical_query())
        assert set(result.location_ids) == {"duomo", "brera"}

    def test_unknown_vertical_raises(self) -> None:
        service = _service()
        service.set_vertical("restaurants")
        with pytest.raises(SearchExecutionError) as exc_info:
            asyncio.run(service.execute_vertical_query())
        assert exc_info.value.vertical == "restaurants"

    def test_no_vertical_raises(self) -> None:
        service = InMemorySearchService({"locations": STORES})
        with pytest.raises(SearchExecutionError):
            asyncio.run(service.execute_vertical_query())

    def test_pagination(self) -> None:
        service = _service(limit=2)
        service.set_offset(2)
        result = asyncio.run(service.execute_vertical_query())
        assert len(result.results) == 2
        assert result.result_count == 4
        assert result.total_pages == 2

    def test_run_explicit_snapshot(self) -> None:
        service = _service()
        result = asyncio.run(service.run(VerticalQuery(vertical="locations", query="roma")))
        assert result.location_ids == ["roma"]


class TestInMemorySearchServiceFilters:
    def test_near_filter_keeps_close_locations(self) -> None:
        service = _service()
        service.set_static_filters([_near(45.4654, 9.1866, 5_000)])
        result = asyncio.run(service.execute_vertical_query())
        assert set(result.location_ids) == {"duomo", "brera"}

    def test_near_results_sorted_by_distance(self) -> None:
        service = _service()
        service.set_static_filters([_near(45.4720, 9.1880, 1_000_000)])
        result = asyncio.run(service.execute_vertical_query())
        assert result.location_ids == ["brera", "duomo", "roma"]
        assert result.results[0].distance_m == 0.0

    def test_near_zero_radius(self) -> None:
        service = _service()
        service.set_static_filters([_near(45.4720, 9.1880, 0.0)])
        result = asyncio.run(service.execute_vertical_query())
        assert result.location_ids == ["brera"]

    def test_equals_filter(self) -> None:
        service = _service()
        service.set_static_filters([StaticFilter("c_type", Matcher.EQUALS, "outlet")])
        result = asyncio.run(service.execute_vertical_query())
        assert set(result.location_ids) == {"roma", "online"}

    def test_unselected_filter_ignored(self) -> None:
        service = _service()
        service.set_static_filters([StaticFilter("c_type", Matcher.EQUALS, "outlet", selected=False)])
        result = asyncio.run(service.execute_vertical_query())
        assert result.result_count == 4


class TestInMemorySearchServiceFacets:
    def test_facets_counted_from_matches(self) -> None:
        result = asyncio.run(_service().execute_vertical_query())
        (facet,) = result.facets
        counts = {o.value: o.count for o in facet.options}
        assert facet.display_name == "Services"
        assert counts == {"Wifi": 2, "Wheelchair Accessible": 1, "Parking": 1}

    def test_facet_selection_refines_results(self) -> None:
        service = _service()
        service.set_facet_option("c_services", FacetOption(value="Wheelchair Accessible"), True)
        result = asyncio.run(service.execute_vertical_query())
        assert result.location_ids == ["duomo"]
        selected = [o.value for o in result.facets[0].options if o.selected]
        assert selected == ["Wheelchair Accessible"]

    def test_facet_deselect(self) -> None:
        service = _service()
        option = FacetOption(value="Parking")
        service.set_facet_option("c_services", option, True)
        service.set_facet_option("c_services", option, False)
        result = asyncio.run(service.execute_vertical_query())
        assert result.result_count == 4

    def test_facets_exposed_after_execution(self) -> None:
        service = _service()
        assert service.facets == ()
        asyncio.run(service.execute_vertical_query())
        assert service.facets[0].field_id == "c_services"
