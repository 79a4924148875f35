"""Tests for the rendering selection filters."""

import pytest

from satbrowser import (
    Position,
    SatelliteRecord,
    SelectionConfig,
    get_selection_config,
    set_selection_config,
)
from satbrowser.rendering import (
    ViewportBounds,
    by_enabled_types,
    by_loading_priority,
    by_search_query,
    by_tracking_status,
    by_viewport_bounds,
    for_performance,
    for_rendering,
    loading_priority,
    select_for_frame,
    viewport_mask,
)

ALL_TYPES = {"scientific", "earth-observation", "communication", "navigation", "weather"}


def _at(sat_id: str, lat: float, lng: float, category: str = "communication"):
    return SatelliteRecord(
        id=sat_id, name=sat_id.upper(), category=category, position=Position(lat=lat, lng=lng)
    )


class TestViewportBounds:
    def test_expand(self):
        bounds = ViewportBounds(west=-10.0, east=10.0, south=-5.0, north=5.0)
        assert bounds.expand(4.0) == ViewportBounds(-14.0, 14.0, -7.0, 7.0)

    def test_contains_inclusive(self):
        bounds = ViewportBounds(west=-10.0, east=10.0, south=-5.0, north=5.0)
        assert bounds.contains(lat=5.0, lng=-10.0)
        assert not bounds.contains(lat=5.1, lng=0.0)


class TestByEnabledTypes:
    def test_keeps_enabled(self, records):
        result = by_enabled_types(records, {"weather", "navigation"})
        assert [r.id for r in result] == ["gps-biir-2", "goes-16"]

    def test_empty_set(self, records):
        assert by_enabled_types(records, set()) == []


class TestByTrackingStatus:
    def test_exclusive(self, records):
        result = by_tracking_status(records, "landsat-9", True)
        assert [r.id for r in result] == ["landsat-9"]

    def test_not_exclusive_is_identity(self, records):
        assert by_tracking_status(records, "landsat-9", False) == records

    def test_no_tracked_id_is_identity(self, records):
        assert by_tracking_status(records, None, True) == records


class TestByViewportBounds:
    BOUNDS = ViewportBounds(west=-10.0, east=10.0, south=-10.0, north=10.0)

    def test_no_margin(self):
        records = [_at("in", 0.0, 0.0), _at("out", 0.0, 20.0)]
        assert [r.id for r in by_viewport_bounds(records, self.BOUNDS)] == ["in"]

    def test_inclusive_boundaries_with_margin(self):
        margin = 4.0
        records = [
            _at("west-edge", 0.0, -14.0),
            _at("east-edge", 0.0, 14.0),
            _at("south-edge", -12.0, 0.0),
            _at("north-edge", 12.0, 0.0),
        ]
        result = by_viewport_bounds(records, self.BOUNDS, margin)
        assert len(result) == 4

    def test_one_unit_beyond_excluded(self):
        margin = 4.0
        records = [
            _at("west", 0.0, -15.0),
            _at("east", 0.0, 15.0),
            _at("south", -13.0, 0.0),
            _at("north", 13.0, 0.0),
        ]
        assert by_viewport_bounds(records, self.BOUNDS, margin) == []

    def test_latitude_margin_is_halved(self):
        # inside the longitude margin, outside the halved latitude margin
        record = _at("x", 13.0, 13.0)
        assert by_viewport_bounds([record], self.BOUNDS, 4.0) == []

    def test_preserves_order(self):
        records = [_at("b", 1.0, 1.0), _at("a", 2.0, 2.0), _at("c", 3.0, 3.0)]
        assert [r.id for r in by_viewport_bounds(records, self.BOUNDS)] == ["b", "a", "c"]

    def test_empty(self):
        assert by_viewport_bounds([], self.BOUNDS, 5.0) == []
        assert viewport_mask([], self.BOUNDS).shape == (0,)

    def test_mask(self):
        records = [_at("in", 0.0, 0.0), _at("out", 50.0, 0.0)]
        assert viewport_mask(records, self.BOUNDS).tolist() == [True, False]

    def test_just_outside_edges_excluded(self):
        bounds = ViewportBounds(west=-10.0, east=170.0, south=-10.0, north=45.0)
        records = [
            _at("east", 0.0, 170.000005),
            _at("north", 45.000001, 0.0),
            _at("corner", 45.0, 170.0),
        ]
        assert [r.id for r in by_viewport_bounds(records, bounds)] == ["corner"]

    @pytest.mark.parametrize("margin", [0.0, 3.0])
    def test_mask_agrees_with_contains(self, margin):
        records = [
            _at("a", 0.0, 10.000001),
            _at("b", 11.5, 13.0),
            _at("c", -11.500001, 0.0),
            _at("d", 10.0, -10.0),
            _at("e", 0.0, 12.999999),
        ]
        region = self.BOUNDS.expand(margin)
        expected = [region.contains(r.position.lat, r.position.lng) for r in records]
        assert viewport_mask(records, self.BOUNDS, margin).tolist() == expected


class TestForRendering:
    def test_exclusive_tracking_short_circuits(self, records):
        bounds = ViewportBounds(west=100.0, east=110.0, south=-1.0, north=1.0)
        # landsat-9 is neither enabled nor inside the bounds
        result = for_rendering(records, {"weather"}, "landsat-9", True, bounds, 0.0)
        assert [r.id for r in result] == ["landsat-9"]

    def test_exclusive_with_unknown_tracked_id(self, records):
        assert for_rendering(records, ALL_TYPES, "does-not-exist", True) == []

    def test_type_filter_without_bounds(self, records):
        result = for_rendering(records, {"communication"}, None, False)
        assert [r.id for r in result] == ["starlink-1007", "intelsat-901"]

    def test_tracking_not_exclusive_applies_filters(self, records):
        result = for_rendering(records, {"communication"}, "landsat-9", False)
        assert "landsat-9" not in [r.id for r in result]

    def test_type_then_viewport(self, records):
        bounds = ViewportBounds(west=-30.0, east=50.0, south=-30.0, north=60.0)
        result = for_rendering(records, ALL_TYPES, None, False, bounds, 0.0)
        assert [r.id for r in result] == ["iss-zarya-25544", "landsat-9", "intelsat-901"]

    def test_bounds_without_margin(self, records):
        bounds = ViewportBounds(west=-30.0, east=50.0, south=-30.0, north=60.0)
        assert for_rendering(records, ALL_TYPES, None, False, bounds) == for_rendering(
            records, ALL_TYPES, None, False, bounds, 0.0
        )


class TestBySearchQuery:
    def test_blank_is_identity(self, records):
        assert by_search_query(records, "") == records
        assert by_search_query(records, "   ") == records

    def test_name(self, records):
        assert [r.id for r in by_search_query(records, " Landsat ")] == ["landsat-9"]

    def test_shortname(self, records):
        assert [r.id for r in by_search_query(records, "is-9")] == ["intelsat-901"]

    def test_alternate_name(self, records):
        assert [r.id for r in by_search_query(records, "navstar")] == ["gps-biir-2"]

    def test_id_not_searched(self, records):
        assert by_search_query(records, "goes-16") == []


class TestLoadingPriority:
    @pytest.mark.parametrize(
        "name, category, expected",
        [
            ("ISS (ZARYA)", "scientific", 1000),
            ("HUBBLE SPACE TELESCOPE", "scientific", 950),
            ("Sentinel-2A", "earth-observation", 900),
            ("NAVSTAR 43", "navigation", 700),
            ("GALILEO 5", "communication", 700),
            ("CHANDRA", "scientific", 800),
            ("INTELSAT 901", "communication", 600),
            ("YAM-3", "earth-observation", 400),
            ("STARLINK-1007", "debris", 100),
            ("GOES 16", "weather", 200),
        ],
    )
    def test_scores(self, name, category, expected):
        record = SatelliteRecord(id="x", name=name, category=category)
        assert loading_priority(record) == expected

    def test_iss_before_landsat(self):
        records = [
            SatelliteRecord(id="landsat-9", name="LANDSAT 9", category="earth-observation"),
            SatelliteRecord(id="iss-zarya-25544", name="ISS (ZARYA)", category="scientific"),
        ]
        result = by_loading_priority(records)
        assert [r.id for r in result] == ["iss-zarya-25544", "landsat-9"]

    def test_stable_for_equal_scores(self):
        records = [
            SatelliteRecord(id="a", name="A", category="weather"),
            SatelliteRecord(id="b", name="B", category="communication"),
            SatelliteRecord(id="c", name="C", category="weather"),
        ]
        assert [r.id for r in by_loading_priority(records)] == ["b", "a", "c"]

    def test_input_not_mutated(self, records):
        original = list(records)
        by_loading_priority(records)
        assert records == original


class TestForPerformance:
    def test_plain_truncation(self, records):
        assert for_performance(records, 3) == records[:3]

    def test_cap_larger_than_input(self, records):
        assert for_performance(records, 100) == records

    def test_tracked_pinned_first(self, records):
        result = for_performance(records, 3, "goes-16")
        assert len(result) == 3
        assert result[0].id == "goes-16"
        assert [r.id for r in result[1:]] == ["iss-zarya-25544", "landsat-9"]

    def test_tracked_survives_cap_of_one(self, records):
        assert [r.id for r in for_performance(records, 1, "intelsat-901")] == ["intelsat-901"]

    def test_tracked_absent(self, records):
        assert for_performance(records, 2, "does-not-exist") == records[:2]

    def test_non_positive_cap(self, records):
        assert for_performance(records, 0, "goes-16") == []
        assert for_performance(records, -5) == []

    @pytest.mark.parametrize("cap", [1, 2, 5, 6, 10])
    def test_length_bound_and_pin(self, records, cap):
        result = for_performance(records, cap, "starlink-1007")
        assert len(result) <= cap
        assert result[0].id == "starlink-1007"


class TestSelectForFrame:
    def test_priority_then_cap(self, records):
        result = select_for_frame(records, ALL_TYPES, max_count=2)
        assert [r.id for r in result] == ["iss-zarya-25544", "landsat-9"]

    def test_tracked_pinned(self, records):
        result = select_for_frame(records, ALL_TYPES, max_count=2, tracked_id="goes-16")
        assert [r.id for r in result] == ["goes-16", "iss-zarya-25544"]

    def test_exclusive(self, records):
        result = select_for_frame(
            records, set(), max_count=10, tracked_id="goes-16", exclusive=True
        )
        assert [r.id for r in result] == ["goes-16"]

    def test_defaults_from_config(self, records):
        config = SelectionConfig(max_satellites=1)
        result = select_for_frame(records, ALL_TYPES, config=config)
        assert [r.id for r in result] == ["iss-zarya-25544"]

    def test_margin_from_config(self, records):
        bounds = ViewportBounds(west=-1.0, east=1.0, south=-1.0, north=1.0)
        config = SelectionConfig(viewport_margin=20.0)
        result = select_for_frame(records, ALL_TYPES, bounds=bounds, config=config)
        assert [r.id for r in result] == ["intelsat-901"]

    def test_explicit_margin_overrides_config(self, records):
        bounds = ViewportBounds(west=-1.0, east=1.0, south=-1.0, north=1.0)
        config = SelectionConfig(viewport_margin=20.0)
        assert select_for_frame(records, ALL_TYPES, bounds=bounds, margin=0.0, config=config) == []

    def test_module_wide_config(self, records):
        original = get_selection_config()
        try:
            set_selection_config(SelectionConfig(max_satellites=2))
            assert len(select_for_frame(records, ALL_TYPES)) == 2
        finally:
            set_selection_config(original)
