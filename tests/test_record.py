"""Tests for SatelliteRecord and the collation helpers."""

import pytest

from satbrowser import Dimensions, Position, SatelliteRecord
from satbrowser.utils import collation_key, compare_collated


class TestSatelliteRecord:
    """Tests for SatelliteRecord construction and field access."""

    def test_defaults(self):
        record = SatelliteRecord(id="x", name="X")
        assert record.category == "communication"
        assert record.position == Position(0.0, 0.0)
        assert record.dimensions == Dimensions(0.0, 0.0, 0.0)
        assert record.shortname is None
        assert record.image is None

    def test_frozen(self):
        record = SatelliteRecord(id="x", name="X")
        with pytest.raises(AttributeError):
            record.name = "Y"

    def test_str(self):
        record = SatelliteRecord(id="iss", name="ISS")
        assert str(record) == "SatelliteRecord(id='iss', name='ISS')"
        assert repr(record) == str(record)


class TestFromJsonDict:
    """Tests for SatelliteRecord.from_json_dict()."""

    def test_full_dict(self):
        record = SatelliteRecord.from_json_dict(
            {
                "id": "iss-zarya-25544",
                "name": "ISS (ZARYA)",
                "shortname": "ISS",
                "alternateName": "Zarya",
                "type": "scientific",
                "position": {"lat": 51.6, "lng": -0.1},
                "altitude": 420.0,
                "velocity": "7.66",
                "dimensions": {"length": 73, "width": 109, "height": 20},
                "tle1": "1 25544U ...",
                "tle2": "2 25544 ...",
                "image": "iss.png",
                "defaultBearing": 45,
                "defaultZoom": "4",
                "defaultPitch": 60,
                "scaleFactor": 1.5,
            }
        )
        assert record.id == "iss-zarya-25544"
        assert record.alternate_name == "Zarya"
        assert record.category == "scientific"
        assert record.position == Position(lat=51.6, lng=-0.1)
        assert record.velocity == 7.66
        assert record.dimensions == Dimensions(73.0, 109.0, 20.0)
        assert record.default_zoom == 4.0
        assert record.scale_factor == 1.5

    def test_category_key(self):
        record = SatelliteRecord.from_json_dict(
            {"id": "goes-16", "name": "GOES 16", "category": "weather"}
        )
        assert record.category == "weather"

    def test_missing_name_falls_back_to_id(self):
        record = SatelliteRecord.from_json_dict({"id": "obj-1"})
        assert record.name == "obj-1"
        assert record.category == "communication"

    def test_invalid_numbers_ignored(self):
        record = SatelliteRecord.from_json_dict(
            {"id": "a", "altitude": "high", "defaultZoom": "far"}
        )
        assert record.altitude == 0.0
        assert record.default_zoom is None

    def test_missing_id_raises(self):
        with pytest.raises(KeyError):
            SatelliteRecord.from_json_dict({"name": "nameless"})


class TestCollation:
    """Tests for collation_key() and compare_collated()."""

    def test_case_insensitive_primary(self):
        assert sorted(["beta", "Alpha", "gamma"], key=collation_key) == [
            "Alpha",
            "beta",
            "gamma",
        ]

    def test_accent_folding(self):
        assert sorted(["Zulu", "Éclair", "Delta"], key=collation_key) == [
            "Delta",
            "Éclair",
            "Zulu",
        ]

    def test_compare(self):
        assert compare_collated("a", "B") == -1
        assert compare_collated("B", "a") == 1
        assert compare_collated("same", "same") == 0

    def test_total_order_on_case_variants(self):
        assert compare_collated("abc", "ABC") != 0

    def test_lowercase_before_uppercase(self):
        assert sorted(["ISS", "Iss", "iss"], key=collation_key) == ["iss", "Iss", "ISS"]
        assert compare_collated("iss", "ISS") == -1
